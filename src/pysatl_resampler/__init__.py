"""
PySATL Resampler
================

Weighted resampling of empirical data: draw observations with replacement
with probability proportional to their weights, for scalar, vector and
matrix valued observations.
"""

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .errors import *
from .errors import __all__ as _errors_all
from .sampling import *
from .sampling import __all__ as _sampling_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-resampler")
__all__ = [
    "__version__",
    *_errors_all,
    *_sampling_all,
    *_types_all,
]

del _errors_all
del _sampling_all
del _types_all
