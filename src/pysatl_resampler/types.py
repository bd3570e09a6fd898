"""
Core Type Definitions
=====================

Fundamental types and descriptors used throughout PySATL Resampler.
"""

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Kind(StrEnum):
    """
    Enumeration of value kinds.

    Attributes
    ----------
    DISCRETE : str
        Integer-valued observations.
    CONTINUOUS : str
        Real-valued observations.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class VariateForm(StrEnum):
    """
    Enumeration of the shape of a single draw.

    Attributes
    ----------
    UNIVARIATE : str
        Each draw is a scalar.
    MULTIVARIATE : str
        Each draw is a fixed-length vector.
    MATRIXVARIATE : str
        Each draw is a matrix.
    """

    UNIVARIATE = "univariate"
    MULTIVARIATE = "multivariate"
    MATRIXVARIATE = "matrixvariate"


@dataclass(frozen=True, slots=True)
class SamplerType:
    """
    Shape and kind descriptor of a sampler.

    Parameters
    ----------
    variate_form : VariateForm
        Shape of a single draw.
    kind : Kind
        Whether drawn values are discrete or continuous.
    """

    variate_form: VariateForm
    kind: Kind


UnivariateDiscrete = SamplerType(VariateForm.UNIVARIATE, Kind.DISCRETE)
"""Type for samplers drawing integer scalars."""

UnivariateContinuous = SamplerType(VariateForm.UNIVARIATE, Kind.CONTINUOUS)
"""Type for samplers drawing real scalars."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

FloatArray = NDArray[np.float64]
"""Type alias for float64 arrays."""

type Observations = NumericArray | Sequence[Number] | Sequence[NumericArray]
"""Observation collections accepted by :class:`WeightedResampler`."""

type Weights = ArrayLike
"""Weight collections accepted by :class:`WeightedResampler`."""


__all__ = [
    "Kind",
    "VariateForm",
    "SamplerType",
    "UnivariateDiscrete",
    "UnivariateContinuous",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "Observations",
    "Weights",
]
