"""
Sampling subpackage

Interfaces and default implementations for weighted resampling:

- weighted index choosers (:mod:`.chooser`);
- the weighted resampler itself (:mod:`.resampler`);
- sample protocol and array-backed samples (:mod:`.sample`);
- pluggable bulk sampling strategies (:mod:`.strategy`).
"""

from __future__ import annotations

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .chooser import (
    AliasTableChooser,
    RandomSource,
    WeightedIndexChooser,
    cumulative_weight_chooser,
)
from .resampler import WeightedResampler, classify_observations
from .sample import ArraySample, Sample
from .strategy import SamplingStrategy, WeightedResamplingStrategy

__all__ = [
    # choosers
    "RandomSource",
    "WeightedIndexChooser",
    "cumulative_weight_chooser",
    "AliasTableChooser",
    # resampler
    "WeightedResampler",
    "classify_observations",
    # samples
    "Sample",
    "ArraySample",
    # strategies
    "SamplingStrategy",
    "WeightedResamplingStrategy",
]
