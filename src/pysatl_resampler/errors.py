"""
Exceptions
==========

Domain-specific exceptions raised by PySATL Resampler.
"""

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DimensionMismatch(ValueError):
    """
    Raised when the number of weights differs from the number of observations.

    Parameters
    ----------
    n_observations : int
        Number of observations found in the observation collection.
    n_weights : int
        Length of the weight vector.
    """

    def __init__(self, n_observations: int, n_weights: int) -> None:
        self.n_observations = n_observations
        self.n_weights = n_weights
        super().__init__(
            f"Length of the weights vector ({n_weights}) must match the "
            f"number of observations ({n_observations})."
        )


__all__ = ["DimensionMismatch"]
