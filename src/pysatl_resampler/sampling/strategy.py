"""
Sampling Strategies
===================

This module defines the pluggable sampling strategy interface and its default
implementation for weighted resamplers:

- :class:`SamplingStrategy` – draws ``n`` values from a sampler.
- :class:`WeightedResamplingStrategy` – draws ``(n, d)`` samples from a
  univariate or multivariate :class:`WeightedResampler`.
"""

from __future__ import annotations

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_resampler.types import VariateForm

from .sample import ArraySample, Sample

if TYPE_CHECKING:
    from .resampler import WeightedResampler


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, sampler: WeightedResampler, **options: Any) -> Sample: ...


class WeightedResamplingStrategy(SamplingStrategy):
    """
    Default bulk strategy for weighted resamplers.

    Parameters
    ----------
    seed : int or None, default None
        Seed of the strategy's own generator. If ``None``, uses system entropy.

    Notes
    -----
    - Univariate draws are returned with shape ``(n, 1)``, multivariate ones
      with shape ``(n, d)``.
    - Matrixvariate samplers are rejected since :class:`ArraySample` is 2D;
      use :meth:`WeightedResampler.sample` for them.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def sample(self, n: int, sampler: WeightedResampler, **options: Any) -> ArraySample:
        """
        Draw ``n`` observations from ``sampler``.

        Parameters
        ----------
        n : int
            Number of draws.
        sampler : WeightedResampler
            Univariate or multivariate resampler.
        **options
            ``rng`` – generator used instead of the strategy's own one.

        Returns
        -------
        ArraySample
            A 2D sample of shape ``(n, d)`` tagged with the sampler type.

        Raises
        ------
        ValueError
            If ``n`` is negative or the sampler is matrixvariate.
        """
        if sampler.variate_form is VariateForm.MATRIXVARIATE:
            raise ValueError("Matrixvariate samplers cannot produce a 2D ArraySample.")

        rng = options.get("rng", self._rng)
        return ArraySample.from_draws(sampler.sample(n, rng), sampler.sampler_type)


__all__ = ["SamplingStrategy", "WeightedResamplingStrategy"]
