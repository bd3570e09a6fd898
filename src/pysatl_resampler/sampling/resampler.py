"""
Weighted Resampler
==================

This module provides :class:`WeightedResampler`, a sampler that draws
observations from raw data with probability proportional to their weights
(sampling with replacement).

Observation layouts
-------------------
- 1D array or sequence of scalars – univariate, each draw is a scalar;
- 2D array – multivariate, each *column* is one observation;
- 3D array or sequence of equally shaped 2D arrays – matrixvariate, each draw is a matrix.

Notes
-----
- The sampler keeps references to the given collections and never copies or
  mutates them.
- Choosing an index is delegated to a :class:`WeightedIndexChooser`; degenerate
  weights are reported by the chooser at draw time, not at construction.
"""

from __future__ import annotations

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numbers
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_resampler.errors import DimensionMismatch
from pysatl_resampler.types import Kind, SamplerType, VariateForm

from .chooser import cumulative_weight_chooser

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from pysatl_resampler.types import NumericArray, Observations, Weights

    from .chooser import RandomSource, WeightedIndexChooser

_ARRAY_FORMS = {
    1: VariateForm.UNIVARIATE,
    2: VariateForm.MULTIVARIATE,
    3: VariateForm.MATRIXVARIATE,
}


def _dtype_kind(dtype: np.dtype[Any]) -> Kind:
    if np.issubdtype(dtype, np.integer):
        return Kind.DISCRETE
    if np.issubdtype(dtype, np.floating):
        return Kind.CONTINUOUS
    raise TypeError(f"Unsupported observation dtype '{dtype}'; expected integer or real values.")


def _scalar_kind(value: object) -> Kind:
    if isinstance(value, bool | np.bool_):
        raise TypeError("Boolean observations are not supported.")
    if isinstance(value, numbers.Integral):
        return Kind.DISCRETE
    if isinstance(value, numbers.Real):
        return Kind.CONTINUOUS
    raise TypeError(
        f"Unsupported observation element of type '{type(value).__name__}'; "
        "expected integer or real values."
    )


def classify_observations(observations: Observations) -> SamplerType:
    """
    Derive the sampler type from the layout and element kind of ``observations``.

    Parameters
    ----------
    observations : numpy.ndarray or Sequence
        Observation collection (see module docstring for accepted layouts).

    Returns
    -------
    SamplerType
        Variate form and value kind.

    Raises
    ------
    TypeError
        If the layout or the element type is not supported.
    ValueError
        If a sequence of matrices mixes matrix shapes.
    """
    if isinstance(observations, np.ndarray):
        form = _ARRAY_FORMS.get(observations.ndim)
        if form is None:
            raise TypeError(
                f"Observation arrays must be 1D, 2D or 3D, got {observations.ndim}D."
            )
        return SamplerType(form, _dtype_kind(observations.dtype))

    if isinstance(observations, str | bytes) or not isinstance(observations, Sequence):
        raise TypeError(
            f"Unsupported observation collection of type '{type(observations).__name__}'."
        )

    if observations and all(
        isinstance(item, np.ndarray) and item.ndim == 2 for item in observations
    ):
        shapes = {item.shape for item in observations}
        if len(shapes) != 1:
            raise ValueError(
                f"Matrix observations must share one shape, got {sorted(shapes)}."
            )
        dtype = np.result_type(*{item.dtype for item in observations})
        return SamplerType(VariateForm.MATRIXVARIATE, _dtype_kind(dtype))

    kinds = {_scalar_kind(item) for item in observations}
    kind = Kind.DISCRETE if kinds == {Kind.DISCRETE} else Kind.CONTINUOUS
    return SamplerType(VariateForm.UNIVARIATE, kind)


class WeightedResampler:
    """
    Sampler drawing observations with probability proportional to weight.

    Parameters
    ----------
    observations : numpy.ndarray or Sequence
        Raw data to resample from. Held by reference.
    weights : array_like
        1D non-negative weights, one per observation. Held by reference when
        already a NumPy array.
    chooser : WeightedIndexChooser, optional
        Weighted index primitive. Defaults to :func:`cumulative_weight_chooser`.

    Raises
    ------
    TypeError
        If the observation layout is not supported.
    ValueError
        If the weights are not 1D, or if matrix observations differ in shape.
    DimensionMismatch
        If the number of weights differs from the number of observations.
    """

    __slots__ = ("_observations", "_weights", "_sampler_type", "_chooser")

    def __init__(
        self,
        observations: Observations,
        weights: Weights,
        chooser: WeightedIndexChooser | None = None,
    ) -> None:
        sampler_type = classify_observations(observations)

        wv = np.asarray(weights)
        if wv.ndim != 1:
            raise ValueError(f"Weights must be a 1D array, got {wv.ndim}D.")

        if sampler_type.variate_form is VariateForm.MULTIVARIATE:
            n_observations = int(np.shape(observations)[1])
        else:
            n_observations = len(observations)
        if n_observations != wv.size:
            raise DimensionMismatch(n_observations, int(wv.size))

        self._observations = observations
        self._weights = wv
        self._sampler_type = sampler_type
        self._chooser = chooser if chooser is not None else cumulative_weight_chooser

    @classmethod
    def create(
        cls,
        observations: Observations,
        weights: Weights,
        chooser: WeightedIndexChooser | None = None,
    ) -> WeightedResampler:
        """Alternative constructor; see :class:`WeightedResampler`."""
        return cls(observations, weights, chooser)

    @property
    def observations(self) -> Observations:
        return self._observations

    @property
    def weights(self) -> NumericArray:
        return self._weights

    @property
    def sampler_type(self) -> SamplerType:
        """Variate form and value kind derived at construction."""
        return self._sampler_type

    @property
    def variate_form(self) -> VariateForm:
        return self._sampler_type.variate_form

    @property
    def kind(self) -> Kind:
        return self._sampler_type.kind

    @property
    def chooser(self) -> WeightedIndexChooser:
        return self._chooser

    @property
    def n_observations(self) -> int:
        """Number of observations (equal to the number of weights)."""
        return int(self._weights.size)

    def __len__(self) -> int:
        """Return the length of a single draw (multivariate samplers only)."""
        self._require(VariateForm.MULTIVARIATE, "len()")
        return int(np.shape(self._observations)[0])

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(variate_form={self.variate_form.value!r}, "
            f"kind={self.kind.value!r}, n_observations={self.n_observations})"
        )

    def _require(self, form: VariateForm, operation: str) -> None:
        if self.variate_form is not form:
            raise TypeError(f"{operation} is not supported for {self.variate_form} samplers.")

    def _choose(self, rng: RandomSource) -> int:
        return self._chooser(rng, self._weights)

    def draw(self, rng: RandomSource) -> Any:
        """
        Draw one observation.

        Parameters
        ----------
        rng : RandomSource
            Random source passed to the chooser.

        Returns
        -------
        Any
            ``observations[i]`` for the chosen index: a scalar for univariate
            samplers, a whole matrix for matrixvariate ones.

        Raises
        ------
        TypeError
            For multivariate samplers; use :meth:`fill_draw` instead.
        """
        if self.variate_form is VariateForm.MULTIVARIATE:
            raise TypeError("draw is not supported for multivariate samplers; use fill_draw.")
        return self._observations[self._choose(rng)]

    def fill_draw[T: MutableSequence[Any] | np.ndarray](self, rng: RandomSource, out: T) -> T:
        """
        Draw one observation into a caller-provided buffer.

        Exactly one index is chosen; every position of ``out`` is overwritten
        with the corresponding entry of the chosen column.

        Parameters
        ----------
        rng : RandomSource
            Random source passed to the chooser.
        out : MutableSequence or numpy.ndarray
            1D buffer of length ``len(self)``.

        Returns
        -------
        MutableSequence or numpy.ndarray
            ``out`` itself.

        Raises
        ------
        TypeError
            For non-multivariate samplers.
        ValueError
            If the buffer is not 1D or its length differs from ``len(self)``;
            raised before any randomness is consumed.
        """
        self._require(VariateForm.MULTIVARIATE, "fill_draw")
        if np.ndim(out) != 1:
            raise ValueError(f"Buffer must be 1D, got {np.ndim(out)}D.")
        dim = len(self)
        if len(out) != dim:
            raise ValueError(f"Buffer length ({len(out)}) must match the sample dimension ({dim}).")

        j = self._choose(rng)
        column = self._observations[:, j]  # type: ignore[call-overload]
        for i in range(dim):
            out[i] = column[i]
        return out

    def sample(self, n: int, rng: RandomSource) -> NumericArray:
        """
        Draw ``n`` independent observations into a new array.

        Parameters
        ----------
        n : int
            Number of draws.
        rng : RandomSource
            Random source passed to the chooser.

        Returns
        -------
        numpy.ndarray
            Shape ``(n,)`` for univariate, ``(n, d)`` for multivariate (one row
            per draw) and ``(n, r, c)`` for matrixvariate samplers.

        Raises
        ------
        ValueError
            If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Number of samples must be non-negative, got {n}")

        obs = self._observations
        form = self.variate_form

        if form is VariateForm.MULTIVARIATE:
            result = np.empty((n, len(self)), dtype=np.asarray(obs).dtype)
            for row in result:
                self.fill_draw(rng, row)
            return result

        idx = np.fromiter((self._choose(rng) for _ in range(n)), dtype=np.intp, count=n)

        if isinstance(obs, np.ndarray):
            return obs[idx]

        if form is VariateForm.MATRIXVARIATE:
            if n == 0:
                return np.empty((0, *np.shape(obs[0])), dtype=np.result_type(obs[0]))
            return np.stack([obs[i] for i in idx])

        dtype = np.int64 if self.kind is Kind.DISCRETE else np.float64
        return np.asarray([obs[i] for i in idx], dtype=dtype)


__all__ = ["WeightedResampler", "classify_observations"]
