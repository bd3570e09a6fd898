"""
Resampled Draws
===============

Containers for the result of bulk resampling. A sample remembers the
:class:`~pysatl_resampler.types.SamplerType` of the resampler it came from, so
the value kind and the shape of a single draw travel with the data.
"""

from __future__ import annotations

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_resampler.types import Kind, VariateForm

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_resampler.types import NumericArray, SamplerType


class Sample(Protocol):
    """
    Protocol for containers of resampled draws.

    Attributes
    ----------
    array : numpy.ndarray
        Draws as a 2D array, one row per draw.
    shape : tuple[int, ...]
        Shape of ``array``.
    sampler_type : SamplerType
        Descriptor of the resampler that produced the draws.
    """

    def __len__(self) -> int: ...
    @property
    def array(self) -> NumericArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...
    @property
    def sampler_type(self) -> SamplerType: ...


class ArraySample:
    """
    Draws of a univariate or multivariate resampler, one row per draw.

    Parameters
    ----------
    data : numpy.ndarray
        2D array of shape ``(n, d)``; ``d == 1`` for univariate draws.
    sampler_type : SamplerType
        Descriptor of the producing resampler. Its kind fixes the dtype family:
        integer arrays for discrete draws, floating arrays for continuous ones.

    Raises
    ------
    ValueError
        If ``data`` is not 2D, if univariate draws have more than one column,
        if the sampler type is matrixvariate, or if the dtype contradicts the
        kind.
    """

    __slots__ = ("_data", "_sampler_type")

    def __init__(self, data: NumericArray, sampler_type: SamplerType) -> None:
        if sampler_type.variate_form is VariateForm.MATRIXVARIATE:
            raise ValueError("Matrixvariate draws cannot be stored in a 2D ArraySample.")
        if data.ndim != 2:
            raise ValueError(f"ArraySample expects 2D array of shape (n, d), got {data.ndim}D.")
        if sampler_type.variate_form is VariateForm.UNIVARIATE and data.shape[1] != 1:
            raise ValueError(
                f"Univariate draws must have shape (n, 1), got {tuple(data.shape)}."
            )
        expected = np.integer if sampler_type.kind is Kind.DISCRETE else np.floating
        if not np.issubdtype(data.dtype, expected):
            raise ValueError(
                f"dtype '{data.dtype}' does not hold {sampler_type.kind} draws."
            )
        self._data = data
        self._sampler_type = sampler_type

    @classmethod
    def from_draws(cls, draws: NumericArray, sampler_type: SamplerType) -> ArraySample:
        """
        Wrap the output of :meth:`WeightedResampler.sample`.

        Univariate draws of shape ``(n,)`` become a ``(n, 1)`` column.
        """
        if sampler_type.variate_form is VariateForm.UNIVARIATE and draws.ndim == 1:
            draws = draws.reshape(-1, 1)
        return cls(draws, sampler_type)

    def __len__(self) -> int:
        """Return the number of draws (n)."""
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[NumericArray]:
        """Iterate over draws (rows of the array)."""
        yield from self._data

    @property
    def array(self) -> NumericArray:
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        n, d = self._data.shape
        return int(n), int(d)

    @property
    def dimension(self) -> int:
        """Length of a single draw (1 for univariate)."""
        return int(self._data.shape[1])

    @property
    def sampler_type(self) -> SamplerType:
        return self._sampler_type

    @property
    def kind(self) -> Kind:
        return self._sampler_type.kind

    @property
    def draws(self) -> NumericArray:
        """Draws in resampler layout: ``(n,)`` for univariate, ``(n, d)`` otherwise."""
        if self._sampler_type.variate_form is VariateForm.UNIVARIATE:
            return self._data[:, 0]
        return self._data


__all__ = ["Sample", "ArraySample"]
