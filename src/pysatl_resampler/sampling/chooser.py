"""
Weighted Index Choosers
=======================

This module defines the contract of the weighted index chooser used by
:class:`~pysatl_resampler.sampling.resampler.WeightedResampler` and two
default implementations:

- :func:`cumulative_weight_chooser` – inverse-CDF search over cumulative sums.
- :class:`AliasTableChooser` – Vose's alias method with a prebuilt table.

Notes
-----
- Indices are 0-based.
- Both implementations reject empty, negative, non-finite and zero-sum weights
  with :class:`ValueError`. Zero-weight entries are never chosen.
"""

from __future__ import annotations

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from pysatl_resampler.types import FloatArray, Weights


class RandomSource(Protocol):
    """Minimal random source interface (satisfied by :class:`numpy.random.Generator`)."""

    def random(self) -> float: ...


class WeightedIndexChooser(Protocol):
    """
    Protocol for weighted index choosers.

    A chooser returns one index ``i`` in ``[0, len(weights))`` drawn with
    probability proportional to ``weights[i]``, consuming randomness from
    ``rng``. It may raise for degenerate weights.
    """

    def __call__(self, rng: RandomSource, weights: Weights) -> int: ...


def _validated_weights(weights: Weights) -> FloatArray:
    w = np.asarray(weights, dtype=np.float64)
    if w.ndim != 1:
        raise ValueError(f"Weights must be a 1D array, got {w.ndim}D.")
    if w.size == 0:
        raise ValueError("Weights must be non-empty.")
    if not np.isfinite(w).all():
        raise ValueError("Weights must be finite.")
    if (w < 0.0).any():
        raise ValueError("Weights must be non-negative.")
    if not w.sum() > 0.0:
        raise ValueError("Sum of weights must be positive.")
    return w


def cumulative_weight_chooser(rng: RandomSource, weights: Weights) -> int:
    """
    Choose an index by inverting the cumulative weight distribution.

    Parameters
    ----------
    rng : RandomSource
        Source of one uniform variate on ``[0, 1)``.
    weights : array_like
        1D non-negative weights with a positive sum.

    Returns
    -------
    int
        Chosen index.

    Raises
    ------
    ValueError
        If the weights are degenerate.

    Notes
    -----
    The weights are validated and accumulated on every call, so one draw costs
    O(N). Prefer :class:`AliasTableChooser` for many draws over large N.
    """
    w = _validated_weights(weights)
    cumulative = np.cumsum(w)
    u = rng.random() * cumulative[-1]
    idx = int(np.searchsorted(cumulative, u, side="right"))
    # rounding may push u onto the total; fall back to the last reachable entry
    return min(idx, int(np.flatnonzero(w)[-1]))


@dataclass(frozen=True, slots=True, eq=False)
class AliasTableChooser:
    """
    Weighted index chooser based on Vose's alias method.

    The table is built once for ``weights``; every call then costs one uniform
    variate and O(1) work.

    Parameters
    ----------
    weights : array_like
        1D non-negative weights with a positive sum.

    Attributes
    ----------
    table_weights : numpy.ndarray
        Snapshot of the validated weights the table was built for.
    prob : numpy.ndarray
        Acceptance probability of each column, shape ``(n,)``.
    alias : numpy.ndarray
        Alias index of each column, shape ``(n,)``.

    Raises
    ------
    ValueError
        If the weights are degenerate, or if the chooser is called with a
        weight vector other than the one it was built for.
    """

    weights: Weights
    table_weights: FloatArray = field(init=False, repr=False)
    prob: FloatArray = field(init=False, repr=False)
    alias: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        w = _validated_weights(self.weights)
        n = w.size
        q = w * (n / w.sum())

        prob = np.ones(n, dtype=np.float64)
        alias = np.arange(n, dtype=np.intp)

        small = [i for i in range(n) if q[i] < 1.0]
        large = [i for i in range(n) if q[i] >= 1.0]
        while small and large:
            s = small.pop()
            g = large.pop()
            prob[s] = q[s]
            alias[s] = g
            q[g] -= 1.0 - q[s]
            if q[g] < 1.0:
                small.append(g)
            else:
                large.append(g)

        # leftovers are numerically ~1 and keep their own column, except
        # zero-weight entries stranded by rounding
        heaviest = int(np.argmax(w))
        for i in small:
            if w[i] == 0.0:
                prob[i] = 0.0
                alias[i] = heaviest

        object.__setattr__(self, "table_weights", w.copy())
        object.__setattr__(self, "prob", prob)
        object.__setattr__(self, "alias", alias)

    def __len__(self) -> int:
        return int(self.prob.size)

    def __call__(self, rng: RandomSource, weights: Weights | None = None) -> int:
        """
        Choose an index from the prebuilt table.

        Parameters
        ----------
        rng : RandomSource
            Source of one uniform variate on ``[0, 1)``.
        weights : array_like, optional
            Weight vector of the caller; must equal the one the table was
            built for.
        """
        n = len(self)
        if (
            weights is not None
            and weights is not self.weights
            and not np.array_equal(np.asarray(weights, dtype=np.float64), self.table_weights)
        ):
            raise ValueError(
                f"Alias table was built for {n} weights that differ from the given "
                f"weights of shape {np.shape(weights)}."
            )
        u = rng.random() * n
        column = min(int(u), n - 1)
        if u - column < self.prob[column]:
            return column
        return int(self.alias[column])


__all__ = [
    "RandomSource",
    "WeightedIndexChooser",
    "cumulative_weight_chooser",
    "AliasTableChooser",
]
