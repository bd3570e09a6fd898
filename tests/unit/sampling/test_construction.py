from __future__ import annotations

__author__ = "PySATL project contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_resampler import (
    DimensionMismatch,
    Kind,
    SamplerType,
    UnivariateContinuous,
    UnivariateDiscrete,
    VariateForm,
    WeightedResampler,
    cumulative_weight_chooser,
)
from tests.unit.sampling.test_basic import ResamplerTestBase
from tests.utils.mocks import RecordingChooser


class TestClassification(ResamplerTestBase):
    @pytest.mark.parametrize(
        "observations, expected",
        [
            (np.array([1, 2, 3]), UnivariateDiscrete),
            (np.array([1.0, 2.0, 3.0]), UnivariateContinuous),
            ([1, 2, 3], UnivariateDiscrete),
            ([1, 2.5, 3], UnivariateContinuous),
            ([np.int32(1), np.int64(2), 3], UnivariateDiscrete),
            (np.zeros((2, 3), dtype=np.int64), SamplerType(VariateForm.MULTIVARIATE, Kind.DISCRETE)),
            (np.zeros((2, 3)), SamplerType(VariateForm.MULTIVARIATE, Kind.CONTINUOUS)),
            (np.zeros((3, 2, 2)), SamplerType(VariateForm.MATRIXVARIATE, Kind.CONTINUOUS)),
            (
                [np.eye(2, dtype=np.int64), np.eye(2, dtype=np.int64), np.eye(2, dtype=np.int64)],
                SamplerType(VariateForm.MATRIXVARIATE, Kind.DISCRETE),
            ),
            (
                [np.eye(2, dtype=np.int64), np.eye(2), np.eye(2)],
                SamplerType(VariateForm.MATRIXVARIATE, Kind.CONTINUOUS),
            ),
        ],
    )
    def test_sampler_type_follows_layout(self, observations, expected: SamplerType) -> None:
        sampler = WeightedResampler(observations, np.ones(3))
        assert sampler.sampler_type == expected
        assert sampler.variate_form is expected.variate_form
        assert sampler.kind is expected.kind
        assert sampler.n_observations == 3

    def test_empty_sequence_is_univariate_continuous(self) -> None:
        sampler = WeightedResampler([], [])
        assert sampler.sampler_type == UnivariateContinuous
        assert sampler.n_observations == 0

    @pytest.mark.parametrize(
        "observations",
        [
            np.array([True, False]),
            np.array([1 + 2j, 3j]),
            np.array(["a", "b"]),
            np.zeros((2, 2, 2, 2)),
            np.float64(1.0),
            [True, False],
            ["a", "b"],
            "ab",
            {1: 2, 3: 4},
        ],
    )
    def test_unsupported_observations_raise_type_error(self, observations) -> None:
        with pytest.raises(TypeError):
            WeightedResampler(observations, np.ones(2))

    def test_matrices_must_share_one_shape(self) -> None:
        with pytest.raises(ValueError, match="share one shape"):
            WeightedResampler([np.eye(2), np.eye(3)], np.ones(2))


class TestValidation(ResamplerTestBase):
    def test_mismatch_reports_both_counts(self) -> None:
        with pytest.raises(DimensionMismatch, match=r"\(2\).*\(3\)") as exc_info:
            WeightedResampler(np.array([10, 20, 30]), np.array([1.0, 1.0]))
        assert exc_info.value.n_observations == 3
        assert exc_info.value.n_weights == 2
        assert isinstance(exc_info.value, ValueError)

    def test_vector_count_is_number_of_columns(self) -> None:
        WeightedResampler(self.TABLE, np.ones(3))
        with pytest.raises(DimensionMismatch, match=r"\(2\).*\(3\)"):
            WeightedResampler(self.TABLE, np.ones(2))

    def test_matrix_count_is_number_of_matrices(self) -> None:
        with pytest.raises(DimensionMismatch, match=r"\(4\).*\(2\)"):
            WeightedResampler([np.eye(2), np.eye(2)], np.ones(4))

    def test_weights_must_be_one_dimensional(self) -> None:
        with pytest.raises(ValueError, match="1D"):
            WeightedResampler(np.array([1.0, 2.0]), np.ones((1, 2)))

    def test_degenerate_weights_are_accepted_at_construction(self) -> None:
        sampler = WeightedResampler(np.array([1.0, 2.0]), np.zeros(2))
        assert sampler.n_observations == 2

    def test_construction_consumes_no_randomness(self) -> None:
        chooser = RecordingChooser()
        WeightedResampler.create(np.array([1.0, 2.0]), np.ones(2), chooser)
        assert chooser.calls == []


class TestSharedOwnership(ResamplerTestBase):
    def test_collections_are_not_copied(self) -> None:
        obs = np.array([1.0, 2.0, 3.0])
        weights = np.array([1.0, 2.0, 3.0])
        sampler = WeightedResampler(obs, weights)
        assert sampler.observations is obs
        assert sampler.weights is weights

    def test_matrix_sequence_is_not_copied(self) -> None:
        sampler = self.make_matrix_sampler()
        assert isinstance(sampler.observations, list)

    def test_default_chooser(self) -> None:
        assert self.make_scalar_sampler().chooser is cumulative_weight_chooser

    def test_repr(self) -> None:
        assert repr(self.make_vector_sampler()) == (
            "WeightedResampler(variate_form='multivariate', kind='continuous', n_observations=3)"
        )


class TestLength(ResamplerTestBase):
    def test_vector_length_is_row_count(self) -> None:
        assert len(self.make_vector_sampler()) == 2

    @pytest.mark.parametrize("factory", ["make_scalar_sampler", "make_matrix_sampler"])
    def test_length_requires_multivariate(self, factory: str) -> None:
        sampler = getattr(self, factory)()
        with pytest.raises(TypeError, match="not supported"):
            len(sampler)
