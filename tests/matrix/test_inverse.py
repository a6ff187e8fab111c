"""
Tests for Matrix.inverse().

Validates:
    - Exact inverses of small integer matrices
    - A @ inv(A) ≈ I within the rounding tolerance
    - Agreement with scipy.linalg.inv
    - Singular and ill-conditioned inputs
"""

import warnings

import numpy as np
import pytest
from scipy import linalg

from pylinalg import Matrix, to_f64
from pylinalg.core.compute.tolerances import ROUNDOFF
from pylinalg.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Invertible inputs
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_identity(self):
        assert Matrix.identity(2).inverse() == Matrix.identity(2)
        assert Matrix.identity(5).inverse() == Matrix.identity(5)

    def test_integer_inverse(self, invertible3):
        expected = Matrix.new(3, 3, to_f64(
            0, 0, 1,
            -2, 1, 3,
            3, -1, -5,
        ))
        assert invertible3.inverse() == expected

    def test_diagonal(self):
        m = Matrix.new(2, 2, to_f64(4, 0, 0, -8))
        assert m.inverse() == Matrix.new(2, 2, [0.25, 0.0, 0.0, -0.125])

    def test_one_by_one(self):
        assert Matrix.new(1, 1, [5.0]).inverse() == Matrix.new(1, 1, [0.2])

    def test_requires_row_swap(self):
        m = Matrix.new(2, 2, to_f64(0, 1, 1, 0))
        assert m.inverse() == m

    def test_product_is_identity(self, well_conditioned):
        product = well_conditioned @ well_conditioned.inverse()
        np.testing.assert_allclose(
            product.to_numpy(), np.eye(5), rtol=ROUNDOFF.rtol, atol=ROUNDOFF.atol,
        )

    def test_matches_scipy(self, well_conditioned):
        expected = linalg.inv(well_conditioned.to_numpy())
        np.testing.assert_allclose(
            well_conditioned.inverse().to_numpy(), expected,
            rtol=ROUNDOFF.rtol, atol=ROUNDOFF.atol,
        )

    def test_untruncated_matches_scipy_closely(self, well_conditioned):
        expected = linalg.inv(well_conditioned.to_numpy())
        np.testing.assert_allclose(
            well_conditioned.inverse(decimals=None).to_numpy(), expected,
            rtol=1e-10, atol=1e-12,
        )

    def test_inverse_of_inverse(self, invertible3):
        assert invertible3.inverse().inverse() == invertible3

    def test_input_not_mutated(self, invertible3):
        before = invertible3.copy()
        invertible3.inverse()
        assert invertible3 == before

    def test_no_warning_when_well_conditioned(self, invertible3):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            invertible3.inverse()


# ═══════════════════════════════════════════════════════════════════════
# Failure modes
# ═══════════════════════════════════════════════════════════════════════


class TestInverseFailures:

    def test_not_square(self, wide2x4):
        with pytest.raises(DimensionError, match="square"):
            wide2x4.inverse()

    def test_singular(self, singular3):
        with pytest.raises(SingularMatrixError) as excinfo:
            singular3.inverse()
        assert excinfo.value.rank == 2
        assert excinfo.value.expected_rank == 3

    def test_rank_one(self):
        with pytest.raises(SingularMatrixError, match="rank=1"):
            Matrix.new(2, 2, to_f64(1, 2, 2, 4)).inverse()

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError) as excinfo:
            Matrix.new(3, 3, [0.0] * 9).inverse()
        assert excinfo.value.rank == 0

    def test_singular_below_rounding_resolution(self):
        m = Matrix.new(2, 2, [1.0, 1.0, 1.0, 1.0 + 1e-7])
        with pytest.raises(SingularMatrixError):
            m.inverse()

    def test_ill_conditioned_warns(self):
        m = Matrix.new(2, 2, [1.0, 1.0, 1.0, 1.00001])
        with pytest.warns(RuntimeWarning, match="ill-conditioned"):
            result = m.inverse()
        np.testing.assert_allclose(
            result.to_numpy(),
            [[100001.0, -100000.0], [-100000.0, 100000.0]],
            rtol=1e-6,
        )

    @pytest.mark.parametrize("bad", [np.inf, np.nan])
    def test_non_finite_input_rejected(self, bad):
        with pytest.raises(ValidationError, match="non-finite"):
            Matrix.new(2, 2, [bad, 0.0, 0.0, 1.0]).inverse()

    def test_empty_matrix(self):
        with pytest.raises(ValidationError, match="no data"):
            Matrix.empty(2, 2).inverse()
