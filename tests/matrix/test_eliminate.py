"""
Tests for the eliminate() solver entry point.
"""

import numpy as np
import pytest

from pylinalg import Matrix, eliminate, to_f64
from pylinalg.core.exceptions import ValidationError
from pylinalg.matrix import EliminationSolution


class TestEliminateEchelon:

    def test_matches_matrix_method(self, wide2x4):
        result = eliminate(wide2x4)
        assert isinstance(result, EliminationSolution)
        assert result.form == 'echelon'
        assert result.matrix == wide2x4.echelon()

    def test_pivots_and_rank(self, wide2x4):
        result = eliminate(wide2x4)
        assert result.pivot_columns == (1, 2)
        assert result.pivots == (3.0, 4.33333)
        assert result.rank == 2
        assert result.is_full_rank
        assert result.warnings == ()

    def test_timing_sections(self, square4):
        result = eliminate(square4)
        assert set(result.timing) == {'total_seconds', 'forward'}
        assert result.backend_name == 'cpu_rows'

    def test_info(self, square4):
        info = eliminate(square4).info
        assert info['rows'] == 4
        assert info['cols'] == 4
        assert info['max_rank'] == 4
        assert info['decimals'] == 5
        assert 0.0 < info['pivot_ratio'] <= 1.0


class TestEliminateReduced:

    def test_matches_matrix_method(self, square4):
        result = eliminate(square4, form='reduced')
        assert result.matrix == square4.reduced_echelon()
        assert set(result.timing) == {'total_seconds', 'forward', 'back_substitution'}

    def test_augmented_system_from_array(self):
        result = eliminate(
            np.array([[2.0, 1.0, 5.0], [1.0, 3.0, 10.0]]),
            form='reduced',
            augmented_size=1,
        )
        assert result.matrix == Matrix.new(2, 3, to_f64(1, 0, 1, 0, 1, 3))
        assert result.info['max_rank'] == 2
        assert result.is_full_rank

    def test_from_view(self, row_constant4):
        with row_constant4.view((1, 2), (2, 3)) as v:
            result = eliminate(v, form='reduced')
        assert result.matrix == Matrix.new(2, 2, to_f64(1, 1, 0, 0))
        assert result.pivot_columns == (1,)


class TestRankDeficiency:

    def test_reported_as_warning(self, singular3):
        result = eliminate(singular3)
        assert result.rank == 2
        assert not result.is_full_rank
        assert len(result.warnings) == 1
        assert "rank-deficient" in result.warnings[0]
        assert result._result.has_warning("rank=2")

    def test_zero_matrix(self):
        result = eliminate(Matrix.new(2, 2, [0.0] * 4))
        assert result.rank == 0
        assert result.pivot_columns == ()
        assert result.info['pivot_ratio'] == 0.0


class TestEliminateValidation:

    def test_bad_form(self, square4):
        with pytest.raises(ValidationError, match="form"):
            eliminate(square4, form='lu')

    def test_bad_augmented_size(self, square4):
        with pytest.raises(ValidationError, match="augmented_size"):
            eliminate(square4, augmented_size=5)

    def test_bad_array(self):
        with pytest.raises(ValidationError):
            eliminate(np.array([1.0, 2.0]))


class TestSolutionDisplay:

    def test_summary(self, singular3):
        text = eliminate(singular3, form='reduced').summary()
        assert "Elimination (reduced form)" in text
        assert "Rank: 2 of 3" in text
        assert "Pivot columns: 1, 2" in text
        assert "Warning: Matrix is rank-deficient" in text

    def test_repr(self, wide2x4):
        assert repr(eliminate(wide2x4)) == (
            "EliminationSolution(form='echelon', rank=2, shape=(2, 4))"
        )

    def test_provenance(self, square4):
        provenance = eliminate(square4)._result.provenance
        assert provenance['numpy_version'] == np.__version__
