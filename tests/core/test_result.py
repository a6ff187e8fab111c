"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinalg.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu_rows",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            info={"form": "reduced", "rank": 3},
            timing={"total_seconds": 0.01, "forward": 0.006},
        )
        assert result.params.value == 1.0
        assert result.info["rank"] == 3
        assert result.timing["forward"] == 0.006
        assert result.backend_name == "cpu_rows"

    def test_timing_none(self):
        assert _result().timing is None


# ═══════════════════════════════════════════════════════════════════════
# Default factories
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        result = _result()
        assert "pylinalg_version" in result.provenance
        assert "numpy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}


# ═══════════════════════════════════════════════════════════════════════
# has_warning
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("Matrix is rank-deficient: rank=1, expected=2",))
        assert result.has_warning("rank-deficient")
        assert not result.has_warning("singular")

    def test_no_warnings(self):
        assert not _result().has_warning("anything")


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen — no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)
