"""
Tests for Timer, timed() and the precision policy constants.
"""

import numpy as np
import pytest

from pylinalg.core.compute import (
    PIVOT_EPSILON,
    ROUNDOFF_DECIMALS,
    Timer,
    timed,
)
from pylinalg.core.compute.tolerances import ILL_CONDITIONED_PIVOT_RATIO, ROUNDOFF


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("forward"):
            pass
        with timer.section("forward"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "forward"}
        assert result["forward"] >= 0.0
        assert result["total_seconds"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert "total_seconds" in timer.result()


class TestTolerances:

    def test_pivot_epsilon_is_machine_epsilon(self):
        assert PIVOT_EPSILON == np.finfo(np.float64).eps

    def test_roundoff_decimals(self):
        assert ROUNDOFF_DECIMALS == 5

    def test_roundoff_tier(self):
        assert ROUNDOFF.atol == 1e-4
        assert ROUNDOFF.rtol == 0.0

    def test_ill_conditioned_ratio_below_one(self):
        assert 0.0 < ILL_CONDITIONED_PIVOT_RATIO < 1.0
