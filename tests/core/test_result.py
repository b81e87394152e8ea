"""
Tests for the Result[P] envelope and the Timer.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings tuple and has_warning()
    - Timer sections accumulate and report total_seconds
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from litemath.core.compute.timing import Timer, timed
from litemath.core.compute.tolerances import (
    CLOSED_FORM,
    EIGEN_PIPELINE,
    select_tolerance,
)
from litemath.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=1.5),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_cofactor",
        )
        assert result.params.value == 1.5
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_cofactor"
        assert result.warnings == ()

    def test_timing_optional(self):
        result = Result(params=FakeParams(0.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None

    def test_frozen(self):
        result = Result(params=FakeParams(0.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(0.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("repeated eigenvalue 0.5: eigenvector taken from null space",),
        )
        assert result.has_warning("repeated eigenvalue")
        assert not result.has_warning("complex")


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("step"):
            pass
        with timer.section("step"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "step"}
        assert result["step"] >= 0.0
        assert result["total_seconds"] >= 0.0

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context_manager(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()["total_seconds"] >= 0.0


class TestTolerances:

    def test_select_tolerance(self):
        assert select_tolerance("cpu_cofactor") is EIGEN_PIPELINE
        assert select_tolerance("cpu_eigh") is CLOSED_FORM
