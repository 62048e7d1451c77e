"""Tests for batch result objects."""

import pytest

from glyphforge.shared.result import (
    BatchResult,
    PerformanceMetrics,
    TransformFailure,
    TransformSuccess,
)


class TestOutcomes:
    """Test the success and failure variants."""

    def test_success(self):
        outcome = TransformSuccess(index=0, original="a", style="bold", transformed="x")

        assert outcome.success is True
        assert outcome.to_dict() == {
            "index": 0,
            "original": "a",
            "style": "bold",
            "transformed": "x",
            "success": True,
        }

    def test_failure(self):
        outcome = TransformFailure(index=1, original="b", style="nope", error="Unknown style: nope")

        assert outcome.success is False
        assert outcome.to_dict()["error"] == "Unknown style: nope"
        assert "transformed" not in outcome.to_dict()

    def test_failure_requires_message(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            TransformFailure(index=0, original="a", style="bold", error="")


class TestBatchResult:
    """Test aggregate batch results."""

    def make_result(self):
        return BatchResult(results=[
            TransformSuccess(index=0, original="a", style="bold", transformed="x"),
            TransformFailure(index=1, original="b", style="nope", error="Unknown style: nope"),
            TransformSuccess(index=2, original="c", style="wave", transformed="~c~"),
        ])

    def test_counts(self):
        result = self.make_result()

        assert result.total_items == 3
        assert result.successful == 2
        assert result.failed == 1
        assert result.success_rate == pytest.approx(2 / 3)
        assert [failure.index for failure in result.failures] == [1]

    def test_wire_form(self):
        data = self.make_result().to_dict()

        assert set(data) == {"totalItems", "successful", "results"}
        assert data["totalItems"] == 3
        assert data["successful"] == 2
        assert [item["success"] for item in data["results"]] == [True, False, True]

    def test_empty(self):
        result = BatchResult()

        assert result.total_items == 0
        assert result.success_rate == 0.0

    def test_out_of_order_results_rejected(self):
        with pytest.raises(ValueError, match="out of order"):
            BatchResult(results=[
                TransformSuccess(index=1, original="a", style="bold", transformed="x"),
            ])


class TestPerformanceMetrics:
    """Test timing metrics."""

    def test_characters_per_second(self):
        metrics = PerformanceMetrics(processing_time_ms=500.0, characters_processed=100)

        assert metrics.characters_per_second == pytest.approx(200.0)

    def test_zero_time(self):
        assert PerformanceMetrics().characters_per_second == 0.0
