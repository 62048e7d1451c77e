"""Result objects for GlyphForge aggregate operations.

Batch outcomes are modelled as a two-variant sum type, ``TransformSuccess`` or
``TransformFailure``, so isolated per-item failures are visible in the type of
``BatchResult.results`` rather than hidden behind a caught exception.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class TransformSuccess:
    """A batch item that was transformed."""

    index: int
    original: Any
    style: Any
    transformed: str

    @property
    def success(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "original": self.original,
            "style": self.style,
            "transformed": self.transformed,
            "success": True,
        }


@dataclass(frozen=True)
class TransformFailure:
    """A batch item that could not be transformed, with the reason."""

    index: int
    original: Any
    style: Any
    error: str

    def __post_init__(self) -> None:
        """Validate failure entry."""
        if not self.error:
            raise ValueError("Failure error message cannot be empty")

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "original": self.original,
            "style": self.style,
            "error": self.error,
            "success": False,
        }


ItemOutcome = Union[TransformSuccess, TransformFailure]


@dataclass
class PerformanceMetrics:
    """Timing metrics for an aggregate operation."""

    processing_time_ms: float = 0.0
    characters_processed: int = 0
    items_processed: int = 0
    parallel: bool = False

    @property
    def characters_per_second(self) -> float:
        """Calculate characters processed per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.characters_processed * 1000.0) / self.processing_time_ms


@dataclass
class BatchResult:
    """Index-ordered outcomes of a batch transform."""

    results: List[ItemOutcome] = field(default_factory=list)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate that outcomes are ordered by their input index."""
        for position, outcome in enumerate(self.results):
            if outcome.index != position:
                raise ValueError(
                    f"Batch results out of order: position {position} "
                    f"holds index {outcome.index}"
                )

    @property
    def total_items(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for outcome in self.results if outcome.success)

    @property
    def failed(self) -> int:
        return self.total_items - self.successful

    @property
    def failures(self) -> List[TransformFailure]:
        return [
            outcome for outcome in self.results
            if isinstance(outcome, TransformFailure)
        ]

    @property
    def success_rate(self) -> float:
        if self.total_items == 0:
            return 0.0
        return self.successful / self.total_items

    def to_dict(self) -> Dict[str, Any]:
        """Wire form: ``{totalItems, successful, results}``."""
        return {
            "totalItems": self.total_items,
            "successful": self.successful,
            "results": [outcome.to_dict() for outcome in self.results],
        }
