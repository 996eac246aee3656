"""Data models for post classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass(frozen=True)
class Document:
    """A labeled post: the topic tag and the raw post text."""

    label: str
    content: str


class Prediction(NamedTuple):
    """Best-scoring label for a document and its log-probability score."""

    label: str
    score: float


@dataclass
class PredictionRecord:
    """Outcome of classifying a single test document."""

    gold_label: str
    predicted_label: str
    score: float
    content: str

    @property
    def is_correct(self) -> bool:
        return self.gold_label == self.predicted_label

    def to_dict(self) -> dict:
        return {
            "correct": self.gold_label,
            "predicted": self.predicted_label,
            "score": round(self.score, 4),
            "content": self.content,
        }


@dataclass
class EvaluationResult:
    """Tally of predictions over a labeled test set."""

    correct: int = 0
    total: int = 0
    records: list[PredictionRecord] = field(default_factory=list)

    @property
    def accuracy(self) -> float:
        """Fraction of test documents predicted correctly (0-1)."""
        return self.correct / self.total if self.total > 0 else 0.0

    def as_tuple(self) -> tuple[int, int]:
        return self.correct, self.total

    def to_dict(self) -> dict:
        return {
            "correct": self.correct,
            "total": self.total,
            "accuracy": round(self.accuracy, 4),
            "predictions": [r.to_dict() for r in self.records],
        }
