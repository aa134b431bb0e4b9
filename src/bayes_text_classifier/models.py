"""Data models for training records, predictions, and model summaries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LabeledRecord:
    """A single labeled document read from a record source."""

    label: str
    text: str
    line: int | None = None

    def to_dict(self) -> dict:
        return {"label": self.label, "text": self.text}


@dataclass
class Prediction:
    """Result of classifying a single document.

    Attributes:
        label: Arg-max label after tie-breaking.
        score: Log-probability score of ``label``.
        scores: Score of every known label, keyed by label.
    """

    label: str
    score: float
    scores: dict[str, float] = field(default_factory=dict, repr=False)

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "score": self.score,
            "scores": dict(sorted(self.scores.items(), key=lambda x: x[1], reverse=True)),
        }


@dataclass(frozen=True)
class ClassSummary:
    """Training statistics for one label."""

    label: str
    documents: int
    log_prior: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "documents": self.documents,
            "log_prior": self.log_prior,
        }


@dataclass(frozen=True)
class WordParameter:
    """Learned statistics for one (label, word) pair."""

    label: str
    word: str
    count: int
    log_likelihood: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "word": self.word,
            "count": self.count,
            "log_likelihood": self.log_likelihood,
        }


@dataclass
class RecordResult:
    """Prediction for one labeled query record, for accuracy reporting."""

    record: LabeledRecord
    prediction: Prediction

    @property
    def is_correct(self) -> bool:
        return self.record.label == self.prediction.label

    def to_dict(self) -> dict:
        return {
            "correct": self.record.label,
            "predicted": self.prediction.label,
            "score": self.prediction.score,
            "content": self.record.text,
        }
