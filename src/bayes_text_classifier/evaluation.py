"""Accuracy reporting for predictions over labeled query records."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from .models import LabeledRecord, RecordResult
from .predictor import Predictor


@dataclass
class ClassificationMetrics:
    """Evaluation metrics for a set of predictions.

    Attributes:
        accuracy: Fraction of correct predictions.
        per_class: Per-label precision, recall, F1.
        macro_f1: Unweighted mean F1 across labels.
        confusion_matrix: ``{true_label: {predicted_label: count}}``.
        support: Per-label counts in the true labels.
    """

    accuracy: float = 0.0
    per_class: dict[str, dict[str, float]] = field(default_factory=dict)
    macro_f1: float = 0.0
    confusion_matrix: dict[str, dict[str, int]] = field(default_factory=dict)
    support: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "accuracy": round(self.accuracy, 4),
            "macro_f1": round(self.macro_f1, 4),
            "per_class": {
                cls: {k: round(v, 4) for k, v in metrics.items()}
                for cls, metrics in self.per_class.items()
            },
            "confusion_matrix": self.confusion_matrix,
        }


def _label_scores(hits: int, predicted: int, actual: int) -> dict[str, float]:
    precision = hits / predicted if predicted else 0.0
    recall = hits / actual if actual else 0.0
    denom = precision + recall
    return {
        "precision": precision,
        "recall": recall,
        "f1": 2 * precision * recall / denom if denom else 0.0,
    }


def compute_metrics(results: Iterable[RecordResult]) -> ClassificationMetrics:
    """Tally labeled predictions into accuracy, per-label scores, and a confusion matrix.

    A label seen only as a prediction (never as a true label) still gets
    a row, with zero support.
    """
    pairs = Counter((r.record.label, r.prediction.label) for r in results)
    truth: Counter[str] = Counter()
    guessed: Counter[str] = Counter()
    for (true, pred), n in pairs.items():
        truth[true] += n
        guessed[pred] += n

    labels = sorted(truth.keys() | guessed.keys())
    matrix = {
        true: {pred: pairs.get((true, pred), 0) for pred in labels}
        for true in labels
    }
    per_class = {
        label: _label_scores(pairs.get((label, label), 0), guessed[label], truth[label])
        for label in labels
    }

    total = sum(truth.values())
    correct = sum(matrix[label][label] for label in labels)
    return ClassificationMetrics(
        accuracy=correct / total if total else 0.0,
        per_class=per_class,
        macro_f1=sum(s["f1"] for s in per_class.values()) / len(labels) if labels else 0.0,
        confusion_matrix=matrix,
        support=dict(truth),
    )


@dataclass
class EvaluationReport:
    """Per-record predictions and aggregate accuracy for a query set."""

    results: list[RecordResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def correct(self) -> int:
        return sum(1 for r in self.results if r.is_correct)

    @property
    def metrics(self) -> ClassificationMetrics:
        return compute_metrics(self.results)

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "correct": self.correct,
            "total": self.total,
            "metrics": self.metrics.to_dict(),
        }


def evaluate(predictor: Predictor, records: Iterable[LabeledRecord]) -> EvaluationReport:
    """Predict every record and compare against its label.

    The record label is used only for scoring the prediction; the
    predictor sees the text alone.
    """
    report = EvaluationReport()
    for record in records:
        report.results.append(RecordResult(record=record, prediction=predictor.predict(record.text)))
    return report
