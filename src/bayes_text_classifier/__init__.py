"""Bayes Text Classifier -- presence/absence Naive Bayes for labeled text."""

__version__ = "0.1.0"

from .errors import (
    ClassifierError,
    EmptyModelError,
    RecordParseError,
    SourceUnavailableError,
    UnknownLabelError,
)
from .evaluation import ClassificationMetrics, EvaluationReport, compute_metrics, evaluate
from .models import ClassSummary, LabeledRecord, Prediction, RecordResult, WordParameter
from .predictor import TIE_TOLERANCE, Predictor
from .records import iter_records, read_records
from .model import NaiveBayesModel
from .tokenizer import tokenize
from .trainer import Trainer, TrainingOutcome

__all__ = [
    # Core
    "NaiveBayesModel",
    "Trainer",
    "TrainingOutcome",
    "Predictor",
    "TIE_TOLERANCE",
    "tokenize",
    # Data models
    "LabeledRecord",
    "Prediction",
    "ClassSummary",
    "WordParameter",
    "RecordResult",
    # Records
    "iter_records",
    "read_records",
    # Evaluation
    "evaluate",
    "EvaluationReport",
    "ClassificationMetrics",
    "compute_metrics",
    # Errors
    "ClassifierError",
    "SourceUnavailableError",
    "RecordParseError",
    "UnknownLabelError",
    "EmptyModelError",
]
