"""Exception taxonomy for the Naive Bayes text classifier."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ClassifierError(Exception):
    """Base class for all classifier errors."""


class SourceUnavailableError(ClassifierError, OSError):
    """A training or query record source could not be opened or read."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Error opening file: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class RecordParseError(ClassifierError, ValueError):
    """A record source contained a malformed row or header."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class UnknownLabelError(ClassifierError, KeyError):
    """A model query referenced a label never seen during training."""

    def __init__(self, label: str, known: list[str]) -> None:
        self.label = label
        self.known = known
        super().__init__(f"Unknown label: {label!r}. Known: {known}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class EmptyModelError(ClassifierError, RuntimeError):
    """Prediction was attempted on a model trained on zero examples."""

    def __init__(self) -> None:
        super().__init__("Model has no trained labels. Train on at least one example first.")
