"""Training: stream labeled examples into a NaiveBayesModel."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .errors import RecordParseError, SourceUnavailableError
from .models import LabeledRecord
from .records import DEFAULT_LABEL_FIELD, DEFAULT_TEXT_FIELD, read_records
from .model import NaiveBayesModel
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

Example = Union[LabeledRecord, tuple[str, str]]


@dataclass
class TrainingOutcome:
    """Success/failure result of training from a file.

    Exactly one of ``model`` and ``error`` is set.
    """

    model: Optional[NaiveBayesModel] = None
    error: Optional[SourceUnavailableError | RecordParseError] = None
    records: list[LabeledRecord] = field(default_factory=list, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> NaiveBayesModel:
        """Return the trained model, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        if self.model is None:
            raise RuntimeError("TrainingOutcome holds neither a model nor an error")
        return self.model


class Trainer:
    """Accumulates label and (label, word) document counts into a model.

    Example::

        trainer = Trainer()
        model = trainer.train([("sports", "ball game win"),
                               ("politics", "vote election law")])

    Training is not idempotent: calling :meth:`train` twice with the
    same examples counts them twice.

    Args:
        model: Model to train into. A fresh one is created if omitted.
    """

    def __init__(self, model: NaiveBayesModel | None = None) -> None:
        self.model = model if model is not None else NaiveBayesModel()

    def train(self, examples: Iterable[Example]) -> NaiveBayesModel:
        """Add each ``(label, text)`` example to the model in input order.

        Args:
            examples: LabeledRecord instances or ``(label, text)`` pairs.

        Returns:
            The trained model (same object as ``self.model``).
        """
        count = 0
        for example in examples:
            if isinstance(example, LabeledRecord):
                label, text = example.label, example.text
            else:
                label, text = example
            self.model.add_document(label, tokenize(text))
            count += 1

        logger.debug(
            "trained on %d examples (%d total), vocabulary size = %d",
            count,
            self.model.total_documents(),
            self.model.vocabulary_size(),
        )
        return self.model

    def train_file(
        self,
        path: str | Path,
        label_field: str = DEFAULT_LABEL_FIELD,
        text_field: str = DEFAULT_TEXT_FIELD,
        delimiter: str = ",",
        encoding: str = "utf-8",
    ) -> TrainingOutcome:
        """Train from a delimited file.

        The file is read completely before the model is touched, so an
        unreadable or malformed file leaves the model unchanged.

        Returns:
            TrainingOutcome holding the model, or the error that stopped
            the file from being read.
        """
        try:
            records = read_records(
                path,
                label_field=label_field,
                text_field=text_field,
                delimiter=delimiter,
                encoding=encoding,
            )
        except (SourceUnavailableError, RecordParseError) as exc:
            logger.info("Training source %s rejected: %s", path, exc)
            return TrainingOutcome(error=exc)

        model = self.train(records)
        return TrainingOutcome(model=model, records=records)
