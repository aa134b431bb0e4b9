"""Prediction: score a document against every label and pick the arg-max."""

from __future__ import annotations

import math
from collections.abc import Iterable

from .errors import EmptyModelError
from .models import Prediction
from .model import NaiveBayesModel
from .tokenizer import tokenize

# Scores closer than this are treated as equal.
TIE_TOLERANCE = 1e-9


class Predictor:
    """Read-only classifier over a trained :class:`NaiveBayesModel`.

    For each label the score is the log-prior plus, for every word in
    the training vocabulary, the log-likelihood of that word being
    present (if it occurs in the document) or absent (otherwise). Words
    in the document but outside the vocabulary contribute nothing.

    Predicting never mutates the model, so a single Predictor may serve
    independent documents concurrently.

    Args:
        model: Trained model.
    """

    def __init__(self, model: NaiveBayesModel) -> None:
        self.model = model

    def scores(self, text: str) -> dict[str, float]:
        """Log-probability score of ``text`` under every known label.

        Raises:
            EmptyModelError: If the model has no trained labels.
        """
        if self.model.is_empty:
            raise EmptyModelError()

        bag = tokenize(text)
        vocabulary = self.model.vocabulary
        result: dict[str, float] = {}
        for label in self.model.labels:
            terms = [self.model.log_prior(label)]
            for word in vocabulary:
                if word in bag:
                    terms.append(self.model.log_likelihood_present(label, word))
                else:
                    terms.append(self.model.log_likelihood_absent(label, word))
            # fsum is exact, so set iteration order cannot change the total
            result[label] = math.fsum(terms)
        return result

    def predict(self, text: str) -> Prediction:
        """Classify ``text``.

        The highest-scoring label wins. Labels whose scores lie within
        ``TIE_TOLERANCE`` of each other are tied, and the lexicographically
        smallest of them is chosen.

        Returns:
            Prediction with the chosen label, its score, and all scores.

        Raises:
            EmptyModelError: If the model has no trained labels.
        """
        scores = self.scores(text)

        # Ascending label order: a tie keeps the earlier, smaller label.
        labels = sorted(scores)
        best_label = labels[0]
        best_score = scores[best_label]
        for label in labels[1:]:
            score = scores[label]
            if score - best_score >= TIE_TOLERANCE:
                best_label, best_score = label, score

        return Prediction(label=best_label, score=best_score, scores=scores)

    def predict_batch(self, texts: Iterable[str]) -> list[Prediction]:
        """Classify several documents."""
        return [self.predict(text) for text in texts]
