"""Statistics store for a presence/absence Naive Bayes text model.

The model keeps three pieces of state, all owned by one instance:

- ``label_count``: documents seen per label.
- ``label_word_hits``: per label, the number of *documents* containing
  each word at least once (document frequency, not token frequency).
- ``vocabulary``: every distinct token seen across training documents.

Probabilities use add-one smoothing over a binary feature::

    P(word present | label) = (hits + 1) / (docs_in_label + 2)

which keeps both the presence and absence probabilities strictly inside
``(0, 1)``, so summing their logs never yields ``-inf``.
"""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import UnknownLabelError
from .models import ClassSummary, WordParameter


@dataclass
class NaiveBayesModel:
    """Label and (label, word) document counts plus the global vocabulary.

    Build one with :class:`~bayes_text_classifier.trainer.Trainer`, then
    treat it as read-only while predicting.
    """

    label_count: Counter[str] = field(default_factory=Counter)
    label_word_hits: dict[str, Counter[str]] = field(
        default_factory=lambda: defaultdict(Counter), repr=False
    )
    vocabulary: set[str] = field(default_factory=set, repr=False)
    word_document_count: Counter[str] = field(default_factory=Counter, repr=False)

    # ------------------------------------------------------------------
    # Mutation (training only)
    # ------------------------------------------------------------------

    def add_document(self, label: str, words: Iterable[str]) -> None:
        """Record one training document given its distinct tokens."""
        self.label_count[label] += 1
        hits = self.label_word_hits[label]
        for word in set(words):
            hits[word] += 1
            self.vocabulary.add(word)
            self.word_document_count[word] += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def labels(self) -> list[str]:
        """Known labels in lexicographic order."""
        return sorted(self.label_count)

    @property
    def is_empty(self) -> bool:
        return not self.label_count

    def total_documents(self) -> int:
        """Number of training documents processed."""
        return sum(self.label_count.values())

    def vocabulary_size(self) -> int:
        return len(self.vocabulary)

    def documents_in_label(self, label: str) -> int:
        self._require_label(label)
        return self.label_count[label]

    def word_count(self, label: str, word: str) -> int:
        """Documents of ``label`` containing ``word`` (0 if never seen)."""
        self._require_label(label)
        return self.label_word_hits.get(label, {}).get(word, 0)

    def document_frequency(self, word: str) -> int:
        """Training documents of any label containing ``word``."""
        return self.word_document_count.get(word, 0)

    def log_prior(self, label: str) -> float:
        """``ln(P(label))`` estimated from label document counts."""
        self._require_label(label)
        return math.log(self.label_count[label] / self.total_documents())

    def smoothed_prob(self, label: str, word: str) -> float:
        """Laplace-smoothed probability that a ``label`` document contains ``word``."""
        hits = self.word_count(label, word)
        return (hits + 1) / (self.label_count[label] + 2)

    def log_likelihood_present(self, label: str, word: str) -> float:
        return math.log(self.smoothed_prob(label, word))

    def log_likelihood_absent(self, label: str, word: str) -> float:
        return math.log(1.0 - self.smoothed_prob(label, word))

    # ------------------------------------------------------------------
    # Reporting helpers
    # ------------------------------------------------------------------

    def class_summaries(self) -> list[ClassSummary]:
        """Per-label document counts and log-priors, sorted by label."""
        return [
            ClassSummary(
                label=label,
                documents=self.label_count[label],
                log_prior=self.log_prior(label),
            )
            for label in self.labels
        ]

    def parameters(self) -> list[WordParameter]:
        """Every observed (label, word) pair with its count and log-likelihood."""
        params: list[WordParameter] = []
        for label in self.labels:
            hits = self.label_word_hits.get(label, {})
            for word in sorted(hits):
                params.append(WordParameter(
                    label=label,
                    word=word,
                    count=hits[word],
                    log_likelihood=self.log_likelihood_present(label, word),
                ))
        return params

    def most_informative_words(
        self,
        label: str,
        top_n: int = 10,
    ) -> list[tuple[str, float]]:
        """Return the words most indicative of ``label``.

        Each vocabulary word is ranked by its presence log-likelihood under
        ``label`` minus the mean presence log-likelihood under every other
        label. With a single label, words are ranked by their presence
        log-likelihood alone.

        Args:
            label: Target label.
            top_n: Number of words to return.

        Returns:
            List of ``(word, log_likelihood_ratio)`` tuples, highest first,
            ties broken alphabetically.

        Raises:
            UnknownLabelError: If ``label`` was never seen in training.
        """
        self._require_label(label)
        others = [other for other in self.labels if other != label]

        ratios: list[tuple[str, float]] = []
        for word in self.vocabulary:
            target = self.log_likelihood_present(label, word)
            if others:
                mean_other = sum(
                    self.log_likelihood_present(other, word) for other in others
                ) / len(others)
                target -= mean_other
            ratios.append((word, target))

        ratios.sort(key=lambda x: (-x[1], x[0]))
        return ratios[:top_n]

    def _require_label(self, label: str) -> None:
        if label not in self.label_count:
            raise UnknownLabelError(label, self.labels)
