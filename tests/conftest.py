"""Shared test fixtures for bayes-text-classifier tests."""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from bayes_text_classifier.predictor import Predictor
from bayes_text_classifier.model import NaiveBayesModel
from bayes_text_classifier.trainer import Trainer


TRAIN_ROWS = [
    ("euchre", "how do I play the left bower"),
    ("euchre", "who leads after the dealer picks up trump"),
    ("euchre", "can the dealer go alone with the right bower"),
    ("calculator", "the calculator crashes on division by zero"),
    ("calculator", "how do I implement the stack for the calculator"),
    ("recursion", "my recursive list function never reaches the base case"),
]

TEST_ROWS = [
    ("euchre", "the dealer picks up the left bower"),
    ("calculator", "stack overflow in my calculator"),
    ("recursion", "base case for a recursive tree"),
]


def write_csv(path: Path, rows, header=("tag", "content")) -> Path:
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)
    return path


@pytest.fixture
def sports_politics() -> list[tuple[str, str]]:
    """Two labels with disjoint vocabularies."""
    return [("sports", "ball game win"), ("politics", "vote election law")]


@pytest.fixture
def sports_model(sports_politics) -> NaiveBayesModel:
    return Trainer().train(sports_politics)


@pytest.fixture
def sports_predictor(sports_model) -> Predictor:
    return Predictor(sports_model)


@pytest.fixture
def posts_model() -> NaiveBayesModel:
    return Trainer().train(TRAIN_ROWS)


@pytest.fixture
def train_csv(tmp_path: Path) -> Path:
    return write_csv(tmp_path / "train.csv", TRAIN_ROWS)


@pytest.fixture
def test_csv(tmp_path: Path) -> Path:
    return write_csv(tmp_path / "test.csv", TEST_ROWS)
