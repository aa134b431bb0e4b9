"""Tests for scoring and arg-max prediction."""

from __future__ import annotations

import copy
import math

import pytest

from bayes_text_classifier.errors import EmptyModelError
from bayes_text_classifier.predictor import TIE_TOLERANCE, Predictor
from bayes_text_classifier.model import NaiveBayesModel
from bayes_text_classifier.trainer import Trainer


class TestScenarios:
    def test_positive_overlap_wins(self, sports_predictor) -> None:
        prediction = sports_predictor.predict("win the game")
        assert prediction.label == "sports"

    def test_score_sums_over_full_vocabulary(self, sports_predictor) -> None:
        prediction = sports_predictor.predict("win the game")
        # game, win present; ball, vote, election, law absent
        expected_sports = math.log(0.5) + 5 * math.log(2 / 3) + math.log(1 / 3)
        expected_politics = math.log(0.5) + 5 * math.log(1 / 3) + math.log(2 / 3)
        assert prediction.score == pytest.approx(expected_sports)
        assert prediction.scores["politics"] == pytest.approx(expected_politics)

    def test_empty_document_falls_back_to_priors(self, sports_predictor) -> None:
        prediction = sports_predictor.predict("")
        # equal priors and symmetric vocabularies: tie goes to the smaller label
        assert prediction.label == "politics"

    def test_empty_document_prefers_larger_prior(self) -> None:
        model = Trainer().train([("b", "x"), ("b", "x"), ("a", "y")])
        assert Predictor(model).predict("").label == "b"

    def test_out_of_vocabulary_words_ignored(self, sports_predictor) -> None:
        a = sports_predictor.predict("win game")
        b = sports_predictor.predict("win game zebra quokka")
        assert a.label == b.label
        assert a.score == b.score

    def test_posts(self, posts_model) -> None:
        predictor = Predictor(posts_model)
        assert predictor.predict("the dealer picks up the left bower").label == "euchre"
        assert predictor.predict("calculator stack division").label == "calculator"


class TestTieBreak:
    def test_identical_labels_choose_smaller(self) -> None:
        model = Trainer().train([("beta", "same words"), ("alpha", "same words")])
        prediction = Predictor(model).predict("same")
        assert prediction.label == "alpha"
        assert prediction.scores["alpha"] == prediction.scores["beta"]

    def test_within_tolerance_is_tie(self, sports_predictor, monkeypatch) -> None:
        monkeypatch.setattr(
            sports_predictor,
            "scores",
            lambda text: {"zulu": -1.0, "alpha": -1.0 - TIE_TOLERANCE / 2},
        )
        assert sports_predictor.predict("anything").label == "alpha"

    def test_within_tolerance_larger_score_on_smaller_label(
        self, sports_predictor, monkeypatch
    ) -> None:
        monkeypatch.setattr(
            sports_predictor,
            "scores",
            lambda text: {"zulu": -1.0 + TIE_TOLERANCE / 2, "alpha": -1.0},
        )
        assert sports_predictor.predict("anything").label == "alpha"

    def test_outside_tolerance_is_not_tie(self, sports_predictor, monkeypatch) -> None:
        monkeypatch.setattr(
            sports_predictor,
            "scores",
            lambda text: {"zulu": -1.0, "alpha": -1.0 - 1e-6},
        )
        assert sports_predictor.predict("anything").label == "zulu"


class TestSingleLabel:
    def test_only_label_wins(self) -> None:
        model = Trainer().train([("only", "some words")])
        prediction = Predictor(model).predict("other words")
        assert prediction.label == "only"
        assert prediction.score == prediction.scores["only"]


class TestDeterminism:
    def test_repeated_predictions_identical(self, posts_model) -> None:
        predictor = Predictor(posts_model)
        first = predictor.predict("base case for a recursive tree")
        second = predictor.predict("base case for a recursive tree")
        assert (first.label, first.score) == (second.label, second.score)

    def test_prediction_does_not_mutate_model(self, posts_model) -> None:
        before = copy.deepcopy(posts_model)
        Predictor(posts_model).predict("a brand new word appears here")
        assert posts_model.label_count == before.label_count
        assert posts_model.vocabulary == before.vocabulary
        assert dict(posts_model.label_word_hits) == dict(before.label_word_hits)

    def test_separately_trained_models_agree(self) -> None:
        rows = [("x", "one two"), ("y", "two three"), ("x", "three four")]
        a = Predictor(Trainer().train(rows)).predict("two four")
        b = Predictor(Trainer().train(rows)).predict("two four")
        assert (a.label, a.score) == (b.label, b.score)

    def test_scores_finite(self, posts_model) -> None:
        scores = Predictor(posts_model).scores("the calculator")
        assert set(scores) == set(posts_model.labels)
        assert all(math.isfinite(s) for s in scores.values())


class TestEmptyModel:
    def test_predict_raises(self) -> None:
        predictor = Predictor(Trainer().train([]))
        with pytest.raises(EmptyModelError):
            predictor.predict("anything")

    def test_predict_empty_text_raises(self) -> None:
        with pytest.raises(EmptyModelError):
            Predictor(NaiveBayesModel()).predict("")

    def test_empty_model_error_is_runtime_error(self) -> None:
        with pytest.raises(RuntimeError):
            Predictor(NaiveBayesModel()).scores("x")


class TestBatch:
    def test_predict_batch(self, sports_predictor) -> None:
        predictions = sports_predictor.predict_batch(["win game", "vote law"])
        assert [p.label for p in predictions] == ["sports", "politics"]
