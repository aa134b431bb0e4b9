"""Tests for runtime settings."""

from __future__ import annotations

import pytest

from bayes_text_classifier.config import Settings, parse_delimiter


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings.from_env(environ={})
        assert settings.label_field == "tag"
        assert settings.text_field == "content"
        assert settings.delimiter == ","
        assert settings.score_precision == 1

    def test_environment(self) -> None:
        settings = Settings.from_env(environ={
            "BAYES_CLASSIFIER_LABEL_FIELD": "category",
            "BAYES_CLASSIFIER_DELIMITER": "\\t",
            "BAYES_CLASSIFIER_SCORE_PRECISION": "3",
        })
        assert settings.label_field == "category"
        assert settings.delimiter == "\t"
        assert settings.score_precision == 3

    def test_empty_values_ignored(self) -> None:
        settings = Settings.from_env(environ={"BAYES_CLASSIFIER_TEXT_FIELD": ""})
        assert settings.text_field == "content"

    def test_bad_precision(self) -> None:
        with pytest.raises(ValueError, match="SCORE_PRECISION"):
            Settings.from_env(environ={"BAYES_CLASSIFIER_SCORE_PRECISION": "two"})

    def test_negative_precision_from_env(self) -> None:
        with pytest.raises(ValueError, match="zero or more"):
            Settings.from_env(environ={"BAYES_CLASSIFIER_SCORE_PRECISION": "-1"})

    def test_negative_precision(self) -> None:
        with pytest.raises(ValueError, match="zero or more"):
            Settings(score_precision=-1)

    def test_zero_precision(self) -> None:
        assert Settings(score_precision=0).score_precision == 0

    def test_unknown_encoding(self) -> None:
        with pytest.raises(ValueError, match="unknown encoding"):
            Settings.from_env(environ={"BAYES_CLASSIFIER_ENCODING": "nope"})

    def test_unknown_encoding_override(self) -> None:
        with pytest.raises(ValueError, match="unknown encoding"):
            Settings().override(encoding="nope")

    def test_override_skips_none(self) -> None:
        settings = Settings().override(label_field="category", text_field=None)
        assert settings.label_field == "category"
        assert settings.text_field == "content"

    def test_record_options(self) -> None:
        assert Settings().record_options == {
            "label_field": "tag",
            "text_field": "content",
            "delimiter": ",",
            "encoding": "utf-8",
        }


class TestParseDelimiter:
    @pytest.mark.parametrize("raw,expected", [(",", ","), (";", ";"), ("\\t", "\t"), ("tab", "\t")])
    def test_valid(self, raw: str, expected: str) -> None:
        assert parse_delimiter(raw) == expected

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="single character"):
            parse_delimiter(",,")
