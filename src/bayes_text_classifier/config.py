"""Runtime settings for the command-line interface.

Values come from built-in defaults, then environment variables (a
``.env`` file in the working directory is loaded first), then explicit
overrides such as CLI options.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, fields, replace

from dotenv import load_dotenv

from .records import DEFAULT_LABEL_FIELD, DEFAULT_TEXT_FIELD

ENV_PREFIX = "BAYES_CLASSIFIER_"


@dataclass(frozen=True)
class Settings:
    """Record-format and report settings.

    Attributes:
        label_field: Header name of the label column.
        text_field: Header name of the text column.
        delimiter: Field delimiter of record files.
        encoding: Encoding of record files.
        score_precision: Decimal places for scores in test reports.
    """

    label_field: str = DEFAULT_LABEL_FIELD
    text_field: str = DEFAULT_TEXT_FIELD
    delimiter: str = ","
    encoding: str = "utf-8"
    score_precision: int = 1

    def __post_init__(self) -> None:
        if self.score_precision < 0:
            raise ValueError(
                f"score precision must be zero or more, got {self.score_precision}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"unknown encoding {self.encoding!r}") from exc

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, dotenv: bool = True) -> "Settings":
        """Build settings from ``BAYES_CLASSIFIER_*`` environment variables.

        Raises:
            ValueError: If a variable cannot be converted to its field type,
                a precision is negative, or an encoding is unknown.
        """
        if dotenv and environ is None:
            load_dotenv()
        env = os.environ if environ is None else environ

        values: dict[str, object] = {}
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            if f.name == "score_precision":
                try:
                    values[f.name] = int(raw)
                except ValueError as exc:
                    raise ValueError(
                        f"{ENV_PREFIX}SCORE_PRECISION must be an integer, got {raw!r}"
                    ) from exc
            elif f.name == "delimiter":
                values[f.name] = parse_delimiter(raw)
            else:
                values[f.name] = raw
        return cls(**values)

    def override(self, **changes: object) -> "Settings":
        """Return a copy with every non-None change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @property
    def record_options(self) -> dict[str, str]:
        """Keyword arguments for :func:`~bayes_text_classifier.records.read_records`."""
        return {
            "label_field": self.label_field,
            "text_field": self.text_field,
            "delimiter": self.delimiter,
            "encoding": self.encoding,
        }


def parse_delimiter(raw: str) -> str:
    """Turn a user-supplied delimiter (``","``, ``"\\t"``, ``"tab"``) into one character.

    Raises:
        ValueError: If the result is not exactly one character.
    """
    value = "\t" if raw in ("\\t", "tab", "TAB") else raw
    if len(value) != 1:
        raise ValueError(f"delimiter must be a single character, got {raw!r}")
    return value
