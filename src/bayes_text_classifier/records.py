"""Delimited-text record source for training and query data.

Reads a CSV-style file whose header row names a label column and a text
column (``tag`` and ``content`` by default) and yields one
:class:`~bayes_text_classifier.models.LabeledRecord` per data row, in
file order.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from .errors import RecordParseError, SourceUnavailableError
from .models import LabeledRecord

logger = logging.getLogger(__name__)

DEFAULT_LABEL_FIELD = "tag"
DEFAULT_TEXT_FIELD = "content"


def iter_records(
    path: str | Path,
    label_field: str = DEFAULT_LABEL_FIELD,
    text_field: str = DEFAULT_TEXT_FIELD,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> Iterator[LabeledRecord]:
    """Stream labeled records from a delimited file.

    Args:
        path: Path to the file.
        label_field: Header name of the label column.
        text_field: Header name of the text column.
        delimiter: Field delimiter.
        encoding: File encoding.

    Yields:
        One LabeledRecord per data row.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded,
            including an unknown encoding name.
        RecordParseError: If the header lacks a required column, a row
            has the wrong number of fields, or a label is blank.
    """
    path = Path(path)
    try:
        handle = open(path, "r", encoding=encoding, newline="")
    except OSError as exc:
        raise SourceUnavailableError(path, exc.strerror or "") from exc
    except LookupError as exc:
        raise SourceUnavailableError(path, f"unknown encoding {encoding!r}") from exc

    with handle:
        reader = csv.reader(handle, delimiter=delimiter)
        try:
            header = next(reader, None)
            if header is None:
                raise RecordParseError(f"{path.name} is empty; expected a header row", line=1)

            missing = [name for name in (label_field, text_field) if name not in header]
            if missing:
                raise RecordParseError(
                    f"header of {path.name} is missing column(s) {', '.join(missing)}",
                    line=1,
                )
            label_idx = header.index(label_field)
            text_idx = header.index(text_field)

            for row in reader:
                if not row:
                    continue
                if len(row) != len(header):
                    raise RecordParseError(
                        f"expected {len(header)} fields, found {len(row)}",
                        line=reader.line_num,
                    )
                if not row[label_idx].strip():
                    raise RecordParseError("empty label", line=reader.line_num)
                yield LabeledRecord(
                    label=row[label_idx],
                    text=row[text_idx],
                    line=reader.line_num,
                )
        except UnicodeDecodeError as exc:
            raise SourceUnavailableError(path, f"cannot decode as {encoding}") from exc
        except csv.Error as exc:
            raise RecordParseError(str(exc), line=reader.line_num) from exc


def read_records(
    path: str | Path,
    label_field: str = DEFAULT_LABEL_FIELD,
    text_field: str = DEFAULT_TEXT_FIELD,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> list[LabeledRecord]:
    """Read every record from a delimited file into a list.

    Same arguments and errors as :func:`iter_records`. Nothing is
    returned unless the whole file parses.
    """
    records = list(iter_records(
        path,
        label_field=label_field,
        text_field=text_field,
        delimiter=delimiter,
        encoding=encoding,
    ))
    logger.debug("Read %d records from %s", len(records), path)
    return records
