"""CSV reader for labeled posts.

Each file has a header row naming its columns. The label and content
columns (``tag`` and ``content`` by default) are converted to
:class:`~post_classifier.models.Document` values as soon as a row is read;
any other columns are ignored.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import TextIO

from .errors import InputAccessError, MalformedRecordError
from .models import Document

logger = logging.getLogger(__name__)

DEFAULT_LABEL_FIELD = "tag"
DEFAULT_CONTENT_FIELD = "content"


def read_documents(
    path: str | Path,
    label_field: str = DEFAULT_LABEL_FIELD,
    content_field: str = DEFAULT_CONTENT_FIELD,
) -> list[Document]:
    """Read every record of a CSV file as a labeled document.

    Args:
        path: Path to the CSV file.
        label_field: Header name of the label column.
        content_field: Header name of the post text column.

    Returns:
        Documents in file order.

    Raises:
        InputAccessError: If the file cannot be opened for reading.
        MalformedRecordError: If the header lacks a required column or a
            row has no value for one, or the CSV itself cannot be parsed.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8", errors="replace", newline="") as f:
            return _read_records(f, path, label_field, content_field)
    except OSError as e:
        raise InputAccessError(f"Error opening file: {path} ({e.strerror or e})") from e


def _read_records(
    f: TextIO,
    path: Path,
    label_field: str,
    content_field: str,
) -> list[Document]:
    reader = csv.DictReader(f)
    try:
        return _convert_rows(reader, path, label_field, content_field)
    except csv.Error as e:
        raise MalformedRecordError(f"{path}, line {reader.line_num}: {e}") from e


def _convert_rows(
    reader: csv.DictReader,
    path: Path,
    label_field: str,
    content_field: str,
) -> list[Document]:
    header = reader.fieldnames or []
    missing = [name for name in (label_field, content_field) if name not in header]
    if missing:
        raise MalformedRecordError(
            f"{path}: header is missing column(s) {', '.join(missing)}. "
            f"Found: {list(header)}"
        )

    documents: list[Document] = []
    for row in reader:
        label = row.get(label_field)
        content = row.get(content_field)
        if label is None or content is None:
            raise MalformedRecordError(
                f"{path}, line {reader.line_num}: record has no value for "
                f"'{label_field if label is None else content_field}'"
            )
        documents.append(Document(label=label, content=content))

    logger.debug("Read %d records from %s", len(documents), path)
    return documents
