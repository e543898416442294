"""Loading report documents and the data bank from JSON files.

The engine itself performs no I/O. This module is the host-side loader: it
reads plain JSON and hands the parsed structures to `reporting` untouched.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from reporting import DataBank

logger = logging.getLogger(__name__)

_DOCUMENT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\-]*$")
DATA_BANK_STEM = "data_bank"


class DocumentError(ValueError):
    """Raised when a report document or data bank file cannot be read."""

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize the error.

        Args:
            path: File that failed to load.
            reason: Human-readable failure description.
        """

        super().__init__(f"Could not load {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class DocumentSummary:
    """A report document available in the document directory."""

    name: str
    title: str


def load_json(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        DocumentError: When the file is missing, unreadable, or not JSON.
    """

    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:
        raise DocumentError(path=path, reason="file not found") from exc
    except OSError as exc:
        raise DocumentError(path=path, reason=str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise DocumentError(path=path, reason=f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc


def load_document(path: Path) -> Any:
    """Load a report document (root element or list of elements).

    Args:
        path: JSON file holding the document.

    Returns:
        Parsed document, passed to the engine as-is.

    Raises:
        DocumentError: When the file cannot be read or parsed.
    """

    return load_json(path)


def load_data_bank(path: Path | None) -> DataBank:
    """Load the data bank used to resolve named series.

    Args:
        path: JSON file mapping series names to `{Values, Dates, Frequency}`.

    Returns:
        DataBank; empty when `path` is None or the file does not exist.

    Raises:
        DocumentError: When the file exists but is not a JSON object.
    """

    if path is None or not path.exists():
        logger.warning("Data bank file %s not found; named series will render empty.", path)
        return DataBank()
    payload = load_json(path)
    if not isinstance(payload, dict):
        raise DocumentError(path=path, reason="data bank must be a JSON object")
    return DataBank(payload)


def document_path(document_dir: Path, name: str) -> Path | None:
    """Resolve a document name to its JSON path inside `document_dir`.

    Args:
        document_dir: Directory holding report documents.
        name: Document name without extension.

    Returns:
        Path to `<name>.json`, or None when the name is not a safe document
        name (path separators, leading dots) or refers to the data bank.
    """

    if not _DOCUMENT_NAME_PATTERN.match(name) or name == DATA_BANK_STEM:
        return None
    return document_dir / f"{name}.json"


def list_documents(document_dir: Path) -> tuple[DocumentSummary, ...]:
    """List report documents in `document_dir`, sorted by name.

    Documents that fail to load are skipped and logged.
    """

    if not document_dir.is_dir():
        return ()
    summaries: list[DocumentSummary] = []
    for path in sorted(document_dir.glob("*.json")):
        if document_path(document_dir, path.stem) is None:
            continue
        try:
            document = load_document(path)
        except DocumentError as exc:
            logger.warning("Skipping report document: %s", exc)
            continue
        summaries.append(DocumentSummary(name=path.stem, title=document_title(document) or path.stem))
    return tuple(summaries)


def document_title(document: Any) -> str:
    """Return the root title of a document, if it has one."""

    if isinstance(document, dict) and isinstance(document.get("Title"), str):
        return document["Title"]
    return ""
