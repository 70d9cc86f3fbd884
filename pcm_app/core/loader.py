"""Spreadsheet ingestion: first worksheet (or CSV) to ordered row mappings."""

from __future__ import annotations

import logging
import zipfile
from io import BytesIO
from pathlib import Path
from typing import Any

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from .config import UPLOAD_TYPES

logger = logging.getLogger(__name__)


class WorkbookReadError(ValueError):
    """Raised when an uploaded file cannot be decoded into rows."""


def _source_name(source: Any, filename: str | None) -> str:
    if filename:
        return str(filename)
    name = getattr(source, "name", None)
    if name:
        return str(name)
    if isinstance(source, str | Path):
        return str(source)
    return ""


def _extension(name: str) -> str:
    suffix = Path(name).suffix.lower().lstrip(".")
    # Unnamed buffers are assumed to hold a workbook
    return suffix or "xlsx"


def read_frame(source: Any, filename: str | None = None) -> pd.DataFrame:
    """Read the upload into a text-only DataFrame (blank cells as "")."""
    name = _source_name(source, filename)
    ext = _extension(name)
    if ext not in UPLOAD_TYPES:
        raise WorkbookReadError(f"Unsupported file type '.{ext}' (expected one of: {', '.join(UPLOAD_TYPES)})")
    if isinstance(source, bytes | bytearray):
        source = BytesIO(source)
    try:
        if ext == "csv":
            df = pd.read_csv(source, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(source, sheet_name=0, dtype=str, keep_default_na=False, engine="openpyxl")
    except (
        ValueError,
        KeyError,
        OSError,
        zipfile.BadZipFile,
        InvalidFileException,
    ) as exc:
        logger.warning("Failed to read %s: %s", name or "<upload>", exc)
        raise WorkbookReadError(f"Could not read {name or 'uploaded file'}: {exc}") from exc
    df.columns = [str(c) for c in df.columns]
    logger.debug("Read %s rows x %s columns from %s", len(df), len(df.columns), name or "<upload>")
    return df


def load_workbook_rows(source: Any, filename: str | None = None) -> list[dict[str, Any]]:
    """Return the first sheet of ``source`` as an ordered list of row dicts.

    Parameters
    ----------
    source : path, bytes or file-like
        Workbook (``.xlsx``) or ``.csv`` content. Streamlit ``UploadedFile``
        objects carry their own ``name`` and need no ``filename``.
    filename : str, optional
        Name used to pick the parser when ``source`` has none.

    Returns
    -------
    list[dict]
        One mapping per data row, keyed by header text, in sheet order.

    Raises
    ------
    WorkbookReadError
        If the content cannot be decoded.
    """
    df = read_frame(source, filename)
    return df.to_dict(orient="records")
