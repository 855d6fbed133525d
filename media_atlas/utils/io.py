"""File IO utilities for resource exports and uploads."""

from __future__ import annotations

import os
import unicodedata
from pathlib import Path

import chardet

_SAMPLE_BYTES = 64 * 1024


def detect_encoding(raw: bytes) -> str:
    """Guess the text encoding of an export payload."""

    if raw.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"
    detection = chardet.detect(raw[:_SAMPLE_BYTES])
    encoding = detection.get("encoding")
    if not encoding or encoding.lower() == "ascii":
        return "utf-8"
    return encoding


def read_text(path: os.PathLike[str] | str) -> str:
    """Read an export file, decoding it with its detected encoding."""

    raw = Path(path).read_bytes()
    return raw.decode(detect_encoding(raw), errors="replace")


def safe_filename(filename: str) -> str:
    """Strip an uploaded filename down to filesystem safe characters."""

    normalized = unicodedata.normalize("NFKD", Path(filename).name)
    sanitized = "".join(c for c in normalized if c.isalnum() or c in {"-", "_", "."})
    return sanitized.lstrip(".") or "upload"


def ensure_directory(path: os.PathLike[str] | str) -> Path:
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory
