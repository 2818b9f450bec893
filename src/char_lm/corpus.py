from __future__ import annotations

import logging
import re
import unicodedata
from pathlib import Path
from typing import Iterator

import regex  # type: ignore

from .config import NormalizeConfig

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

DEFAULT_CHUNK_SIZE = 64 * 1024


def normalize_corpus(text: str, config: NormalizeConfig | None = None) -> str:
    """Optional clean-up applied before training. A no-op by default."""

    cfg = config or NormalizeConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.normalize_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s


def read_corpus(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    normalize: NormalizeConfig | None = None,
) -> str:
    """Read the whole corpus file into one string of characters."""

    # newline="" keeps \r\n as two characters, the way they appear on disk.
    with open(path, "r", encoding=encoding, newline="") as f:
        text = f.read()
    logger.info(f"Read {len(text)} characters from {path}")

    if normalize is not None and normalize.enabled:
        text = normalize_corpus(text, normalize)
        logger.info(f"Normalized corpus to {len(text)} characters")
    return text


def iter_corpus(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[str]:
    """Yield the corpus one character at a time without loading it whole."""

    if chunk_size < 1:
        raise ValueError("chunk_size must be >= 1")

    with open(path, "r", encoding=encoding, newline="") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield from chunk
