"""Load ``surfaces.txt`` files from disk into Document ASTs."""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Optional

from seriko.ast.document import Document
from seriko.decoding import decode, sniff_charset
from seriko.lang.parser import SerikoParser

logger = logging.getLogger(__name__)


def parse_bytes(data: bytes, *, path: Optional[str] = None) -> Document:
    """Decode a raw buffer with its declared charset and parse it."""
    charset = sniff_charset(data, path=path)
    logger.debug("Declared charset of %s is %s", path or "<bytes>", charset.value)
    text = decode(data, charset, path=path)
    return SerikoParser(text, path=path or "").parse()


def load_surfaces(path: str | PathLike[str]) -> Document:
    """Read, decode and parse the ``surfaces.txt`` at ``path``."""
    source_path = Path(path)
    data = source_path.read_bytes()
    logger.debug("Read %d bytes from %s", len(data), source_path)

    document = parse_bytes(data, path=str(source_path))
    logger.info(
        "Parsed %s: %d block(s), %d trailing comment line(s)",
        source_path,
        len(document.blocks),
        len(document.footer_comments),
    )
    return document


__all__ = ["parse_bytes", "load_surfaces"]
