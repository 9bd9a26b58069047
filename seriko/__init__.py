"""
SERIKO (``surfaces.txt``) parser.

``surfaces.txt`` describes the surfaces of a desktop mascot: how image
elements are composed, how animations are timed and sequenced, where the
hit-test regions are, which cursor to show over them, tooltip text and
surface-id aliases. This package turns a raw ``surfaces.txt`` buffer into
an immutable, order-preserving syntax tree.

The code is organised into several modules:

* ``ast`` – frozen dataclasses for every node of the tree. Comment and
  blank lines are kept in place so nothing of the source is lost.
* ``decoding`` – finds the ``charset,<name>`` declaration and decodes the
  buffer strictly with it.
* ``lang.parser`` – the hand written line-oriented parser: a scanner of
  small primitives, value grammars, one grammar per block kind and the
  document assembler.
* ``loader`` / ``cli`` / ``config`` – reading files from disk and the
  ``seriko`` command built on top of the parser.

Typical use::

    from seriko import parse_bytes

    document = parse_bytes(Path("surfaces.txt").read_bytes())
    for entry in document.blocks:
        ...
"""

from importlib import metadata as _metadata

try:  # pragma: no cover - source tree without an install
    __version__ = _metadata.version("seriko-parser")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"

from .ast import Document
from .decoding import decode_bytes, sniff_charset
from .errors import SerikoDecodeError, SerikoError, SerikoSyntaxError
from .lang.parser import SerikoParser, parse
from .loader import load_surfaces, parse_bytes

__all__ = [
    "__version__",
    "Document",
    "SerikoDecodeError",
    "SerikoError",
    "SerikoParser",
    "SerikoSyntaxError",
    "decode_bytes",
    "load_surfaces",
    "parse",
    "parse_bytes",
    "sniff_charset",
]
