"""Recursive-descent parser for SERIKO ``surfaces.txt`` text."""

from .parse import SerikoParser, parse
from .scanner import GrammarMismatch, LineScanner

__all__ = ["SerikoParser", "parse", "GrammarMismatch", "LineScanner"]
