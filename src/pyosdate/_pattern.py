"""Pattern scanning and capacity estimation for strftime-style patterns."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from lark import Lark, Token, Tree
from lark.visitors import Interpreter

from pyosdate._constants import LITERAL_WEIGHT, SPECIFIER_WEIGHT

# A specifier is '%' with optional glibc flag, width and E/O modifier.
# A trailing lone '%' still forms a (truncated) specifier.
_GRAMMAR = r"""
pattern: (literal | specifier)*
literal: LITERAL
specifier: SPECIFIER

LITERAL: /[^%]+/
SPECIFIER: /%[-_0^#]?[0-9]*[EO]?[\s\S]?/
"""

_parser = Lark(_GRAMMAR, start="pattern", parser="lalr")


@dataclass(frozen=True)
class Segment:
    """A run of literal text or a single conversion specifier."""

    text: str
    is_specifier: bool


@dataclass(frozen=True)
class PatternInfo:
    """Result of scanning a pattern."""

    segments: tuple[Segment, ...]
    capacity: int

    @property
    def specifiers(self) -> tuple[str, ...]:
        return tuple(s.text for s in self.segments if s.is_specifier)


def _weigh(text: str) -> int:
    markers = text.count("%")
    return markers * SPECIFIER_WEIGHT + (len(text) - markers) * LITERAL_WEIGHT


class _PatternScanner(Interpreter):
    """Collects segments and sums their capacity weights."""

    def __init__(self) -> None:
        self.segments: list[Segment] = []
        self.capacity = 0

    def literal(self, tree: Tree) -> None:
        self._add(tree.children[0], is_specifier=False)

    def specifier(self, tree: Tree) -> None:
        self._add(tree.children[0], is_specifier=True)

    def _add(self, token: Token, is_specifier: bool) -> None:
        text = str(token)
        self.segments.append(Segment(text, is_specifier))
        self.capacity += _weigh(text)


@lru_cache(maxsize=256)
def scan_pattern(pattern: str) -> PatternInfo:
    """Split a pattern into segments and estimate its rendered size.

    Each '%' weighs SPECIFIER_WEIGHT and every other character weighs
    LITERAL_WEIGHT.
    """
    if not pattern:
        return PatternInfo(segments=(), capacity=0)
    scanner = _PatternScanner()
    scanner.visit(_parser.parse(pattern))
    return PatternInfo(segments=tuple(scanner.segments), capacity=scanner.capacity)


def estimate_capacity(pattern: str) -> int:
    """Initial scratch buffer size for rendering ``pattern``."""
    return scan_pattern(pattern).capacity
