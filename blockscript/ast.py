"""Statement definitions for the Blockscript language.

A program is a flat list of statements taken from the code block of the
source text, in source order. Each statement remembers the physical line
it came from and its cleaned text so that errors can be reported against
it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Node:
    """Base class for all statement nodes."""
    pass


@dataclass
class Statement(Node):
    line: int
    source: str


@dataclass
class DisplayStmt(Statement):
    template: str  # text after the DISPLAY: prefix


@dataclass
class DeclarationStmt(Statement):
    words: List[str]  # type word, then name/literal words


@dataclass
class ExprStmt(Statement):
    expression: str


@dataclass
class Program(Node):
    body: List[Statement] = field(default_factory=list)
