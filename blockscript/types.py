"""Type tags and runtime values for Blockscript.

Every value the interpreter handles is one of a closed set of variants:
`IntVal`, `FloatVal`, `CharVal`, `BoolVal`, or the `ABSENT` marker used
wherever a coercion or computation failed. Floats are single precision and
are stored as `numpy.float32` so that arithmetic rounds the way the
language expects.

This module also implements value coercion (turning a literal token into a
typed value under a declared type tag) and the textual form used when
values are displayed.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .errors import ErrorKind, ErrorRecord, ScriptError


class TypeTag(enum.Enum):
    """The declared types a declaration statement may name."""
    INT = 'INT'
    FLOAT = 'FLOAT'
    CHAR = 'CHAR'
    BOOL = 'BOOL'

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, word: str) -> Optional['TypeTag']:
        try:
            return cls(word)
        except ValueError:
            return None


@dataclass(frozen=True)
class IntVal:
    v: int

    def __repr__(self) -> str:
        return f"Int({self.v})"


@dataclass(frozen=True)
class FloatVal:
    """Single precision float. The payload is always a `numpy.float32`."""
    v: np.float32

    def __post_init__(self):
        object.__setattr__(self, 'v', np.float32(self.v))

    def __repr__(self) -> str:
        return f"Float({to_string(self)})"


@dataclass(frozen=True)
class CharVal:
    v: str

    def __repr__(self) -> str:
        return f"Char({self.v!r})"


@dataclass(frozen=True)
class BoolVal:
    v: bool

    def __repr__(self) -> str:
        return f"Bool({self.v})"


class AbsentVal:
    """Marker for the result of a failed coercion or computation."""
    _instance: Optional['AbsentVal'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'Absent'

    def __bool__(self) -> bool:
        return False


ABSENT = AbsentVal()

Value = Union[IntVal, FloatVal, CharVal, BoolVal, AbsentVal]

INT_LITERAL = re.compile(r'[+-]?\d+')
FLOAT_LITERAL = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


def parse_int(text: str) -> Optional[int]:
    """Parse a base-10 integer literal, tolerating surrounding whitespace."""
    text = text.strip()
    if INT_LITERAL.fullmatch(text):
        return int(text)
    return None


def parse_float(text: str) -> Optional[np.float32]:
    """Parse a base-10 float literal to single precision.

    Only plain decimal notation with an optional exponent is accepted;
    Python spellings such as `inf`, `nan` or `1_000` are rejected.
    """
    text = text.strip()
    if FLOAT_LITERAL.fullmatch(text):
        return np.float32(text)
    return None


def parse_number(text: str) -> Optional[Union[IntVal, FloatVal]]:
    """Try the text as an integer first, then as a float."""
    i = parse_int(text)
    if i is not None:
        return IntVal(i)
    f = parse_float(text)
    if f is not None:
        return FloatVal(f)
    return None


def coerce_literal(literal: str, type_word: Union[str, TypeTag]) -> Value:
    """Convert a literal token to a typed value under the declared type.

    Raises ScriptError when the literal cannot be read as the requested
    type. Booleans never fail: anything other than TRUE (in any case,
    optionally double quoted) is false.
    """
    tag = TypeTag.lookup(str(type_word))
    if tag is TypeTag.INT:
        i = parse_int(literal)
        if i is None:
            raise ScriptError(ErrorRecord(ErrorKind.INVALID_NUMBER_FORMAT, f'invalid number format: {literal}'))
        return IntVal(i)
    if tag is TypeTag.CHAR:
        stripped = literal.strip("'")
        if not stripped:
            raise ScriptError(ErrorRecord(ErrorKind.MALFORMED_DECLARATION, f'empty character literal: {literal}'))
        return CharVal(stripped[0])
    if tag is TypeTag.BOOL:
        return BoolVal(literal.strip('"').upper() == 'TRUE')
    if tag is TypeTag.FLOAT:
        f = parse_float(literal)
        if f is None:
            raise ScriptError(ErrorRecord(ErrorKind.INVALID_NUMBER_FORMAT, f'invalid number format: {literal}'))
        return FloatVal(f)
    raise ScriptError(ErrorRecord(ErrorKind.INVALID_TYPE, f'invalid variable type: {type_word}'))


def type_name(value: Value) -> str:
    """Return the language-level name of a runtime value's variant."""
    if isinstance(value, IntVal):
        return 'INT'
    if isinstance(value, FloatVal):
        return 'FLOAT'
    if isinstance(value, CharVal):
        return 'CHAR'
    if isinstance(value, BoolVal):
        return 'BOOL'
    if isinstance(value, AbsentVal):
        return 'NULL'
    raise TypeError(f'not a Blockscript value: {value!r}')


def format_float(f: np.float32) -> str:
    """Render a single-precision float the way program output shows it.

    Digits are the shortest that round-trip at single precision. Decimal
    exponents from -5 to 6 print positionally, anything outside that range
    in exponent form (`1E+10`, `1E-07`). Non-finite values print as
    `Infinity`, `-Infinity` and `NaN`.
    """
    if np.isnan(f):
        return 'NaN'
    if np.isinf(f):
        return 'Infinity' if f > 0 else '-Infinity'
    mantissa, exponent = np.format_float_scientific(f, unique=True, trim='-', exp_digits=2).split('e')
    if int(exponent) < -5 or int(exponent) >= 7:
        return f'{mantissa}E{exponent}'
    # integral values print without a fractional part, e.g. 20 rather than 20.0
    if f == np.floor(f):
        return str(int(f))
    return np.format_float_positional(f, unique=True, trim='-')


def to_string(value: Value) -> str:
    """Textual form of a value as it appears in program output."""
    if isinstance(value, IntVal):
        return str(value.v)
    if isinstance(value, FloatVal):
        return format_float(value.v)
    if isinstance(value, CharVal):
        return value.v
    if isinstance(value, BoolVal):
        return 'True' if value.v else 'False'
    if isinstance(value, AbsentVal):
        return 'NULL'
    raise TypeError(f'not a Blockscript value: {value!r}')
