"""Arithmetic for Blockscript.

There are two evaluators with deliberately different semantics:

* `evaluate_chained` folds a whole `n op n op n ...` chain strictly left to
  right with no precedence, always in single precision float. Bare
  expression statements and the declaration shorthand use it.

* `evaluate_pairwise_typed` applies one operator to two typed values and
  keeps integer arithmetic integral. Display templates use it.

Both raise ScriptError on failure; the caller decides what the failed
expression turns into.
"""

import numpy as np

from .errors import ErrorKind, ErrorRecord, ScriptError
from .parser import split_chain
from .types import FloatVal, IntVal, Value, parse_number, type_name


def _division_by_zero() -> ScriptError:
    return ScriptError(ErrorRecord(ErrorKind.DIVISION_BY_ZERO, 'division by zero'))


def _invalid_operator(op: str) -> ScriptError:
    return ScriptError(ErrorRecord(ErrorKind.INVALID_OPERATOR, f'invalid operator: {op}'))


def _operand(token: str, expression: str) -> np.float32:
    number = parse_number(token)
    if number is None:
        raise ScriptError(ErrorRecord(
            ErrorKind.INVALID_NUMBER_FORMAT, f'invalid number format in expression: {expression}'))
    return np.float32(number.v)


def evaluate_chained(expression: str) -> FloatVal:
    """Evaluate a chain of numbers and operators from left to right.

    `2+3*4` is `(2+3)*4`, i.e. 20. Integer literals are accepted but the
    accumulator is always a single precision float.
    """
    operands, operators = split_chain(expression)
    # every operand must be a number before any operator is applied
    numbers = [_operand(token, expression) for token in operands]
    result = numbers[0]
    for op, rhs in zip(operators, numbers[1:]):
        if op == '+':
            result = np.float32(result + rhs)
        elif op == '-':
            result = np.float32(result - rhs)
        elif op == '*':
            result = np.float32(result * rhs)
        elif op == '/':
            if rhs == 0:
                raise _division_by_zero()
            result = np.float32(result / rhs)
        else:
            raise _invalid_operator(op)
    return FloatVal(result)


def _truncating_divmod(a: int, b: int):
    # quotient rounds toward zero and the remainder takes the dividend's sign
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


def _int_op(op: str, a: int, b: int) -> IntVal:
    if op == '+':
        return IntVal(a + b)
    if op == '-':
        return IntVal(a - b)
    if op == '*':
        return IntVal(a * b)
    if op in ('/', '%'):
        if b == 0:
            raise _division_by_zero()
        q, r = _truncating_divmod(a, b)
        return IntVal(q if op == '/' else r)
    raise _invalid_operator(op)


def _float_op(op: str, a: np.float32, b: np.float32, allow_mod: bool) -> FloatVal:
    if op == '+':
        return FloatVal(a + b)
    if op == '-':
        return FloatVal(a - b)
    if op == '*':
        return FloatVal(a * b)
    if op == '/':
        if b == 0:
            raise _division_by_zero()
        return FloatVal(a / b)
    if op == '%' and allow_mod:
        if b == 0:
            raise _division_by_zero()
        return FloatVal(np.fmod(a, b))
    raise _invalid_operator(op)


def evaluate_pairwise_typed(op: str, left: Value, right: Value) -> Value:
    """Apply `op` to two values, preserving integer-vs-float typing.

    INT op INT stays INT (`/` truncates, `%` is the truncated remainder).
    FLOAT op FLOAT is float arithmetic, `%` being the float remainder.
    Mixed INT/FLOAT promotes the integer and supports `+ - * /` only.
    Any other pairing, CHAR, BOOL or an absent value included, is an
    InvalidOperandTypes error.
    """
    if isinstance(left, IntVal) and isinstance(right, IntVal):
        return _int_op(op, left.v, right.v)
    if isinstance(left, FloatVal) and isinstance(right, FloatVal):
        return _float_op(op, left.v, right.v, allow_mod=True)
    if isinstance(left, FloatVal) and isinstance(right, IntVal):
        return _float_op(op, left.v, np.float32(right.v), allow_mod=False)
    if isinstance(left, IntVal) and isinstance(right, FloatVal):
        return _float_op(op, np.float32(left.v), right.v, allow_mod=False)
    raise ScriptError(ErrorRecord(
        ErrorKind.INVALID_OPERAND_TYPES,
        f'invalid operand types for arithmetic operation: {type_name(left)} {op} {type_name(right)}'))
