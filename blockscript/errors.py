import enum
from dataclasses import dataclass
from typing import Optional


class ErrorKind(enum.Enum):
    MALFORMED_DECLARATION = 'MalformedDeclaration'
    INVALID_TYPE = 'InvalidType'
    INVALID_NUMBER_FORMAT = 'InvalidNumberFormat'
    INVALID_OPERATOR = 'InvalidOperator'
    DIVISION_BY_ZERO = 'DivisionByZero'
    INVALID_OPERAND_TYPES = 'InvalidOperandTypes'
    VARIABLE_NOT_FOUND = 'VariableNotFound'

    def __str__(self) -> str:
        return self.value


@dataclass
class ErrorRecord:
    """A reported error: what went wrong and, once known, on which line."""
    kind: ErrorKind
    message: str
    line: Optional[int] = None

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line is not None else ""
        return f"{where}{self.kind}: {self.message}"


class ScriptError(Exception):
    """Exception type used to abort the statement or segment being evaluated."""
    def __init__(self, err: ErrorRecord):
        super().__init__(f"ScriptError: {err.kind}: {err.message}")
        self.err = err
