"""Parser for the Blockscript language.

Blockscript is line oriented, so parsing is a single pass over the
physical lines of the source:

1. **Cleaning**: everything from the first `#` is dropped and the line is
   trimmed. Empty lines are skipped.

2. **Block tracking**: `BEGIN CODE` and `END CODE` lines open and close the
   code block. Only lines inside the block become statements; everything
   else is ignored, and unbalanced markers are not an error.

3. **Classification**: a line starting with `DISPLAY:` is a display
   statement, a line containing `=` is a declaration, anything else is a
   bare arithmetic expression.

The module also provides the tokenizers used by the interpreter. The word
and operator tokenizers are small Lark grammars so that the splitting
rules live in one declarative place and can be tested on their own.

The `parse_program` function is the public entry point and returns a
`Program` holding the statements in source order.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from lark import Lark

from .ast import DeclarationStmt, DisplayStmt, ExprStmt, Program, Statement

BEGIN_MARKER = 'BEGIN CODE'
END_MARKER = 'END CODE'
DISPLAY_PREFIX = 'DISPLAY:'
COMMENT_CHAR = '#'

ARITHMETIC_OPERATORS = '+-*/'


# Declaration lines: whitespace and '=' are equally weighted delimiters and
# neither is kept.
WORD_GRAMMAR = r"""
    start: WORD*

    WORD: /[^\s=]+/
    %ignore /[\s=]+/
"""

# Arithmetic text: split immediately before and after every operator
# character so that operands and operators come out as separate tokens.
# Operand text is kept verbatim, surrounding whitespace included.
OPERATOR_GRAMMAR = r"""
    start: (OPERAND | OPERATOR)*

    OPERATOR: /[-+*\/%]/
    OPERAND: /[^-+*\/%]+/
"""


WORD_LEXER = Lark(WORD_GRAMMAR, parser='lalr', lexer='basic')
OPERATOR_LEXER = Lark(OPERATOR_GRAMMAR, parser='lalr', lexer='basic')


def tokenize_words(line: str) -> List[str]:
    """Split a declaration line into words.

    >>> tokenize_words("INT a = 5 b=3")
    ['INT', 'a', '5', 'b', '3']
    """
    tree = WORD_LEXER.parse(line)
    return [str(token) for token in tree.children]


def tokenize_operators(text: str) -> List[str]:
    """Split arithmetic text on operator boundaries.

    Operators become single-character tokens; everything between them is
    kept as one operand token. Nothing is dropped, so adjacent operators
    yield adjacent operator tokens and a leading operator yields no empty
    operand before it.

    >>> tokenize_operators("2+3*4")
    ['2', '+', '3', '*', '4']
    """
    tree = OPERATOR_LEXER.parse(text)
    return [str(token) for token in tree.children]


def is_operator_token(token: str) -> bool:
    return len(token) == 1 and token in ARITHMETIC_OPERATORS + '%'


def split_chain(text: str) -> Tuple[List[str], List[str]]:
    """Split arithmetic text into its operands and the operators between them.

    The result always has exactly one more operand than operators. Where an
    operand is missing (leading, trailing or doubled operators) an empty
    string stands in for it.

    >>> split_chain("2+3*4")
    (['2', '3', '4'], ['+', '*'])
    >>> split_chain("5/")
    (['5', ''], ['/'])
    """
    operands: List[str] = []
    operators: List[str] = []
    expect_operand = True
    for token in tokenize_operators(text):
        if is_operator_token(token):
            if expect_operand:
                operands.append('')
            operators.append(token)
            expect_operand = True
        else:
            operands.append(token)
            expect_operand = False
    if expect_operand:
        operands.append('')
    return operands, operators


def has_arithmetic_operator(text: str) -> bool:
    return any(op in text for op in ARITHMETIC_OPERATORS)


def split_template(template: str) -> List[str]:
    """Split a display template into its `&` separated segments (untrimmed)."""
    return template.split('&')


def clean_line(line: str) -> str:
    """Drop a trailing comment and surrounding whitespace."""
    comment_at = line.find(COMMENT_CHAR)
    if comment_at >= 0:
        line = line[:comment_at]
    return line.strip()


def classify(text: str, line: int) -> Statement:
    """Build the statement for one cleaned line inside the code block."""
    if text.startswith(DISPLAY_PREFIX):
        return DisplayStmt(line=line, source=text, template=text[len(DISPLAY_PREFIX):].strip())
    if '=' in text:
        return DeclarationStmt(line=line, source=text, words=tokenize_words(text))
    return ExprStmt(line=line, source=text, expression=text)


def parse_line(raw: str, line: int, inside: bool) -> Tuple[bool, Optional[Statement]]:
    """Process one physical line.

    Returns the updated inside-block flag and the statement for the line,
    or None when the line is blank, a marker, or outside the code block.
    """
    text = clean_line(raw)
    if not text:
        return inside, None
    if text == BEGIN_MARKER:
        return True, None
    if text == END_MARKER:
        return False, None
    if not inside:
        return inside, None
    return inside, classify(text, line)


def parse_program(source: str) -> Program:
    """Parse Blockscript source text into a Program.

    Parsing never fails: malformed statements are carried through as-is
    and reported when the interpreter executes them, so that errors come
    out in source order.
    """
    program = Program()
    inside = False
    for number, raw in enumerate(source.splitlines(), start=1):
        inside, stmt = parse_line(raw, number, inside)
        if stmt is not None:
            program.body.append(stmt)
    return program
