from pathlib import Path

from blockscript.errors import ErrorKind
from blockscript.interpreter import Interpreter
from blockscript.parser import parse_program
from blockscript.report import ConsoleSink


def test_program_5_errors_do_not_stop_the_run(capsys):
    """Test program 5: one failure per line.

    Every failing statement is reported on stderr with its line number,
    failed results render as NULL, and the final display still runs.
    """
    with open(Path(__file__).parent.parent / 'examples' / 'program_5.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    result = interp.run(program, ConsoleSink())
    captured = capsys.readouterr()
    assert captured.out.strip().split('\n') == [
        'NULL',
        'Result NULL',
        'z is NULL',
        'missing NULL',
        'flag NULL',
        'NULL',
        'still running',
    ]
    assert [(e.line, e.kind) for e in result.errors] == [
        (3, ErrorKind.DIVISION_BY_ZERO),
        (4, ErrorKind.DIVISION_BY_ZERO),
        (5, ErrorKind.MALFORMED_DECLARATION),
        (6, ErrorKind.INVALID_NUMBER_FORMAT),
        (7, ErrorKind.INVALID_TYPE),
        (9, ErrorKind.VARIABLE_NOT_FOUND),
        (11, ErrorKind.INVALID_OPERAND_TYPES),
        (12, ErrorKind.INVALID_OPERATOR),
    ]
    err_lines = captured.err.strip().split('\n')
    assert len(err_lines) == 8
    assert err_lines[0] == 'Error: line 3: DivisionByZero: division by zero'
