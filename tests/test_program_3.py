from pathlib import Path

from blockscript.interpreter import Interpreter
from blockscript.parser import parse_program
from blockscript.report import ConsoleSink


def test_program_3_typed_display_arithmetic(capsys):
    """Display arithmetic keeps INT op INT integral and promotes mixed operands.

    7/2 truncates to 3, 3 + 2.0 is the float 5 (printed without a fraction),
    and parenthesised operands are unwrapped before they are resolved.
    """
    with open(Path(__file__).parent.parent / 'examples' / 'program_3.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program, ConsoleSink())
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == [
        'sum 5',
        'quotient 3',
        'difference 5',
        'product 14',
        'ratio 0.6666667',
        'literal 70',
    ]
