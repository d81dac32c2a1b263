from pathlib import Path

from blockscript.interpreter import Interpreter
from blockscript.parser import parse_program
from blockscript.report import ConsoleSink
from blockscript.types import FloatVal


def test_program_2_declarations_of_every_type(capsys):
    with open(Path(__file__).parent.parent / 'examples' / 'program_2.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    result = interp.run(program, ConsoleSink())
    out = capsys.readouterr().out.strip()
    assert out == 'a=5, b=3\nf is 2.5\nc is x flag is True'
    assert result.ok
    assert interp.store.entry('f') == ('FLOAT', FloatVal(2.5))
