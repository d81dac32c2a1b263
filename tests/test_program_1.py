from pathlib import Path

from blockscript.interpreter import Interpreter
from blockscript.parser import parse_program
from blockscript.report import ConsoleSink


def test_program_1(capsys):
    with open(Path(__file__).parent.parent / 'examples' / 'program_1.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program, ConsoleSink())
    out = capsys.readouterr().out.strip()
    assert out == 'Hello World!!'
