from pathlib import Path

from blockscript.interpreter import Interpreter
from blockscript.parser import parse_program
from blockscript.report import ConsoleSink


def test_program_6_only_code_blocks_run(capsys):
    with open(Path(__file__).parent.parent / 'examples' / 'program_6.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program, ConsoleSink())
    out = capsys.readouterr().out.strip()
    # the declaration on line 1 is outside the block, so `outside` is plain text
    assert out == 'inside\noutside'
    assert 'outside' not in interp.store
