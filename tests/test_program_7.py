from pathlib import Path

from blockscript.interpreter import Interpreter
from blockscript.parser import parse_program
from blockscript.report import ConsoleSink
from blockscript.types import FloatVal, IntVal


def test_program_7_redeclaration_and_shorthand(capsys):
    with open(Path(__file__).parent.parent / 'examples' / 'program_7.bs', 'r', encoding='utf-8') as f:
        source = f.read()
    program = parse_program(source)
    interp = Interpreter()
    interp.run(program, ConsoleSink())
    out = capsys.readouterr().out.strip()
    assert out == '2.5\n8\n1 4 3\nTrueTrueFalse'
    assert interp.store.entry('v') == ('FLOAT', FloatVal(2.5))
    # the doubled literal goes through the chained evaluator, so it is a float
    assert interp.store.entry('w') == ('INT', FloatVal(8.0))
    # the word after `2 + 2` is passed over rather than bound
    assert 'skipped' not in interp.store
    assert interp.store.entry('c') == ('INT', IntVal(3))
