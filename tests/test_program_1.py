from pathlib import Path

from bella.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parents[1] / 'examples'


def test_program_1_declare_assign_print(capsys):
    with open(EXAMPLES / 'program_1.bella', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out == '-180'
