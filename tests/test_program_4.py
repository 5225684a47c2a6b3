from pathlib import Path

from bella.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parents[1] / 'examples'


def test_program_4_while_loop(capsys):
    with open(EXAMPLES / 'program_4.bella', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out == '10'
    assert interp.global_env.lookup('y') == 10.0
