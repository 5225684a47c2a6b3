import io

from bella.interpreter import Interpreter, compile_module, run_program
from bella.parser import parse_program


def test_run_program_returns_interpreter():
    out = io.StringIO()
    interp = run_program("x := 6\nsquare(n) = n * n\nprint(square(x))\n", out=out)
    assert isinstance(interp, Interpreter)
    assert out.getvalue() == '36\n'
    assert interp.global_env.lookup('x') == 6.0


def test_compile_module_runs_file(tmp_path, capsys):
    path = tmp_path / 'module.bella'
    path.write_text("total := 0\ni := 1\nwhile i <= 4 { total = total + i; i = i + 1 }\nprint(total)\n",
                    encoding='utf-8')
    interp = compile_module(str(path))
    assert capsys.readouterr().out == '10\n'
    assert interp.global_env.lookup('i') == 5.0


def test_debug_file_opened_only_while_running(tmp_path):
    debug_path = tmp_path / 'debug.txt'
    interp = Interpreter(debug_level=1, debug_file=str(debug_path), out=io.StringIO())
    assert not debug_path.exists()
    interp.run(parse_program("print(1)"))
    assert interp.debug_fp is None
    assert 'program finished' in debug_path.read_text(encoding='utf-8')
