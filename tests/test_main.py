import logging
from main import main, process_program


def test_process_program_prints_environment(capsys):
    assert process_program("begin a := 2; B := a * 3 end.")
    out = capsys.readouterr().out
    assert out.splitlines() == ["a = 2", "B = 6"]


def test_process_expression_prints_value_and_translations(capsys):
    assert process_program("2 + 3 * 4", translations=("postfix", "lisp"))
    out = capsys.readouterr().out
    assert out.splitlines() == ["14", "postfix: 2 3 4 * +", "lisp: (+ 2 (* 3 4))"]


def test_process_program_reports_errors(capsys):
    assert not process_program("begin a := b end.")
    err = capsys.readouterr().err
    assert "Variable 'b' is not defined" in err


def test_process_program_prints_tokens_and_ast(capsys):
    assert process_program("begin end.", print_tokens=True, print_ast=True)
    out = capsys.readouterr().out
    assert "Tokens (4):" in out
    assert "BEGIN" in out
    assert "StatementList" in out


def test_main_runs_sample_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "nUmber = 3" in out
    assert "_c = 27" in out


def test_main_reads_file(tmp_path, capsys):
    src = tmp_path / "prog.pas"
    src.write_text("program t; begin x := 7 div 2 end.", encoding="utf-8")
    assert main(["--file", str(src)]) == 0
    assert capsys.readouterr().out.strip() == "x = 3"


def test_main_missing_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "missing.pas")]) == 1
    assert "Failed to read file" in capsys.readouterr().err


def test_main_expression_with_single_notation(capsys):
    assert main(["--expr", "7 / 2", "--translate", "lisp"]) == 0
    assert capsys.readouterr().out.splitlines() == ["3.5", "lisp: (/ 7 2)"]


def test_main_unary_translation_fails(capsys):
    assert main(["--expr", "-1", "--translate", "postfix"]) == 1
    assert "postfix" in capsys.readouterr().err


def test_main_syntax_error_exit_code(capsys):
    assert main(["--expr", "1 +"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_verbose_logging_reports_stages(caplog, capsys):
    caplog.set_level(logging.INFO, logger="tinypascal")
    assert process_program("begin x := 1 end.")
    assert "lexed 7 tokens" in caplog.text
    assert "parsed PROGRAM" in caplog.text
    assert "evaluated PROGRAM" in caplog.text
    assert capsys.readouterr().out.strip() == "x = 1"
