"""End-to-end checks through the runner and the tamc command line."""

import json

from click.testing import CliRunner

from tamlang import __version__
from tamlang import error_reporter
from tamlang.cli.main import cli
from tamlang.error_reporter import SyntaxError as TamSyntaxError, UndeclaredVariableError
from tamlang.runner import check_file, check_files, check_source

VALID = """\
// ornek program
tam sayaç = 0 ;
tam toplam ;

dönmeDolap ( sayaç = 0 ; sayaç < 10 ; sayaç = sayaç + 1 ) basla
    toplam = toplam + sayaç * 2 ;
bitir

olurMu ( toplam >= 90 ) basla
    toplam = 90 ;
bitir
budaMıDegil basla
    çarkıFelek ( toplam != 90 ) basla
        toplam = toplam + 1 ;
    bitir
bitir
"""

UNDECLARED = "tam a ;\na = b + 1 ;\n"

MISSING_END = "tam a ;\nçarkıFelek ( a < 3 ) basla\n    a = a + 1 ;\n"


def test_check_source():
    result = check_source(VALID)
    assert result.ok
    assert result.declared == ("sayaç", "toplam")


def test_check_file_success(write_source):
    report = check_file(write_source("ok.tk", VALID))
    assert report.ok
    assert report.io_error is None
    assert report.declared == ("sayaç", "toplam")


def test_check_file_reports_parse_errors(write_source):
    report = check_file(write_source("bad.tk", UNDECLARED))
    assert not report.ok
    assert isinstance(report.error, UndeclaredVariableError)
    assert report.error.line == 2
    assert report.error.filename.endswith("bad.tk")
    assert report.declared == ()


def test_check_file_missing(tmp_path):
    report = check_file(tmp_path / "nope.tk")
    assert not report.ok
    assert report.result is None
    assert report.error is None
    assert report.io_error


def test_check_file_bad_encoding(tmp_path):
    path = tmp_path / "latin.tk"
    path.write_bytes("tam ş ;".encode("utf-16"))
    report = check_file(path)
    assert not report.ok
    assert report.io_error


def test_one_failure_does_not_stop_the_rest(write_source, tmp_path):
    paths = [
        write_source("1.tk", MISSING_END),
        tmp_path / "missing.tk",
        write_source("3.tk", VALID),
    ]
    reports = check_files(paths)
    assert [r.ok for r in reports] == [False, False, True]
    assert isinstance(reports[0].error, TamSyntaxError)
    assert reports[0].error.line is None
    assert reports[1].io_error
    assert reports[2].declared == ("sayaç", "toplam")


def test_checks_keep_no_shared_source_lines(write_source):
    paths = [write_source(f"{i}.tk", UNDECLARED if i % 2 else VALID) for i in range(5)]
    reports = check_files(paths)
    assert len({id(r.reporter) for r in reports}) == len(reports)
    for path, report in zip(paths, reports):
        assert report.reporter.filenames == (str(path),)
    assert not hasattr(error_reporter, "_default_reporter")


def test_check_source_reporters_are_independent():
    results = [check_source(UNDECLARED, filename=f"f{i}.tk") for i in range(3)]
    assert [r.reporter.filenames for r in results] == [("f0.tk",), ("f1.tk",), ("f2.tk",)]
    assert results[1].reporter.get_source_line("f1.tk", 2) == "a = b + 1 ;"


def test_cli_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_check_success(write_source):
    path = write_source("ok.tk", VALID)
    result = CliRunner().invoke(cli, ["check", str(path)])
    assert result.exit_code == 0, result.output
    assert "Parsing completed successfully" in result.output
    assert "sayaç, toplam" in result.output


def test_cli_check_failure_sets_exit_code(write_source):
    good = write_source("good.tk", "tam x ;")
    bad = write_source("bad.tk", "tam x ;;")
    result = CliRunner().invoke(cli, ["check", str(bad), str(good)])
    assert result.exit_code == 1
    assert "Syntax error" in result.output
    assert "Variables declared: x" in result.output
    assert "1 of 2 file(s) failed" in result.output


def test_cli_check_uses_project_file_list():
    runner = CliRunner()
    with runner.isolated_filesystem():
        with open("first.tk", "w", encoding="utf-8") as f:
            f.write("tam ilk ;\n")
        with open("second.tk", "w", encoding="utf-8") as f:
            f.write("tam ikinci = 2 ;\n")
        with open("tamlang.json", "w", encoding="utf-8") as f:
            json.dump({"files": ["first.tk", "second.tk"]}, f)

        result = runner.invoke(cli, ["check"])
    assert result.exit_code == 0, result.output
    assert "ilk" in result.output
    assert "ikinci" in result.output


def test_cli_check_default_files_missing():
    runner = CliRunner()
    with runner.isolated_filesystem():
        with open("ornek1.tk", "w", encoding="utf-8") as f:
            f.write("tam x ;\n")
        result = runner.invoke(cli, ["check"])
    assert result.exit_code == 1
    assert "Cannot read" in result.output
    assert "3 of 4 file(s) failed" in result.output


def test_cli_check_bad_project_file(write_source):
    config_path = write_source("tamlang.json", "{oops")
    result = CliRunner().invoke(cli, ["check", "--config", str(config_path), "x.tk"])
    assert result.exit_code == 2


def test_cli_tokens(write_source):
    path = write_source("t.tk", "tam x = 42 ;")
    result = CliRunner().invoke(cli, ["tokens", str(path)])
    assert result.exit_code == 0, result.output
    for text in ("INT", "ASSIGN", "NUMBER", "42", "SEMICOLON"):
        assert text in result.output
