"""Tests for the demo layer and console entry point."""

from click.testing import CliRunner

from monadic import Nothing, Some, __version__
from monadic.cli import cli
from monadic.demo import logged_demo, maybe_demo, run_demos


def test_logged_demo():
    report = logged_demo()

    assert report.agree
    assert report.folded.value == 50
    assert list(report.folded.logs) == ["squared 5", "doubled 25"]


def test_maybe_demo_zero_divisor():
    report = maybe_demo(divisor=0)

    assert report.agree
    assert report.folded == Nothing()


def test_maybe_demo_nonzero_divisor():
    report = maybe_demo(divisor=5)

    assert report.agree
    assert report.folded == Some(44)


def test_run_demos_all_agree():
    reports = run_demos()

    assert len(reports) == 3
    assert all(report.agree for report in reports)


def test_cli_prints_results_and_exits_zero():
    runner = CliRunner()

    result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "Logged(value=50, logs=['squared 5', 'doubled 25'])" in result.output
    assert "Nothing" in result.output
    assert "Some(44.0)" in result.output


def test_cli_verbose_exits_zero():
    result = CliRunner().invoke(cli, ["--verbose"])

    assert result.exit_code == 0


def test_cli_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_demos_print_nothing_without_configured_logging(capsys):
    run_demos()

    assert capsys.readouterr().out == ""
