"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from symalg.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    def test_list_examples(self, runner):
        result = runner.invoke(main, ["list-examples"])
        assert result.exit_code == 0
        assert "polynomial" in result.output

    def test_simplify_named(self, runner):
        result = runner.invoke(main, ["simplify", "cube"])
        assert result.exit_code == 0
        assert "cube" in result.output
        assert "8" in result.output

    def test_simplify_all_reports_errors(self, runner):
        result = runner.invoke(main, ["simplify"])
        assert result.exit_code == 0
        assert "huge_exponent" in result.output

    def test_simplify_unknown(self, runner):
        result = runner.invoke(main, ["simplify", "nope"])
        assert result.exit_code == 1
        assert "Unknown examples" in result.output

    def test_max_exponent_option(self, runner):
        result = runner.invoke(main, ["simplify", "cube", "--max-exponent", "2"])
        assert result.exit_code == 0
        assert "Exponent" in result.output

    def test_inspect(self, runner):
        result = runner.invoke(main, ["inspect", "nested_power", "--simplified"])
        assert result.exit_code == 0
        assert "Power" in result.output

    def test_inspect_unknown(self, runner):
        result = runner.invoke(main, ["inspect", "nope"])
        assert result.exit_code == 1
