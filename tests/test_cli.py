"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from sweetdraw.cli import app

runner = CliRunner()


@pytest.fixture
def tables_dir(tmp_path):
    (tmp_path / ".sweetdraw").mkdir()
    (tmp_path / ".sweetdraw" / "tables.toml").write_text(
        '[tables.coins]\nentries = [{ name = "Heads", weight = 1 }, { name = "Tails", weight = 1 }]\n'
        '[tables.dud]\nentries = [{ name = "Nothing", weight = 0 }, { name = "Less", weight = 0 }]\n'
    )
    return tmp_path


class TestDraw:

    def test_draw_builtin(self):
        result = runner.invoke(app, ["draw", "rarity", "-n", "5", "--seed", "1"])
        assert result.exit_code == 0
        assert "Tally" in result.stdout

    def test_draw_is_reproducible(self):
        args = ["draw", "chest", "-n", "8", "--seed", "9", "--bonus", "50"]
        assert runner.invoke(app, args).stdout == runner.invoke(app, args).stdout

    def test_draw_distinct(self, tables_dir):
        result = runner.invoke(
            app, ["draw", "coins", "-n", "2", "--mode", "distinct", "--tables-dir", str(tables_dir)],
        )
        assert result.exit_code == 0
        assert "Heads" in result.stdout and "Tails" in result.stdout

    def test_tables_dir_from_env(self, tables_dir):
        result = runner.invoke(app, ["draw", "coins"], env={"SWEETDRAW_TABLES_DIR": str(tables_dir)})
        assert result.exit_code == 0

    def test_draw_overflow_fails(self, tables_dir):
        result = runner.invoke(
            app, ["draw", "coins", "-n", "3", "--mode", "distinct", "--tables-dir", str(tables_dir)],
        )
        assert result.exit_code == 1
        assert "Draw failed" in result.stdout

    def test_zero_weight_table_fails(self, tables_dir):
        result = runner.invoke(app, ["draw", "dud", "--tables-dir", str(tables_dir)])
        assert result.exit_code == 1

    def test_unknown_table(self):
        result = runner.invoke(app, ["draw", "nope"])
        assert result.exit_code == 1
        assert "Unknown table" in result.stdout

    def test_unknown_mode(self):
        result = runner.invoke(app, ["draw", "rarity", "--mode", "roulette"])
        assert result.exit_code == 1
        assert "Unknown mode" in result.stdout


class TestOdds:

    def test_odds_zero_bonus(self):
        result = runner.invoke(app, ["odds", "rarity"])
        assert result.exit_code == 0
        assert "70.00%" in result.stdout

    def test_odds_with_bonus_and_pivot(self):
        result = runner.invoke(app, ["odds", "rarity", "--bonus", "100", "--pivot", "median", "--range", "below"])
        assert result.exit_code == 0
        assert "pivot=median" in result.stdout

    def test_negative_bonus(self):
        result = runner.invoke(app, ["odds", "rarity", "--bonus", "-1"])
        assert result.exit_code == 1
        assert "bonus" in result.stdout


class TestListings:

    def test_list_tables(self, tables_dir):
        result = runner.invoke(app, ["list-tables", "--tables-dir", str(tables_dir)])
        assert result.exit_code == 0
        assert "coins" in result.stdout

    def test_list_modes(self):
        result = runner.invoke(app, ["list-modes"])
        assert result.exit_code == 0
        assert "distinct" in result.stdout
