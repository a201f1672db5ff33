"""Tests for the command-line front end."""

import pytest

from scrabbler.board import default_grid
from scrabbler.cli import main, run_cli
from scrabbler.rack import Rack


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("CEDAR\nCEDARS\n", encoding="utf-8")
    return str(path)


def feed(monkeypatch, commands):
    """Answer input() prompts with *commands*, then EOF."""
    it = iter(commands)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


class TestMain:
    """One-shot runs and data errors."""

    def test_once(self, word_file, capsys):
        assert main(["--words", word_file, "--rack", "cedars", "--once"]) == 0
        out = capsys.readouterr().out
        assert "Points: 24" in out
        assert "Play 'CEDARS' at (7,3) horizontally" in out

    def test_game_overlay(self, word_file, tmp_path, capsys):
        game = tmp_path / "game.txt"
        rows = ["." * 15] * 15
        rows[7] = "......CEDAR...."
        game.write_text("\n".join(rows) + "\n", encoding="utf-8")
        assert main(["--words", word_file, "--game", str(game), "--rack", "S", "--once"]) == 0
        out = capsys.readouterr().out
        assert "Play 'CEDARS' at (7,11) horizontally" in out

    def test_missing_tile_table(self, word_file, tmp_path):
        assert main(["--words", word_file, "--tiles", str(tmp_path / "none.txt"), "--once"]) == 1

    def test_bad_board(self, word_file, tmp_path):
        board = tmp_path / "board.txt"
        board.write_text("...\n..\n", encoding="utf-8")
        assert main(["--words", word_file, "--board", str(board), "--once"]) == 1


class TestInteractive:
    """Console loop commands."""

    def test_find_and_play(self, monkeypatch, context_factory, capsys):
        ctx = context_factory({"CEDAR", "CEDARS"})
        grid = default_grid()
        grid.annotate(ctx.words)
        rack = Rack.from_string("CEDARSE")
        feed(monkeypatch, ["f", "p", "q"])
        run_cli(ctx, grid, rack)
        assert grid.letter_rows()[7] == "...CEDARS......"
        assert str(rack) == "E"
        assert "Played 'CEDARS' for 24 points" in capsys.readouterr().out

    def test_set_tile_and_rack(self, monkeypatch, context_factory, capsys):
        ctx = context_factory({"CAT"})
        grid = default_grid()
        feed(monkeypatch, ["t C 7 7", "t x 99 99", "r TA", "s"])
        run_cli(ctx, grid, Rack())
        out = capsys.readouterr().out
        assert grid.at(7, 7).letter == "C"
        assert "Invalid tile input" in out
        assert "Rack: AT" in out

    def test_new_rack_discards_found_move(self, monkeypatch, context_factory, capsys):
        ctx = context_factory({"CEDAR", "CEDARS"})
        grid = default_grid()
        grid.annotate(ctx.words)
        before = grid.letter_rows()
        feed(monkeypatch, ["f", "r QQ", "p", "q"])
        run_cli(ctx, grid, Rack.from_string("CEDARS"))
        assert grid.letter_rows() == before
        assert "No move to play" in capsys.readouterr().out

    def test_play_without_find(self, monkeypatch, context_factory, capsys):
        ctx = context_factory({"CAT"})
        feed(monkeypatch, ["p", "q"])
        run_cli(ctx, default_grid(), Rack())
        assert "No move to play" in capsys.readouterr().out
