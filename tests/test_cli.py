"""Tests for the terminal front end."""

from typer.testing import CliRunner

from connect_four.cli.main import app, board_to_text, parse_columns
from connect_four.game.engine import new_game


runner = CliRunner()


def lines_in(*inputs: str) -> str:
    return "\n".join(inputs) + "\n"


class TestBoardToText:
    def test_ascii_board(self):
        engine = new_game(3, 2, 2)
        engine.drop_token(0)  # Yellow
        engine.drop_token(2)  # Red

        text = board_to_text(engine, "ascii").splitlines()

        assert text[0] == "  0   1   2 "
        assert text[1] == "+---+---+---+"
        assert text[2] == "|   |   |   |"
        assert text[4] == "| Y |   | R |"
        assert len(text) == 6

    def test_emoji_board(self):
        engine = new_game(2, 2, 2)
        engine.drop_token(1)
        assert "🟡" in board_to_text(engine)


class TestParseColumns:
    def test_separators(self):
        assert parse_columns("0,1, 2 3") == [0, 1, 2, 3]
        assert parse_columns("") == []


class TestReplay:
    def test_horizontal_win(self):
        result = runner.invoke(app, ["replay", "0,6,1,6,2,6,3", "--ascii"])
        assert result.exit_code == 0
        assert "Yellow has won!" in result.output

    def test_game_in_progress(self):
        result = runner.invoke(app, ["replay", "3", "--ascii"])
        assert result.exit_code == 0
        assert "Turn 2: Red" in result.output
        assert "has won" not in result.output

    def test_tie_with_clamped_match_length(self):
        result = runner.invoke(
            app,
            ["replay", "1 0 2 1 0 2 0 1 2", "-w", "3", "--height", "3", "-n", "5", "--ascii"],
        )
        assert result.exit_code == 0
        assert "3x3, 3 in a row" in result.output
        assert "It's a tie!" in result.output

    def test_full_column_rejected(self):
        result = runner.invoke(app, ["replay", "0,0,0,0,0,0,0", "--ascii"])
        assert result.exit_code == 1
        assert "Move 7 rejected" in result.output

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("CONNECT4_WIDTH", "4")
        monkeypatch.setenv("CONNECT4_HEIGHT", "4")
        result = runner.invoke(app, ["replay", "0", "--ascii"])
        assert result.exit_code == 0
        assert "Board: 4x4, 4 in a row" in result.output

    def test_bad_columns(self):
        result = runner.invoke(app, ["replay", "a,b"])
        assert result.exit_code != 0


class TestPlay:
    def test_play_to_a_win(self):
        moves = lines_in("0", "6", "1", "6", "2", "6", "3", "q")
        result = runner.invoke(app, ["play", "--ascii"], input=moves)
        assert result.exit_code == 0
        assert "Yellow has won!" in result.output
        assert "Game quit." in result.output

    def test_invalid_input_is_ignored(self):
        result = runner.invoke(app, ["play", "--ascii"], input=lines_in("x", "9", "q"))
        assert result.exit_code == 0
        assert "Enter a column number 0-6" in result.output
        assert "Invalid! Column 9 is out of range" in result.output
        assert "Turn 2" not in result.output

    def test_move_after_game_over(self):
        moves = lines_in("0", "6", "1", "6", "2", "6", "3", "4", "q")
        result = runner.invoke(app, ["play", "--ascii"], input=moves)
        assert "Press 'r' to play again." in result.output

    def test_restart(self):
        moves = lines_in("0", "6", "1", "6", "2", "6", "3", "r", "q")
        result = runner.invoke(app, ["play", "--ascii"], input=moves)
        assert result.exit_code == 0
        assert result.output.count("Turn 1: Yellow") == 2
        assert result.output.count("Yellow has won!") == 1

    def test_reconfigure(self):
        result = runner.invoke(
            app, ["play", "--ascii"], input=lines_in("c", "4", "4", "9", "q")
        )
        assert result.exit_code == 0
        assert "Board: 4x4, 4 in a row" in result.output

    def test_reconfigure_rejects_bad_size(self):
        result = runner.invoke(
            app, ["play", "--ascii"], input=lines_in("c", "0", "4", "3", "q")
        )
        assert "Keeping current game" in result.output
