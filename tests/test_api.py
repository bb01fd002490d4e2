"""
Tests for filler.api

Drives the game loop with scripted input instead of a terminal.
"""

from typing import List

import pytest

from filler.api import final_message, play_game, prompt_manual_board
from filler.core.types import PLAYER_ONE, PLAYER_TWO
from filler.games.filler import Filler
from filler.utils.config import Config


class TestPlayGame:
    """play_game loop tests."""

    def test_self_play_forced_line(self, forced_game: Filler, output: List[str]):
        """Two computer players on a forced board end 4-2."""
        counts = play_game(forced_game, human_players=[], depth=2, write=output.append)

        assert counts == (4, 2)
        assert forced_game.is_over()
        assert output[-1] == "Player X wins!"
        assert "GAME OVER" in output

    def test_human_retries_until_valid(self, forced_game: Filler, output: List[str], scripted_input):
        """Empty, unknown and identity colors are rejected; the loop asks again."""
        answers = scripted_input(["", "z", "r", "b", "g", "r"])

        counts = play_game(
            forced_game,
            human_players=[PLAYER_ONE],
            depth=1,
            read_input=answers,
            write=output.append,
        )

        assert counts == (4, 2)
        retries = [line for line in output if "Please try again" in line]
        assert len(retries) == 3
        assert len(answers.prompts) == 6
        assert "You played: b" in "\n".join(output)
        assert "AI (Player O) played: r" in "\n".join(output)

    def test_human_as_player_two(self, forced_game: Filler, output: List[str], scripted_input):
        answers = scripted_input(["r", "b"])
        counts = play_game(
            forced_game,
            human_players=[PLAYER_TWO],
            depth=1,
            read_input=answers,
            write=output.append,
        )
        assert counts == (4, 2)
        assert len(answers.prompts) == 2

    def test_stops_when_no_legal_color(self, blocked_game: Filler, output: List[str]):
        """Blocked board ends immediately as a tie."""
        counts = play_game(blocked_game, human_players=[], write=output.append)

        assert counts == (1, 1)
        assert any("no legal color" in line for line in output)
        assert output[-1] == "It's a tie!"

    def test_already_over(self, output: List[str]):
        counts = play_game(Filler(1, 1), human_players=[], write=output.append)
        assert counts == (0, 1)
        assert output[-1] == "Player O wins!"

    def test_worker_pool(self, forced_game: Filler, output: List[str]):
        counts = play_game(
            forced_game, human_players=[], depth=1, num_workers=2, write=output.append
        )
        assert counts == (4, 2)

    def test_debug_table_on_computer_turns(self, forced_game: Filler, output: List[str], capsys):
        """debug=True prints one search table per computer move."""
        play_game(forced_game, human_players=[], depth=1, debug=True, write=output.append)

        assert capsys.readouterr().out.count("◀") == 5
        assert not any("◀" in line for line in output)

    def test_errors_propagate(self, forced_game: Filler, output: List[str]):
        def broken_input(prompt: str) -> str:
            raise RuntimeError("terminal went away")

        with pytest.raises(RuntimeError):
            play_game(forced_game, read_input=broken_input, write=output.append)


class TestPromptManualBoard:
    """prompt_manual_board tests."""

    def test_reads_every_cell(self, output: List[str], scripted_input):
        config = Config(rows=2, cols=2, palette="rg")
        answers = scripted_input(["r", "x", "g", "r", "g"])

        game = prompt_manual_board(config, read_input=answers, write=output.append)

        assert [[game.color_at(r, c) for c in range(2)] for r in range(2)] == [["r", "g"], ["r", "g"]]
        assert game.owner_at(1, 0) == PLAYER_ONE
        assert game.owner_at(0, 1) == PLAYER_TWO
        assert sum("Please try again" in line for line in output) == 1
        assert answers.prompts[1] == "Enter a color for cell [0, 1]: "


class TestFinalMessage:
    """final_message tests."""

    def test_tie(self, blocked_game: Filler):
        assert final_message(blocked_game) == "It's a tie!"

    def test_winner(self, forced_game: Filler):
        for color in ["b", "r", "g", "b", "r"]:
            forced_game.apply_move(color)
        assert final_message(forced_game) == "Player X wins!"
