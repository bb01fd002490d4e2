"""
GameBase - abstract base class for the game contract used by the search.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from filler.core.types import State
from filler.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for two-player color-choice games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - The search engine only talks to this interface:
      deep_clone / apply_move / valid_moves / is_over / get_state.
    - It never mutates the game it was handed; it clones first.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'filler')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def clone(self) -> "GameBase":
        """Shallow copy (shares the state object)."""
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used at every node of the search tree.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> int:
        """Return ID of player to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[str]:
        """Return all legal colors from the current state, in palette order."""
        pass

    @abstractmethod
    def is_valid_move(self, move: str) -> bool:
        """Return True if ``move`` may be played from the current state."""
        pass

    @abstractmethod
    def apply_move(self, move: str, *, validated: bool = False) -> None:
        """
        Apply a move to the game. Mutates internal state.

        Args:
            move: The color to play.
            validated:  If True, skip the legality check (caller guarantees
                        the move came from valid_moves() or deliberately
                        wants the raw rule applied).
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def owned_counts(self) -> Tuple[int, int]:
        """Return (cells owned by player 1, cells owned by player 2)."""
        pass

    @abstractmethod
    def get_result(self, player: int) -> State:
        """
        Return outcome for the player:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Plain-text representation of the state."""
        pass
