"""
Configuration and game registry.
"""

from typing import Optional, Sequence, Tuple

from gridgames.games import Chess, ConnectFour


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "chess": Chess,
    "connect_four": ConnectFour,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_PLAYER_NAMES = ("Player 1", "Player 2")


def _default_names(num_players: int) -> Tuple[str, ...]:
    """Fall back to "Player N" for every seat without a name."""
    return tuple(
        DEFAULT_PLAYER_NAMES[i] if i < len(DEFAULT_PLAYER_NAMES) else f"Player {i + 1}"
        for i in range(num_players)
    )


class Config:
    """Session configuration with sensible defaults."""

    def __init__(
        self,
        game_name: str = "chess",
        player_names: Optional[Sequence[str]] = None,
        markers: Optional[Sequence[str]] = None,
        show_instructions: bool = True,
    ):
        self.game_name = game_name
        self.show_instructions = show_instructions

        # Derive dependent values
        game_class = GAMES[game_name]
        self.num_players = game_class.NUM_PLAYERS

        self.player_names = tuple(player_names) if player_names else _default_names(self.num_players)
        if len(self.player_names) != self.num_players:
            raise ValueError(
                f"{game_name} needs {self.num_players} player names, got {len(self.player_names)}"
            )

        self.markers = tuple(markers) if markers else None
        if self.markers is not None and len(self.markers) != self.num_players:
            raise ValueError(
                f"{game_name} needs {self.num_players} markers, got {len(self.markers)}"
            )
