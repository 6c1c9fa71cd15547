from enum import StrEnum


class Difficulty(StrEnum):
    """Computer strength setting.

    The labels are inverted with respect to playing strength: EASY selects the
    exhaustive minimax player (it never loses), MEDIUM the win/block heuristic,
    and HARD a purely random player. The mapping is kept as shipped; swap the
    entries in ``player_ai.AI_PLAYERS`` once the intended order is confirmed.
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()
