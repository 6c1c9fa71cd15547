from dataclasses import dataclass

from py_tic_tac_toe_solo.outcome import Draw, Outcome, Win


@dataclass(slots=True)
class ScoreBoard:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        """Count a finished round. Ongoing outcomes are not counted."""
        match outcome:
            case Win(player="X"):
                self.x_wins += 1
            case Win(player="O"):
                self.o_wins += 1
            case Draw():
                self.draws += 1

    def reset(self) -> None:
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0

    @property
    def rounds(self) -> int:
        return self.x_wins + self.o_wins + self.draws
