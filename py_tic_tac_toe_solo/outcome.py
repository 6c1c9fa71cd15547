from dataclasses import dataclass
from typing import TypeAlias

from py_tic_tac_toe_solo.board import WIN_LINES, Board, PlayerSymbol


@dataclass(frozen=True, slots=True)
class Ongoing:
    pass


@dataclass(frozen=True, slots=True)
class Win:
    player: PlayerSymbol
    line: tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Draw:
    pass


Outcome: TypeAlias = Ongoing | Win | Draw


def evaluate(board: Board) -> Outcome:
    """Report the result of a board: the first complete line in table order, a draw when full, else ongoing."""
    for line in WIN_LINES:
        a, b, c = line
        first = board[a]
        if first is not None and first == board[b] == board[c]:
            return Win(first, line)

    if board.is_full():
        return Draw()
    return Ongoing()


def is_over(outcome: Outcome) -> bool:
    return not isinstance(outcome, Ongoing)


def describe(outcome: Outcome) -> str:
    match outcome:
        case Win(player=player):
            return f"{player} wins!"
        case Draw():
            return "Draw!"
        case _:
            return ""
