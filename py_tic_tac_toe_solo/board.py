from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final, Literal, TypeAlias

from py_tic_tac_toe_solo.exception import InvalidMoveError

BOARD_SIZE: Final = 3
CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE
PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None

# Rows, then columns, then the two diagonals. Order decides which line wins on
# boards where more than one line is complete.
WIN_LINES: Final[tuple[tuple[int, int, int], ...]] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def opponent(player: PlayerSymbol) -> PlayerSymbol:
    return "O" if player == "X" else "X"


def check_index(index: int) -> None:
    if not (0 <= index < CELL_COUNT):
        raise IndexError("Move out of bounds.")


@dataclass(frozen=True, slots=True)
class Move:
    player: PlayerSymbol
    index: int


@dataclass(frozen=True, slots=True)
class Board:
    """Immutable snapshot of the nine cells, addressed row-major from 0 to 8."""

    cells: tuple[Cell, ...] = (None,) * CELL_COUNT

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            msg = f"A board has {CELL_COUNT} cells, got {len(self.cells)}."
            raise ValueError(msg)

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """Build a board from nine characters: "X", "O", and "." or "_" for empty cells."""
        chars = [c for c in layout if not c.isspace() and c != ","]
        cells: list[Cell] = []
        for char in chars:
            match char:
                case "X" | "O":
                    cells.append(char)
                case "." | "_":
                    cells.append(None)
                case _:
                    msg = f"Invalid cell character: {char!r}"
                    raise ValueError(msg)
        return cls(tuple(cells))

    def __getitem__(self, index: int) -> Cell:
        check_index(index)
        return self.cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __str__(self) -> str:
        return "".join(cell or "." for cell in self.cells)

    def place(self, index: int, player: PlayerSymbol) -> "Board":
        check_index(index)
        if self.cells[index] is not None:
            raise InvalidMoveError("Cell occupied.")

        return Board((*self.cells[:index], player, *self.cells[index + 1 :]))

    def is_empty(self, index: int) -> bool:
        check_index(index)
        return self.cells[index] is None

    def available_positions(self) -> list[int]:
        return [i for i, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def rows(self) -> list[tuple[Cell, ...]]:
        return [self.cells[r * BOARD_SIZE : (r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]
