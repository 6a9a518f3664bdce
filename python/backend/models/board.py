"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

MIN_SIZE = 2
MAX_SIZE = 6


class InvalidBoardError(ValueError):
    """Raised when tiles do not form a valid board (never a user error)."""


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


def check_size(size: int) -> int:
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(
            f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}."
        )
    return size


def neighbors_of(cell: int, size: int) -> list[int]:
    """Return the cells orthogonally adjacent to *cell* (up, down, left, right)."""
    r, c = divmod(cell, size)
    cells: list[int] = []
    if r > 0:
        cells.append(cell - size)
    if r < size - 1:
        cells.append(cell + size)
    if c > 0:
        cells.append(cell - 1)
    if c < size - 1:
        cells.append(cell + 1)
    return cells


@dataclass(frozen=True)
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major tuple mapping cell -> tile label.
    0 represents the blank space.  Boards are immutable; moves produce new
    boards.
    """

    size: int
    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        check_size(self.size)
        total = self.size * self.size
        if len(self.tiles) != total:
            raise InvalidBoardError(
                f"Expected {total} tiles for a {self.size}×{self.size} board, "
                f"got {len(self.tiles)}."
            )
        if sorted(self.tiles) != list(range(total)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{total - 1}: {self.tiles}"
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        total = size * size
        return cls(size=size, tiles=tuple(range(1, total)) + (0,))

    @classmethod
    def from_flat(cls, size: int, flat: list[int] | tuple[int, ...]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(size=size, tiles=tuple(flat))

    # -- queries --------------------------------------------------------------

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def blank_cell(self) -> int:
        """Index of the single cell holding the blank."""
        return self.tiles.index(0)

    @property
    def key(self) -> tuple[int, ...]:
        """Hashable canonical encoding of the configuration."""
        return self.tiles

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def cell_of(self, tile: int) -> int | None:
        """Return the cell holding *tile*, or ``None`` for an unknown label."""
        if not 0 <= tile < self.total_cells:
            return None
        return self.tiles.index(tile)

    def positions(self) -> list[int]:
        """Return the derived label -> cell view of this board."""
        pos = [0] * self.total_cells
        for cell, tile in enumerate(self.tiles):
            pos[tile] = cell
        return pos

    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = self.total_cells - 1
        for cell, tile in enumerate(self.tiles):
            expected = 0 if cell == last else cell + 1
            if tile != expected:
                return False
        return True

    def is_tile_correct(self, cell: int) -> bool:
        """Check if the tile at *cell* is in its goal position."""
        val = self.tiles[cell]
        if val == 0:
            return cell == self.total_cells - 1
        return cell == val - 1

    def swapped(self, a: int, b: int) -> Board:
        """Return a copy with the contents of cells *a* and *b* exchanged."""
        tiles = list(self.tiles)
        tiles[a], tiles[b] = tiles[b], tiles[a]
        return Board(size=self.size, tiles=tuple(tiles))

    def __str__(self) -> str:
        width = len(str(self.total_cells - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" if v else "·".rjust(width) for v in row)
            for row in self.rows()
        )
