from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (row, col) coordinate of a board cell."""
    row: int
    col: int

    def offset(self, rows: int = 0, cols: int = 0) -> "Position":
        return Position(self.row + rows, self.col + cols)

    @classmethod
    def of(cls, value) -> "Position":
        """Accept a Position or a (row, col) pair."""
        if isinstance(value, Position):
            return value
        row, col = value
        return cls(row, col)
