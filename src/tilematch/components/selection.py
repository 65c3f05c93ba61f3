from dataclasses import dataclass
from typing import Optional

from tilematch.engine.position import Position


@dataclass(slots=True)
class Selection:
    """Cells picked by the player for the next swap."""
    first: Optional[Position] = None
    second: Optional[Position] = None

    def clear(self) -> None:
        self.first = None
        self.second = None
