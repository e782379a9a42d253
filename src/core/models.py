"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The service layer and the session store both use the model defined here to send to/receive from each other
(Decouples the domain objects from whatever the store or the API layer wants to keep around)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
Coordinates = tuple[int, int]
SideName = str


@dataclass
class GameModel:
    """Transport-safe representation of a game session used between Service, store, and Game layers."""

    position: str
    active_side: SideName
    selection: Optional[Coordinates] = None
