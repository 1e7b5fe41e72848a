"""Base game object and its lifecycle flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag


class Flag(IntFlag):
    """Lifecycle state bits of a game object."""

    ALIVE = 1
    WAIT_FOR_GC = 1 << 1


@dataclass
class GameObject:
    """An object in the game world, identified by name."""

    name: str = "unnamed"