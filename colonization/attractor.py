"""
Attractor class - point sources that pull nearby nodes toward them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .vector import Point


def sq_dist(distance: float) -> float:
    """Convert a plain distance into the squared form the engine compares against."""
    return distance * distance


class ActionKind(Enum):
    KILL = 'kill'
    DISABLE_FOR = 'disable_for'
    DISABLE_FOR_CONNECTING_ROOT = 'disable_for_connecting_root'


@dataclass(frozen=True)
class ConnectAction:
    """What happens to an attractor once a node comes within its connect radius."""
    kind: ActionKind
    iterations: int = 0

    @classmethod
    def kill(cls) -> 'ConnectAction':
        return cls(ActionKind.KILL)

    @classmethod
    def disable_for(cls, iterations: int) -> 'ConnectAction':
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations}")
        return cls(ActionKind.DISABLE_FOR, iterations)

    @classmethod
    def disable_for_connecting_root(cls) -> 'ConnectAction':
        return cls(ActionKind.DISABLE_FOR_CONNECTING_ROOT)

    @classmethod
    def from_name(cls, name: str, iterations: int = 0) -> 'ConnectAction':
        if name == ActionKind.KILL.value:
            return cls.kill()
        if name == ActionKind.DISABLE_FOR.value:
            return cls.disable_for(iterations)
        if name == ActionKind.DISABLE_FOR_CONNECTING_ROOT.value:
            return cls.disable_for_connecting_root()
        raise ValueError(f"Unknown connect action: {name!r}")


class Attractor:
    __slots__ = (
        'attract_radius_sq', 'connect_radius_sq', 'strength', 'position',
        'payload', 'connect_action', 'active_from_iteration',
        'excluded_root', 'excluded_connecting_root',
    )

    def __init__(
        self,
        position: Point,
        attract_radius_sq: float,
        connect_radius_sq: float,
        strength: float = 1.0,
        payload: Any = None,
        connect_action: ConnectAction = ConnectAction.kill(),
        active_from_iteration: int = 0,
        excluded_root: Optional[int] = None,
        excluded_connecting_root: Optional[int] = None,
    ):
        self.position = position
        self.attract_radius_sq = attract_radius_sq
        self.connect_radius_sq = connect_radius_sq
        self.strength = strength
        self.payload = payload
        self.connect_action = connect_action
        self.active_from_iteration = active_from_iteration
        # Nodes of these trees never see this attractor
        self.excluded_root = excluded_root
        self.excluded_connecting_root = excluded_connecting_root

    def is_active_in(self, iteration: int) -> bool:
        return iteration >= self.active_from_iteration

    def disable_until(self, iteration: int):
        self.active_from_iteration = iteration

    def excludes_root(self, root: int) -> bool:
        return root == self.excluded_root or root == self.excluded_connecting_root

    def __repr__(self) -> str:
        return (f"Attractor({self.position}, {self.connect_action.kind.value}, "
                f"active_from={self.active_from_iteration})")
