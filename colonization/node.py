"""
Node class - a single point of the growing structure.

Nodes live in an append-only arena owned by the engine and refer to their
parent and root by index, never by reference.
"""

from typing import Any, Optional

from .vector import Point


class Node:
    __slots__ = (
        'parent', 'root', 'length', 'branch_count', 'position',
        'growth', 'growth_count', 'assigned_payload', 'connected',
    )

    def __init__(
        self,
        position: Point,
        parent: int,
        root: int,
        length: int = 0,
        payload: Optional[Any] = None,
    ):
        self.parent = parent
        self.root = root
        self.length = length  # Edges between this node and its root
        self.branch_count = 0
        self.position = position
        self.growth = position.zero()
        self.growth_count = 0  # Attractors pulling on this node this step
        self.assigned_payload = payload
        self.connected = False  # Set once an attractor has connected here

    @property
    def is_leaf(self) -> bool:
        return self.branch_count == 0

    @property
    def is_root(self) -> bool:
        return self.length == 0

    @property
    def has_payload(self) -> bool:
        return self.connected or self.assigned_payload is not None

    def receive_payload(self, payload: Any):
        self.assigned_payload = payload
        self.connected = True

    def is_active(self, max_length: int, max_branches: int) -> bool:
        return self.length < max_length and self.branch_count < max_branches

    def attract(self, direction: Point):
        self.growth = self.growth + direction
        self.growth_count += 1

    def reset_growth(self):
        self.growth = self.position.zero()
        self.growth_count = 0

    def __repr__(self) -> str:
        return (f"Node({self.position}, parent={self.parent}, root={self.root}, "
                f"length={self.length}, branches={self.branch_count})")
