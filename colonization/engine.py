"""
SpaceColonization - the stateful engine that grows the node structure.

Each call to ``step()`` lets every active attractor pick a node:
- the first node inside its connect radius receives the attractor's payload
  and triggers the attractor's connect action (kill / disable);
- otherwise the nearest node inside its attract radius is pulled toward it.
Every node pulled by at least one attractor then spawns one child node
``move_distance`` away along the sum of its pulls.

Growth is driven by the caller. The structure can oscillate between
competing attractors, so ``step()`` never decides on its own when to stop;
callers loop until it returns 0 or an iteration budget is spent.
"""

import math
from typing import Any, Callable, Iterator, List, Optional, Tuple

from .attractor import ActionKind, Attractor, ConnectAction
from .node import Node
from .vector import Point


class SpaceColonization:
    def __init__(
        self,
        default_attract_radius_sq: float,
        default_connect_radius_sq: float,
        max_length: int,
        max_branches: int,
        move_distance: float,
    ):
        self.default_attract_radius_sq = default_attract_radius_sq
        self.default_connect_radius_sq = default_connect_radius_sq
        self.max_length = max_length
        self.max_branches = max_branches
        self.move_distance = move_distance
        self._nodes: List[Node] = []
        self._attractors: List[Attractor] = []
        self._iteration = 0
        self._active_window: Optional[int] = None

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def add_attractor(self, attractor: Attractor):
        self._attractors.append(attractor)

    def add_default_attractor(self, position: Point, payload: Any = None) -> Attractor:
        attractor = Attractor(
            position,
            attract_radius_sq=self.default_attract_radius_sq,
            connect_radius_sq=self.default_connect_radius_sq,
            strength=1.0,
            payload=payload,
            connect_action=ConnectAction.kill(),
            active_from_iteration=0,
        )
        self._attractors.append(attractor)
        return attractor

    def add_root_node(self, position: Point, payload: Any = None) -> int:
        """Add the root of a new tree and return its index.

        A root is its own parent and root. The index never changes and is the
        handle used to refer to the tree (e.g. in attractor exclusions).
        """
        index = len(self._nodes)
        self._nodes.append(Node(position, parent=index, root=index, length=0, payload=payload))
        return index

    def _add_leaf_node(self, position: Point, parent: int) -> int:
        parent_node = self._nodes[parent]
        parent_node.branch_count += 1
        index = len(self._nodes)
        self._nodes.append(Node(
            position,
            parent=parent,
            root=parent_node.root,
            length=parent_node.length + 1,
        ))
        return index

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def active_window(self) -> Optional[int]:
        """Number of most recently added nodes scanned each step (None = all)."""
        return self._active_window

    @active_window.setter
    def active_window(self, value: Optional[int]):
        if value is not None and value <= 0:
            raise ValueError(f"active_window must be positive or None, got {value}")
        self._active_window = value

    @property
    def iteration(self) -> int:
        return self._iteration

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def attractors(self) -> Tuple[Attractor, ...]:
        return tuple(self._attractors)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def attractor_count(self) -> int:
        return len(self._attractors)

    def node(self, index: int) -> Node:
        return self._nodes[index]

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def _scan(self, attractor: Attractor, start: int) -> Tuple[Optional[Node], Optional[Node]]:
        """Return (connect_node, nearest_node) for one attractor over the window."""
        nearest_node = None
        nearest_dist = attractor.attract_radius_sq
        for node in self._nodes[start:]:
            if not node.is_active(self.max_length, self.max_branches):
                continue
            if attractor.excludes_root(node.root):
                continue

            dist = node.position.distance_squared_to(attractor.position)
            if dist < attractor.connect_radius_sq:
                # First match wins, even if a closer node follows in scan order
                return node, None
            if dist < nearest_dist:
                nearest_dist = dist
                nearest_node = node
        return None, nearest_node

    def _process_attractors(self, start: int):
        current = self._iteration
        idx = 0
        while idx < len(self._attractors):
            attractor = self._attractors[idx]
            if not attractor.is_active_in(current):
                idx += 1
                continue

            connect_node, nearest_node = self._scan(attractor, start)

            if connect_node is not None:
                connect_node.receive_payload(attractor.payload)
                action = attractor.connect_action
                if action.kind is ActionKind.KILL:
                    # swap-remove, then process the attractor moved into this slot
                    last = self._attractors.pop()
                    if idx < len(self._attractors):
                        self._attractors[idx] = last
                    continue
                if action.kind is ActionKind.DISABLE_FOR:
                    # Skipped by the next `iterations` steps
                    attractor.disable_until(current + 1 + action.iterations)
                elif action.kind is ActionKind.DISABLE_FOR_CONNECTING_ROOT:
                    attractor.excluded_connecting_root = connect_node.root
            elif nearest_node is not None:
                pull = (attractor.position - nearest_node.position).normalize() * attractor.strength
                nearest_node.attract(pull)

            idx += 1

    def _spawn_nodes(self, start: int, end: int):
        for i in range(start, end):
            node = self._nodes[i]
            if node.growth_count == 0:
                continue

            direction = node.growth.normalize()
            # Opposing pulls can cancel out exactly; such a node skips this step
            norm_sq = direction.distance_squared_to(direction.zero())
            if norm_sq > 0 and math.isfinite(norm_sq):
                self._add_leaf_node(node.position + direction * self.move_distance, i)

            node.reset_growth()

    def step(self) -> int:
        """Run one growth iteration and return the number of nodes created."""
        num_nodes = len(self._nodes)
        window = num_nodes if self._active_window is None else min(num_nodes, self._active_window)
        start = num_nodes - window

        self._process_attractors(start)
        self._spawn_nodes(start, num_nodes)

        self._iteration += 1
        return len(self._nodes) - num_nodes

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.step()

    def grow(
        self,
        max_iterations: int,
        callback: Optional[Callable[['SpaceColonization', int], None]] = None,
        log_interval: int = 50,
    ) -> int:
        """
        Step until no node is created or ``max_iterations`` steps have run.
        Optional callback is called after each step with (engine, iteration).
        Returns the number of steps run.
        """
        print(f"Starting growth with {len(self._attractors)} attractors, "
              f"{len(self._nodes)} nodes...")

        steps = 0
        while steps < max_iterations:
            created = self.step()
            steps += 1

            if callback:
                callback(self, self._iteration)

            if log_interval and self._iteration % log_interval == 0:
                print(f"  Iteration {self._iteration}: {len(self._nodes)} nodes, "
                      f"{len(self._attractors)} attractors remaining")

            if created == 0:
                break

        print(f"Growth stopped after {steps} steps (iteration {self._iteration})")
        print(f"  Final nodes: {len(self._nodes)}")
        print(f"  Remaining attractors: {len(self._attractors)}")

        return steps

    # ------------------------------------------------------------------
    # Read-only traversal
    # ------------------------------------------------------------------

    def visit_attractor_points(self, visitor: Callable[[Point], None]):
        for attractor in self._attractors:
            visitor(attractor.position)

    def visit_attractors(self, visitor: Callable[[Attractor], None]):
        for attractor in self._attractors:
            visitor(attractor)

    def visit_node_segments(self, visitor: Callable[[Point, Point], None]):
        """Call ``visitor(child_position, parent_position)`` for every edge."""
        for node in self._nodes:
            if not node.is_root:
                visitor(node.position, self._nodes[node.parent].position)

    def visit_nodes_with_payload_and_root(self, visitor: Callable[[Node, Node], None]):
        """Call ``visitor(node, root_node)`` for every non-root node carrying a payload."""
        for node in self._nodes:
            if node.has_payload and not node.is_root:
                visitor(node, self._nodes[node.root])

    def visit_root_nodes(self, visitor: Callable[[Node], None]):
        for node in self._nodes:
            if node.is_root:
                visitor(node)
