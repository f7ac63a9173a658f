"""
Exporters that turn a grown structure into renderer-friendly JSON.

Only the engine's visitors and read-only views are used, so the engine itself
stays free of any file format.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .engine import SpaceColonization


def structure_to_dict(
    engine: SpaceColonization,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Format:
    {
        "source_width": int | null,
        "source_height": int | null,
        "iteration": int,
        "segments": [{"start": [...], "end": [...], "depth": int}],
        "roots": [{"position": [...], "payload": any}],
        "connected": [{"position": [...], "root": [...], "payload": any}],
        "attractors": [[...], ...]
    }

    ``start`` is the parent position, ``end`` the child position and
    ``depth`` the child's distance in edges from its root.
    """
    # visit_node_segments walks the non-root nodes in arena order
    depths = iter([node.length for node in engine.nodes if not node.is_root])
    segments = []
    engine.visit_node_segments(lambda child, parent: segments.append({
        "start": list(parent),
        "end": list(child),
        "depth": next(depths),
    }))

    roots = []
    engine.visit_root_nodes(lambda n: roots.append({
        "position": list(n.position),
        "payload": n.assigned_payload,
    }))

    connected = []
    engine.visit_nodes_with_payload_and_root(lambda n, root: connected.append({
        "position": list(n.position),
        "root": list(root.position),
        "payload": n.assigned_payload,
    }))

    attractors = []
    engine.visit_attractor_points(lambda p: attractors.append(list(p)))

    return {
        "source_width": width,
        "source_height": height,
        "iteration": engine.iteration,
        "segments": segments,
        "roots": roots,
        "connected": connected,
        "attractors": attractors,
    }


def export_structure(
    engine: SpaceColonization,
    output_path: str,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> Dict[str, Any]:
    data = structure_to_dict(engine, width, height)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    return data


def load_structure(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)
