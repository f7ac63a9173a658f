"""
Scene setup - builds an engine from a config and populates it from a mask image.
"""

from dataclasses import dataclass

import numpy as np

from .attractor import Attractor
from .config import SCAConfig
from .engine import SpaceColonization
from .mask import load_mask, sample_attractors, find_bottom_center, get_mask_dimensions
from .vector import Vector


@dataclass
class Scene:
    engine: SpaceColonization
    mask: np.ndarray
    width: int
    height: int
    root: int


def build_engine(config: SCAConfig) -> SpaceColonization:
    engine = SpaceColonization(
        config.attract_radius_sq,
        config.connect_radius_sq,
        max_length=config.max_length,
        max_branches=config.max_branches,
        move_distance=config.move_distance,
    )
    engine.active_window = config.active_window
    return engine


def populate_from_mask(engine: SpaceColonization, config: SCAConfig) -> Scene:
    """Sample attractors inside the config's mask image and add one root."""
    mask = load_mask(config.mask_image_path)
    width, height = get_mask_dimensions(mask)

    positions = sample_attractors(
        mask,
        config.num_attractors,
        method=config.attractor_placement,
        image_path=config.mask_image_path,
        edge_threshold=config.edge_threshold,
    )
    action = config.build_connect_action()
    for i, position in enumerate(positions):
        engine.add_attractor(Attractor(
            position,
            attract_radius_sq=config.attract_radius_sq,
            connect_radius_sq=config.connect_radius_sq,
            strength=config.strength,
            payload=i,
            connect_action=action,
        ))

    if config.root_pos is None:
        root_pos = find_bottom_center(mask)
    else:
        root_pos = Vector(*config.root_pos)
    root = engine.add_root_node(root_pos)

    print("Initialized scene:")
    print(f"  Mask size: {width}x{height}")
    print(f"  Attractors: {engine.attractor_count}")
    print(f"  Root position: {root_pos}")

    return Scene(engine=engine, mask=mask, width=width, height=height, root=root)


def build_scene(config: SCAConfig) -> Scene:
    return populate_from_mask(build_engine(config), config)
