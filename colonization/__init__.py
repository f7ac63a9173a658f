"""
Space colonization engine for growing tree-like branching structures.

Based on: "Modeling Trees with a Space Colonization Algorithm"
by Runions, Lane, and Prusinkiewicz (2007).
"""

from .vector import Point, Vector
from .attractor import Attractor, ConnectAction, ActionKind, sq_dist
from .node import Node
from .engine import SpaceColonization
from .config import SCAConfig, load_config, save_config
from .scene import Scene, build_engine, build_scene, populate_from_mask
from .export import export_structure, load_structure, structure_to_dict
from .visualization import visualize_engine, animate_growth, plot_growth_statistics

__all__ = [
    'Point',
    'Vector',
    'Attractor',
    'ConnectAction',
    'ActionKind',
    'sq_dist',
    'Node',
    'SpaceColonization',
    'SCAConfig',
    'load_config',
    'save_config',
    'Scene',
    'build_engine',
    'build_scene',
    'populate_from_mask',
    'export_structure',
    'load_structure',
    'structure_to_dict',
    'visualize_engine',
    'animate_growth',
    'plot_growth_statistics',
]
