"""
Configuration for the space colonization engine and its scene setup.
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Literal, Optional, Tuple
import json

import numpy as np

from .attractor import ConnectAction, sq_dist

AttractorPlacement = Literal['random', 'edge']
ConnectActionName = Literal['kill', 'disable_for', 'disable_for_connecting_root']


@dataclass
class SCAConfig:
    mask_image_path: str = 'images/leaf.png'

    num_attractors: int = 2000
    attractor_placement: AttractorPlacement = 'random'
    edge_threshold: float = 0.1

    # Plain distances; the engine works with their squares
    attract_distance: float = 20.0
    connect_distance: float = 2.0
    move_distance: float = 1.0
    strength: float = 1.0

    connect_action: ConnectActionName = 'kill'
    disable_iterations: int = 0

    max_length: int = 10000
    max_branches: int = 5
    active_window: Optional[int] = None  # None = scan every node

    root_pos: Optional[Tuple[float, float]] = None
    max_iterations: int = 500
    log_interval: int = 50

    animate: bool = False
    show_attractors: bool = True

    output_dir: str = 'outputs/sca'
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.root_pos is not None:
            self.root_pos = tuple(self.root_pos)
        if self.random_seed is not None:
            np.random.seed(self.random_seed)

    @property
    def attract_radius_sq(self) -> float:
        return sq_dist(self.attract_distance)

    @property
    def connect_radius_sq(self) -> float:
        return sq_dist(self.connect_distance)

    @property
    def image_name(self) -> str:
        return Path(self.mask_image_path).stem

    def build_connect_action(self) -> ConnectAction:
        return ConnectAction.from_name(self.connect_action, self.disable_iterations)


def load_config(path: str = 'config/sca.json') -> SCAConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return SCAConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    known = {f.name for f in fields(SCAConfig)}
    unknown = set(data) - known
    if unknown:
        print(f"Warning: ignoring unknown config keys: {sorted(unknown)}")

    return SCAConfig(**{k: v for k, v in data.items() if k in known})


def save_config(config: SCAConfig, path: str = 'config/sca.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = asdict(config)
    if data['root_pos'] is not None:
        data['root_pos'] = list(data['root_pos'])

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
