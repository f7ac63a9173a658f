"""
Tests for mask sampling and scene construction.
"""

import numpy as np
import pytest
from PIL import Image

from colonization import SCAConfig, Vector, build_engine, build_scene
from colonization.mask import (
    find_bottom_center,
    get_mask_dimensions,
    load_mask,
    sample_attractors,
    sample_attractors_random,
)


@pytest.fixture
def square_mask_path(tmp_path):
    """40x30 RGBA image, opaque square at columns 10..29 and rows 5..24."""
    arr = np.zeros((30, 40, 4), dtype=np.uint8)
    arr[5:25, 10:30] = (200, 40, 40, 255)
    path = tmp_path / 'square.png'
    Image.fromarray(arr).save(path)
    return str(path)


class TestMask:

    def test_load_mask_uses_alpha(self, square_mask_path):
        mask = load_mask(square_mask_path)
        assert mask.dtype == bool
        assert mask.sum() == 20 * 20
        assert get_mask_dimensions(mask) == (40, 30)

    def test_find_bottom_center(self, square_mask_path):
        root = find_bottom_center(load_mask(square_mask_path))
        assert root == Vector(19.5, 24.0)

    def test_random_samples_lie_inside_mask(self, square_mask_path):
        np.random.seed(0)
        mask = load_mask(square_mask_path)
        points = sample_attractors_random(mask, 50)
        assert len(points) == 50
        for p in points:
            assert mask[int(p.y), int(p.x)]

    def test_sampling_more_than_available(self, capsys):
        mask = np.zeros((4, 4), dtype=bool)
        mask[1, 1] = mask[2, 2] = True
        points = sample_attractors_random(mask, 10)
        assert len(points) == 2
        assert 'Warning' in capsys.readouterr().out

    def test_edge_sampling_requires_image(self, square_mask_path):
        mask = load_mask(square_mask_path)
        with pytest.raises(ValueError):
            sample_attractors(mask, 10, method='edge')

    def test_edge_samples_lie_on_border(self, tmp_path):
        arr = np.zeros((30, 30, 4), dtype=np.uint8)
        arr[:, :, 3] = 255
        arr[10:20, 10:20, :3] = 255
        path = tmp_path / 'edges.png'
        Image.fromarray(arr).save(path)

        np.random.seed(1)
        mask = load_mask(str(path))
        points = sample_attractors(mask, 20, method='edge', image_path=str(path))
        assert 0 < len(points) <= 20
        for p in points:
            # Sobel response is confined to a band around the square's outline
            assert 8 <= p.x <= 21 and 8 <= p.y <= 21
            assert not (12 <= p.x <= 17 and 12 <= p.y <= 17)

    def test_unknown_method(self, square_mask_path):
        with pytest.raises(ValueError):
            sample_attractors(load_mask(square_mask_path), 5, method='grid')


class TestScene:

    def test_build_engine_uses_squared_radii(self):
        config = SCAConfig(attract_distance=10.0, connect_distance=2.0, active_window=50)
        engine = build_engine(config)
        assert engine.default_attract_radius_sq == 100.0
        assert engine.default_connect_radius_sq == 4.0
        assert engine.active_window == 50

    def test_build_scene_populates_engine(self, square_mask_path):
        config = SCAConfig(mask_image_path=square_mask_path, num_attractors=60,
                           attract_distance=8.0, connect_distance=1.5, random_seed=3,
                           connect_action='disable_for', disable_iterations=2)
        scene = build_scene(config)

        assert (scene.width, scene.height) == (40, 30)
        assert scene.engine.attractor_count == 60
        assert scene.engine.node_count == 1
        assert scene.engine.node(scene.root).position == Vector(19.5, 24.0)
        payloads = sorted(a.payload for a in scene.engine.attractors)
        assert payloads == list(range(60))
        assert all(a.connect_radius_sq == pytest.approx(2.25) for a in scene.engine.attractors)

    def test_configured_root_position(self, square_mask_path):
        config = SCAConfig(mask_image_path=square_mask_path, num_attractors=5,
                           root_pos=(12.0, 6.0), random_seed=0)
        scene = build_scene(config)
        assert scene.engine.node(scene.root).position == Vector(12.0, 6.0)

    def test_scene_grows(self, square_mask_path):
        config = SCAConfig(mask_image_path=square_mask_path, num_attractors=100,
                           attract_distance=15.0, connect_distance=1.5, random_seed=5)
        scene = build_scene(config)
        scene.engine.grow(max_iterations=60)
        assert scene.engine.node_count > 1
        assert scene.engine.attractor_count < 100
