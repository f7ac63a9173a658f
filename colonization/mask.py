"""
Mask loading and sampling utilities for attractor placement.

Provides two placement methods:
- random: Uniform random sampling within the mask
- edge: Edge detection-based sampling using Sobel operator on color gradients
"""

import numpy as np
from PIL import Image
from typing import List, Optional, Tuple
from scipy import ndimage

from .config import AttractorPlacement
from .vector import Vector


def load_mask(image_path: str) -> np.ndarray:
    """Load an image as a binary mask. Returns True where foreground exists."""
    img = Image.open(image_path).convert('RGBA')
    arr = np.array(img)

    alpha = arr[:, :, 3]
    return alpha > 0


def load_image_grayscale(image_path: str) -> np.ndarray:
    """Load an image as grayscale for edge detection."""
    img = Image.open(image_path).convert('L')
    return np.array(img, dtype=np.float32) / 255.0


def get_valid_positions(mask: np.ndarray) -> List[Tuple[float, float]]:
    """Get all (x, y) coordinates where the mask is True."""
    ys, xs = np.where(mask)
    return list(zip(xs.astype(float), ys.astype(float)))


def detect_edges_from_image(image_path: str, threshold: float = 0.1) -> Tuple[np.ndarray, np.ndarray]:
    """
    Detect edges based on color gradients in the image using Sobel operator.

    Args:
        image_path: Path to the image
        threshold: Minimum gradient magnitude to consider as edge (0-1 scale)

    Returns:
        (edges, edge_magnitude) where edges is a boolean mask
    """
    gray = load_image_grayscale(image_path)

    sobel_x = ndimage.sobel(gray, axis=1)
    sobel_y = ndimage.sobel(gray, axis=0)

    edge_magnitude = np.hypot(sobel_x, sobel_y)
    peak = edge_magnitude.max()
    if peak > 0:
        edge_magnitude = edge_magnitude / peak

    return edge_magnitude > threshold, edge_magnitude


def _choose(positions: List[Tuple[float, float]], count: int) -> List[Vector]:
    if len(positions) < count:
        print(f"Warning: Only {len(positions)} positions available, wanted {count}")
        count = len(positions)

    indices = np.random.choice(len(positions), size=count, replace=False)
    return [Vector(*positions[i]) for i in indices]


def sample_attractors_random(mask: np.ndarray, num_attractors: int) -> List[Vector]:
    """Sample random positions uniformly from within the mask."""
    return _choose(get_valid_positions(mask), num_attractors)


def sample_attractors_edge(
    image_path: str,
    mask: np.ndarray,
    num_attractors: int,
    threshold: float = 0.1
) -> List[Vector]:
    """Sample positions from color gradient edges using Sobel edge detection."""
    edges, _ = detect_edges_from_image(image_path, threshold)
    edge_positions = get_valid_positions(edges & mask)

    if not edge_positions:
        print("Warning: No edges detected, falling back to random sampling")
        return sample_attractors_random(mask, num_attractors)

    return _choose(edge_positions, num_attractors)


def sample_attractors(
    mask: np.ndarray,
    num_attractors: int,
    method: AttractorPlacement = 'random',
    image_path: Optional[str] = None,
    edge_threshold: float = 0.1
) -> List[Vector]:
    """
    Sample attractor positions from the mask.

    Args:
        mask: Binary mask where True indicates valid positions
        num_attractors: Number of attractors to sample
        method: Placement method - 'random' for uniform sampling, 'edge' for edge-based
        image_path: Path to image (required for edge method)
        edge_threshold: Minimum gradient magnitude for edge detection (0-1)
    """
    if method == 'edge':
        if image_path is None:
            raise ValueError("image_path is required for edge placement method")
        return sample_attractors_edge(image_path, mask, num_attractors, edge_threshold)
    if method != 'random':
        raise ValueError(f"Unknown placement method: {method!r}")
    return sample_attractors_random(mask, num_attractors)


def find_bottom_center(mask: np.ndarray) -> Vector:
    """Find the bottom-center point of the mask for root placement."""
    ys, xs = np.where(mask)
    if len(ys) == 0:
        raise ValueError("Mask is empty")

    max_y = np.max(ys)
    center_x = np.mean(xs[ys == max_y])

    return Vector(center_x, max_y)


def get_mask_dimensions(mask: np.ndarray) -> Tuple[int, int]:
    """Return (width, height) of the mask."""
    return mask.shape[1], mask.shape[0]
