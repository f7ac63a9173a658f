"""
Visualization utilities for the space colonization engine.

Everything here reads the engine through its visitors and read-only views;
only the first two coordinates of each position are drawn.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.animation import FuncAnimation
from typing import List, Optional, Tuple
from pathlib import Path

from .engine import SpaceColonization


def collect_segments(engine: SpaceColonization) -> List[List[Tuple[float, float]]]:
    segments = []
    engine.visit_node_segments(
        lambda child, parent: segments.append([(parent[0], parent[1]), (child[0], child[1])])
    )
    return segments


def collect_attractor_points(engine: SpaceColonization) -> np.ndarray:
    points = []
    engine.visit_attractor_points(lambda p: points.append((p[0], p[1])))
    return np.array(points) if points else np.empty((0, 2))


def collect_root_points(engine: SpaceColonization) -> np.ndarray:
    points = []
    engine.visit_root_nodes(lambda n: points.append((n.position[0], n.position[1])))
    return np.array(points) if points else np.empty((0, 2))


def collect_payload_points(engine: SpaceColonization) -> np.ndarray:
    points = []
    engine.visit_nodes_with_payload_and_root(
        lambda node, root: points.append((node.position[0], node.position[1]))
    )
    return np.array(points) if points else np.empty((0, 2))


def _apply_extent(ax, extent: Optional[Tuple[int, int]], mask: Optional[np.ndarray]):
    if mask is not None:
        ax.imshow(mask, cmap='gray', alpha=0.2, origin='upper')
        extent = (mask.shape[1], mask.shape[0])
    if extent is not None:
        width, height = extent
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
    else:
        ax.autoscale()
    ax.set_aspect('equal')
    ax.axis('off')


def visualize_engine(
    engine: SpaceColonization,
    mask: Optional[np.ndarray] = None,
    extent: Optional[Tuple[int, int]] = None,
    show_attractors: bool = False,
    show_roots: bool = True,
    show_payload_nodes: bool = False,
    branch_color: str = 'saddlebrown',
    branch_width: float = 1.0,
    attractor_color: str = 'green',
    attractor_size: float = 1.0,
    figsize: Tuple[int, int] = (16, 16),
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Visualize the current state of the grown structure."""
    fig, ax = plt.subplots(figsize=figsize)

    segments = collect_segments(engine)
    if segments:
        ax.add_collection(LineCollection(segments, colors=branch_color, linewidths=branch_width))

    if show_attractors:
        points = collect_attractor_points(engine)
        if len(points) > 0:
            ax.scatter(points[:, 0], points[:, 1], c=attractor_color, s=attractor_size, alpha=0.5)

    if show_payload_nodes:
        points = collect_payload_points(engine)
        if len(points) > 0:
            ax.scatter(points[:, 0], points[:, 1], c='royalblue', s=4, alpha=0.7)

    if show_roots:
        points = collect_root_points(engine)
        if len(points) > 0:
            ax.scatter(points[:, 0], points[:, 1], c='red', s=20, marker='o')

    _apply_extent(ax, extent, mask)
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor='white', edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def animate_growth(
    engine: SpaceColonization,
    max_iterations: int,
    mask: Optional[np.ndarray] = None,
    extent: Optional[Tuple[int, int]] = None,
    interval: int = 50,
    show_attractors: bool = True,
    branch_color: str = 'saddlebrown',
    branch_width: float = 1.0,
    figsize: Tuple[int, int] = (16, 16),
    save_path: Optional[str] = None,
    frame_skip: int = 1,
    show: bool = True,
) -> FuncAnimation:
    """
    Grow the engine and animate the process.

    frame_skip: Only record every Nth iteration. Higher = faster, fewer frames.
    """
    fig, ax = plt.subplots(figsize=figsize)

    branch_collection = LineCollection([], colors=branch_color, linewidths=branch_width)
    ax.add_collection(branch_collection)
    if show_attractors:
        attractor_scatter = ax.scatter([], [], c='green', s=1, alpha=0.3)
    title = ax.set_title('Iteration: 0')

    frames_data = []

    def collect_frame():
        frames_data.append({
            'segments': collect_segments(engine),
            'attractors': collect_attractor_points(engine),
            'iteration': engine.iteration,
        })

    def on_step(_, iteration):
        if iteration % frame_skip == 0:
            collect_frame()

    collect_frame()
    engine.grow(max_iterations, callback=on_step)
    collect_frame()

    print(f"Collected {len(frames_data)} frames for animation")

    if extent is None and mask is None:
        segments = frames_data[-1]['segments']
        if segments:
            xs = [p[0] for seg in segments for p in seg]
            ys = [p[1] for seg in segments for p in seg]
            ax.set_xlim(min(xs) - 1, max(xs) + 1)
            ax.set_ylim(max(ys) + 1, min(ys) - 1)
        ax.set_aspect('equal')
        ax.axis('off')
    else:
        _apply_extent(ax, extent, mask)

    def init():
        branch_collection.set_segments([])
        if show_attractors:
            attractor_scatter.set_offsets(np.empty((0, 2)))
        return [branch_collection]

    def update(frame_idx):
        data = frames_data[frame_idx]
        branch_collection.set_segments(data['segments'])
        if show_attractors:
            attractor_scatter.set_offsets(data['attractors'])
        title.set_text(f"Iteration: {data['iteration']}")
        return [branch_collection]

    anim = FuncAnimation(
        fig, update,
        frames=len(frames_data),
        init_func=init,
        interval=interval,
        blit=False,
        repeat=True
    )

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        print(f"Saving animation ({len(frames_data)} frames)...")
        anim.save(save_path, writer='pillow', fps=20)
        print(f"Saved animation to {save_path}")

    if show:
        plt.show()
    return anim


def plot_growth_statistics(
    engine: SpaceColonization,
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Plot node depth and branching distributions of the grown structure."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    depths = [node.length for node in engine.nodes]
    max_depth = max(depths) if depths else 0
    depth_counts = np.bincount(depths, minlength=max_depth + 1) if depths else [0]
    axes[0].bar(range(max_depth + 1), depth_counts, color='forestgreen', edgecolor='black')
    axes[0].set_xlabel('Distance From Root (edges)')
    axes[0].set_ylabel('Node Count')
    axes[0].set_title('Nodes per Depth Level')

    branches = [node.branch_count for node in engine.nodes]
    max_branches = max(branches) if branches else 0
    branch_counts = np.bincount(branches, minlength=max_branches + 1) if branches else [0]
    axes[1].bar(range(max_branches + 1), branch_counts, color='saddlebrown', edgecolor='black')
    axes[1].set_xlabel('Children per Node')
    axes[1].set_ylabel('Node Count')
    axes[1].set_title('Branching Distribution')

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
