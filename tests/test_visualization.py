"""
Smoke tests for the matplotlib visualization helpers (Agg backend).
"""

import numpy as np

from colonization import animate_growth, plot_growth_statistics, visualize_engine
from colonization.visualization import collect_attractor_points, collect_segments


class TestCollectors:

    def test_collect_segments_parent_first(self, chain_engine):
        chain_engine.step()
        assert collect_segments(chain_engine) == [[(0.0, 0.0), (1.0, 0.0)]]

    def test_collect_attractor_points(self, chain_engine):
        points = collect_attractor_points(chain_engine)
        np.testing.assert_allclose(points, [[10.0, 0.0]])


class TestPlots:

    def test_visualize_engine_saves(self, chain_engine, tmp_path):
        chain_engine.grow(max_iterations=20)
        path = tmp_path / 'tree.png'
        fig, ax = visualize_engine(chain_engine, extent=(20, 5), show_attractors=True,
                                   show_payload_nodes=True, save_path=str(path), show=False)
        assert path.exists()
        assert len(ax.collections) >= 1

    def test_plot_statistics(self, chain_engine):
        chain_engine.grow(max_iterations=20)
        fig, axes = plot_growth_statistics(chain_engine, show=False)
        assert len(axes) == 2

    def test_animate_growth_collects_frames(self, chain_engine):
        anim = animate_growth(chain_engine, max_iterations=20, frame_skip=2, show=False)
        assert anim is not None
        assert chain_engine.attractor_count == 0
