"""
Main entry point for the space colonization engine.

Samples attractors inside a mask image, grows a structure from the bottom
centre of the mask and saves a figure, growth statistics and the grown
structure as JSON.

Configuration is loaded from config/sca.json (defaults for missing fields).
"""

import argparse
from pathlib import Path

from colonization import (
    build_scene,
    export_structure,
    load_config,
    visualize_engine,
    animate_growth,
    plot_growth_statistics,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Grow a space colonization structure inside a mask image")
    parser.add_argument('--config', default='config/sca.json', help="Path to config JSON")
    parser.add_argument('--max-iterations', type=int, default=None, help="Override max_iterations")
    parser.add_argument('--animate', action='store_true', help="Save a growth animation instead of a still")
    parser.add_argument('--no-show', action='store_true', help="Do not open matplotlib windows")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = load_config(args.config)
    if args.max_iterations is not None:
        config.max_iterations = args.max_iterations
    if args.animate:
        config.animate = True

    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    image_name = config.image_name
    show = not args.no_show

    print(f"Running space colonization on {config.mask_image_path}")
    print(f"  Attractors: {config.num_attractors}")
    print(f"  Max iterations: {config.max_iterations}")
    print()

    scene = build_scene(config)
    engine = scene.engine

    if config.animate:
        animate_growth(
            engine,
            config.max_iterations,
            mask=scene.mask,
            show_attractors=config.show_attractors,
            save_path=str(output_dir / f"{image_name}_growth.gif"),
            frame_skip=20,  # Only save every 20th frame for speed
            show=show,
        )
    else:
        engine.grow(config.max_iterations, log_interval=config.log_interval)
        visualize_engine(
            engine,
            mask=scene.mask,
            show_attractors=config.show_attractors,
            save_path=str(output_dir / f"{image_name}_tree.png"),
            show=show,
        )

    plot_growth_statistics(engine, save_path=str(output_dir / f"{image_name}_stats.png"), show=show)

    data_path = output_dir / f"{image_name}_structure.json"
    export_structure(engine, str(data_path), width=scene.width, height=scene.height)
    print(f"Exported structure to: {data_path}")

    print("\nSpace colonization complete!")
    print(f"  Nodes: {engine.node_count}")
    print(f"  Iterations: {engine.iteration}")


if __name__ == '__main__':
    main()
