"""
Walker Path Script

Runs the Path Repulsion Algorithm and writes every artifact for a plot.

Configuration is loaded from config/pipeline.json.
All output paths are derived from the run name.

Outputs:
- Path data (.json) for rendering and plotting
- Raster render (.png) and one SVG per color group for the plotter
- Preview and statistics plots (.png)
- Run metadata (.json), including the resolved seed
"""

import json

from config import load_config, WalkerConfig, RenderConfig
from pra import spawn_scene, visualize_paths, plot_walker_statistics
from pra.profiling import enable_profiling
from rendering.exporters import export_walker_data
from rendering.walker_renderer import WalkerRenderer


def main():
    pipeline = load_config()
    pipeline.create_output_dirs()
    enable_profiling(pipeline.profile)

    walker_config = WalkerConfig.from_pipeline(pipeline)

    print(f"Running walkers for {pipeline.run_name}")
    print(f"  Candidates: {walker_config.total_candidates}")
    print(f"  Max steps: {pipeline.max_steps}")
    print()

    scene = spawn_scene(walker_config)
    scene.run(max_steps=pipeline.max_steps)

    data = export_walker_data(scene, str(pipeline.path_data_path))
    print(f"Exported path data to: {pipeline.path_data_path}")

    visualize_paths(scene, save_path=str(pipeline.preview_path), show=False)
    plot_walker_statistics(scene, save_path=str(pipeline.stats_path), show=False)

    renderer = WalkerRenderer(RenderConfig.from_pipeline(pipeline))
    renderer.save_frame(data, str(pipeline.render_path))
    print(f"Saved render to {pipeline.render_path}")

    svg_paths = renderer.save_svg_layers(data, pipeline.svg_path)
    for svg_path in svg_paths:
        print(f"Saved plotter layer to {svg_path}")

    if pipeline.render_animation:
        renderer.render_animation(data, str(pipeline.animation_path),
                                  fps=pipeline.render_fps,
                                  entries_per_frame=pipeline.steps_per_frame)

    metadata = {
        'run_name': pipeline.run_name,
        'seed': scene.config.seed,
        'size': walker_config.size,
        'population': walker_config.population,
        'repulsion': walker_config.repulsion,
        'max_turn_deg': walker_config.max_turn_deg,
        'dropoff_rate': walker_config.dropoff_rate,
        'dropoff_direction': walker_config.dropoff_direction,
        'color_mode': walker_config.color_mode,
        'num_walkers': len(scene.walkers),
        'num_points': scene.registry.point_count,
        'iterations': scene.iteration,
        'finished': not scene.has_active(),
        'path_data_path': str(pipeline.path_data_path),
        'svg_paths': svg_paths,
    }
    with open(pipeline.metadata_path, 'w') as f:
        json.dump(metadata, f, indent=2)
    print(f"Saved metadata to {pipeline.metadata_path}")

    print("\nWalkers complete!")
    print(f"  Seed: {scene.config.seed!r} (reuse it to reproduce this plot)")
    print(f"  Paths: {pipeline.path_data_path}")
    print(f"  Render: {pipeline.render_path}")


if __name__ == '__main__':
    main()
