"""
Demo script for rendering pre-exported walker path data.

This script only loads and renders - no simulation code.
First run run_pra.py to generate the path data.

Run from project root:
    python -m rendering.demo_walkers
"""

from pathlib import Path

from config import load_config, RenderConfig
from rendering.exporters import load_walker_data
from rendering.walker_renderer import WalkerRenderer


def main():
    print("=== Walker Rendering Demo ===\n")

    pipeline = load_config()
    data_path = pipeline.path_data_path

    if not Path(data_path).exists():
        print(f"Error: Data file not found: {data_path}")
        print("Run run_pra.py first to generate path data.")
        return

    print(f"Loading data from: {data_path}")
    data = load_walker_data(str(data_path))
    print(f"  Domain: [-{data['size']}, {data['size']}]")
    print(f"  Walkers: {len(data['walkers'])}")

    longest = max((len(w['path']) for w in data['walkers']), default=0)
    print(f"  Longest path: {longest} entries")

    output_dir = Path("outputs/rendering")
    output_dir.mkdir(parents=True, exist_ok=True)

    for style in ('solid', 'dashed', 'dotted'):
        config = RenderConfig(paper_format=pipeline.paper_format, line_style=style)
        renderer = WalkerRenderer(config)
        frame_path = output_dir / f"walkers_{style}.png"
        renderer.save_frame(data, str(frame_path))
        print(f"  Saved {style} frame: {frame_path}")

    renderer = WalkerRenderer(RenderConfig(paper_format=pipeline.paper_format))

    print("\nRendering growth animation...")
    animation_path = output_dir / "walkers_growth.gif"
    renderer.render_animation(data, str(animation_path), fps=pipeline.render_fps,
                              entries_per_frame=pipeline.steps_per_frame)

    print("\n=== Done ===")


if __name__ == "__main__":
    main()
