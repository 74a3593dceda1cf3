"""
Main entry point for the Path Repulsion Algorithm (PRA).

Grows non-overlapping walker trails over a square domain and shows a preview,
or an animation of the growth.
"""

from pathlib import Path

from pra import WalkerConfig, spawn_scene, visualize_paths, animate_growth
from pra.visualization import plot_walker_statistics


def main():
    config = WalkerConfig(seed='plotter', size=60, population=1.0, max_turn_deg=180.0)
    animate = False

    output_dir = Path('outputs/pra')
    output_dir.mkdir(parents=True, exist_ok=True)

    if animate:
        animate_growth(
            config,
            interval=50,
            steps_per_frame=20,
            save_path=str(output_dir / "walkers_growth.gif"),
        )
    else:
        scene = spawn_scene(config)
        scene.run()

        visualize_paths(scene, save_path=str(output_dir / "walkers.png"))
        plot_walker_statistics(scene, save_path=str(output_dir / "walkers_stats.png"))


if __name__ == '__main__':
    main()
