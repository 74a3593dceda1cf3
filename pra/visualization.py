"""
Visualization utilities for walker paths.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.animation import FuncAnimation
from typing import List, Optional, Tuple
from pathlib import Path

from .config import WalkerConfig
from .scene import WalkerScene
from .spawner import spawn_scene


def _stroke_lines(scene: WalkerScene, channel: Optional[int] = None) -> Tuple[List, List[str]]:
    lines, colors = [], []
    for walker in scene.walkers:
        if channel is not None and walker.channel != channel:
            continue
        for stroke in scene.recorder.segments(walker.index):
            if len(stroke) < 2:
                continue
            lines.append([p.to_tuple() for p in stroke])
            colors.append(walker.color or 'black')
    return lines, colors


def _setup_axes(ax, size: float, background: str):
    ax.set_xlim(-size, size)
    ax.set_ylim(size, -size)
    ax.set_aspect('equal')
    ax.set_facecolor(background)
    ax.axis('off')


def visualize_paths(
    scene: WalkerScene,
    line_width: float = 1.0,
    background: str = 'white',
    figsize: Tuple[int, int] = (12, 12),
    save_path: Optional[str] = None,
    show: bool = True,
):
    """Draw every stroke in its walker's color (only the draw channel in single color mode)."""
    config = scene.config
    channel = config.draw_channel if config.color_mode == 'single' else None

    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(background)

    lines, colors = _stroke_lines(scene, channel)
    if lines:
        ax.add_collection(LineCollection(lines, colors=colors, linewidths=line_width))

    _setup_axes(ax, config.size, background)
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=background, edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def animate_growth(
    config: WalkerConfig,
    interval: int = 50,
    steps_per_frame: int = 10,
    line_width: float = 1.0,
    figsize: Tuple[int, int] = (12, 12),
    save_path: Optional[str] = None,
    max_steps: Optional[int] = None,
    show: bool = True,
) -> FuncAnimation:
    """
    Create an animation of the walkers growing.

    steps_per_frame: simulation steps between recorded frames.
    """
    scene = spawn_scene(config)

    fig, ax = plt.subplots(figsize=figsize)
    _setup_axes(ax, config.size, 'white')

    collection = LineCollection([], linewidths=line_width)
    ax.add_collection(collection)
    title = ax.set_title('Iteration: 0')

    frames_data = []

    def collect_frame():
        lines, colors = _stroke_lines(scene)
        frames_data.append({'lines': lines, 'colors': colors, 'iteration': scene.iteration})

    collect_frame()
    while scene.step_batch(steps_per_frame):
        collect_frame()
        if max_steps is not None and scene.iteration >= max_steps:
            break
    collect_frame()

    print(f"Collected {len(frames_data)} frames for animation")

    def init():
        collection.set_segments([])
        return [collection]

    def update(frame_idx):
        data = frames_data[frame_idx]
        collection.set_segments(data['lines'])
        if data['colors']:
            collection.set_color(data['colors'])
        title.set_text(f"Iteration: {data['iteration']}")
        return [collection]

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


def plot_walker_statistics(scene: WalkerScene, save_path: Optional[str] = None, show: bool = True):
    """Plot stroke length distribution and walkers per color group."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    stroke_lengths = [
        len(stroke)
        for walker in scene.walkers
        for stroke in scene.recorder.segments(walker.index)
    ]
    axes[0].hist(stroke_lengths, bins=30, color='steelblue', edgecolor='black')
    axes[0].set_xlabel('Stroke Length (points)')
    axes[0].set_ylabel('Count')
    axes[0].set_title('Stroke Length Distribution')

    groups = np.array([w.color_group for w in scene.walkers], dtype=int)
    counts = [int(np.sum(groups == g)) for g in (1, 2, 3)]
    axes[1].bar([1, 2, 3], counts, color=list(scene.config.colors), edgecolor='black')
    axes[1].set_xticks([1, 2, 3])
    axes[1].set_xlabel('Color Group')
    axes[1].set_ylabel('Walkers')
    axes[1].set_title('Walkers per Color Group')

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
