"""
Walker path renderer using Cairo.

Works on exported path data only (see exporters.py), so renders can be
redone at any paper size without re-running the simulation.
"""

import cairo
import numpy as np
import imageio
import multiprocessing
from tqdm import tqdm
from typing import Any, Dict, List, Optional
from pathlib import Path

from config.render_config import RenderConfig
from .base import Renderer
from .utils import hex_to_rgba, split_strokes


def render_walker_frame_wrapper(args):
    config, data, max_entries = args
    renderer = WalkerRenderer(config)
    return renderer.render_frame(data, max_entries=max_entries)


class WalkerRenderer(Renderer):
    def __init__(self, config: RenderConfig = None):
        super().__init__(config or RenderConfig())

    def _visible_walkers(self, data: Dict[str, Any], color_group: Optional[int] = None) -> List[Dict]:
        walkers = data['walkers']
        if self.config.channel is not None:
            walkers = [w for w in walkers if w['channel'] == self.config.channel]
        if color_group is not None:
            walkers = [w for w in walkers if w['color_group'] == color_group]
        return walkers

    def _draw_paths(self, ctx: cairo.Context, walkers: List[Dict], size: float,
                    scale_x: float, scale_y: float, max_entries: int = None):
        ctx.set_line_width(self.config.line_width)
        ctx.set_line_cap(cairo.LINE_CAP_ROUND)
        ctx.set_line_join(cairo.LINE_JOIN_ROUND)
        ctx.set_dash(self.config.dash_pattern)

        for walker in walkers:
            path = walker['path']
            if max_entries is not None:
                path = path[:max_entries]

            ctx.set_source_rgba(*hex_to_rgba(walker.get('color') or '#000000'))

            for stroke in split_strokes(path):
                if len(stroke) < 2:
                    continue
                x, y = stroke[0]
                ctx.move_to((x + size) * scale_x, (y + size) * scale_y)
                for x, y in stroke[1:]:
                    ctx.line_to((x + size) * scale_x, (y + size) * scale_y)
                ctx.stroke()

    def render_frame(self, data: Dict[str, Any], max_entries: int = None) -> np.ndarray:
        """
        Render the paths to an RGBA array.
        max_entries: only draw the first N path entries of each walker (growth replay).
        """
        surface, ctx = self._create_surface()

        size = data['size']
        scale_x, scale_y = self._compute_scale(size, self.config.output_width, self.config.output_height)
        self._draw_paths(ctx, self._visible_walkers(data), size, scale_x, scale_y, max_entries)

        return self._surface_to_numpy(surface)

    def save_frame(self, data: Dict[str, Any], output_path: str):
        frame = self.render_frame(data)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)

    def save_svg(self, data: Dict[str, Any], output_path: str, color_group: Optional[int] = None) -> int:
        """
        Write the paths as an SVG sized to the paper format.
        With `color_group` only that pen's walkers are written (one file per plotter layer).
        Returns the number of walkers written.
        """
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        width, height = self.config.paper_size_px
        walkers = self._visible_walkers(data, color_group)

        surface = cairo.SVGSurface(output_path, width, height)
        ctx = cairo.Context(surface)
        self._prepare_context(ctx, paint_background=False)

        size = data['size']
        scale_x, scale_y = self._compute_scale(size, width, height)
        self._draw_paths(ctx, walkers, size, scale_x, scale_y)

        surface.finish()
        return len(walkers)

    def save_svg_layers(self, data: Dict[str, Any], path_for_group) -> List[str]:
        """One SVG per color group; `path_for_group(group)` names the file. Empty groups are skipped."""
        written = []
        for group in (1, 2, 3):
            if not self._visible_walkers(data, group):
                continue
            output_path = str(path_for_group(group))
            self.save_svg(data, output_path, color_group=group)
            written.append(output_path)
        return written

    def render_animation(self, data: Dict[str, Any], output_path: str,
                         fps: int = 20, entries_per_frame: int = 10):
        """
        Render growth animation by progressively revealing each walker's path.
        Paths grow one entry per simulation step, so entry count tracks time.
        """
        longest = max((len(w['path']) for w in data['walkers']), default=0)

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        tasks = [
            (self.config, data, n)
            for n in range(entries_per_frame, longest + entries_per_frame, entries_per_frame)
        ]
        tasks.append((self.config, data, None))

        num_cores = max(1, multiprocessing.cpu_count() - 1)
        print(f"Rendering with {num_cores} cores...")

        with multiprocessing.Pool(processes=num_cores) as pool:
            frames = list(tqdm(pool.imap(render_walker_frame_wrapper, tasks), total=len(tasks),
                               desc="Rendering walker frames (Parallel)"))

        imageio.mimsave(output_path, frames, fps=fps)
        print(f"  Saved animation: {output_path}")
