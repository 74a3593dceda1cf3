"""
Data exporters to convert simulation data into renderer-friendly format.
Keeps rendering module decoupled from simulation code.
"""

import json
from pathlib import Path
from typing import Any, Dict


def scene_to_data(scene) -> Dict[str, Any]:
    """
    Path data for every walker in simulation coordinates.

    Format:
    {
        "size": float,        # domain half size
        "seed": str,
        "repulsion": float,
        "colors": [str, str, str],
        "walkers": [
            {
                "index": int,
                "channel": int,
                "color_group": int,
                "color": str,
                "path": [[x, y], ..., null, ...]   # null marks a stroke break
            }
        ]
    }
    """
    config = scene.config
    walkers_data = []
    for walker in scene.walkers:
        walkers_data.append({
            "index": walker.index,
            "channel": walker.channel,
            "color_group": walker.color_group,
            "color": walker.color,
            "path": scene.recorder.to_data(walker.index),
        })

    return {
        "size": config.size,
        "seed": config.seed,
        "repulsion": config.repulsion,
        "colors": list(config.colors),
        "walkers": walkers_data,
    }


def export_walker_data(scene, output_path: str) -> Dict[str, Any]:
    """Export walker paths to JSON for rendering."""
    data = scene_to_data(scene)

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f)

    return data


def load_walker_data(path: str) -> Dict[str, Any]:
    with open(path, 'r') as f:
        return json.load(f)
