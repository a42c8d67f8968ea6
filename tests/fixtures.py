"""
Common code for tests.
"""
import os
from pathlib import Path

from bezcurve import make_control_points


def sandbox_fname(base_name, ext):
    work_dir = "sandbox"
    Path(work_dir).mkdir(parents=True, exist_ok=True)
    return os.path.join(work_dir, f"{base_name}.{ext}")


def make_points(coords, radius=None):
    return make_control_points(coords, radius)


quadratic_coords = [(0, 0), (10, 0), (10, 10)]
cubic_coords = [(0, 0), (0, 10), (10, 10), (10, 0)]
quartic_coords = [(0, 0), (0, 10), (5, 15), (10, 10), (10, 0)]
