"""
Draw instructions produced by the curve evaluation.

The evaluation never draws anything itself. It returns a RenderPlan, a structured
description of the geometry grouped by category, and a renderer (see `bezcurve.plot`)
turns that into pixels.
"""
from typing import *

import attrs
import numpy as np

from .vector2 import Vector2


@attrs.frozen
class Style:
    color: str
    line_width: float = 1.0


@attrs.frozen
class Circle:
    """
    Filled circle, used for the control points.
    """
    center: Vector2
    radius: float
    color: str


@attrs.frozen
class Polyline:
    """
    Connected sequence of straight segments.
    `name` identifies the group: 'control_polygon', 'scaffold_<level>', 'curve'.
    """
    name: str
    points: Tuple[Vector2, ...] = attrs.field(converter=tuple)
    style: Style

    @property
    def n_segments(self) -> int:
        return max(len(self.points) - 1, 0)

    def segments(self) -> Iterator[Tuple[Vector2, Vector2]]:
        """
        Consecutive point pairs. Zero length segments are kept.
        """
        return zip(self.points[:-1], self.points[1:])

    def to_array(self) -> np.ndarray:
        """
        Points as array of shape (N, 2).
        """
        return np.array([[p.x, p.y] for p in self.points], dtype=float).reshape(-1, 2)

    def length(self) -> float:
        """
        Sum of the segment lengths. For the sampled curve this is only
        an approximation of the arc length.
        """
        return sum(Vector2.distance(a, b) for a, b in self.segments())


@attrs.frozen
class RenderPlan:
    curve: Polyline
    control_polygon: Optional[Polyline] = None
    scaffold: List[Polyline] = attrs.field(factory=list)
    control_points: List[Circle] = attrs.field(factory=list)

    def instructions(self) -> Iterator[Union[Polyline, Circle]]:
        """
        All instructions in the draw order: control polygon, scaffold levels,
        curve, control points on top.
        """
        if self.control_polygon is not None:
            yield self.control_polygon
        yield from self.scaffold
        yield self.curve
        yield from self.control_points
