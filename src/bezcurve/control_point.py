"""
Draggable control point of a curve.
"""
from typing import *

import attrs

from .config import dotdict, default_config
from .render_plan import Circle
from .vector2 import Vector2


def _to_vector(position) -> Vector2:
    if isinstance(position, Vector2):
        return position
    return Vector2.from_array(position)


@attrs.define(eq=False)
class ControlPoint:
    """
    The position is replaced by the interaction code while dragging.
    Curves keep references to the points, so the new position is used
    on the next evaluation.
    Identity semantics (eq=False), two points at the same place are different points.
    """
    radius: float
    position: Vector2 = attrs.field(converter=_to_vector)

    default_color: ClassVar[str] = '#0000ff'

    def draw(self, color: Optional[str] = None) -> Circle:
        if color is None:
            color = self.default_color
        return Circle(center=self.position, radius=self.radius, color=color)

    def contains(self, position) -> bool:
        """
        Hit test, True if `position` lies within the point's disc.
        """
        return Vector2.distance(_to_vector(position), self.position) <= self.radius

    def move_to(self, position):
        self.position = _to_vector(position)


def make_control_points(coords, radius: float = None, config: dotdict = None) -> List[ControlPoint]:
    """
    Control points at given positions.
    :param coords: sequence of Vector2 or (x, y) pairs
    :param radius: radius of all points, `config.control_point_radius` if None
    """
    if radius is None:
        if config is None:
            config = default_config()
        radius = config.control_point_radius
    return [ControlPoint(radius, xy) for xy in coords]
