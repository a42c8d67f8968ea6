"""
Bezier curves of degree 2 to 4 and their de Casteljau construction.

Usage:
    points = [ControlPoint(8, (0, 0)), ControlPoint(8, (10, 0)), ControlPoint(8, (10, 10))]
    curve = QuadraticCurve(points)
    plan = curve.evaluate(precision=0.01)
    Plotting().draw(plan)

The curve keeps references to the control points. Moving a point changes
the result of the next evaluation, nothing is cached.
"""
from typing import *

import enum
import logging
import numpy as np

from . import casteljau
from .config import dotdict, default_config, style
from .control_point import ControlPoint
from .exceptions import InvalidControlPointCount
from .render_plan import Circle, Polyline, RenderPlan
from .report import report
from .vector2 import Vector2


class CurveKind(enum.IntEnum):
    """
    Curve variants, the value is the degree.
    """
    quadratic = 2
    cubic = 3
    quartic = 4

    @property
    def min_points(self) -> int:
        return min_control_points[self]


min_control_points = {
    CurveKind.quadratic: 3,
    CurveKind.cubic: 4,
    CurveKind.quartic: 5,
}
# Floor for any curve of the family.
family_min_points = 3


class Curve:
    """
    Bezier curve given by an ordered list of control points.
    Common part of all variants, the degree is fixed by `kind`.
    """
    kind: CurveKind = CurveKind.quadratic

    def __init__(self, control_points: Sequence[ControlPoint], config: dotdict = None):
        """
        :param control_points: Ordered control points, at least `kind.min_points` of them.
            Stored as given, the order defines the curve parametrization.
        :param config: Rendering configuration, see `bezcurve.config`. Defaults are used if None.
        """
        control_points = list(control_points)
        required = max(family_min_points, self.kind.min_points)
        if len(control_points) < required:
            raise InvalidControlPointCount(self.kind.name, required, len(control_points))
        self.control_points: List[ControlPoint] = control_points

        if config is None:
            config = default_config()
        self.config = config
        self.render_control: bool = bool(config.render_control)
        # Draw the control polygon.
        self.render_tangent: bool = bool(config.render_tangent)
        # Draw the interpolation scaffold at t = scaffold_t.
        logging.debug(f"Created {self.kind.name} curve with {len(control_points)} control points.")

    @property
    def degree(self) -> int:
        return int(self.kind)

    @property
    def positions(self) -> List[Vector2]:
        """
        Current positions of the control points.
        """
        return [p.position for p in self.control_points]

    @property
    def poles(self) -> List[Vector2]:
        """
        Positions of the control points entering the reduction (degree + 1 of them).
        """
        return self.positions[:self.degree + 1]

    def draw_control_points(self) -> List[Circle]:
        color = self.config.styles.control_point.color
        return [p.draw(color) for p in self.control_points]

    def control_polygon(self) -> Polyline:
        return Polyline('control_polygon', self.positions, style(self.config, 'control_polygon'))

    def scaffold(self, t: float = None) -> List[Polyline]:
        """
        Interpolated edges of the de Casteljau construction at parameter `t`.
        One polyline per level 1 .. degree-1, level k has (degree + 1 - k) points.
        The single point of the last level is not included.
        """
        if t is None:
            t = self.config.scaffold_t
        scaffold_style = style(self.config, 'scaffold')
        levels = casteljau.construction_levels(self.poles, t)
        return [Polyline(f'scaffold_{i_level}', level, scaffold_style)
                for i_level, level in enumerate(levels[1:-1], start=1)]

    def point_at(self, t: float) -> Vector2:
        return casteljau.eval_point(self.poles, t)

    def eval_array(self, t_values) -> np.ndarray:
        """
        Vectorized evaluation for an array of parameters.
        :return: array of points, shape (N, 2)
        """
        poles = np.array([[p.x, p.y] for p in self.poles])
        return casteljau.eval_array(poles, t_values)

    def sample(self, precision: float = None) -> List[Vector2]:
        """
        Curve points at t = i * precision, for all such t < 1.
        """
        if precision is None:
            precision = self.config.precision
        poles = self.poles
        return [casteljau.eval_point(poles, t) for t in casteljau.sample_parameters(precision)]

    @report
    def evaluate(self, precision: float = None) -> RenderPlan:
        """
        Compute everything needed to draw the curve for the current control point positions.
        :param precision: Parameter step of the curve polyline, 0 < precision < 1.
            A precision >= 1 gives a single curve point and no segment.
        :return: RenderPlan with the control polygon (if render_control), the scaffold
            at t=0.5 (if render_tangent), the curve polyline and the control points.
        """
        if precision is None:
            precision = self.config.precision
        points = self.sample(precision)
        logging.debug(f"Evaluated {self.kind.name} curve: {len(points)} samples, precision {precision}.")
        return RenderPlan(
            curve=Polyline('curve', points, style(self.config, 'curve')),
            control_polygon=self.control_polygon() if self.render_control else None,
            scaffold=self.scaffold() if self.render_tangent else [],
            control_points=self.draw_control_points(),
        )

    def find_control_point(self, position) -> Optional[ControlPoint]:
        """
        Control point under `position`. Points are drawn in order, so the last hit
        is the one on top.
        """
        for point in reversed(self.control_points):
            if point.contains(position):
                return point
        return None


class QuadraticCurve(Curve):
    kind = CurveKind.quadratic


class CubicCurve(Curve):
    kind = CurveKind.cubic


class QuarticCurve(Curve):
    kind = CurveKind.quartic


curve_classes = {
    CurveKind.quadratic: QuadraticCurve,
    CurveKind.cubic: CubicCurve,
    CurveKind.quartic: QuarticCurve,
}


def make_curve(kind: Union[CurveKind, int, str], control_points: Sequence[ControlPoint],
               config: dotdict = None) -> Curve:
    """
    Create curve of given kind, accepts the enum, the degree or the variant name.
    """
    if isinstance(kind, str):
        kind = CurveKind[kind]
    return curve_classes[CurveKind(kind)](control_points, config)
