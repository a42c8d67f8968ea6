from .exceptions import CurveError, InvalidControlPointCount, InvalidPrecision, ConfigError
from .vector2 import Vector2
from .control_point import ControlPoint, make_control_points
from .render_plan import Style, Circle, Polyline, RenderPlan
from .config import dotdict, default_config, load_config, dump_config
from .curve import Curve, CurveKind, QuadraticCurve, CubicCurve, QuarticCurve, make_curve
