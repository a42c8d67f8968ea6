"""
Errors raised by the bezcurve package.
"""


class CurveError(Exception):
    pass


class InvalidControlPointCount(CurveError, ValueError):
    """
    Too few control points for the requested curve kind.
    Raised only by the curve constructor.
    """
    def __init__(self, kind, required, given):
        self.kind = kind
        self.required = required
        self.given = given
        super().__init__(
            f"A {kind} Bezier curve requires at least {required} control points, got {given}.")


class InvalidPrecision(CurveError, ValueError):
    pass


class ConfigError(CurveError, KeyError):
    pass
