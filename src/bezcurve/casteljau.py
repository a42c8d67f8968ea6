"""
De Casteljau reduction of a Bezier control polygon.

A single level replaces the points P_0 .. P_k by the k interpolated points
lerp(P_i, P_{i+1}, t), always combining neighbours in index order.
Repeating the level until one point remains evaluates the curve at `t`.
"""
from typing import *

import math
import numpy as np

from .exceptions import InvalidPrecision
from .vector2 import Vector2


def reduce_level(points: Sequence[Vector2], t: float) -> List[Vector2]:
    return [Vector2.lerp(a, b, t) for a, b in zip(points[:-1], points[1:])]


def construction_levels(points: Sequence[Vector2], t: float) -> List[List[Vector2]]:
    """
    All levels of the reduction, starting with the control points themselves:
    [P (n+1 points), level 1 (n points), ..., level n (single point)].
    """
    buffer = list(points)
    levels = [buffer]
    while len(buffer) > 1:
        buffer = reduce_level(buffer, t)
        levels.append(buffer)
    return levels


def eval_point(points: Sequence[Vector2], t: float) -> Vector2:
    """
    Point of the Bezier curve with control polygon `points` at parameter `t`.
    """
    buffer = list(points)
    while len(buffer) > 1:
        buffer = reduce_level(buffer, t)
    return buffer[0]


def eval_array(poles: np.ndarray, t_values) -> np.ndarray:
    """
    Vectorized evaluation.
    :param poles: control points, shape (n+1, 2)
    :param t_values: parameters, shape (N,)
    :return: curve points, shape (N, 2)
    """
    t = np.atleast_1d(np.asarray(t_values, dtype=float))[:, None, None]
    W = np.broadcast_to(np.asarray(poles, dtype=float), (t.shape[0], *np.shape(poles)))
    while W.shape[1] > 1:
        W = (1 - t) * W[:, :-1, :] + t * W[:, 1:, :]
    return W[:, 0, :]


def n_samples(precision: float) -> int:
    """
    Number of parameters t = i * precision with t < 1.
    The quotient is rounded to suppress floating drift, e.g. 1 / 0.1 is taken as exactly 10.
    Precision >= 1 gives a single sample at t = 0.
    """
    if not precision > 0:
        raise InvalidPrecision(f"Precision must be a positive number, got {precision}.")
    if precision >= 1:
        return 1
    return max(1, math.ceil(round(1.0 / precision, 9)))


def sample_parameters(precision: float) -> List[float]:
    """
    Parameters t = i * precision, t < 1. The first one is always exactly 0,
    also for an infinite precision.
    """
    return [0.0] + [i * precision for i in range(1, n_samples(precision))]
