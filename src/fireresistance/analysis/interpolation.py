"""
Piecewise-Linear Interpolation
==============================
Stateless evaluation of a :class:`~fireresistance.model.curves.Curve` and the
inverse used for critical-temperature searches.

Both functions only read the curve; they never extrapolate.
"""
from __future__ import annotations

import math

import numpy as np

from fireresistance.errors import DomainError
from fireresistance.model.curves import Curve


def evaluate(curve: Curve, x: float) -> float:
    """
    Evaluate a curve at ``x``, clamped to the end knots.

    Args:
        curve: Curve with at least one knot.
        x: Query abscissa.

    Returns:
        ``y[0]`` for ``x <= x[0]``, ``y[-1]`` for ``x >= x[-1]``, otherwise the
        linear interpolant between the knots ``x_lo < x <= x_hi``.

    Raises:
        DomainError: If ``x`` is NaN.
    """
    if math.isnan(x):
        raise DomainError(f"Cannot evaluate curve '{curve.name}' at x = {x}.")

    return float(
        np.interp(
            x,
            curve.x,
            curve.y,
            left=curve.y[0],
            right=curve.y[-1],
        )
    )


def inverse_threshold(curve: Curve, threshold: float) -> float:
    """
    Return the ``x`` at which a non-increasing curve first drops to ``threshold``.

    Args:
        curve: Curve whose ``y`` values do not increase with ``x``
            (retained strength vs. temperature).
        threshold: Target ``y`` value in [0, 1].

    Returns:
        ``x[0]`` when the curve already starts at or below the threshold,
        ``math.inf`` when it never reaches it within the digitized range,
        otherwise the linearly interpolated crossing.

    Raises:
        DomainError: If ``threshold`` is outside [0, 1].
    """
    if not 0.0 <= threshold <= 1.0:
        raise DomainError(f"threshold must be in [0, 1]. Got: {threshold}")

    xs, ys = curve.x, curve.y
    if ys[0] <= threshold:
        return float(xs[0])
    if ys[-1] > threshold:
        return math.inf

    i = int(np.argmax(ys <= threshold))
    x_lo, x_hi = xs[i - 1], xs[i]
    y_lo, y_hi = ys[i - 1], ys[i]
    alpha = (threshold - y_lo) / (y_hi - y_lo)
    return float(x_lo + alpha * (x_hi - x_lo))
