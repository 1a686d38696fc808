"""
Digitized Curves
================
Immutable containers for the tabulated data digitized from the ACI/TMS
216.1M-14 figures.

A :class:`Curve` is a sorted run of ``(x, y)`` knots. A :class:`CurveFamily`
groups curves under discrete keys (aggregate type, stress condition, ...).
Both are built once at load time and are never mutated afterwards, so they
can be shared freely between model objects and threads.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, Optional

import numpy as np
import matplotlib.pyplot as plt

from fireresistance.errors import CurveDataError, UnknownCategoryError

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes


class Curve:
    """
    A named piecewise-linear curve.

    Attributes:
        name: Label used in error messages and plots.
        x: Knot abscissae, strictly increasing (read-only array).
        y: Knot ordinates (read-only array).
        x_label: Axis label for plots.
        y_label: Axis label for plots.
    """
    __slots__ = ("name", "x", "y", "x_label", "y_label")

    def __init__(
        self,
        name: str,
        x: Iterable[float] | npt.NDArray[np.float64],
        y: Iterable[float] | npt.NDArray[np.float64],
        x_label: str = "x",
        y_label: str = "y",
    ):
        x_arr = np.array(x if isinstance(x, np.ndarray) else list(x), dtype=np.float64)
        y_arr = np.array(y if isinstance(y, np.ndarray) else list(y), dtype=np.float64)

        if x_arr.ndim != 1 or y_arr.ndim != 1:
            raise CurveDataError(f"Curve '{name}': knot arrays must be one-dimensional.")

        if len(x_arr) != len(y_arr):
            raise CurveDataError(
                f"Curve '{name}': x and y must have the same length "
                f"({len(x_arr)} != {len(y_arr)})."
            )

        if len(x_arr) < 1:
            raise CurveDataError(f"Curve '{name}': at least one knot is required.")

        if not (np.all(np.isfinite(x_arr)) and np.all(np.isfinite(y_arr))):
            raise CurveDataError(f"Curve '{name}': knots must be finite numbers.")

        if not np.all(np.diff(x_arr) > 0):
            raise CurveDataError(
                f"Curve '{name}': x values must be strictly increasing without duplicates."
            )

        x_arr.setflags(write=False)
        y_arr.setflags(write=False)

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "x", x_arr)
        object.__setattr__(self, "y", y_arr)
        object.__setattr__(self, "x_label", x_label)
        object.__setattr__(self, "y_label", y_label)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable.")

    def __reduce__(self) -> tuple[Any, ...]:
        # rebuilt through __init__, which re-validates and re-locks the arrays
        return type(self), (self.name, self.x, self.y, self.x_label, self.y_label)

    @classmethod
    def from_knots(cls, name: str, knots: Iterable[tuple[float, float]], **kwargs: str) -> Curve:
        """Build a curve from ``(x, y)`` pairs, sorting them by ``x`` first."""
        pairs = sorted(knots, key=lambda k: k[0])
        if not pairs:
            raise CurveDataError(f"Curve '{name}': at least one knot is required.")
        xs, ys = zip(*pairs)
        return cls(name, xs, ys, **kwargs)

    def __len__(self) -> int:
        return len(self.x)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        for xi, yi in zip(self.x, self.y):
            yield float(xi), float(yi)

    def __repr__(self) -> str:
        return (
            f"Curve({self.name!r}, knots={len(self)}, "
            f"x=[{self.x_min:g}, {self.x_max:g}])"
        )

    @property
    def x_min(self) -> float:
        return float(self.x[0])

    @property
    def x_max(self) -> float:
        return float(self.x[-1])

    def plot(self, ax: Optional[Axes] = None, show: bool = False, **kwargs: Any) -> Axes:
        """
        Plot the digitized knots joined by straight segments.

        Args:
            ax: Axes to draw into. A new figure is created when omitted.
            show: Call ``plt.show()`` after drawing.
            **kwargs: Passed through to ``Axes.plot``.

        Returns:
            The Axes that was drawn into.
        """
        if ax is None:
            plt.rcParams["figure.constrained_layout.use"] = True
            _, ax = plt.subplots(figsize=(7, 5))

        kwargs.setdefault("marker", ".")
        kwargs.setdefault("label", self.name)
        ax.plot(self.x, self.y, **kwargs)

        ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        ax.minorticks_on()
        ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        ax.set_xlabel(self.x_label)
        ax.set_ylabel(self.y_label)

        if show:
            plt.show()
        return ax


class CurveFamily(Mapping):
    """
    Read-only mapping of discrete keys to curves.

    Args:
        name: Family label (e.g. ``"carbonate strength"``).
        curves: Mapping of key -> Curve.
        required_keys: Keys that must be present; construction fails otherwise.
    """

    def __init__(
        self,
        name: str,
        curves: Mapping[Hashable, Curve],
        required_keys: Optional[Iterable[Hashable]] = None,
    ):
        if not curves:
            raise CurveDataError(f"Curve family '{name}' is empty.")

        for key, curve in curves.items():
            if not isinstance(curve, Curve):
                raise CurveDataError(
                    f"Curve family '{name}': entry {key!r} is not a Curve."
                )

        if required_keys is not None:
            missing = [k for k in required_keys if k not in curves]
            if missing:
                raise CurveDataError(
                    f"Curve family '{name}' is missing curves for: "
                    + ", ".join(str(k) for k in missing)
                )

        self.name = name
        self._curves = dict(curves)

    def __getitem__(self, key: Hashable) -> Curve:
        return self._curves[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._curves)

    def __len__(self) -> int:
        return len(self._curves)

    def __repr__(self) -> str:
        return f"CurveFamily({self.name!r}, keys={sorted(map(str, self._curves))})"

    def get_curve(self, key: Hashable) -> Curve:
        """Return the curve for ``key`` or raise with the list of valid keys."""
        try:
            return self._curves[key]
        except KeyError:
            valid = ", ".join(sorted(str(k) for k in self._curves))
            raise UnknownCategoryError(
                f"Unknown key {key!r} in {self.name}. Valid options: {valid}"
            ) from None
