"""Plot functions of one variable in 2D, and parametric curves in 3D."""

import math
import os
from typing import Callable, Optional, Sequence, Tuple

import numpy as np
from matplotlib.figure import Figure
from matplotlib.ticker import FormatStrFormatter, MaxNLocator

_DPI = 100

Range = Tuple[float, float]


def _figure(width: int, height: int) -> Figure:
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    return Figure(figsize=(width / _DPI, height / _DPI), dpi=_DPI)


def _save(fig: Figure, filename) -> None:
    path = os.fspath(filename)
    fig.savefig(path, dpi=_DPI, facecolor="white")
    print(f"Result has been saved to {path}")


def graph_2d_fun(
    filename,
    width: int,
    height: int,
    x_range: Range,
    y_range: Range,
    fun: Callable[[float], float],
) -> None:
    """Plot ``fun`` over ``x_range`` with one point per pixel column."""
    fig = _figure(width, height)
    x0, x1 = x_range
    y0, y1 = y_range
    step = (x1 - x0) / width
    xs = x0 + step * np.arange(width)
    ys = [fun(float(x)) for x in xs]

    ax = fig.add_subplot()
    ax.set_title("Sine and Cosine", fontsize=20)
    ax.set_xlim(x0, x1)
    ax.set_ylim(y0, y1)
    ax.grid(True)
    ax.xaxis.set_major_locator(MaxNLocator(10))
    ax.yaxis.set_major_locator(MaxNLocator(10))
    ax.xaxis.set_major_formatter(FormatStrFormatter("%.1f"))
    ax.yaxis.set_major_formatter(FormatStrFormatter("%.1f"))
    ax.plot(xs, ys, color="red", label="Sine")
    ax.legend(edgecolor="black")
    _save(fig, filename)


def graph_3d_line_fun(
    filename,
    width: int,
    height: int,
    x_range: Range,
    y_range: Range,
    z_range: Range,
    fun: Callable[[float], Tuple[float, float, float]],
    num_points: int,
) -> None:
    """Plot the curve ``fun(t)`` for t in [0, 1), with its shadows on three walls."""
    if num_points < 1:
        raise ValueError("num_points must be at least 1")
    fig = _figure(width, height)
    ax = fig.add_subplot(projection="3d")
    ax.set_title("3D Plot Test", fontsize=10)
    ax.set_xlim(*x_range)
    ax.set_ylim(*y_range)
    ax.set_zlim(*z_range)
    ax.view_init(azim=math.degrees(0.5))

    points = np.array([fun(float(t)) for t in np.arange(num_points) / num_points])
    xs, ys, zs = points[:, 0], points[:, 1], points[:, 2]
    ax.plot(xs, ys, zs, color="black", label="Line")

    x_wall, y_wall, z_wall = x_range[0], y_range[0], z_range[0]
    grey = "#9e9e9e"
    ax.plot(xs, ys, np.full_like(zs, z_wall), color=grey)
    ax.plot(xs, np.full_like(ys, y_wall), zs, color=grey)
    ax.plot(np.full_like(xs, x_wall), ys, zs, color=grey)
    ax.legend(edgecolor="black")
    _save(fig, filename)


def waveshaper_curve(s: float) -> float:
    """A cubic waveshaping curve, with ``s`` mapped onto its interesting stretch."""
    lo = -3.825
    hi = 1.85
    x = (s * (hi - lo)) + lo
    return ((x * x * x + 3.0 * x * x - 3.0 * x + 1.0) / 6.0) - 1.0


def _complex_sinusoid(t: float) -> Tuple[float, float, float]:
    tt = t * 2.0 * math.pi
    return math.cos(tt), math.sin(tt), tt


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Draw the sample graphs into the current directory."""
    del argv
    graph_2d_fun("out2d.png", 1024, 768, (-3.4, 3.4), (-1.2, 1.2), lambda x: math.sin(x * 10.0))
    graph_3d_line_fun(
        "out3d.svg",
        1024,
        768,
        (-7.0, 7.0),
        (-7.0, 7.0),
        (-7.0, 7.0),
        _complex_sinusoid,
        500,
    )
    graph_2d_fun("waveshaper.png", 1024, 768, (-1.0, 2.0), (-1.0, 3.0), waveshaper_curve)
    return 0