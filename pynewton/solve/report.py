"""
Plain text formatting of Newton-Raphson results for display, e.g.::

    index = 0 x = -4.00 y = 12.00 slope = -8.00 delta_x = -1.50
    index = 1 x = -2.50 y = 2.25 slope = -5.00 delta_x = -0.45
    ...
    Function root is approximately at x = -2.00
"""

from collections.abc import Iterable

from pynewton.solve.newton_raphson import Iteration


# Written October 2026.


# ======================================================================

def format_iteration(it: Iteration, precision: int = 2) -> str:
    """
    Returns a single line describing iteration `it`, with values given
    in fixed point notation to `precision` decimal places.
    """
    p = precision
    return (f"index = {it.index} x = {it.x:.{p}f} y = {it.y:.{p}f} "
            f"slope = {it.slope:.{p}f} delta_x = {it.delta_x:.{p}f}")


def format_iterations(iterations: Iterable[Iteration],
                      precision: int = 2) -> str:
    """
    Returns the lines from `format_iteration` for each of `iterations`
    joined by newlines.  An empty trace gives an empty string.
    """
    return '\n'.join(format_iteration(it, precision) for it in iterations)


def format_root(x: float, precision: int = 2) -> str:
    """Returns a sentence stating the approximate root `x`."""
    return f"Function root is approximately at x = {x:.{precision}f}"
