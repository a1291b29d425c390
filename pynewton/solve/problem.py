from collections.abc import Callable
from dataclasses import dataclass


# Written October 2026.


# ======================================================================

@dataclass(frozen=True)
class Problem:
    # noinspection PyUnresolvedReferences
    """
    A scalar equation :math:`f(x) = 0` paired with its derivative
    :math:`f'(x)`, as required by `NewtonRaphson`.  Both are supplied by
    the user; nothing is inferred.

    Any other object having callable `equation` and `derivative`
    attributes may be used in place of a `Problem`.

    Parameters
    ----------
    equation : Callable[[float], float]
        Function :math:`f(x)` for which a root is sought.
    derivative : Callable[[float], float]
        Derivative :math:`f'(x)` of `equation`.

    Examples
    --------
    >>> p = Problem(lambda x: x ** 3 - 8, lambda x: 3 * x ** 2)
    >>> p(3.0), p.derivative(3.0)
    (19.0, 27.0)
    """
    equation: Callable[[float], float]
    derivative: Callable[[float], float]

    def __post_init__(self):
        if not callable(self.equation) or not callable(self.derivative):
            raise TypeError("Problem requires callable 'equation' and "
                            "'derivative'.")

    def __call__(self, x: float) -> float:
        """Evaluate the equation at `x`."""
        return self.equation(x)


# ----------------------------------------------------------------------

def quadratic_problem(c: float = 4.0) -> Problem:
    r"""
    Returns the `Problem` :math:`f(x) = x^2 - c`, :math:`f'(x) = 2x`,
    having roots at :math:`\pm\sqrt{c}` when ``c > 0`` and no real
    roots when ``c < 0``.
    """
    return Problem(equation=lambda x: x ** 2 - c,
                   derivative=lambda x: 2 * x)
