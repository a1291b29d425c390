"""
Find a zero of a real scalar function using the Newton-Raphson method,
keeping a record of every iteration so that the path taken to the root
can be inspected or plotted afterwards.

Failures are not left to hang or to propagate NaN values.  Each is
reported as a distinct subclass of `SolverError`:

    - `NonConvergence`: The iteration limit was reached.
    - `SingularDerivative`: The derivative was zero, or too small for
      the Newton step to be represented.
    - `InvalidInput`: A non-finite guess, function value or estimate.
    - `InvalidTolerance`: The tolerance was not a finite positive
      number.
"""

# Written October 2026.

from __future__ import annotations

import operator
import warnings
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pynewton.solve.exception import (InvalidInput, InvalidTolerance,
                                      NonConvergence, SingularDerivative)
from pynewton.solve.problem import Problem


# ======================================================================

@dataclass(frozen=True)
class Iteration:
    # noinspection PyUnresolvedReferences
    """
    Snapshot of a single Newton-Raphson step.  All values are those that
    the step acted upon, i.e. `x` is the estimate *before* the update.

    Parameters
    ----------
    index : int
        Position of this step in the trace, starting from zero.
    x : float
        Estimate at the start of the step.
    y : float
        Equation value :math:`f(x)`.
    slope : float
        Derivative value :math:`f'(x)`.
    delta_x : float
        Newton step :math:`f(x) / f'(x)`.
    """
    index: int
    x: float
    y: float
    slope: float
    delta_x: float

    @property
    def x_next(self) -> float:
        """Return the estimate produced by this step."""
        return self.x - self.delta_x


# ----------------------------------------------------------------------

class NewtonRaphson:
    r"""
    Newton-Raphson root finder for a scalar function.  Starting from an
    initial guess, the estimate is repeatedly updated using:

        :math:`x' = x - f(x) / f'(x)`

    until the size of the step :math:`|f(x) / f'(x)|` is less than the
    tolerance.  At least one step is always taken, even if the initial
    guess is already a root.

    Parameters
    ----------
    problem : Problem
        Supplies ``equation(x)`` and ``derivative(x)``.  Any object with
        these two callable attributes can be used.
    tolerance : float
        Stop when the Newton step satisfies ``abs(delta_x) <
        tolerance``.  Must be finite and greater than zero.
    max_iter : int, default = 100
        Maximum number of steps before `NonConvergence` is raised.
    dtype : data-type, default = np.float64
        NumPy floating type used for all computations and stored
        values, e.g. ``np.float32`` for single precision.
    verbose : bool, default = False
        If True, print progress statements while solving.

    Raises
    ------
    InvalidTolerance
        If `tolerance` is not finite, or is zero or negative once
        converted to `dtype`.
    ValueError
        If `max_iter` < 1.
    TypeError
        If `dtype` is not a floating type or `problem` is incomplete.

    Examples
    --------
    >>> from pynewton.solve.problem import quadratic_problem
    >>> finder = NewtonRaphson(quadratic_problem(), tolerance=0.001)
    >>> round(finder.solve(-4.0), 6)
    -2.0
    >>> len(finder.iterations)
    4
    >>> first = finder.iterations[0]
    >>> float(first.x), float(first.delta_x), float(first.x_next)
    (-4.0, -1.5, -2.5)
    """

    def __init__(self, problem: Problem, tolerance: float, *,
                 max_iter: int = 100, dtype: DTypeLike = np.float64,
                 verbose: bool = False):

        if not (callable(getattr(problem, 'equation', None)) and
                callable(getattr(problem, 'derivative', None))):
            raise TypeError("Problem must provide callable 'equation' "
                            "and 'derivative'.")
        self._problem = problem

        if not np.issubdtype(dtype, np.floating):
            raise TypeError(f"dtype must be a floating type, got {dtype}.")
        self._dtype = np.dtype(dtype).type

        tol = self._as_dtype(tolerance)
        if not (np.isfinite(tol) and tol > 0):
            raise InvalidTolerance(
                f"Tolerance must be finite and positive, got {tolerance}.",
                details=f"Converted to {tol!r}.")
        if tol < np.finfo(self._dtype).eps:
            warnings.warn(f"Tolerance {tolerance} is below machine epsilon "
                          f"for {np.dtype(self._dtype).name} and may be "
                          f"unreachable.", RuntimeWarning)
        self._tolerance = tol

        self._max_iter = operator.index(max_iter)
        if self._max_iter < 1:
            raise ValueError("max_iter must be greater than 0.")

        self.verbose = verbose
        self._iterations: list[Iteration] = []
        self._root = None

    # -- Public Methods ------------------------------------------------

    @property
    def dtype(self) -> type:
        """Return the NumPy floating type used for computations."""
        return self._dtype

    @property
    def iterations(self) -> tuple[Iteration, ...]:
        """
        Return the steps taken by the most recent call to `solve`, in
        order.  If that call failed, only the steps completed before
        the failure are included.
        """
        return tuple(self._iterations)

    def iterations_array(self) -> NDArray:
        """
        Return the steps taken by the most recent call to `solve` as a
        NumPy structured array with fields ``index``, ``x``, ``y``,
        ``slope`` and ``delta_x``.  This is convenient for plotting.
        """
        fields = [('index', np.int64), ('x', self._dtype),
                  ('y', self._dtype), ('slope', self._dtype),
                  ('delta_x', self._dtype)]
        return np.array([(it.index, it.x, it.y, it.slope, it.delta_x)
                         for it in self._iterations], dtype=fields)

    @property
    def max_iter(self) -> int:
        """Return the iteration limit."""
        return self._max_iter

    @property
    def problem(self) -> Problem:
        """Return the problem being solved."""
        return self._problem

    @property
    def root(self) -> float | None:
        """
        Return the root found by the most recent call to `solve`, or
        None if `solve` has not succeeded since it was last called.
        """
        return self._root

    def solve(self, initial_guess: float) -> float:
        """
        Find a root starting from `initial_guess`.  Any steps recorded by
        a previous call are discarded first.

        Parameters
        ----------
        initial_guess : float
            Starting estimate of the root.

        Returns
        -------
        x : float
            Converged estimate, i.e. the result of applying the final
            step where ``abs(delta_x) < tolerance``.

        Raises
        ------
        InvalidInput
            If `initial_guess`, a function value or an updated estimate
            is not finite (or cannot be converted to `dtype`).
        SingularDerivative
            If ``derivative(x) == 0``, or ``equation(x) / derivative(x)``
            is too large to be represented in `dtype`.
        NonConvergence
            If `max_iter` steps are taken without converging.
        """
        self._iterations = []
        self._root = None

        x = self._as_dtype(initial_guess)
        if not np.isfinite(x):
            raise InvalidInput(f"Initial guess must be finite, got "
                               f"{initial_guess}.",
                               details="Non-finite initial guess.")

        if self.verbose:
            print(f"Newton-Raphson Iteration:")

        for i in range(self._max_iter):
            y = self._as_dtype(self._problem.equation(x))
            slope = self._as_dtype(self._problem.derivative(x))

            if not (np.isfinite(y) and np.isfinite(slope)):
                raise InvalidInput(
                    "Newton-Raphson encountered a non-finite function "
                    "value:", details="Non-finite evaluation.",
                    x=x, y=y, slope=slope, its=i)

            # Zero slope, or a step too large to represent.
            with np.errstate(all='ignore'):
                delta_x = y / slope
            if slope == 0 or not np.isfinite(delta_x):
                raise SingularDerivative(
                    "Newton-Raphson failed, derivative was zero:",
                    details="Singular derivative.", x=x, y=y, slope=slope,
                    its=i)

            self._iterations.append(Iteration(i, x, y, slope, delta_x))
            if self.verbose:
                print(f"... Iteration {i}: x = {x: .6f}, y = {y: .6f}, "
                      f"slope = {slope: .6f}, delta_x = {delta_x: .6f}")

            with np.errstate(all='ignore'):
                x = x - delta_x
            if not np.isfinite(x):
                raise InvalidInput(
                    "Newton-Raphson update overflowed:",
                    details="Non-finite estimate.", x=x, its=i + 1)

            if abs(delta_x) < self._tolerance:
                if self.verbose:
                    print(f"... Converged.")
                self._root = float(x)
                return self._root

        raise NonConvergence(
            f"Newton-Raphson failed to converge within {self._max_iter} "
            f"iterations:", details="Reached max_iter.", x=x,
            its=self._max_iter)

    @property
    def tolerance(self) -> float:
        """Return the convergence tolerance (as `dtype`)."""
        return self._tolerance

    # -- Private Methods -----------------------------------------------

    def _as_dtype(self, value) -> np.floating:
        # Values that cannot be converted (e.g. huge ints) become NaN.
        try:
            with np.errstate(all='ignore'):
                return self._dtype(value)
        except (OverflowError, TypeError, ValueError):
            return self._dtype(np.nan)


# ======================================================================

def newton_raphson(equation: Callable[[float], float],
                   derivative: Callable[[float], float], x0: float,
                   tol: float = 1e-6, maxits: int = 100,
                   dtype: DTypeLike = np.float64, full_output: bool = False,
                   verbose: bool = False):
    """
    Approximate solution of :math:`f(x) = 0` by the Newton-Raphson
    method, starting from `x0`.  This is a convenience wrapper around
    `NewtonRaphson`.

    Examples
    --------
    >>> f = lambda x: x ** 2 - x - 1
    >>> df_dx = lambda x: 2 * x - 1
    >>> round(newton_raphson(f, df_dx, 1.0, tol=1e-12), 12)
    1.61803398875

    Parameters
    ----------
    equation : Callable[[float], float]
        Function :math:`f(x)` for which we are searching for a root.
    derivative : Callable[[float], float]
        Derivative :math:`f'(x)`.
    x0 : float
        Initial guess.
    tol : float, default = 1e-6
        Stop when the Newton step is smaller than this in magnitude.
    maxits : int, default = 100
        Maximum number of iterations.
    dtype : data-type, default = np.float64
        NumPy floating type used for computations.
    full_output : bool, default = False
        If True, also return the iterations taken.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    x : float
        Best estimate of root found, when ``full_output == False``.
    x, iterations : float, tuple[Iteration, ...]
        Root and the steps taken, when ``full_output == True``.

    Raises
    ------
    SolverError
        Any of the `SolverError` subclasses raised by
        `NewtonRaphson.solve`.
    """
    finder = NewtonRaphson(Problem(equation, derivative), tol,
                           max_iter=maxits, dtype=dtype, verbose=verbose)
    x = finder.solve(x0)
    if full_output:
        return x, finder.iterations
    return x
