"""
===============================
Solvers (:mod:`pynewton.solve`)
===============================

.. currentmodule:: pynewton.solve

Newton-Raphson root finding for a scalar function, recording each
iteration taken so that convergence can be examined afterwards.

Classes
-------

.. autosummary::
    :toctree:

    Iteration
    NewtonRaphson
    Problem

Functions
---------

.. autosummary::
    :toctree:

    format_iteration
    format_iterations
    format_root
    newton_raphson
    quadratic_problem

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    InvalidInput
    InvalidTolerance
    NonConvergence
    SingularDerivative

"""

from .exception import (SolverError, InvalidInput, InvalidTolerance,
                        NonConvergence, SingularDerivative)
from .newton_raphson import Iteration, NewtonRaphson, newton_raphson
from .problem import Problem, quadratic_problem
from .report import format_iteration, format_iterations, format_root
