#!/usr/bin/env python3

# Find a root of f(x) = x^2 - 4 from x = -4 and show each step taken.
# Last updated: October 2026.

import numpy as np

from pynewton.solve import (NewtonRaphson, SolverError, format_iterations,
                            format_root, quadratic_problem)

initial_guess = -4.0
tolerance = 0.001

for dtype in (np.float64, np.float32):
    finder = NewtonRaphson(quadratic_problem(), tolerance, dtype=dtype)
    x_root = finder.solve(initial_guess)

    print(f"\n{np.dtype(dtype).name}:")
    print(format_iterations(finder.iterations))
    print(format_root(x_root))

# No real root exists for f(x) = x^2 + 1, so this reaches the iteration
# limit.
try:
    NewtonRaphson(quadratic_problem(c=-1.0), tolerance,
                  max_iter=20).solve(initial_guess)
except SolverError as e:
    print(f"\n{e}")
