from dataclasses import FrozenInstanceError
from unittest import TestCase


# ======================================================================

class TestProblem(TestCase):
    def test_problem(self):
        from pynewton.solve.problem import Problem

        p = Problem(lambda x: x ** 3 - 8, lambda x: 3 * x ** 2)
        self.assertEqual(p(2.0), 0.0)
        self.assertEqual(p.equation(3.0), 19.0)
        self.assertEqual(p.derivative(3.0), 27.0)

        with self.assertRaises(FrozenInstanceError):
            p.equation = abs  # noqa

        with self.assertRaises(TypeError):
            Problem(lambda x: x, 2.0)

    def test_quadratic_problem(self):
        from pynewton.solve.newton_raphson import NewtonRaphson
        from pynewton.solve.problem import quadratic_problem

        p = quadratic_problem()
        self.assertEqual(p(-4.0), 12.0)
        self.assertEqual(p.derivative(-4.0), -8.0)

        finder = NewtonRaphson(quadratic_problem(c=9.0), 1e-9)
        self.assertAlmostEqual(finder.solve(1.0), 3.0, places=9)
        self.assertAlmostEqual(finder.solve(-1.0), -3.0, places=9)
