

# Written by Eric J. Whitney, April 2023.  Failure subclasses added
# October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    Base class for failures of a root finder.  Each subclass gives one
    distinct reason for the failure and carries its own numeric `flag`.

    Parameters
    ----------
    args :
        Passed to `RuntimeError`.
    flag : int, optional
        Numeric status code.  If omitted, the `default_flag` of the
        class is used.
    details : str, optional
        Short description of the failure.
    kwargs :
        Any other values describing the state at failure, e.g. `x` (the
        last estimate) and `its` (the completed iterations).  These are
        stored as attributes.

    Notes
    -----
    ``str()`` lists each attribute that is not None on its own line
    below the message, as ``name -> value``.
    """
    default_flag: int = None

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        super().__init__(*args)
        self.flag = self.default_flag if flag is None else flag
        self.details = details
        self.__dict__.update(kwargs)

    def __str__(self):
        lines = [super().__str__()]
        lines += [f"{k} -> {v}" for k, v in vars(self).items()
                  if v is not None]
        return '\n'.join(lines)


# ----------------------------------------------------------------------

class NonConvergence(SolverError):
    """
    The iteration limit was reached before the step size fell below the
    tolerance (e.g. divergence, oscillation or no real root).
    """
    default_flag = 1


class SingularDerivative(SolverError):
    """
    The derivative was zero, or so small compared to the equation value
    that the Newton step could not be represented.
    """
    default_flag = 2


class InvalidInput(SolverError, ValueError):
    """
    A non-finite value was encountered: the initial guess, an
    evaluation of the equation or derivative, or the updated estimate.
    """
    default_flag = 3


class InvalidTolerance(SolverError, ValueError):
    """The convergence tolerance was not a finite positive number."""
    default_flag = 4
