"""
.. This module acts as the top-level API documentation.

.. module: pynewton

.. autosummary::
    :toctree: generated/

    solve

"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)
