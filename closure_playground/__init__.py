"""Closure playground.

A walkthrough of closures in Python: a counter factory whose returned
function captures its running total, sorting with an ordering predicate
written as a lambda, a named function or ``operator.gt``, and spelling
numbers digit by digit with ``map``-style transforms. Run
``python -m closure_playground`` to evaluate every snippet in order.
"""

from . import api as _api
from .api import *  # re-export public API symbols

__all__ = _api.__all__
