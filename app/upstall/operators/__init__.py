"""Package operators for running installers.

This module exports the operator classes for executing install actions.
"""

from upstall.operators.cargo import CargoOperator

__all__ = ["CargoOperator"]
