"""
Exceptions raised by the engine.

The search itself has no error channel: ContractViolation is only raised
when an engine is built with check_contracts=True.
"""


class MinimaxError(Exception):
    """Base class for engine errors."""


class ContractViolation(MinimaxError):
    """A GameLogic implementation broke the contract the engine relies on."""
