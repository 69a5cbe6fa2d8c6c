"""
errors.py — Caller Contract Violations
=======================================
Every engine entry point validates its input before producing a single
step.  A bad structure, an out-of-range start cell or an unknown variant
raises InvalidInput and no partial trace is returned.

InvalidInput subclasses ValueError so callers that already catch
ValueError (the HTTP adapter, tests) keep working.
"""


class InvalidInput(ValueError):
    """Raised when a caller hands the engine a structure it cannot run on."""
