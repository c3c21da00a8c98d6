"""
=================================================
Solver exceptions (:mod:`l1robust.errors`)
=================================================

Input errors derive from ``ValueError`` and are raised before any
computation starts. ``InvariantViolation`` indicates an internal bug.
"""

class L1RobustError(ValueError):
    """ Base class for invalid solver inputs. """
    pass

class InvalidDistribution(L1RobustError):
    """ A nominal distribution component lies outside of [0,1]. """
    pass

class InvalidBudget(L1RobustError):
    """ The deviation budget is negative. """
    pass

class DimensionMismatch(L1RobustError):
    """ Inputs are empty or their lengths differ. """
    pass

class UnnormalizedDistribution(L1RobustError):
    """ The nominal distribution does not sum to one. """
    pass

class NonPositiveWeight(L1RobustError):
    """ A weight is zero or negative. """
    pass

class InvariantViolation(AssertionError):
    """ Internal consistency check failed during a greedy transfer. """
    pass
