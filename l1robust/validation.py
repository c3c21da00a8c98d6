"""
=================================================
Input validation (:mod:`l1robust.validation`)
=================================================

Checks shared by the worst-case solvers. All checks are pure and raise
one of the exceptions in :mod:`l1robust.errors`.
"""
import numpy as np
from l1robust import configuration
from l1robust.errors import InvalidDistribution, InvalidBudget, \
        DimensionMismatch, UnnormalizedDistribution, NonPositiveWeight

def as_vector(values):
    """
    Converts a sequence to a one dimensional float array.

    Numpy float arrays are returned as is (no copy), which is what allows
    the weighted solver to modify the caller's distribution in place.
    """
    if isinstance(values, np.ndarray) and values.dtype == np.float64 and values.ndim == 1:
        return values
    out = np.asarray(values, dtype=np.float64)
    if out.ndim != 1:
        raise DimensionMismatch('Expected a one dimensional vector, got shape %s.' % str(out.shape))
    return out

def check_inputs(z, pbar, xi, w=None, normalized=False):
    """
    Checks the inputs of a worst-case solver.

    Parameters
    ----------
    z : array
        Payoff for each outcome
    pbar : array
        Nominal distribution
    xi : float
        Deviation budget
    w : array, optional
        Positive weight for each outcome (weighted solver only)
    normalized : bool, optional
        Whether to require that pbar sums to one

    Raises
    ------
    DimensionMismatch, InvalidDistribution, InvalidBudget,
    NonPositiveWeight, UnnormalizedDistribution
    """
    if len(z) == 0 or len(z) != len(pbar):
        raise DimensionMismatch("z's values needs to be same length as pbar's values")
    if w is not None and len(w) != len(z):
        raise DimensionMismatch("w's values needs to be same length as z's values")

    tol = configuration.distribution_tolerance
    if not np.all(np.isfinite(pbar)) or np.max(pbar) > 1 + tol or np.min(pbar) < -tol:
        raise InvalidDistribution('Values of pbar must be between 0 and 1.')
    if not xi >= 0:
        raise InvalidBudget('Budget xi must be nonnegative.')
    if w is not None and np.min(w) <= 0:
        raise NonPositiveWeight('Weights must be positive.')
    if normalized and abs(np.sum(pbar) - 1) > configuration.normalization_tolerance:
        raise UnnormalizedDistribution('Values of pbar must sum to one.')
