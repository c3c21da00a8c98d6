"""
=================================================
Linear programming reference (:mod:`l1robust.lp`)
=================================================

Solves the (weighted) L1 worst case as a generic linear program. This is
much slower than :mod:`l1robust.robust`, but it is exact for the weighted
problem and it is used to check the greedy solvers.
"""
import numpy as np
from scipy.optimize import linprog

from l1robust.validation import as_vector, check_inputs

def worstcase_l1_lp(z, pbar, xi, w=None):
    """
    p, o = worstcase_l1_lp(z, pbar, xi, w=None)

    Computes the solution of:
    min_p   p^T * z
    s.t.    sum_i w_i |p_i - pbar_i| <= xi
            1^T p = 1
            p >= 0

    with auxiliary variables t >= |p - pbar|. Unit weights are used when
    w is omitted.

    Parameters
    ----------
    z : array
        Payoff (value) of each outcome
    pbar : array
        Nominal distribution, not modified
    xi : float
        Bound on the (weighted) L1 distance
    w : array, optional
        Positive weight of each outcome

    Returns
    -------
    p : numpy.ndarray
        Worst-case distribution
    o : float
        Objective value p^T * z
    """
    z = as_vector(z)
    pbar = as_vector(pbar)
    if w is not None:
        w = as_vector(w)
    check_inputs(z, pbar, xi, w=w)

    n = len(z)
    if w is None:
        w = np.ones(n)

    # variables: [p, t]
    c = np.concatenate((z, np.zeros(n)))

    eye = np.eye(n)
    A_ub = np.vstack([np.hstack([eye, -eye]),
                      np.hstack([-eye, -eye]),
                      np.concatenate((np.zeros(n), w))[np.newaxis, :]])
    b_ub = np.concatenate((pbar, -pbar, [xi]))

    A_eq = np.concatenate((np.ones(n), np.zeros(n)))[np.newaxis, :]
    b_eq = np.array([1.0])

    bounds = [(0.0, None)] * (2 * n)

    res = linprog(c, A_ub=A_ub, b_ub=b_ub, A_eq=A_eq, b_eq=b_eq, bounds=bounds, method="highs")
    if not res.success:
        raise RuntimeError('Worst-case LP failed: %s' % res.message)

    p = res.x[:n]
    return p, np.dot(p, z)
