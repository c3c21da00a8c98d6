"""
================================================================
Worst-case expectations over L1 balls (:mod:`l1robust.robust`)
================================================================

Solvers for the inner problem of robust MDPs with L1 ambiguity sets:

    min_p   p^T * z
    s.t.    ||p - pbar||_{1,w} <= xi
            1^T p = 1
            p >= 0

The unweighted solver is exact. The weighted solver transfers probability
mass greedily along the steepest donor/receiver pairs, see
:class:`GradientsL1_w`.
"""
import collections
import logging
import numpy as np

from l1robust import configuration
from l1robust.errors import DimensionMismatch, InvariantViolation, NonPositiveWeight
from l1robust.validation import as_vector, check_inputs

logger = logging.getLogger(__name__)

def worstcase_l1(z, pbar, xi):
    """
    p, o = worstcase_l1(z, pbar, xi)

    Computes the solution of:
    min_p   p^T * z
    s.t.    ||p - pbar||_1 <= xi
            1^T p = 1
            p >= 0

    where p is the optimal distribution and o is the objective value

    Parameters
    ----------
    z : array
        Payoff (value) of each outcome
    pbar : array
        Nominal distribution, not modified
    xi : float
        Bound on the L1 distance, values above 2 are treated as 2

    Returns
    -------
    p : numpy.ndarray
        Worst-case distribution
    o : float
        Objective value p^T * z

    Notes
    -----
    This implementation works in O(n log n) time because of the sort. Using
    quickselect to choose the right quantile would work in O(n) time.

    This function does not check whether the provided probability distribution
    sums to 1.
    """
    z = as_vector(z)
    pbar = as_vector(pbar)
    check_inputs(z, pbar, xi)

    xi = min(xi, configuration.max_l1_distance)

    # sort items increasingly
    smallest = np.argsort(z, kind='stable')

    k = smallest[0]
    epsilon = max(0.0, min(xi / 2, 1 - pbar[k]))
    o = np.copy(pbar)
    o[k] += epsilon

    # take from the largest values, never from k itself
    i = len(smallest) - 1
    while epsilon > 0 and i > 0:
        k = smallest[i]
        diff = min(epsilon, o[k])
        o[k] -= diff
        epsilon -= diff
        i -= 1

    return o, np.dot(o, z)


class GradientsL1_w:
    """
    Candidate transfers for the weighted L1 worst case, sorted by how much
    they decrease the objective per unit of the consumed budget.

    An edge moves probability mass from a donor to a receiver. Only outcomes
    on the lower Pareto frontier of (z, w) can be receivers: an outcome with
    a smaller or equal payoff and a smaller weight is always a better choice.

    There are two kinds of edges:

        - ``donor_greater=False``: the donor is at or below its nominal
          probability, so moving mass costs ``w[donor] + w[receiver]``
        - ``donor_greater=True``: the donor has received mass above its
          nominal value and gives it back, which costs
          ``w[receiver] - w[donor]``

    The table is read-only after construction and can be reused for any
    solve with the same z and w.

    Parameters
    ----------
    z : array
        Payoff (value) of each outcome
    w : array
        Positive weight of each outcome

    Attributes
    ----------
    grads : numpy.ndarray
        Objective change per unit of budget, non-improving edges are 0
    donors : numpy.ndarray
        Donor index of each edge
    receivers : numpy.ndarray
        Receiver index of each edge
    donor_greater : numpy.ndarray
        Whether the edge gives back mass above the nominal value
    sorted : numpy.ndarray
        Edge indices in the order of increasing gradients
    """

    def __init__(self, z, w):
        z = as_vector(z)
        w = as_vector(w)
        if len(w) != len(z):
            raise DimensionMismatch("w's values needs to be same length as z's values")
        if len(w) > 0 and np.min(w) <= 0:
            raise NonPositiveWeight("Weights must be positive.")

        epsilon = configuration.gradient_tolerance

        grads = []
        donors = []
        receivers = []
        donor_greater = []

        # outcomes where the weight is a new minimum when increasing z
        possible_receivers = []
        smallest_w = np.inf
        for iz in np.argsort(z, kind='stable'):
            if w[iz] < smallest_w:
                possible_receivers.append(iz)
                smallest_w = w[iz]

        def add(grad, i, j, greater):
            grads.append(grad if grad < -epsilon else 0.0)
            donors.append(i)
            receivers.append(j)
            donor_greater.append(greater)

        # donor at or below its nominal value
        for i in range(len(z)):
            for j in possible_receivers:
                if z[i] <= z[j]:
                    continue
                add((z[j] - z[i]) / (w[i] + w[j]), i, j, False)

        # donor above its nominal value
        for i in possible_receivers:
            for j in possible_receivers:
                if z[i] <= z[j]:
                    continue
                if abs(w[i] - w[j]) > epsilon and w[i] < w[j]:
                    add((z[j] - z[i]) / (w[j] - w[i]), i, j, True)

        self.grads = np.array(grads, dtype=np.float64)
        self.donors = np.array(donors, dtype=np.intp)
        self.receivers = np.array(receivers, dtype=np.intp)
        self.donor_greater = np.array(donor_greater, dtype=bool)
        self.sorted = np.argsort(self.grads, kind='stable')
        self.size = len(z)

        for a in (self.grads, self.donors, self.receivers, self.donor_greater, self.sorted):
            a.setflags(write=False)

    def __len__(self):
        return len(self.grads)

    def steepest_solution(self, index):
        """
        Returns the edge with the given rank (0 is the steepest) as
        ``(gradient, donor, receiver, donor_greater)``.
        """
        if index < 0 or index >= len(self.sorted):
            raise IndexError('Rank %d is out of range [0,%d).' % (index, len(self.sorted)))
        e = self.sorted[index]
        return float(self.grads[e]), int(self.donors[e]), int(self.receivers[e]), \
                bool(self.donor_greater[e])


def _transfer_greedy(p, w, xi, gradients):
    """
    Moves mass in p along the candidate edges, steepest first, until the
    budget xi is used up. Modifies p in place.
    """
    epsilon = configuration.mass_tolerance
    grad_epsilon = configuration.grad_epsilon

    nominal = np.copy(p)
    xi_rest = xi
    # edges tied (within grad_epsilon) with the last one added
    window = collections.deque()
    transfers = 0

    for k in range(len(gradients)):
        if xi_rest < epsilon:
            break

        edge = gradients.steepest_solution(k)
        # all remaining edges are non-improving
        if edge[0] >= 0:
            break

        window.append(edge)
        while len(window) > 1 and window[0][0] < window[-1][0] - grad_epsilon:
            window.popleft()

        for _, donor, receiver, donor_greater in window:
            above = p[donor] > nominal[donor] + epsilon
            if donor_greater != above:
                continue
            if p[donor] < epsilon:
                continue

            if donor_greater:
                weight_change = w[receiver] - w[donor]
                available = p[donor] - nominal[donor]
            else:
                weight_change = w[donor] + w[receiver]
                available = p[donor]

            if weight_change <= 0:
                raise InvariantViolation('Non-positive weight change %g for edge %d -> %d.'
                                         % (weight_change, donor, receiver))

            donor_step = min(xi_rest / weight_change, available)
            p[donor] -= donor_step
            p[receiver] += donor_step
            xi_rest -= donor_step * weight_change
            transfers += 1

            if xi_rest < epsilon:
                break

    logger.debug('Weighted L1 worst case: %d edges, %d transfers, unused budget %g',
                 len(gradients), transfers, xi_rest)

def worstcase_l1_w(z, pbar, w, xi, gradients=None):
    """
    p, o = worstcase_l1_w(z, pbar, w, xi)

    Computes an approximate solution of:
    min_p   p^T * z
    s.t.    sum_i w_i |p_i - pbar_i| <= xi
            1^T p = 1
            p >= 0

    where p is the worst-case distribution and o is the objective value

    Parameters
    ----------
    z : array
        Payoff (value) of each outcome
    pbar : array
        Nominal distribution, must sum to one. A float numpy array is
        modified in place and returned as p; other sequences are copied.
    w : array
        Positive weight of each outcome
    xi : float
        Bound on the weighted L1 distance
    gradients : GradientsL1_w, optional
        Precomputed candidate edges for the same z and w

    Returns
    -------
    p : numpy.ndarray
        Worst-case distribution (the same object as pbar when possible)
    o : float
        Objective value p^T * z

    Notes
    -----
    Runs in O(n log n + n r) time where r is the number of outcomes on the
    Pareto frontier of (z, w).
    """
    z = as_vector(z)
    w = as_vector(w)
    p = as_vector(pbar)
    check_inputs(z, p, xi, w=w, normalized=True)

    if gradients is None:
        gradients = GradientsL1_w(z, w)
    elif gradients.size != len(z):
        raise DimensionMismatch('Gradients were computed for %d outcomes, not %d.'
                                % (gradients.size, len(z)))

    _transfer_greedy(p, w, xi, gradients)

    return p, np.dot(p, z)

def worstcase_l1_batch(Z, pbar, xi, w=None):
    """
    Computes the worst-case objective for each row of Z, such as the values
    of the next states for each action in a robust Bellman update.

    Parameters
    ----------
    Z : array (2D)
        Payoffs, one row per problem
    pbar : array
        Nominal distribution, not modified
    xi : float
        Bound on the (weighted) L1 distance
    w : array, optional
        Weights, uses the unweighted solver when omitted

    Returns
    -------
    out : numpy.ndarray
        Objective value for each row
    """
    Z = np.asarray(Z, dtype=np.float64)
    if Z.ndim != 2:
        raise DimensionMismatch('Payoffs must be a two dimensional array.')
    pbar = as_vector(pbar)

    out = np.empty(Z.shape[0])
    for i, z in enumerate(Z):
        if w is None:
            _, out[i] = worstcase_l1(z, pbar, xi)
        else:
            _, out[i] = worstcase_l1_w(z, np.copy(pbar), w, xi)
    return out
