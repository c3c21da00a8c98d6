"""
Worst-case expectations over L1 balls (:mod:`l1robust`)
=============================================================

Inner-loop solvers for distributionally robust optimization and robust
Markov decision processes with (weighted) L1 ambiguity sets.

It directly imports:
    - :mod:`l1robust.robust`
    - :mod:`l1robust.errors`

To determine the package version, call ::
    >>> import l1robust
    >>> l1robust.version.full_version

"""
from . import errors
from .errors import *
from . import robust
from .robust import worstcase_l1, worstcase_l1_w, worstcase_l1_batch, GradientsL1_w
from . import lp
from .lp import worstcase_l1_lp

from . import version
