import unittest
from .test_robust import *

def test(suite='l1robust.test',verbosity=2):
    """
    Runs all tests from the module.
    
    Parameters
    ----------
    verbosity : int (optional)
        Test output verbosity
    """
    suite = unittest.TestLoader().loadTestsFromNames([suite])
    unittest.TextTestRunner(verbosity=verbosity).run(suite)
