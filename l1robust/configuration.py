"""
Global configuration for the numerical tolerances used by the solvers

The values are read at call time, so changing them affects all subsequent
solves.
"""

# maximum L1 distance between two probability distributions
max_l1_distance = 2.0

# slack allowed for distribution entries outside of [0,1]
distribution_tolerance = 1e-9

# slack allowed when checking that a distribution sums to one
normalization_tolerance = 1e-5

# gradients above -gradient_tolerance are treated as non-improving
gradient_tolerance = 1e-8

# gradients within grad_epsilon are considered tied
grad_epsilon = 1e-5

# mass and budget values below this are treated as zero
mass_tolerance = 1e-10
