"""Tunable parameters shared by the graph model and the solvers.

Values are read at call time, so callers may adjust them before running an
experiment.
"""

# Default number of vertices of a random graph.
N = 240

# Threshold on path length: a path of length >= T counts as blocked.
T = 30

# Probability that a vertex pair is joined when generating a random graph.
EDGE_DENSITY = 0.3

# Number of weight-function families an edge may draw from (0 .. EDGE_TYPE-1).
EDGE_TYPE = 1

# Number of source/target pairs the blocking must cut.
NUM_PATH_QUERIES = 10

# Tolerance for floating-point comparisons.
EPS = 1e-12

# Sampling-approach parameters.
Q = 3
ALPHA = 0.8
EPSILON = 0.95
DELTA = 0.01

# Linear-rounding tolerance.
LR_EPS = 1e-3