"""Linear relaxation solved with the ellipsoid method, then randomised rounding."""

import math

import numpy as np

from . import constants, randomness
from .graph import norm

# Threshold on the log-volume below which the ellipsoid is considered empty.
LOG_EPS = 1.0


class Ellipsoid:
    """Ellipsoid ``{x : (x - u)^T H^-1 (x - u) <= 1}`` centred at the origin initially.

    The centre is kept in the non-negative orthant after every cut.
    """

    def __init__(self, dims, bound):
        n = int(dims)
        if n < 1:
            raise ValueError("an ellipsoid needs at least one dimension")
        self.n = n
        self.u = np.zeros(n, dtype=np.float64)
        self.h = np.eye(n, dtype=np.float64) * (bound * bound)
        # log of the volume of the unit ball in n dimensions
        self.pot = math.log(math.pi) * n / 2 - math.lgamma(n / 2 + 1)

    def center(self):
        """Coordinates of the centre as a list of floats."""
        return self.u.tolist()

    def center_norm(self):
        """Sum of the centre's coordinates."""
        return float(self.u.sum())

    def log_volume(self):
        """Natural logarithm of the ellipsoid's volume."""
        _, logdet = np.linalg.slogdet(self.h)
        return float(self.pot + logdet / 2)

    def volume_check(self):
        """True when the volume has shrunk below the stopping threshold."""
        return self.log_volume() < LOG_EPS

    def longest_axis_length(self):
        """Length of the longest semi-axis."""
        largest = float(np.linalg.eigvalsh(self.h)[-1])
        return math.sqrt(largest) if largest >= 0 else math.nan

    def update(self, a):
        """Cut by the half-space ``a . x >= a . u`` and shrink to the new ellipsoid."""
        n = self.n
        if n < 2:
            raise ValueError("a one-dimensional ellipsoid cannot be cut")
        vec = -np.asarray(a, dtype=np.float64)
        if vec.shape != (n,):
            raise ValueError(f"cut vector must have {n} entries")
        ha = self.h @ vec
        denom = float(vec @ ha)
        if denom <= 0:
            raise ValueError("cut vector is degenerate for this ellipsoid")
        g = vec / math.sqrt(denom)
        self.u = self.u - (self.h @ g) / (n + 1)
        factor = (n * n) / (n * n - 1)
        self.h = factor * (self.h - (self.h @ np.outer(g, g) @ self.h) * 2.0 / (n + 1))
        self.u = np.maximum(self.u, 0.0)


def ellipsoid_step(graph, bound):
    """Fractional blocking vector of total at most ``bound``, or [] if none was found."""
    ellipsoid = Ellipsoid(graph.m, bound)
    while True:
        center = ellipsoid.center()
        total = ellipsoid.center_norm()
        if abs(total - bound) < constants.EPS or total > bound:
            cut = [-1] * graph.m
        else:
            cut = graph.unblocked_path(center)
        if not cut:
            return center
        if ellipsoid.volume_check() or ellipsoid.longest_axis_length() < constants.EPS:
            return []
        ellipsoid.update(cut)


def ellipsoid_search(graph):
    """Binary search on the budget for the smallest one the ellipsoid step solves.

    Returns the fractional vector found for that budget, or [] when no tried
    budget succeeded.
    """
    low, high = 1, norm(graph.capacities())
    best = []
    while low < high:
        mid = (low + high) // 2
        found = ellipsoid_step(graph, mid)
        if not found:
            low = mid + 1
        else:
            high = mid
            best = list(found)
    return best


def _rounding_scale(graph):
    beta = graph.linear_max_slope()
    if beta == 0:
        return math.nan
    return beta / (1 - math.exp(-beta)) * (
        constants.T * math.log(graph.n) - math.log(0.5) + 1
    )


def solve(graph):
    """Round the fractional solution at random until every query is blocked.

    Raises RuntimeError when no fractional solution was found and the
    all-zero vector does not block every query.
    """
    capacities = graph.capacities()
    x = [0] * graph.m
    fractional = ellipsoid_search(graph)
    if not fractional:
        if graph.is_feasible(x):
            return x
        raise RuntimeError("the relaxation yielded no fractional solution")
    eta = _rounding_scale(graph)
    while True:
        for i, value in enumerate(fractional):
            whole = int(value)
            if abs(whole - value) < constants.EPS:
                level = whole
            else:
                p = (value - whole) * eta
                level = whole + 1 if p >= 1 else whole + int(randomness.bernoulli(p))
            x[i] = min(level, capacities[i])
        if graph.is_feasible(x):
            return x