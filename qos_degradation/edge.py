"""Undirected edge whose length grows step by step as it is degraded."""

import math
from dataclasses import dataclass, field

from . import constants, randomness


@dataclass
class Edge:
    """An edge between ``u`` and ``v``.

    ``weight[i]`` is the edge length after ``i`` degradation steps; the last
    entry reaches the blocking threshold ``constants.T``.
    """

    u: int = -1
    v: int = -1
    weight: list = field(default_factory=list)

    @classmethod
    def random(cls, u, v):
        """Create an edge with a randomly drawn weight function."""
        edge = cls(u, v)
        edge.make_weighted()
        return edge

    @classmethod
    def from_tokens(cls, tokens):
        """Read ``u v size w_0 .. w_{size-1}`` from an iterator of tokens.

        Tokens are consumed from ``tokens`` when it is an iterator.
        """
        it = iter(tokens)
        try:
            u = int(next(it))
            v = int(next(it))
            size = int(next(it))
            weight = [int(next(it)) for _ in range(size)]
        except StopIteration:
            raise ValueError("not enough tokens for an edge") from None
        return cls(u, v, weight)

    def make_weighted(self):
        """Draw a weight function from one of the configured families."""
        limit = constants.T
        kind = randomness.rand_int(0, constants.EDGE_TYPE)
        weight = []
        if kind == 0:
            # linear: a*i + b
            a = randomness.rand_int(3, 10)
            b = 1
            i = 0
            while True:
                weight.append(min(a * i + b, limit))
                if weight[-1] >= limit:
                    break
                i += 1
        elif kind == 1:
            # quadratic: a*i^2 + b*i + c
            a = randomness.rand_int(1, 5)
            b = randomness.rand_int(3, 10)
            c = 1
            i = 0
            while True:
                weight.append(min(a * i * i + b * i + c, limit))
                if weight[-1] >= limit:
                    break
                i += 1
        elif kind == 2:
            # concave: d * floor(ln(a*i^2 + b*i + c)) + e
            a = randomness.rand_int(3, 20)
            b = randomness.rand_int(10, 50)
            c = 1
            d = randomness.rand_int(5, 20)
            e = randomness.rand_int(max(1, limit - 30), limit)
            if e != 1:
                weight.append(1)
            i = 0
            while True:
                value = min(d * int(math.log(a * i * i + b * i + c)) + e, limit)
                if not weight or weight[-1] != value:
                    weight.append(value)
                if weight[-1] >= limit:
                    break
                i += 1
        else:
            # cut: unblocked, then immediately blocked
            weight = [1, limit]
        if weight[0] != 1 or len(weight) <= 1:
            raise ValueError("weight function must start at 1 and have at least two steps")
        self.weight = weight

    def other_end(self, x):
        """Return the endpoint opposite to ``x``."""
        return self.v if x == self.u else self.u

    def weight_at(self, i):
        """Length of the edge after ``i`` degradation steps."""
        return self.weight[i]

    def linear_weight(self, x):
        """Linear interpolation of the first weight step at fractional level ``x``."""
        return x * (self.weight[1] - self.weight[0]) + self.weight[0]

    def linear_tan(self):
        """Slope of the first weight step."""
        return self.weight[1] - self.weight[0]

    def __str__(self):
        parts = [str(self.u), str(self.v), str(len(self.weight))]
        parts.extend(str(w) for w in self.weight)
        return " ".join(parts) + " "