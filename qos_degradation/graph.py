"""Undirected graph of degradable edges and the path queries to block."""

import heapq
from collections import deque

from . import constants, randomness
from .edge import Edge


def norm(x):
    """Total number of degradation steps in a cost vector."""
    return sum(x)


def addition(x, idx, val=1):
    """Return a copy of ``x`` with ``val`` added at position ``idx``."""
    result = list(x)
    result[idx] += val
    return result


class Graph:
    """Graph with per-edge weight functions and a set of source/target queries."""

    num_samples = 100000

    def __init__(self):
        self.n = 0
        self.m = 0
        self.adjacency = []
        self.entries = []
        self.edges = []
        self.path_queries = []

    # ------------------------------------------------------------------
    # construction and persistence
    # ------------------------------------------------------------------

    def _build_edges(self):
        self.edges = []
        self.adjacency = [[] for _ in range(self.n)]
        for index, (u, v) in enumerate(self.entries):
            edge = Edge.random(u, v)
            self.edges.append(edge)
            self.adjacency[edge.u].append(index)
            self.adjacency[edge.v].append(index)

    def randomize(self, n=None, density=None):
        """Build a random graph on ``n`` vertices and draw path queries.

        Returns the pair ``(n, m)``.
        """
        if n is None:
            n = constants.N
        if density is None:
            density = constants.EDGE_DENSITY
        self.n = n
        self.entries = [
            (u, v)
            for u in range(n)
            for v in range(u + 1, n)
            if randomness.bernoulli(density)
        ]
        self.m = len(self.entries)
        self._build_edges()
        self.gen_path_queries()
        return self.n, self.m

    def read_mtx(self, filename):
        """Load the edge list of a Matrix Market file and draw path queries.

        Edge weights are drawn at random. Returns the pair ``(n, m)``.
        """
        with open(filename, encoding="utf-8") as handle:
            lines = iter(handle)
            header = ""
            for line in lines:
                if line.startswith("%"):
                    continue
                header = line
                break
            fields = header.split()
            if len(fields) < 3:
                raise ValueError("missing size line in matrix file")
            rows, _cols, nonzeros = (int(f) for f in fields[:3])
            tokens = [tok for line in lines for tok in line.split()]
        if len(tokens) < 2 * nonzeros:
            raise ValueError("matrix file has fewer entries than declared")
        self.n = rows
        self.m = nonzeros
        self.entries = [
            (int(tokens[2 * k]) - 1, int(tokens[2 * k + 1]) - 1)
            for k in range(nonzeros)
        ]
        self._build_edges()
        self.gen_path_queries()
        return self.n, self.m

    def dumps(self):
        """Serialise the graph, its weights and its path queries to text."""
        lines = [f"{self.n} {self.m} {len(self.path_queries)}"]
        lines.extend(str(edge) for edge in self.edges[: self.m])
        lines.extend(f"{u} {v}" for u, v in self.path_queries)
        return "\n".join(lines) + "\n"

    def write(self, filename):
        """Write :meth:`dumps` output to ``filename``."""
        with open(filename, "w", encoding="utf-8") as handle:
            handle.write(self.dumps())

    @classmethod
    def loads(cls, text):
        """Build a graph from text produced by :meth:`dumps`."""
        tokens = iter(text.split())
        graph = cls()
        try:
            graph.n = int(next(tokens))
            graph.m = int(next(tokens))
            count = int(next(tokens))
        except StopIteration:
            raise ValueError("missing graph header") from None
        graph.adjacency = [[] for _ in range(graph.n)]
        for index in range(graph.m):
            edge = Edge.from_tokens(tokens)
            graph.edges.append(edge)
            graph.entries.append((edge.u, edge.v))
            graph.adjacency[edge.u].append(index)
            graph.adjacency[edge.v].append(index)
        try:
            for _ in range(count):
                graph.path_queries.append((int(next(tokens)), int(next(tokens))))
        except StopIteration:
            raise ValueError("not enough tokens for path queries") from None
        return graph

    def capacities(self):
        """Maximum number of degradation steps for each edge."""
        return [len(edge.weight) - 1 for edge in self.edges]

    def gen_path_queries(self, log_path=None):
        """Draw ``constants.NUM_PATH_QUERIES`` reachable source/target pairs.

        When ``log_path`` is given, each pair is written there with its
        distance. Raises ValueError when the graph has no edges.
        """
        if self.m == 0:
            raise ValueError("cannot draw path queries on a graph without edges")
        self.path_queries = []
        log_lines = []
        remaining = constants.NUM_PATH_QUERIES
        while remaining > 0:
            source = randomness.rand_int(0, self.n - 1)
            dist, _ = self.dijkstra(source)
            candidates = [i for i, d in enumerate(dist) if 0 < d < constants.T]
            if candidates:
                target = candidates[randomness.rand_int(0, len(candidates))]
                self.path_queries.append((source, target))
                log_lines.append(f"{source} {target} {dist[target]}\n")
                remaining -= 1
        if log_path is not None:
            with open(log_path, "w", encoding="utf-8") as handle:
                handle.writelines(log_lines)

    # ------------------------------------------------------------------
    # shortest paths
    # ------------------------------------------------------------------

    def dijkstra(self, source, cost=None):
        """Integer shortest distances capped at ``constants.T``.

        Returns ``(dist, prev)`` where ``prev[v]`` is the id of the edge used
        to reach ``v`` or -1.
        """
        limit = constants.T
        if not cost:
            cost = [0] * self.m
        dist = [limit] * self.n
        prev = [-1] * self.n
        buckets = [deque() for _ in range(limit + 1)]
        dist[source] = 0
        buckets[0].append(source)
        for level in range(limit):
            bucket = buckets[level]
            while bucket:
                u = bucket.popleft()
                if dist[u] != level:
                    continue
                for eid in self.adjacency[u]:
                    edge = self.edges[eid]
                    v = edge.other_end(u)
                    k = min(limit, dist[u] + edge.weight_at(cost[eid]))
                    if dist[v] > k:
                        dist[v] = k
                        prev[v] = eid
                        buckets[k].append(v)
        return dist, prev

    def dijkstra_linear(self, source, cost=None):
        """Shortest distances under the linearised edge weights.

        Each relaxed distance is truncated to an integer and capped at
        ``constants.T``. Returns ``(dist, prev)``.
        """
        limit = constants.T
        eps = constants.EPS
        if not cost:
            cost = [0.0] * self.m
        dist = [float(limit)] * self.n
        prev = [-1] * self.n
        dist[source] = 0.0
        heap = [(0.0, source)]
        while heap:
            d, u = heapq.heappop(heap)
            if abs(dist[u] - d) > eps:
                continue
            for eid in self.adjacency[u]:
                edge = self.edges[eid]
                v = edge.other_end(u)
                k = float(int(min(float(limit), dist[u] + edge.linear_weight(cost[eid]))))
                if dist[v] > k and abs(dist[v] - k) > eps:
                    dist[v] = k
                    prev[v] = eid
                    heapq.heappush(heap, (k, v))
        return dist, prev

    def unblocked_path(self, cost):
        """Separating vector for the first query still open under ``cost``.

        The result holds, for each edge of the open path, its linear slope,
        and zero elsewhere. Returns an empty list when every query is blocked.
        """
        limit = constants.T
        for u, v in self.path_queries:
            dist, prev = self.dijkstra_linear(u, cost)
            if abs(dist[v] - limit) < constants.EPS or dist[v] >= limit:
                continue
            result = [0] * self.m
            while v != u:
                eid = prev[v]
                result[eid] += self.edges[eid].linear_tan()
                v = self.edges[eid].other_end(v)
            return result
        return []

    def is_feasible(self, cost):
        """True when every path query is blocked under ``cost``."""
        return all(
            self.dijkstra(s, cost)[0][t] >= constants.T for s, t in self.path_queries
        )

    def _trace(self, parents, source, target):
        path = []
        v = target
        while v != source:
            eid = parents[v]
            path.append(eid)
            v = self.edges[eid].other_end(v)
        path.reverse()
        return path

    def potential_paths(self, cost):
        """One shortest path per open query, avoiding widely shared edges.

        For each open query the smallest sharing bound is searched for which
        a shortest path uses only edges lying on at most that many queries'
        shortest paths.
        """
        limit = constants.T
        queries = self.path_queries
        count = [0] * self.m
        forward = []
        backward = []
        for s, t in queries:
            pl = self.dijkstra(s, cost)[0]
            pr = self.dijkstra(t, cost)[0]
            forward.append(pl)
            backward.append(pr)
            distance = pl[t]
            if distance == limit:
                continue
            for eid, edge in enumerate(self.edges[: self.m]):
                u, v, w = edge.u, edge.v, edge.weight_at(cost[eid])
                if distance in (pl[u] + pr[v] + w, pl[v] + pr[u] + w):
                    count[eid] += 1

        paths = []
        for (s, t), pl, pr in zip(queries, forward, backward):
            distance = pl[t]
            if distance == limit:
                continue
            low, high = 1, len(queries) + 1
            parents = {}
            while low <= high:
                mid = (low + high) // 2
                parents = {s: None}
                que = deque([s])
                while que:
                    u = que.popleft()
                    for eid in self.adjacency[u]:
                        edge = self.edges[eid]
                        v = edge.other_end(u)
                        w = edge.weight_at(cost[eid])
                        if (
                            v not in parents
                            and distance == pl[u] + pr[v] + w
                            and count[eid] <= mid
                        ):
                            parents[v] = eid
                            que.append(v)
                if low == high:
                    break
                if t in parents:
                    high = mid
                else:
                    low = mid + 1
            paths.append(self._trace(parents, s, t))
        return paths

    def potential_path(self, u, v, cost=None):
        """A shortest ``u``-``v`` path as edge ids, or [] when it is blocked."""
        if not cost:
            cost = [0] * self.m
        dist, prev = self.dijkstra(u, cost)
        if dist[v] >= constants.T:
            return []
        return self._trace(prev, u, v)

    # ------------------------------------------------------------------
    # objective
    # ------------------------------------------------------------------

    def path_budget(self, path, cost):
        """Length of ``path`` under ``cost``, capped at ``constants.T``."""
        total = sum(self.edges[i].weight_at(cost[i]) for i in path)
        return min(total, constants.T)

    def budget(self, paths, cost):
        """Sum of capped path lengths over ``paths``."""
        return sum(self.path_budget(path, cost) for path in paths)

    def sample_paths(self, cost):
        """Draw random near-shortest paths for open queries.

        Returns a list of ``(path, probability)`` pairs; ``num_samples`` draws
        are made and those landing on blocked queries are dropped.
        """
        queries = self.path_queries
        if not queries:
            return []
        trees = [self.dijkstra(t, cost) for _, t in queries]
        alpha = constants.ALPHA
        samples = []
        for _ in range(self.num_samples):
            qid = randomness.rand_int(0, len(queries))
            prob = 1.0 / len(queries)
            s, t = queries[qid]
            dist, prev = trees[qid]
            if dist[s] >= constants.T:
                continue
            path = []
            u = s
            while u != t:
                eid = prev[u]
                if eid == -1:
                    raise RuntimeError("shortest-path tree is broken")
                v = self.edges[eid].other_end(u)
                if randomness.bernoulli(alpha):
                    path.append(eid)
                    prob *= alpha
                    u = v
                    continue
                options = [
                    j
                    for j in self.adjacency[u]
                    if dist[self.edges[j].other_end(u)] <= dist[u]
                ]
                if not options:
                    path.append(eid)
                    u = v
                    continue
                chosen = options[randomness.rand_int(0, len(options))]
                path.append(chosen)
                u = self.edges[chosen].other_end(u)
                prob *= (1 - alpha) / len(options)
            samples.append((path, prob))
        return samples

    def max_degree(self):
        """Largest number of edges incident to one vertex."""
        return max((len(ids) for ids in self.adjacency), default=0)

    def linear_max_slope(self):
        """Largest first-step slope over all edges."""
        return max((edge.linear_tan() for edge in self.edges[: self.m]), default=0)