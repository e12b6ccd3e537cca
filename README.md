# qos_degradation

Tools for studying how far a network has to be degraded before a set of
source–target queries can no longer be served within a length threshold `T`.

Every edge carries a non-decreasing list of weights that starts at 1 and ends
at `T`. Raising an edge by one level costs one unit of budget and moves it to
the next weight. A query is *blocked* when its shortest path length reaches
`T`. The solvers look for a level vector (one entry per edge) that blocks every
query while keeping the total number of levels — the *norm* — small.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
qos-degradation
```

Builds a random graph (10 vertices by default), draws path queries on it, then
runs the iterative greedy solver (mode 1) and the linear rounding solver and
prints each level vector followed by `Norm = <total>`.

Options:

- `--vertices N` – number of vertices of the random graph (default 10).
- `--density P` – edge probability of the random graph (default
  `constants.EDGE_DENSITY`, 0.3).
- `--input FILE` – load a graph previously written with `--output` instead of
  generating one.
- `--output FILE` – write the graph (edges, weights and queries) to `FILE`.
- `--seed S` – seed the shared random generator for repeatable runs.

On a file, value or solver error the command prints `error: ...` to standard
error and exits with status 1.

## Library use

```python
from qos_degradation import iterative_greedy, randomness
from qos_degradation.graph import Graph, norm

randomness.seed(1)
graph = Graph()
graph.randomize(10, 0.3)

levels = iterative_greedy.solve(graph, 1)
print(levels, norm(levels), graph.is_feasible(levels))
```

### Modules

- `qos_degradation.graph` – `Graph` with `randomize`, `read_mtx`, `write`,
  `dumps`/`loads`, `dijkstra` (integer, capped at `T`), `dijkstra_linear`,
  `potential_path`, `potential_paths`, `unblocked_path`, `is_feasible`,
  `budget`, `path_budget`, `sample_paths`, `capacities`, `max_degree` and
  `linear_max_slope`; helpers `norm(x)` and `addition(x, idx, val)`.
- `qos_degradation.edge` – `Edge` with its weight list, `Edge.random`,
  `Edge.from_tokens`, `weight_at`, `linear_weight`, `linear_tan` and
  `other_end`.
- `qos_degradation.iterative_solution` – `solve(graph, algorithm, mode)`:
  repeatedly adds paths still open under the current vector and reruns
  `algorithm(graph, path_set)` on the whole set.
- `qos_degradation.iterative_greedy` – `solve(graph, mode)`, raising one edge
  by one level per round, choosing the largest budget gain.
- `qos_degradation.adaptive_trading` – `solve(graph, mode)`, choosing the edge
  and number of levels with the best gain per level.
- `qos_degradation.sampling_approach` – `solve(graph)`, sampling
  near-shortest paths (`Graph.num_samples` draws per round) and raising up to
  `constants.Q` edges per round, weighted by inverse sampling probability.
- `qos_degradation.linear_rounding` – `solve(graph)`: binary search over the
  budget with an ellipsoid method (`Ellipsoid`, `ellipsoid_step`,
  `ellipsoid_search`) on the linearised weights, then random rounding until
  the result blocks every query.
- `qos_degradation.randomness` – `seed`, `bernoulli`, `rand_int`; all random
  choices in the package go through it.
- `qos_degradation.constants` – `T`, `N`, `EDGE_DENSITY`, `EDGE_TYPE`,
  `NUM_PATH_QUERIES`, `EPS`, `Q`, `ALPHA` and others. They are read at call
  time, so they can be changed before building a graph or running a solver.

For the `mode` argument, 1 takes one shortest path per query; any other value
takes the sharing-aware paths of `Graph.potential_paths`.

With the default `EDGE_TYPE = 1` every edge gets a linear weight function;
raising `EDGE_TYPE` (up to 4) enables quadratic, logarithmic and one-step
weight families.

## What it does not do

- The command runs only the iterative greedy (mode 1) and linear rounding
  solvers; the adaptive trading and sampling solvers are reached from Python.
- `Graph.read_mtx` reads only the edge list of a Matrix Market file; weights
  are drawn at random and path queries are generated, not read. The command
  line has no option for Matrix Market input.
- Results are printed, not stored; `--output` saves the graph only.
- Generating path queries on a graph with no edges raises `ValueError`.