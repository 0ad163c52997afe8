from frozendict import frozendict
from ..config import interior_adjacency
from ..errors import InvalidConfiguration


def init_surfel_adjacency(dim, interior=None):
  """
  Choose, for every pair of distinct directions, how bels are linked
  in the ambiguous diagonal configuration.

  Parameters
  ----------
  dim : `int`
      Dimension of the space.
  interior : `bool`, optional
      Use interior adjacency for all pairs. Defaults to the
      `interior_adjacency` entry of config.json.

  Returns
  -------
  adjacency : `frozendict[tuple[int, int], bool]`
      `adjacency[(i, k)]` is True for interior adjacency.
  """
  if interior is None:
    interior = interior_adjacency
  return frozendict({(i, k): bool(interior)
                     for i in range(dim) for k in range(dim) if i != k})


def set_adjacency(adjacency, i, k, interior):
  if i == k or (i, k) not in adjacency:
    raise InvalidConfiguration(f"no surfel adjacency between directions {i} and {k}")
  # kept symmetric: the follower of the follower is the starting surfel
  return adjacency.set((i, k), bool(interior)).set((k, i), bool(interior))


def get_adjacency(adjacency, i, k):
  return adjacency[(i, k)]
