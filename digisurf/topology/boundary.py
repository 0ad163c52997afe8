import logging
from frozendict import frozendict
from ..config import np, DEBUG
from .khalimsky import space_contains_point, interior_spel, exterior_spel, point_of_cell, bel_between, orth_dir
from .surfel_adjacency import init_surfel_adjacency
from ..errors import InvalidConfiguration, NoBoundaryFound
from ..digisurf_types import PointPredicate

logger = logging.getLogger(__name__)


def init_implicit_boundary(space, predicate: PointPredicate, adjacency=None):
  """
  Bundle a space, a membership predicate and a surfel adjacency
  into the boundary struct consumed by trackers.

  Parameters
  ----------
  space : `frozendict[str, Any]`
      See khalimsky.init_khalimsky_space.
  predicate : `Callable[[tuple[int, ...]], bool]`
      Membership test of grid points. Only called on points of `space`.
  adjacency : `frozendict[tuple[int, int], bool]`, optional
      See surfel_adjacency.init_surfel_adjacency; defaults to the
      configured adjacency.

  Returns
  -------
  boundary : `frozendict[str, Any]`
  """
  if adjacency is None:
    adjacency = init_surfel_adjacency(space["dim"])
  if len(adjacency) != space["dim"] * (space["dim"] - 1):
    raise InvalidConfiguration("surfel adjacency does not match space dimension")
  return frozendict(space=space,
                    predicate=predicate,
                    adjacency=adjacency)


def boundary_contains(boundary, point):
  return space_contains_point(boundary["space"], point) and bool(boundary["predicate"](point))


def is_bel(boundary, surfel):
  coords = surfel[0]
  if len(coords) != boundary["space"]["dim"]:
    return False
  if len(coords) - sum(x & 1 for x in coords) != 1:
    return False
  return (boundary_contains(boundary, point_of_cell(interior_spel(surfel))) and
          not boundary_contains(boundary, point_of_cell(exterior_spel(surfel))))


def find_a_bel(boundary, nb_tries=10000, seed=None):
  """
  Find some bel of the boundary by random probing.

  Parameters
  ----------
  boundary : `frozendict[str, Any]`
      Boundary struct.
  nb_tries : `int`, default=10000
      Number of random points drawn before giving up.
  seed : `int`, optional
      Seed of the random generator.

  Returns
  -------
  surfel : `tuple[tuple[int, ...], bool]`
      A bel whose interior spel is in the object.

  Raises
  ------
  NoBoundaryFound
      when no interior and exterior points were both drawn.

  Notes
  -----
  Once an interior point and an exterior point are known the segment
  between them is bisected until both ends are neighbours in the
  infinity norm. The last pair is then joined one axis at a time.
  """
  space = boundary["space"]
  rng = np.random.default_rng(seed)
  lower = np.array(space["lower"])
  upper = np.array(space["upper"])
  inner = None
  outer = None
  for _ in range(nb_tries):
    point = tuple(int(x) for x in rng.integers(lower, upper + 1))
    if boundary_contains(boundary, point):
      inner = point
    else:
      outer = point
    if inner is not None and outer is not None:
      break
  else:
    raise NoBoundaryFound(f"no interior and exterior points found after {nb_tries} tries")

  x = np.array(inner)
  y = np.array(outer)
  while np.max(np.abs(x - y)) > 1:
    mid = tuple(int(v) for v in (x + y) // 2)
    if boundary_contains(boundary, mid):
      x = np.array(mid)
    else:
      y = np.array(mid)

  if DEBUG:
    # the walk ends on y, so it meets the boundary before leaving the loop
    assert not boundary_contains(boundary, tuple(int(v) for v in y))
  current = tuple(int(v) for v in x)
  for k in range(space["dim"]):
    if x[k] == y[k]:
      continue
    step = current[:k] + (int(y[k]),) + current[k + 1:]
    if not boundary_contains(boundary, step):
      bel = bel_between(current, step)
      logger.debug("found bel %s orthogonal to %d", bel, orth_dir(bel[0]))
      return bel
    current = step
