import logging
from collections import deque
from .khalimsky import open_dirs
from .boundary import is_bel
from .tracker import tracker_clone, tracker_move_to, tracker_space
from .umbrella import init_umbrella, umbrella_next, umbrella_surfel, umbrella_cycle, umbrella_pivot
from .topology_definitions import MIN_UMBRELLA_DIM
from .. import config
from ..errors import InvalidConfiguration, TraversalStuck, MalformedSurface, UnboundedSurface
from ..digisurf_types import Surfel

logger = logging.getLogger(__name__)


def umbrella_frames(surfel):
  """
  Every (k, epsilon, j) frame an umbrella can start from on `surfel`,
  in a fixed order.
  """
  dirs = open_dirs(surfel[0])
  for k in dirs:
    for j in dirs:
      if j == k:
        continue
      for epsilon in (True, False):
        yield k, epsilon, j


def _check_dimension(tracker):
  dim = tracker_space(tracker)["dim"]
  if dim < MIN_UMBRELLA_DIM:
    raise InvalidConfiguration(f"surface tracking needs a space of dimension >= {MIN_UMBRELLA_DIM}, got {dim}")


def surfel_neighbors(tracker, surfel):
  """
  Surfels sharing a separator with `surfel`, one per separator.

  Parameters
  ----------
  tracker : `dict[str, Any]`
      Any tracker on the boundary; it is not moved.
  surfel : `tuple[tuple[int, ...], bool]`
      A bel of the boundary.

  Returns
  -------
  neighbors : `list[tuple[tuple[int, ...], bool]]`
      Neighbours ordered by (track direction, side).

  Raises
  ------
  TraversalStuck
      when some separator of `surfel` has no follower.
  """
  _check_dimension(tracker)
  local = tracker_clone(tracker)
  tracker_move_to(local, surfel)
  neighbors = []
  seen = set()
  for k, epsilon, j in umbrella_frames(surfel):
    if (k, epsilon) in seen:
      continue
    seen.add((k, epsilon))
    umbrella = init_umbrella(local, k, epsilon, j)
    umbrella_next(umbrella)
    neighbors.append(umbrella_surfel(umbrella))
  return neighbors


def discover(seed_surfel: Surfel, seed_tracker, max_surfels=None) -> set[Surfel]:
  """
  Collect the connected boundary component containing `seed_surfel`.

  Parameters
  ----------
  seed_surfel : `tuple[tuple[int, ...], bool]`
      Bel to start from.
  seed_tracker : `dict[str, Any]`
      Tracker on the boundary. It is cloned and never moved.
  max_surfels : `int`, optional
      Safety bound on the number of surfels. Defaults to the
      `max_surfels` entry of config.json.

  Returns
  -------
  surfels : `set[tuple[tuple[int, ...], bool]]`
      Every surfel reachable from the seed through umbrella steps.

  Raises
  ------
  InvalidConfiguration
      when the seed is not a bel or the space has fewer than three dimensions.
  UnboundedSurface
      when more than `max_surfels` surfels are reachable.
  MalformedSurface
      when an umbrella step gets stuck.

  Notes
  -----
  Each surfel is advanced by one umbrella step from every frame
  (k, epsilon, j). The result is a reachability closure, so the
  order in which the worklist is consumed does not change it.
  """
  if max_surfels is None:
    max_surfels = config.max_surfels
  _check_dimension(seed_tracker)
  if not is_bel(seed_tracker["boundary"], seed_surfel):
    raise InvalidConfiguration(f"seed {seed_surfel} is not a bel of the boundary")
  if max_surfels < 1:
    raise UnboundedSurface(seed_surfel, max_surfels)

  tracker = tracker_clone(seed_tracker)
  visited = {seed_surfel}
  frontier = deque([seed_surfel])
  while frontier:
    surfel = frontier.popleft()
    tracker_move_to(tracker, surfel)
    for k, epsilon, j in umbrella_frames(surfel):
      umbrella = init_umbrella(tracker, k, epsilon, j)
      try:
        umbrella_next(umbrella)
      except TraversalStuck as err:
        raise MalformedSurface(seed_surfel, err.surfel, err.separator) from err
      neighbor = umbrella_surfel(umbrella)
      if neighbor in visited:
        continue
      if len(visited) >= max_surfels:
        logger.warning("surfel bound %d reached from seed %s", max_surfels, seed_surfel)
        raise UnboundedSurface(seed_surfel, max_surfels)
      visited.add(neighbor)
      frontier.append(neighbor)
  logger.info("discovered %d surfels from seed %s", len(visited), seed_surfel)
  return visited


def enumerate_umbrellas(tracker, surfels):
  """
  Distinct umbrellas of a set of surfels, the faces of the complex dual
  to the digital surface.

  Parameters
  ----------
  tracker : `dict[str, Any]`
      Any tracker on the boundary; it is not moved.
  surfels : `Iterable[tuple[tuple[int, ...], bool]]`
      Surfels, typically the output of `discover`.

  Returns
  -------
  umbrellas : `dict[tuple[int, ...], list[tuple[tuple[...], ...]]]`
      Maps each pivot cell to its umbrellas, each given as the cycle
      of its surfels rotated to start at the smallest one.

  Raises
  ------
  InvalidConfiguration
      when the space has fewer than three dimensions or a surfel is not a bel.
  TraversalStuck
      when an umbrella of some surfel does not close.
  """
  _check_dimension(tracker)
  local = tracker_clone(tracker)
  umbrellas = {}
  seen = set()
  for surfel in surfels:
    tracker_move_to(local, surfel)
    for k, epsilon, j in umbrella_frames(surfel):
      umbrella = init_umbrella(local, k, epsilon, j)
      pivot = umbrella_pivot(umbrella)
      cycle = umbrella_cycle(umbrella)
      start = cycle.index(min(cycle))
      cycle = tuple(cycle[start:] + cycle[:start])
      if cycle in seen:
        continue
      seen.add(cycle)
      umbrellas.setdefault(pivot, []).append(cycle)
  return umbrellas


def euler_characteristic(tracker, surfels):
  """
  Euler characteristic V - E + F of the complex dual to a closed
  digital surface of a 3-dimensional space: surfels are vertices,
  separators are edges and umbrellas are faces.

  Raises
  ------
  InvalidConfiguration
      when the space is not 3-dimensional.
  TraversalStuck
      when the surface is not closed around some surfel.
  """
  if tracker_space(tracker)["dim"] != 3:
    raise InvalidConfiguration("the Euler characteristic is only defined here for 3-dimensional spaces")
  surfels = set(surfels)
  edges = set()
  for surfel in surfels:
    for neighbor in surfel_neighbors(tracker, surfel):
      edges.add(frozenset((surfel, neighbor)))
  faces = sum(len(cycles) for cycles in enumerate_umbrellas(tracker, surfels).values())
  return len(surfels) - len(edges) + faces
