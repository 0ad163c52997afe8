"""
Umbrella traversal around a (d-3)-cell of a digital surface.

An umbrella is described by a tracker on surfel s, a track direction k,
an orientation epsilon and an umbrella direction j, all three directions
of the state being distinct. With i the orthogonal direction of s:

  separator = s + epsilon e_k                  (a (d-2)-cell)
  pivot     = separator + delta e_j            (a (d-3)-cell)
  delta     = -sigma epsilon perm(k, j, i)

where sigma is the sign of s and perm the sign of the permutation
sorting (k, j, i). The choice of delta makes (epsilon e_k, delta e_j)
turn counter-clockwise around the outward normal -sigma e_i, so every
umbrella of an oriented boundary is walked in the same direction.

Each call to umbrella_next crosses the separator and rotates the frame
so that the next separator is the other edge of the new surfel through
the pivot. The pivot never changes; after as many steps as there are
surfels around it, the state is back where it started.
"""
import logging
from .khalimsky import orth_dir, open_dirs, closed_dirs, incident, axis_permutation_sign
from .boundary import is_bel
from .tracker import tracker_clone, tracker_current, tracker_adjacent, tracker_move_to, tracker_space
from .topology_definitions import NO_MOVE, MAX_UMBRELLA_SIZE, MIN_UMBRELLA_DIM
from ..config import DEBUG
from ..errors import InvalidConfiguration, TraversalStuck
from ..digisurf_types import Surfel, UmbrellaState

logger = logging.getLogger(__name__)


def pivot_direction(surfel, k, epsilon, j):
  """
  Side of the separator, along `j`, on which the pivot lies.

  Parameters
  ----------
  surfel : `tuple[tuple[int, ...], bool]`
      Surfel of the umbrella state.
  k : `int`
      Track direction.
  epsilon : `bool`
      Side of the separator along `k`.
  j : `int`
      Umbrella direction.

  Returns
  -------
  delta : `bool`
      True when the pivot is on the positive side along `j`.
  """
  coords, positive = surfel
  i = orth_dir(coords)
  sigma = 1 if positive else -1
  eps = 1 if epsilon else -1
  return -sigma * eps * axis_permutation_sign(k, j, i) > 0


def init_umbrella(tracker, k, epsilon, j):
  """
  Bind an umbrella computer to a copy of `tracker`.

  Parameters
  ----------
  tracker : `dict[str, Any]`
      Tracker positioned on a bel. It is cloned and never moved.
  k : `int`
      Track direction, an open direction of the current surfel.
  epsilon : `bool`
      Side of the first separator along `k`.
  j : `int`
      Umbrella direction, an open direction of the current surfel
      different from `k`.

  Returns
  -------
  umbrella : `dict[str, Any]`

  Raises
  ------
  InvalidConfiguration
      when the space has fewer than three dimensions, the directions
      are not distinct open directions of the current surfel, or the
      current surfel is not a bel with the orientation it carries.
  """
  dim = tracker_space(tracker)["dim"]
  if dim < MIN_UMBRELLA_DIM:
    raise InvalidConfiguration(f"umbrellas need a space of dimension >= {MIN_UMBRELLA_DIM}, got {dim}")
  surfel = tracker_current(tracker)
  if k == j:
    raise InvalidConfiguration(f"track and umbrella directions are both {k}")
  dirs = open_dirs(surfel[0])
  if k not in dirs or j not in dirs:
    raise InvalidConfiguration(f"directions ({k}, {j}) are not both open directions {dirs} of {surfel}")
  if not is_bel(tracker["boundary"], surfel):
    raise InvalidConfiguration(f"{surfel} is not a bel of the boundary with orientation {surfel[1]}")
  return {"tracker": tracker_clone(tracker),
          "k": k,
          "epsilon": bool(epsilon),
          "j": j}


def umbrella_surfel(umbrella) -> Surfel:
  return tracker_current(umbrella["tracker"])


def umbrella_track_direction(umbrella):
  return umbrella["k"]


def umbrella_orientation(umbrella):
  return umbrella["epsilon"]


def umbrella_direction(umbrella):
  return umbrella["j"]


def umbrella_state(umbrella) -> UmbrellaState:
  return (umbrella_surfel(umbrella), umbrella["k"], umbrella["epsilon"], umbrella["j"])


def umbrella_set_state(umbrella, state):
  surfel, k, epsilon, j = state
  tracker_move_to(umbrella["tracker"], surfel)
  umbrella["k"] = k
  umbrella["epsilon"] = epsilon
  umbrella["j"] = j


def umbrella_separator(umbrella):
  return incident(umbrella_surfel(umbrella)[0], umbrella["k"], umbrella["epsilon"])


def umbrella_pivot(umbrella):
  surfel = umbrella_surfel(umbrella)
  delta = pivot_direction(surfel, umbrella["k"], umbrella["epsilon"], umbrella["j"])
  return incident(umbrella_separator(umbrella), umbrella["j"], delta)


def umbrella_next(umbrella):
  """
  Move to the next surfel around the pivot.

  Returns
  -------
  code : `int`
      Follower code of the move: CONVEX_TURN, SLIDE or CONCAVE_TURN.

  Raises
  ------
  TraversalStuck
      when no bel follows the current surfel across the separator.
  """
  tracker = umbrella["tracker"]
  surfel = tracker_current(tracker)
  k = umbrella["k"]
  epsilon = umbrella["epsilon"]
  j = umbrella["j"]
  if DEBUG:
    pivot = umbrella_pivot(umbrella)
  delta = pivot_direction(surfel, k, epsilon, j)
  code, follower = tracker_adjacent(tracker, k, epsilon)
  if code == NO_MOVE:
    separator = incident(surfel[0], k, epsilon)
    logger.debug("umbrella stuck at %s across %s", surfel, separator)
    raise TraversalStuck(surfel, separator)
  tracker_move_to(tracker, follower)
  i = orth_dir(surfel[0])
  # a slide keeps the orthogonal direction, a turn swaps it with k
  m = k if orth_dir(follower[0]) == i else i
  umbrella["k"] = j
  umbrella["epsilon"] = delta
  umbrella["j"] = m
  if DEBUG:
    assert umbrella_pivot(umbrella) == pivot
  return code


def umbrella_previous(umbrella):
  """
  Move to the previous surfel around the pivot, undoing umbrella_next.

  Returns
  -------
  code : `int`
      Follower code of the move.

  Raises
  ------
  TraversalStuck
      when no bel precedes the current surfel around the pivot.
  """
  tracker = umbrella["tracker"]
  surfel = tracker_current(tracker)
  k = umbrella["k"]
  epsilon = umbrella["epsilon"]
  j = umbrella["j"]
  if DEBUG:
    pivot = umbrella_pivot(umbrella)
  delta = pivot_direction(surfel, k, epsilon, j)
  # the previous separator is the other edge of the surfel through the pivot
  separator = incident(surfel[0], j, delta)
  code, follower = tracker_adjacent(tracker, j, delta)
  if code == NO_MOVE:
    logger.debug("umbrella stuck at %s across %s", surfel, separator)
    raise TraversalStuck(surfel, separator)
  tracker_move_to(tracker, follower)
  i = orth_dir(follower[0])
  k_prev = [d for d in closed_dirs(separator) if d != i][0]
  umbrella["k"] = k_prev
  umbrella["epsilon"] = separator[k_prev] > follower[0][k_prev]
  umbrella["j"] = k
  if DEBUG:
    assert pivot_direction(follower, umbrella["k"], umbrella["epsilon"], k) == epsilon
    assert umbrella_pivot(umbrella) == pivot
  return code


def umbrella_cycle(umbrella):
  """
  Surfels of one full revolution around the pivot, starting with the
  current one. The umbrella ends in the state it started from.

  Raises
  ------
  TraversalStuck
      when a step gets stuck or the revolution does not close within
      MAX_UMBRELLA_SIZE steps. The start state is restored first.
  """
  start = umbrella_state(umbrella)
  surfels = [start[0]]
  try:
    for _ in range(MAX_UMBRELLA_SIZE):
      umbrella_next(umbrella)
      if umbrella_state(umbrella) == start:
        return surfels
      surfels.append(umbrella_surfel(umbrella))
  except TraversalStuck:
    umbrella_set_state(umbrella, start)
    raise
  umbrella_set_state(umbrella, start)
  raise TraversalStuck(start[0], incident(start[0][0], start[1], start[2]))


def umbrella_valence(umbrella):
  return len(umbrella_cycle(umbrella))
