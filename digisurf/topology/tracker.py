"""
Boundary cursors ("trackers").

A tracker is a mutable `dict` holding a boundary struct and the
current surfel. Moves update it in place; `tracker_clone` returns
an independent tracker, since surfels are immutable tuples a shallow
copy shares no mutable state with its origin.
"""
from .khalimsky import orth_dir, make_surfel
from .surfel_neighborhood import get_follower
from .topology_definitions import NO_MOVE


def init_tracker(boundary, surfel):
  return {"boundary": boundary,
          "surfel": make_surfel(*surfel)}


def tracker_clone(tracker):
  return dict(tracker)


def tracker_current(tracker):
  return tracker["surfel"]


def tracker_orientation(tracker):
  return tracker["surfel"][1]


def tracker_orth_dir(tracker):
  return orth_dir(tracker["surfel"][0])


def tracker_space(tracker):
  return tracker["boundary"]["space"]


def tracker_adjacent(tracker, track_dir, pos):
  """
  Bel following the current surfel across its separator along
  `track_dir` on the side given by `pos`. Does not move the tracker.

  Returns
  -------
  code : `int`
      Follower code, NO_MOVE when there is none.
  surfel : `tuple[tuple[int, ...], bool]` or `None`
  """
  return get_follower(tracker["boundary"], tracker["surfel"], track_dir, pos)


def tracker_move(tracker, track_dir, pos):
  code, surfel = tracker_adjacent(tracker, track_dir, pos)
  if code == NO_MOVE:
    return False
  tracker["surfel"] = surfel
  return True


def tracker_move_to(tracker, surfel):
  tracker["surfel"] = surfel
