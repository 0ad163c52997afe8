from digisurf.topology.khalimsky import init_khalimsky_space
from digisurf.topology.boundary import init_implicit_boundary
from digisurf.topology.surfel_adjacency import init_surfel_adjacency
from digisurf.topology.tracker import init_tracker, tracker_clone, tracker_current, tracker_orientation
from digisurf.topology.tracker import tracker_orth_dir, tracker_move, tracker_adjacent, tracker_move_to
from digisurf.topology.topology_definitions import CONVEX_TURN, NO_MOVE
from ..reference_shapes import voxel_set_predicate


def voxel_tracker(surfel):
  space = init_khalimsky_space([-3, -3, -3], [3, 3, 3])
  boundary = init_implicit_boundary(space, voxel_set_predicate([(0, 0, 0)]), init_surfel_adjacency(3))
  return init_tracker(boundary, surfel)


def test_accessors():
  tracker = voxel_tracker(((2, 1, 1), False))
  assert tracker_current(tracker) == ((2, 1, 1), False)
  assert not tracker_orientation(tracker)
  assert tracker_orth_dir(tracker) == 0


def test_adjacent_does_not_move():
  tracker = voxel_tracker(((2, 1, 1), False))
  code, surfel = tracker_adjacent(tracker, 2, False)
  assert code == CONVEX_TURN
  assert surfel == ((1, 1, 0), True)
  assert tracker_current(tracker) == ((2, 1, 1), False)


def test_try_move():
  tracker = voxel_tracker(((2, 1, 1), False))
  assert tracker_move(tracker, 1, False)
  assert tracker_current(tracker) == ((1, 0, 1), True)
  assert tracker_orth_dir(tracker) == 1
  assert tracker_orientation(tracker)


def test_failed_move_keeps_state():
  # wrong orientation: not a bel, so no surfel follows it
  tracker = voxel_tracker(((2, 1, 1), True))
  assert tracker_adjacent(tracker, 1, True) == (NO_MOVE, None)
  assert not tracker_move(tracker, 1, True)
  assert tracker_current(tracker) == ((2, 1, 1), True)


def test_clone_is_independent():
  tracker = voxel_tracker(((2, 1, 1), False))
  clone = tracker_clone(tracker)
  assert tracker_current(clone) == tracker_current(tracker)
  assert tracker_move(clone, 1, True)
  assert tracker_current(clone) == ((1, 2, 1), False)
  assert tracker_current(tracker) == ((2, 1, 1), False)
  assert not tracker_orientation(tracker)
  tracker_move_to(tracker, ((0, 1, 1), True))
  assert tracker_current(clone) == ((1, 2, 1), False)
