from digisurf.topology.khalimsky import init_khalimsky_space
from digisurf.topology.boundary import init_implicit_boundary
from digisurf.topology.surfel_adjacency import init_surfel_adjacency, set_adjacency
from digisurf.topology.surfel_neighborhood import get_follower
from digisurf.topology.topology_definitions import NO_MOVE, CONVEX_TURN, SLIDE, CONCAVE_TURN
from ..reference_shapes import voxel_set_predicate, box_predicate


def make_boundary(predicate, interior=True, closed=True):
  space = init_khalimsky_space([-3, -3, -3], [3, 3, 3], closed=closed)
  return init_implicit_boundary(space, predicate, init_surfel_adjacency(3, interior=interior))


def test_convex_turn():
  boundary = make_boundary(voxel_set_predicate([(0, 0, 0)]))
  code, follower = get_follower(boundary, ((2, 1, 1), False), 1, True)
  assert code == CONVEX_TURN
  assert follower == ((1, 2, 1), False)


def test_slide():
  boundary = make_boundary(box_predicate((-3, -3, -3), (0, 3, 3)))
  code, follower = get_follower(boundary, ((2, 1, 1), False), 1, True)
  assert code == SLIDE
  assert follower == ((2, 3, 1), False)
  code, follower = get_follower(boundary, ((2, 1, 1), False), 2, False)
  assert code == SLIDE
  assert follower == ((2, 1, -1), False)


def test_concave_turn():
  boundary = make_boundary(voxel_set_predicate([(0, 0, 0), (0, 1, 0), (1, 1, 0)]))
  code, follower = get_follower(boundary, ((2, 1, 1), False), 1, True)
  assert code == CONCAVE_TURN
  assert follower == ((3, 2, 1), True)


def test_diagonal_configuration():
  diagonal = voxel_set_predicate([(0, 0, 0), (1, 1, 0)])
  code, follower = get_follower(make_boundary(diagonal, interior=True), ((2, 1, 1), False), 1, True)
  assert code == CONVEX_TURN
  assert follower == ((1, 2, 1), False)
  code, follower = get_follower(make_boundary(diagonal, interior=False), ((2, 1, 1), False), 1, True)
  assert code == CONCAVE_TURN
  assert follower == ((3, 2, 1), True)


def test_mixed_adjacency():
  diagonal = voxel_set_predicate([(0, 0, 0), (1, 1, 0)])
  boundary = make_boundary(diagonal, interior=True)
  adjacency = set_adjacency(boundary["adjacency"], 0, 1, False)
  assert not adjacency[(1, 0)]
  assert adjacency[(0, 2)]
  boundary = init_implicit_boundary(boundary["space"], diagonal, adjacency)
  code, _ = get_follower(boundary, ((2, 1, 1), False), 1, True)
  assert code == CONCAVE_TURN
  # the (0, 2) pair keeps interior adjacency
  code, _ = get_follower(boundary, ((2, 1, 1), False), 2, True)
  assert code == CONVEX_TURN


def test_follower_is_symmetric():
  for interior in [True, False]:
    boundary = make_boundary(voxel_set_predicate([(0, 0, 0), (1, 1, 0)]), interior=interior)
    code, follower = get_follower(boundary, ((2, 1, 1), False), 1, True)
    # walk back across the same separator
    back_dir = 0
    back_pos = follower[0][0] < 2
    code, back = get_follower(boundary, follower, back_dir, back_pos)
    assert back == ((2, 1, 1), False)


def test_no_move():
  boundary = make_boundary(voxel_set_predicate([(0, 0, 0)]))
  # orientation does not match the object
  assert get_follower(boundary, ((2, 1, 1), True), 1, True) == (NO_MOVE, None)
  # not on the boundary
  assert get_follower(boundary, ((4, 1, 1), False), 1, True) == (NO_MOVE, None)
  # follower on the border of an open space
  boundary = make_boundary(box_predicate((-3, -3, -3), (0, 3, 3)), closed=False)
  assert get_follower(boundary, ((2, 7, 1), False), 1, True) == (NO_MOVE, None)
  boundary = make_boundary(box_predicate((-3, -3, -3), (0, 3, 3)), closed=True)
  assert get_follower(boundary, ((2, 7, 1), False), 1, True) == (CONVEX_TURN, ((1, 8, 1), False))
