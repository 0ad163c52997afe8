from pytest import raises
from digisurf.topology.khalimsky import init_khalimsky_space, open_dirs
from digisurf.topology.boundary import init_implicit_boundary, boundary_contains, is_bel, find_a_bel
from digisurf.topology.surfel_adjacency import init_surfel_adjacency
from digisurf.errors import NoBoundaryFound, InvalidConfiguration
from ..reference_shapes import ball_predicate, box_predicate
from ..context import test_radii


def test_contains_restricted_to_space():
  space = init_khalimsky_space([-2, -2, -2], [2, 2, 2])
  boundary = init_implicit_boundary(space, lambda point: True)
  assert boundary_contains(boundary, (2, -2, 0))
  assert not boundary_contains(boundary, (3, 0, 0))


def test_is_bel():
  space = init_khalimsky_space([-3, -3, -3], [3, 3, 3])
  boundary = init_implicit_boundary(space, box_predicate((-1, -1, -1), (1, 1, 1)))
  assert is_bel(boundary, ((4, 1, 1), False))
  assert not is_bel(boundary, ((4, 1, 1), True))
  assert is_bel(boundary, ((1, -2, 1), True))
  # interior surfel
  assert not is_bel(boundary, ((2, 1, 1), False))
  # not a surfel
  assert not is_bel(boundary, ((4, 2, 1), False))
  assert not is_bel(boundary, ((4, 1), False))


def test_adjacency_dimension_mismatch():
  space = init_khalimsky_space([-3, -3, -3], [3, 3, 3])
  with raises(InvalidConfiguration):
    init_implicit_boundary(space, lambda point: True, init_surfel_adjacency(4))


def test_find_a_bel():
  for radius in test_radii:
    space = init_khalimsky_space([-10, -10, -10], [10, 10, 10])
    boundary = init_implicit_boundary(space, ball_predicate((0, 0, 0), radius))
    bel = find_a_bel(boundary, seed=0)
    assert is_bel(boundary, bel)
    assert len(open_dirs(bel[0])) == 2
    assert find_a_bel(boundary, seed=0) == bel


def test_find_a_bel_4d():
  space = init_khalimsky_space([-4] * 4, [4] * 4)
  boundary = init_implicit_boundary(space, ball_predicate((0, 0, 0, 0), 2.0))
  bel = find_a_bel(boundary, seed=1)
  assert is_bel(boundary, bel)


def test_no_boundary():
  space = init_khalimsky_space([-3, -3, -3], [3, 3, 3])
  empty = init_implicit_boundary(space, lambda point: False)
  with raises(NoBoundaryFound):
    find_a_bel(empty, nb_tries=50, seed=0)
  full = init_implicit_boundary(space, lambda point: True)
  with raises(NoBoundaryFound):
    find_a_bel(full, nb_tries=50, seed=0)
