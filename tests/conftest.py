from pytest import fixture
from digisurf.topology.khalimsky import init_khalimsky_space
from digisurf.topology.boundary import init_implicit_boundary, find_a_bel
from digisurf.topology.surfel_adjacency import init_surfel_adjacency
from digisurf.topology.tracker import init_tracker
from .reference_shapes import ball_predicate


def ball_test_setup(radius, dim=3, extent=10, interior=True):
  space = init_khalimsky_space([-extent] * dim, [extent] * dim, closed=True)
  boundary = init_implicit_boundary(space,
                                    ball_predicate([0] * dim, radius),
                                    init_surfel_adjacency(dim, interior=interior))
  bel = find_a_bel(boundary, nb_tries=10000, seed=0)
  return {"space": space,
          "boundary": boundary,
          "bel": bel,
          "tracker": init_tracker(boundary, bel)}


@fixture(scope="module")
def ball_r4():
  return ball_test_setup(4.0)


@fixture(scope="module")
def ball_r2_4d():
  return ball_test_setup(2.0, dim=4, extent=4)
