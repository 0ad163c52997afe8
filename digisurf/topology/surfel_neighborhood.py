from .khalimsky import orth_dir, point_of_cell, translate, bel_between, space_contains_cell
from .topology_definitions import NO_MOVE, CONVEX_TURN, SLIDE, CONCAVE_TURN
from .boundary import boundary_contains


def get_follower(boundary, surfel, track_dir, pos):
  """
  Probe the spels around the separator of `surfel` along `track_dir`
  and select the bel that follows it on the boundary.

  Parameters
  ----------
  boundary : `frozendict[str, Any]`
      Boundary struct, see boundary.init_implicit_boundary.
  surfel : `tuple[tuple[int, ...], bool]`
      Current surfel.
  track_dir : `int`
      Open direction of `surfel` along which the separator lies.
  pos : `bool`
      Whether the separator is on the positive side of `surfel`.

  Returns
  -------
  code : `int`
      One of NO_MOVE, CONVEX_TURN, SLIDE, CONCAVE_TURN.
  follower : `tuple[tuple[int, ...], bool]` or `None`
      The following bel, None when `code` is NO_MOVE.

  Notes
  -----
  At most four membership probes are made. The probe fails with
  NO_MOVE when `surfel` is not a bel of the boundary or when the
  selected follower lies outside the space.
  See topology_definitions for the naming of the followers.
  """
  coords, positive = surfel
  i = orth_dir(coords)
  step = 2 if pos else -2
  inner_coords = translate(coords, i, 1 if positive else -1)
  outer_coords = translate(coords, i, -1 if positive else 1)
  inner = point_of_cell(inner_coords)
  outer = point_of_cell(outer_coords)
  if not boundary_contains(boundary, inner) or boundary_contains(boundary, outer):
    return NO_MOVE, None
  inner_next = point_of_cell(translate(inner_coords, track_dir, step))
  outer_next = point_of_cell(translate(outer_coords, track_dir, step))

  if boundary["adjacency"][(i, track_dir)]:
    if not boundary_contains(boundary, inner_next):
      code, follower = CONVEX_TURN, bel_between(inner, inner_next)
    elif not boundary_contains(boundary, outer_next):
      code, follower = SLIDE, bel_between(inner_next, outer_next)
    else:
      code, follower = CONCAVE_TURN, bel_between(outer_next, outer)
  else:
    if boundary_contains(boundary, outer_next):
      code, follower = CONCAVE_TURN, bel_between(outer_next, outer)
    elif boundary_contains(boundary, inner_next):
      code, follower = SLIDE, bel_between(inner_next, outer_next)
    else:
      code, follower = CONVEX_TURN, bel_between(inner, inner_next)

  if not space_contains_cell(boundary["space"], follower[0]):
    return NO_MOVE, None
  return code, follower
