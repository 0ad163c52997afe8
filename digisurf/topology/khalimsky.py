from frozendict import frozendict
from ..errors import InvalidConfiguration


def init_khalimsky_space(lower, upper, closed=True):
  """
  Create a bounded cellular grid space.

  Parameters
  ----------
  lower : `Sequence[int]`
      Lowest grid point of the space.
  upper : `Sequence[int]`
      Highest grid point of the space.
  closed : `bool`, default=True
      Whether the cells on the outer border of the
      spels belong to the space.

  Returns
  -------
  space : `frozendict[str, Any]`
      Keys `dim`, `lower`, `upper`, `closed` and the Khalimsky
      bounds `klower`, `kupper` of the cells in the space.

  Raises
  ------
  InvalidConfiguration
      when the bounds are empty or of mismatched dimension.

  Notes
  -----
  See topology_definitions for the coordinate conventions.
  """
  lower = tuple(int(x) for x in lower)
  upper = tuple(int(x) for x in upper)
  if len(lower) != len(upper) or len(lower) == 0:
    raise InvalidConfiguration(f"mismatched space bounds {lower}, {upper}")
  if any(lo > up for lo, up in zip(lower, upper)):
    raise InvalidConfiguration(f"empty space bounds {lower}, {upper}")
  if closed:
    klower = tuple(2 * x for x in lower)
    kupper = tuple(2 * x + 2 for x in upper)
  else:
    klower = tuple(2 * x + 1 for x in lower)
    kupper = tuple(2 * x + 1 for x in upper)
  return frozendict(dim=len(lower),
                    lower=lower,
                    upper=upper,
                    closed=bool(closed),
                    klower=klower,
                    kupper=kupper)


def space_contains_point(space, point):
  return all(lo <= x <= up for lo, x, up in zip(space["lower"], point, space["upper"]))


def space_contains_cell(space, coords):
  return all(lo <= x <= up for lo, x, up in zip(space["klower"], coords, space["kupper"]))


def spel_of_point(point):
  return tuple(2 * x + 1 for x in point)


def point_of_cell(coords):
  """
  Grid point of the spel containing `coords` in its closure,
  rounding closed coordinates down.
  """
  return tuple((x - 1) // 2 for x in coords)


def cell_dimension(coords):
  return sum(x & 1 for x in coords)


def is_surfel_coords(coords):
  return len(coords) - cell_dimension(coords) == 1


def open_dirs(coords):
  return [k for k, x in enumerate(coords) if x & 1]


def closed_dirs(coords):
  return [k for k, x in enumerate(coords) if not x & 1]


def orth_dir(coords):
  dirs = closed_dirs(coords)
  if len(dirs) != 1:
    raise InvalidConfiguration(f"{coords} is not a surfel")
  return dirs[0]


def incident(coords, k, up):
  """
  Cell incident to `coords` one Khalimsky step along `k`,
  towards positive coordinates when `up` is true.
  """
  return coords[:k] + (coords[k] + (1 if up else -1),) + coords[k + 1:]


def translate(coords, k, steps):
  return coords[:k] + (coords[k] + steps,) + coords[k + 1:]


def make_surfel(coords, positive):
  coords = tuple(int(x) for x in coords)
  if not is_surfel_coords(coords):
    raise InvalidConfiguration(f"{coords} is not a surfel")
  return coords, bool(positive)


def surfel_coords(surfel):
  return surfel[0]


def surfel_sign(surfel):
  return surfel[1]


def interior_spel(surfel):
  coords, positive = surfel
  return incident(coords, orth_dir(coords), positive)


def exterior_spel(surfel):
  coords, positive = surfel
  return incident(coords, orth_dir(coords), not positive)


def bel_between(inner_point, outer_point):
  """
  Surfel separating two grid points that differ by one along a single axis.

  Parameters
  ----------
  inner_point : `tuple[int, ...]`
      Grid point on the interior side.
  outer_point : `tuple[int, ...]`
      Grid point on the exterior side.

  Returns
  -------
  surfel : `tuple[tuple[int, ...], bool]`
      The oriented surfel whose interior spel is `inner_point`.
  """
  diffs = [k for k, (a, b) in enumerate(zip(inner_point, outer_point)) if a != b]
  if len(diffs) != 1 or abs(inner_point[diffs[0]] - outer_point[diffs[0]]) != 1:
    raise InvalidConfiguration(f"points {inner_point} and {outer_point} are not adjacent")
  k = diffs[0]
  coords = tuple(a + b + 1 for a, b in zip(inner_point, outer_point))
  return coords, inner_point[k] > outer_point[k]


def axis_permutation_sign(a, b, c):
  """
  Sign of the permutation sorting three distinct axes.

  Used as the orientation of the frame (e_a, e_b, e_c) relative
  to the frame of the same axes taken in increasing order.
  """
  inversions = int(a > b) + int(a > c) + int(b > c)
  return -1 if inversions & 1 else 1
