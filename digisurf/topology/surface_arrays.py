from scipy.sparse import coo_array
from ..config import np
from .khalimsky import orth_dir
from .discovery import surfel_neighbors
from ..digisurf_types import SurfelCoordArray, SurfelSignArray, SurfelPositionArray


def surfels_to_arrays(surfels, dim=None) -> tuple[SurfelCoordArray, SurfelSignArray]:
  """
  Pack surfels into arrays for consumers outside of this package
  (viewers, mesh writers).

  Parameters
  ----------
  surfels : `Iterable[tuple[tuple[int, ...], bool]]`
      Surfels of a common space.
  dim : `int`, optional
      Dimension of the space, only used to shape the arrays of an
      empty input. Without it an empty input gives coords of shape (0, 0).

  Returns
  -------
  coords : `Array[tuple[surfel_idx, dim], Int]`
      Khalimsky coordinates, rows sorted lexicographically.
  signs : `Array[tuple[surfel_idx], Bool]`
      Orientation of each surfel.
  """
  ordered = sorted(surfels)
  if len(ordered) == 0:
    return np.zeros(shape=(0, 0 if dim is None else dim), dtype=np.int64), np.zeros(shape=(0,), dtype=bool)
  coords = np.array([s[0] for s in ordered], dtype=np.int64)
  signs = np.array([s[1] for s in ordered], dtype=bool)
  return coords, signs


def surfel_centroids(coords: SurfelCoordArray) -> SurfelPositionArray:
  """
  Position of surfel centers in grid units, where grid point p
  is the center of spel 2p + 1.
  """
  return (coords.astype(np.float64) - 1.0) / 2.0


def surfel_normals(coords: SurfelCoordArray,
                   signs: SurfelSignArray) -> SurfelPositionArray:
  """
  Outward unit normals. A positive surfel has its interior on the
  positive side of its orthogonal direction, hence the normal -e_i.
  """
  normals = np.zeros(shape=coords.shape, dtype=np.float64)
  orth = np.array([orth_dir(tuple(int(x) for x in row)) for row in coords], dtype=np.int64)
  normals[np.arange(coords.shape[0]), orth] = np.where(signs, -1.0, 1.0)
  return normals


def surfel_graph(tracker, surfels):
  """
  Adjacency matrix of the graph whose vertices are surfels and whose
  edges join surfels sharing a separator.

  Parameters
  ----------
  tracker : `dict[str, Any]`
      Any tracker on the boundary; it is not moved.
  surfels : `Iterable[tuple[tuple[int, ...], bool]]`
      Surfels, typically the output of discovery.discover.

  Returns
  -------
  graph : `coo_array[tuple[surfel_idx, surfel_idx], Int]`
      Symmetric 0/1 matrix, rows ordered as in `surfels_to_arrays`.
      Neighbours outside of `surfels` are dropped.
  """
  ordered = sorted(surfels)
  index = {surfel: idx for idx, surfel in enumerate(ordered)}
  rows = []
  cols = []
  for idx, surfel in enumerate(ordered):
    for neighbor in set(surfel_neighbors(tracker, surfel)):
      if neighbor in index:
        rows.append(idx)
        cols.append(index[neighbor])
  data = np.ones(len(rows), dtype=np.int64)
  return coo_array((data, (np.array(rows, dtype=np.int64), np.array(cols, dtype=np.int64))),
                   shape=(len(ordered), len(ordered)))
