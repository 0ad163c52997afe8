from typing import Callable, NewType
import numpy as np
from jaxtyping import Bool, Float, Int64

Dimension = NewType("Dimension", int)

Coords = tuple[int, ...]
Point = tuple[int, ...]
Surfel = tuple[Coords, bool]
UmbrellaState = tuple[Surfel, Dimension, bool, Dimension]

PointPredicate = Callable[[Point], bool]

SurfelCoordArray = Int64[np.ndarray, "surfel_idx dim"]
SurfelSignArray = Bool[np.ndarray, "surfel_idx"]
SurfelPositionArray = Float[np.ndarray, "surfel_idx dim"]
