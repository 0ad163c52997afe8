"""
Errors raised while tracking digital surfaces.

`InvalidConfiguration` and `NoBoundaryFound` are caller errors and are
raised eagerly. `TraversalStuck` comes from a single umbrella step;
the discovery driver re-raises it as `MalformedSurface`.
`UnboundedSurface` ends a discovery pass that exceeded its surfel bound.
"""


class DigitalSurfaceError(Exception):
  pass


class InvalidConfiguration(DigitalSurfaceError, ValueError):
  pass


class NoBoundaryFound(DigitalSurfaceError, ValueError):
  pass


class TraversalStuck(DigitalSurfaceError, RuntimeError):
  def __init__(self, surfel, separator):
    super().__init__(f"no surfel follows {surfel} across separator {separator}")
    self.surfel = surfel
    self.separator = separator


class MalformedSurface(DigitalSurfaceError):
  def __init__(self, seed, surfel, separator):
    super().__init__(f"surface discovered from seed {seed} is not a closed manifold: "
                     f"traversal stuck at {surfel} across separator {separator}")
    self.seed = seed
    self.surfel = surfel
    self.separator = separator


class UnboundedSurface(DigitalSurfaceError):
  def __init__(self, seed, bound):
    super().__init__(f"surface discovered from seed {seed} has more than {bound} surfels")
    self.seed = seed
    self.bound = bound
