"""
This codebase uses Khalimsky coordinates for the cells of a
d-dimensional cubical grid. A coordinate is odd when the cell
is open along that axis and even when it is closed, so the grid
point p is the spel (voxel) 2p + 1 and a surfel has exactly one
even coordinate, its orthogonal direction i.

A surfel (coords, positive) is positive when its interior spel is
coords + e_i. The outward normal of a positive surfel is -e_i.

Crossing the separator of surfel s = A|B (A interior, B exterior)
along track direction k, seen in the (i, k) plane:

           B  |  B'
        ------+------     i
           A  |  A'       ↑
                          ·→ k
The candidate followers are
    CONVEX_TURN   A|A'   valid when A' is exterior
    SLIDE         A'|B'  valid when A' is interior and B' exterior
    CONCAVE_TURN  B'|B   valid when B' is interior
When A' is exterior and B' interior both turns are valid: interior
surfel adjacency picks CONVEX_TURN and keeps the diagonal spels A and B'
apart, exterior adjacency picks CONCAVE_TURN and joins them.
"""
NEG, POS = (False, True)
NO_MOVE, CONVEX_TURN, SLIDE, CONCAVE_TURN = (0, 1, 2, 3)

# at most 12 surfels lie in the star of a (d-3)-cell
MAX_UMBRELLA_SIZE = 12
MIN_UMBRELLA_DIM = 3
