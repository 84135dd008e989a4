# simplify.py
# Ramer-Douglas-Peucker over a closed contour at an absolute tolerance

from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_CONFIG
from .features import perpendicular_distance

XY = Tuple[float, float]

# tolerances as fractions of the contour perimeter, tried in this order
EPSILON_FRACTIONS = DEFAULT_CONFIG.epsilon_fractions


def rdp(points: Sequence[XY], epsilon: float) -> List[XY]:
    """Split each span at its farthest interior point while that distance exceeds
    epsilon; a span that is not split contributes only its start point.
    The last input point is always appended.
    """
    n = len(points)
    if n < 3:
        return list(points)
    out: List[XY] = []
    stack = [(0, n - 1)]   # popped left-to-right, same order as the recursive split
    while stack:
        s, e = stack.pop()
        if e - s < 2:
            out.append(points[s]); continue
        a, b = points[s], points[e]
        max_d = 0.0; idx = s
        for i in range(s + 1, e):
            d = perpendicular_distance(points[i], a, b)
            if d > max_d:
                max_d, idx = d, i
        if max_d > epsilon:
            stack.append((idx, e))
            stack.append((s, idx))
        else:
            out.append(a)
    out.append(points[-1])
    return out


def approximate_polygon(contour: Sequence[XY], epsilon: float) -> Optional[List[XY]]:
    """Simplified polygon, or None when fewer than 3 vertices survive."""
    approx = rdp(contour, epsilon)
    return approx if len(approx) >= 3 else None
