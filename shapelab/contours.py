# contours.py  (Moore-neighbour tracing with a global visited mask)
# outer boundary extraction from the foreground mask

import logging
from typing import List, Sequence, Tuple
import numpy as np

logger = logging.getLogger(__name__)

Contour = List[Tuple[int, int]]   # (x, y), logically closed

# right, top-right, top, top-left, left, bottom-left, bottom, bottom-right  (y grows down)
DIRECTIONS = [(1, 0), (1, -1), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1)]


def is_edge(fg: Sequence, x: int, y: int) -> bool:
    """Foreground pixel with at least one background 8-neighbour."""
    h, w = len(fg), len(fg[0])
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0: continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < w and 0 <= ny < h and not fg[ny][nx]:
                return True
    return False


def trace_boundary(fg: Sequence, visited: np.ndarray, start: Tuple[int, int]) -> Contour:
    """Walk the boundary from `start`, marking every point in `visited`.

    `fg` is indexed fg[y][x] (a bool array or its .tolist()). The walk ends on
    return to `start`, on a dead end, or after w*h moves.
    """
    h, w = len(fg), len(fg[0])
    contour: Contour = []
    x, y = start
    d = 0
    max_iter = w * h
    it = 0
    while True:
        contour.append((x, y))
        visited[y, x] = True
        for i in range(8):
            k = (d + i) % 8
            nx, ny = x + DIRECTIONS[k][0], y + DIRECTIONS[k][1]
            if 0 <= nx < w and 0 <= ny < h and fg[ny][nx]:
                x, y = nx, ny
                d = (k + 6) % 8
                break
        else:
            break
        it += 1
        if (x, y) == start or it >= max_iter:
            break
    return contour


def trace_contours(fg: np.ndarray, min_points: int = 10) -> List[Contour]:
    """Row-major scan of interior pixels; each unvisited edge pixel seeds one trace."""
    h, w = fg.shape
    rows = fg.tolist()
    visited = np.zeros((h, w), dtype=bool)
    contours: List[Contour] = []
    short = 0
    for y in range(1, h - 1):
        row = rows[y]
        for x in range(1, w - 1):
            if not row[x] or visited[y, x]: continue
            if not is_edge(rows, x, y): continue
            c = trace_boundary(rows, visited, (x, y))
            if len(c) >= min_points:
                contours.append(c)
            else:
                short += 1
    logger.debug("traced %d contours (%d shorter than %d points dropped)", len(contours), short, min_points)
    return contours
