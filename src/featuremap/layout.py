from typing import List, Sequence, Tuple


def assign_rows(spans: Sequence[Tuple[float, float]], min_distance: float = 0) -> List[int]:
    """
    Assign each span to the first row where it does not collide.

    Spans are visited in order of their start. A span fits in a row when it starts
    at least ``min_distance`` after the end of the last span already in that row;
    otherwise the next row is tried, and a new row is opened when none fits.

    Args:
        spans: (left, right) pixel extents
        min_distance: Minimum gap between neighbours sharing a row

    Returns:
        Row index for each span, in input order
    """
    order = sorted(range(len(spans)), key=lambda i: spans[i][0])
    row_ends: List[float] = []
    res = [0] * len(spans)
    for idx in order:
        s, e = spans[idx]
        placed = -1
        for row, last_end in enumerate(row_ends):
            if s - last_end >= min_distance and last_end <= s:
                placed = row
                break
        if placed == -1:
            row_ends.append(e)
            placed = len(row_ends) - 1
        else:
            row_ends[placed] = e
        res[idx] = placed
    return res


def row_count(rows: Sequence[int]) -> int:
    return max(rows) + 1 if rows else 0
