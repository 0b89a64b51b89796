from typing import Iterable, List, Tuple

Range = Tuple[int, int]


def merge_ranges(ranges: Iterable[Range], gap: int = 1) -> List[Range]:
    """
    Merge inclusive (start, end) ranges. A range whose start is at most `gap`
    past the previous end joins it, so gap=1 merges touching ranges.
    """
    merged: List[Range] = []
    for start, end in sorted(ranges):
        if merged and start <= merged[-1][1] + gap:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def subtract_ranges(ranges: Iterable[Range], cuts: Iterable[Range]) -> List[Range]:
    """Parts of inclusive `ranges` not covered by any of the inclusive `cuts`."""
    cuts = sorted(cuts)
    pieces: List[Range] = []
    for start, end in ranges:
        for cut_start, cut_end in cuts:
            if cut_end < start or cut_start > end:
                continue
            if cut_start > start:
                pieces.append((start, cut_start - 1))
            start = cut_end + 1
            if start > end:
                break
        if start <= end:
            pieces.append((start, end))
    return pieces
