"""
Window Sizing

Computes the next preferred size for a window and where to place it, and
the centered position of a window inside its work area. Everything here is
pure: callers read live geometry from the host and apply the result.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .geometry import Area, Size


class NoFittingCandidate(LookupError):
    """No configured size fits the work area at the current scale."""

    def __init__(
        self, work_area: Optional[Area] = None, scale_factor: Optional[float] = None
    ):
        if work_area is None:
            message = "no candidate sizes to choose from"
        else:
            message = (
                f"no configured size fits a {work_area.width}x{work_area.height} "
                f"work area at scale {scale_factor}"
            )
        super().__init__(message)
        self.work_area = work_area
        self.scale_factor = scale_factor


@dataclass
class CycleResult:
    """Target frame geometry selected by a cycle step."""

    width: int
    height: int
    x: int
    y: int
    index: int  # Position of the chosen size in the candidate list


def scale_sizes(sizes: Sequence[Size], scale_factor: float) -> List[Size]:
    """Scale every size by the display scale factor, keeping order."""
    return [size.scaled(scale_factor) for size in sizes]


def fitting_candidates(
    sizes: Sequence[Size], work_area: Area, scale_factor: float
) -> List[Size]:
    """Scaled sizes that fit inside the work area, in configured order."""
    return [size for size in scale_sizes(sizes, scale_factor) if size.fits(work_area)]


def find_nearest_index(candidates: Sequence[Size], width: int, height: int) -> int:
    """
    Find the candidate closest to a window size.

    Distance is the sum of the absolute width and height differences. On a
    tie the candidate that comes first in the list wins.

    Raises:
        NoFittingCandidate: if there are no candidates
    """
    nearest_index = None
    nearest_error = 0

    for i, candidate in enumerate(candidates):
        error = abs(candidate.width - width) + abs(candidate.height - height)
        if nearest_index is None or error < nearest_error:
            nearest_index = i
            nearest_error = error

    if nearest_index is None:
        raise NoFittingCandidate()
    return nearest_index


def advance_index(index: int, count: int, backward: bool = False) -> int:
    """Step one position forward or backward through a ring of ``count`` items."""
    if count <= 0:
        raise NoFittingCandidate()
    return (index + (-1 if backward else 1)) % count


def clamp_onscreen(
    x: int, y: int, width: int, height: int, work_area: Area
) -> Tuple[int, int]:
    """
    Push a frame back inside the work area if its far edge would overflow.

    Each axis is handled on its own. The frame is only ever moved towards the
    work area origin, and never past it.
    """
    if x + width > work_area.right:
        x = max(work_area.x, work_area.right - width)
    if y + height > work_area.bottom:
        y = max(work_area.y, work_area.bottom - height)
    return x, y


def cycle(
    outer_rect: Area,
    work_area: Area,
    sizes: Sequence[Size],
    scale_factor: float,
    backward: bool = False,
) -> CycleResult:
    """
    Select the size after (or before) the one nearest to the window's size.

    Args:
        outer_rect: Current frame rect of the window
        work_area: Usable area of the window's monitor
        sizes: Configured sizes, unscaled, in cycle order
        scale_factor: Display scale factor
        backward: Step to the previous size instead of the next one

    Returns:
        CycleResult with the new size and an on-screen position for it

    Raises:
        NoFittingCandidate: if no scaled size fits the work area
    """
    candidates = fitting_candidates(sizes, work_area, scale_factor)
    if not candidates:
        raise NoFittingCandidate(work_area, scale_factor)

    nearest = find_nearest_index(candidates, outer_rect.width, outer_rect.height)
    index = advance_index(nearest, len(candidates), backward)
    target = candidates[index]

    x, y = clamp_onscreen(
        outer_rect.x, outer_rect.y, target.width, target.height, work_area
    )
    return CycleResult(target.width, target.height, x, y, index)


def center(outer_rect: Area, work_area: Area) -> Tuple[int, int]:
    """
    Position that centers a frame inside the work area, size unchanged.

    No clamping: a frame larger than the work area ends up partially outside.
    """
    x = work_area.x + (work_area.width - outer_rect.width) // 2
    y = work_area.y + (work_area.height - outer_rect.height) // 2
    return x, y
