"""Place a drawing of anchor dates onto the rolling contribution-graph window."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from painter_remap.date_utils import DAYS_PER_WEEK, grid_origin, sunday_row, week_start
from painter_remap.errors import EmptyDrawingError
from painter_remap.models import (
    Alignment,
    Drawing,
    GridCoordinate,
    RemapConfig,
    Window,
)

logger = logging.getLogger(__name__)


def to_col_row(day_index: int) -> GridCoordinate:
    """Grid cell of a day index (days since the grid origin)."""
    return GridCoordinate(col=day_index // DAYS_PER_WEEK, row=day_index % DAYS_PER_WEEK)


def from_col_row(coord: GridCoordinate) -> int:
    """Day index of a grid cell; inverse of ``to_col_row``."""
    return coord.col * DAYS_PER_WEEK + coord.row


def day_index(day: date, origin: date) -> int:
    return (day - origin).days


def compute_window(today: date, columns: int) -> Window:
    """
    Build the window of ``columns`` weeks whose last column holds ``today``.

    Args:
        today: Reference day (the last visible cell may not be after it)
        columns: Number of visible week columns

    Returns:
        Window anchored on the Sunday of its leftmost column
    """
    start = week_start(today) - timedelta(weeks=columns - 1)
    return Window(start=start, columns=columns, today_row=sunday_row(today))


def _initial_shift(drawing: Drawing, window: Window, alignment: Alignment) -> int:
    if alignment is Alignment.LEFT:
        return -drawing.min_col
    if alignment is Alignment.RIGHT:
        return window.rightmost_col - drawing.max_col
    return (window.columns - drawing.width) // 2 - drawing.min_col


def _clamp_shift(drawing: Drawing, window: Window, shift: int) -> int:
    """
    Keep the shifted drawing inside the window.

    The left bound is fixed first. The right bound is then pulled in only as far
    as the left bound allows, so an oversized drawing overflows on the right.
    """
    left = drawing.min_col + shift
    if left < 0:
        shift -= left

    excess = drawing.max_col + shift - window.rightmost_col
    if excess > 0:
        # an oversized drawing stops at column 0 and overflows on the right
        shift -= min(excess, drawing.min_col + shift)

    return shift


def _lands_in_future(drawing: Drawing, window: Window, shift: int) -> bool:
    return any(
        c.col + shift == window.rightmost_col and c.row > window.today_row
        for c in drawing.coordinates
    )


def _avoid_future(drawing: Drawing, window: Window, shift: int) -> int:
    """Step the drawing left until no cell after today is painted, or col 0 blocks it."""
    while _lands_in_future(drawing, window, shift) and drawing.min_col + shift - 1 >= 0:
        shift -= 1
    if _lands_in_future(drawing, window, shift):
        logger.warning("Drawing cannot move further left; some marks fall after today")
    return shift


@dataclass(frozen=True)
class GridMapping:
    """
    A rigid horizontal translation from the anchor-year grid onto the window.

    Every cell ``(col, row)`` moves to ``(col + shift_cols, row)``.
    """

    origin: date
    window: Window
    drawing: Drawing
    shift_cols: int

    def shift(self, coord: GridCoordinate) -> GridCoordinate:
        return GridCoordinate(col=coord.col + self.shift_cols, row=coord.row)

    @property
    def shifted_coordinates(self) -> list[GridCoordinate]:
        return [self.shift(c) for c in self.drawing.coordinates]

    def map_date(self, day: date) -> date:
        """
        Map a day of the anchor-year grid to its day in the window.

        Args:
            day: Calendar day (need not be one of the anchors)

        Returns:
            The translated calendar day
        """
        coord = to_col_row(day_index(day, self.origin))
        return self.window.date_at(self.shift(coord))


def build_mapping(anchors: list[date], config: RemapConfig) -> GridMapping:
    """
    Compute the column shift that places the anchors inside the window.

    Steps: align the drawing, clamp it to the window bounds, then (if the
    future guard is on) move it left until nothing is painted after today.

    Args:
        anchors: Anchor days, all from ``config.anchor_year``
        config: Window size, alignment, future guard and reference day

    Returns:
        The mapping applied to every date in the template

    Raises:
        EmptyDrawingError: If ``anchors`` is empty
    """
    if not anchors:
        raise EmptyDrawingError("At least one anchor date is required to build a mapping")

    origin = grid_origin(config.anchor_year)
    drawing = Drawing([to_col_row(day_index(d, origin)) for d in anchors])
    window = compute_window(config.today, config.columns)

    logger.info(
        "Drawing spans columns %d-%d (width %d), window has %d columns from %s",
        drawing.min_col,
        drawing.max_col,
        drawing.width,
        window.columns,
        window.start.isoformat(),
    )
    if drawing.width > window.columns:
        logger.warning(
            "Drawing is %d columns wide but the window only has %d",
            drawing.width,
            window.columns,
        )

    shift = _initial_shift(drawing, window, config.alignment)
    logger.debug("Initial %s shift: %d", config.alignment.value, shift)

    shift = _clamp_shift(drawing, window, shift)
    logger.debug("Clamped shift: %d", shift)

    if config.future_guard:
        shift = _avoid_future(drawing, window, shift)
        logger.debug("Shift after future guard: %d", shift)

    return GridMapping(origin=origin, window=window, drawing=drawing, shift_cols=shift)
