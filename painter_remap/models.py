"""Data models for template records, grid geometry and remap configuration."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum

from painter_remap.date_utils import DAYS_PER_WEEK
from painter_remap.errors import ConfigError

# Fixed year hard-coded into github-painter templates
ANCHOR_YEAR = 2019

# Visible weeks of a profile contribution graph
DEFAULT_COLUMNS = 53


class Alignment(str, Enum):
    """Horizontal placement of the drawing inside the window."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class RemapConfig:
    """
    Inputs of the grid mapping besides the anchors themselves.

    ``today`` is injected rather than read from the clock so that a mapping
    is fully determined by (anchors, config).
    """

    today: date
    alignment: Alignment = Alignment.CENTER
    columns: int = DEFAULT_COLUMNS
    future_guard: bool = True
    anchor_year: int = ANCHOR_YEAR

    def __post_init__(self):
        try:
            object.__setattr__(self, "alignment", Alignment(self.alignment))
        except ValueError as e:
            raise ConfigError(f"Unknown alignment: {self.alignment!r}") from e
        if self.columns < 1:
            raise ConfigError(f"Window needs at least one column, got {self.columns}")


@dataclass(frozen=True)
class GridCoordinate:
    """A cell of the calendar heatmap: week column and weekday row (0 = Sunday)."""

    col: int
    row: int


@dataclass(frozen=True)
class Window:
    """The destination grid: ``columns`` weeks ending with the week of today."""

    start: date  # Sunday of the leftmost column
    columns: int
    today_row: int

    @property
    def rightmost_col(self) -> int:
        return self.columns - 1

    def date_at(self, coord: GridCoordinate) -> date:
        """Calendar day shown at ``coord``."""
        return self.start + timedelta(days=coord.col * DAYS_PER_WEEK + coord.row)


@dataclass(frozen=True)
class PlainText:
    """Template text between date records, line endings included."""

    text: str


@dataclass(frozen=True)
class EchoRecord:
    """An ``echo '<DATE>' >> foobar.txt`` command split around its date."""

    prefix: str
    date_token: str
    suffix: str


@dataclass(frozen=True)
class CommitRecord:
    """
    A ``git commit --date='<ANY>' -m '<DATE>'`` command split around both fields.

    Only ``message_token`` is trusted; ``commit_date`` is kept for logging and
    is overwritten on output.
    """

    head: str
    commit_date: str
    middle: str
    message_token: str
    tail: str


TemplateRecord = PlainText | EchoRecord | CommitRecord


@dataclass
class Drawing:
    """Grid coordinates of all anchor dates; the shape being repositioned."""

    coordinates: list[GridCoordinate] = field(default_factory=list)

    @property
    def min_col(self) -> int:
        return min(c.col for c in self.coordinates)

    @property
    def max_col(self) -> int:
        return max(c.col for c in self.coordinates)

    @property
    def width(self) -> int:
        return self.max_col - self.min_col + 1
