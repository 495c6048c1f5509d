"""Sanitize painter templates and split their lines into typed records."""

import logging
import re
from datetime import date

from painter_remap.date_utils import MONTH_TO_NUMBER
from painter_remap.errors import DateParseError
from painter_remap.models import (
    ANCHOR_YEAR,
    CommitRecord,
    EchoRecord,
    PlainText,
    TemplateRecord,
)

logger = logging.getLogger(__name__)

# Setup/network lines that would create a nested repo inside the painted one
SETUP_LINE_PREFIXES = (
    "mkdir github_painter",
    "cd github_painter",
    "git init",
    "git remote add origin",
    "git pull origin",
)

_SETUP_LINE_RE = re.compile(
    r"^(?:" + "|".join(re.escape(p) for p in SETUP_LINE_PREFIXES) + r").*(?:\r?\n|$)",
    re.MULTILINE,
)

# Only month, day and year are read; the rest of the token is not trusted
_DATE_FIELDS_RE = re.compile(r"^[A-Z][a-z]{2} ([A-Z][a-z]{2}) (\d{2}) (\d{4}) ")


def date_token_pattern(year: int = ANCHOR_YEAR) -> str:
    """
    Regex source for a full date token of ``year``.

    Example: ``Thu Jan 24 2019 00:00:00 GMT-0500 (Eastern Standard Time)``
    """
    return (
        r"[A-Z][a-z]{2}\s[A-Z][a-z]{2}\s\d{2}\s"
        + str(year)
        + r"\s\d{2}:\d{2}:\d{2}\sGMT[+-]\d{4}\s\([^)]+\)"
    )


def sanitize(text: str) -> str:
    """
    Drop setup and network lines so painting happens in the current repo.

    Args:
        text: Raw template text

    Returns:
        Text with every matching line (and its line break) removed
    """
    sanitized, removed = _SETUP_LINE_RE.subn("", text)
    if removed:
        logger.info("Removed %d setup line(s) from template", removed)
    return sanitized


def parse_date_token(token: str) -> date:
    """
    Parse the calendar day out of a date token.

    Args:
        token: Date token such as ``Thu Jan 24 2019 00:00:00 GMT-0500 (EST)``

    Returns:
        The calendar day (time of day and offset are ignored)

    Raises:
        DateParseError: If the month name is unknown or the day does not exist
    """
    match = _DATE_FIELDS_RE.match(token)
    if not match:
        raise DateParseError(f"Bad date: {token!r}")

    month_name, day_str, year_str = match.groups()
    month = MONTH_TO_NUMBER.get(month_name)
    if month is None:
        raise DateParseError(f"Unknown month {month_name!r} in date: {token!r}")

    try:
        return date(int(year_str), month, int(day_str))
    except ValueError as e:
        raise DateParseError(f"Bad date: {token!r}: {e}") from e


class LineClassifier:
    """Split template text into plain, echo and commit records for one anchor year."""

    def __init__(self, anchor_year: int = ANCHOR_YEAR):
        date_re = date_token_pattern(anchor_year)
        self.record_re = re.compile(
            rf"(?P<commit>git commit --date='(?P<commit_date>[^'\r\n]*)'"
            rf" -m '(?P<message>{date_re})')"
            rf"|(?P<echo>echo '(?P<echo_date>{date_re})' >> foobar\.txt)"
        )

    def _record(self, match: re.Match) -> TemplateRecord:
        if match.group("commit"):
            start = match.start()
            text = match.group()
            return CommitRecord(
                head=text[: match.start("commit_date") - start],
                commit_date=match.group("commit_date"),
                middle=text[match.end("commit_date") - start : match.start("message") - start],
                message_token=match.group("message"),
                tail=text[match.end("message") - start :],
            )
        return EchoRecord(
            prefix="echo '",
            date_token=match.group("echo_date"),
            suffix="' >> foobar.txt",
        )

    def classify_line(self, line: str) -> list[TemplateRecord]:
        """
        Split a single line (line ending included, if any) into records.

        Every echo and commit command on the line becomes its own record, in
        order; the text around them is kept as PlainText.

        Args:
            line: One line of sanitized template text

        Returns:
            Records whose rendered text joins back to ``line``
        """
        records: list[TemplateRecord] = []
        pos = 0
        for match in self.record_re.finditer(line):
            if match.start() > pos:
                records.append(PlainText(text=line[pos : match.start()]))
            records.append(self._record(match))
            pos = match.end()
        if pos < len(line) or not records:
            records.append(PlainText(text=line[pos:]))
        return records

    def classify(self, text: str) -> list[TemplateRecord]:
        """Classify every line of ``text``; joining the records gives ``text`` back."""
        records = [
            record
            for line in text.splitlines(keepends=True)
            for record in self.classify_line(line)
        ]
        logger.debug(
            "Classified %d records (%d commit, %d echo)",
            len(records),
            sum(isinstance(r, CommitRecord) for r in records),
            sum(isinstance(r, EchoRecord) for r in records),
        )
        return records


def extract_anchors(records: list[TemplateRecord]) -> list[str]:
    """
    Collect commit-message date tokens in order of first appearance.

    The ``-m`` field is used rather than ``--date`` because it always follows
    the full date grammar.

    Args:
        records: Classified template records

    Returns:
        Unique anchor date tokens
    """
    anchors = dict.fromkeys(
        r.message_token for r in records if isinstance(r, CommitRecord)
    )
    logger.info("Found %d anchor date(s)", len(anchors))
    return list(anchors)
