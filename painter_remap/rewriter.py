"""Write mapped dates back into classified template records."""

import logging

from painter_remap.date_utils import format_utc_noon
from painter_remap.grid import GridMapping
from painter_remap.models import CommitRecord, EchoRecord, PlainText, TemplateRecord
from painter_remap.template import parse_date_token

logger = logging.getLogger(__name__)


class Rewriter:
    """Render records with every date token replaced by its mapped noon-UTC token."""

    def __init__(self, mapping: GridMapping):
        self.mapping = mapping
        self._cache: dict[str, str] = {}

    def map_token(self, token: str) -> str:
        """
        Map one date token to the canonical token of its new day.

        Args:
            token: Anchor-year date token

        Returns:
            Token like ``Mon Apr 20 2026 12:00:00 GMT+0000 (UTC)``
        """
        if token not in self._cache:
            new_day = self.mapping.map_date(parse_date_token(token))
            self._cache[token] = format_utc_noon(new_day)
            logger.debug("%s -> %s", token, self._cache[token])
        return self._cache[token]

    def render_record(self, record: TemplateRecord) -> str:
        if isinstance(record, CommitRecord):
            # --date always follows the message date, whatever it held before
            new_token = self.map_token(record.message_token)
            if record.commit_date != record.message_token:
                logger.debug(
                    "Discarding --date %r in favour of message date %r",
                    record.commit_date,
                    record.message_token,
                )
            return record.head + new_token + record.middle + new_token + record.tail
        if isinstance(record, EchoRecord):
            return record.prefix + self.map_token(record.date_token) + record.suffix
        if isinstance(record, PlainText):
            return record.text
        raise TypeError(f"Unknown template record: {record!r}")

    def render(self, records: list[TemplateRecord]) -> str:
        """Join rendered records into the output script text."""
        return "".join(self.render_record(record) for record in records)
