"""End-to-end remapping of a painter template onto the current window."""

import logging

from painter_remap.grid import build_mapping
from painter_remap.models import RemapConfig
from painter_remap.rewriter import Rewriter
from painter_remap.template import (
    LineClassifier,
    extract_anchors,
    parse_date_token,
    sanitize,
)

logger = logging.getLogger(__name__)


def remap_template(text: str, config: RemapConfig) -> str:
    """
    Sanitize a template and move its dates onto the rolling window.

    Nothing is returned until every date token has been parsed, so a bad
    token never yields partial output.

    Args:
        text: Raw template text
        config: Remap configuration, including the reference day

    Returns:
        The rewritten script text, or the sanitized text if it has no anchors

    Raises:
        DateParseError: If a date token does not name a real calendar day
    """
    sanitized = sanitize(text)
    records = LineClassifier(config.anchor_year).classify(sanitized)

    anchor_tokens = extract_anchors(records)
    if not anchor_tokens:
        logger.info("No anchor dates found; passing template through")
        return sanitized

    anchors = [parse_date_token(token) for token in anchor_tokens]
    mapping = build_mapping(anchors, config)
    logger.info(
        "Shifting drawing by %d column(s) onto window starting %s",
        mapping.shift_cols,
        mapping.window.start.isoformat(),
    )

    return Rewriter(mapping).render(records)
