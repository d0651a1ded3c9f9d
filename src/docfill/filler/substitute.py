"""Substitution of resolved values back into document markup."""

import logging
from typing import Mapping, Match
from xml.sax.saxutils import escape as xml_escape

from ..placeholders import format_marker
from ..placeholders.syntax import MARKER_PATTERN

logger = logging.getLogger(__name__)


def substitute(markup: str, resolution: Mapping[str, str], escape: bool = True) -> str:
    """
    Replace each marker in markup with its resolved value.

    Only the first occurrence of a marker is replaced. Markers are unique
    per document, so this matches a global replace unless a marker was
    duplicated upstream, which is logged and left as is. Replacement is a
    single pass over the input, so markers that appear inside inserted
    values are never substituted.

    Args:
        markup: Markup containing [PH_n] markers
        resolution: Placeholder id -> value
        escape: XML-escape values (&, <, >) before insertion

    Returns:
        The rewritten markup
    """
    counts: dict[str, int] = {}
    for match in MARKER_PATTERN.finditer(markup):
        counts[match.group(1)] = counts.get(match.group(1), 0) + 1

    for placeholder_id in resolution:
        marker = format_marker(placeholder_id)
        occurrences = counts.get(placeholder_id, 0)
        if occurrences == 0:
            logger.warning(f"Marker {marker} not found in markup; skipping")
        elif occurrences > 1:
            logger.warning(f"Marker {marker} occurs {occurrences} times; replacing only the first")

    replaced: set[str] = set()

    def replace(match: Match) -> str:
        placeholder_id = match.group(1)
        if placeholder_id not in resolution or placeholder_id in replaced:
            return match.group(0)
        replaced.add(placeholder_id)
        value = resolution[placeholder_id]
        return xml_escape(value) if escape else value

    return MARKER_PATTERN.sub(replace, markup)
