import re

from shared.models.search import HighlightSegment
from shared.search.query_evaluator import query_terms


def highlight_segments(text: str, query: str) -> list[HighlightSegment]:
    """Split ``text`` into segments, flagging every case-insensitive occurrence of a query term.

    Args:
        text (str): Field value to display, e.g. a title.
        query (str): The raw search query.

    Returns:
        list[HighlightSegment]: Segments that concatenate back to ``text``.
    """
    terms = query_terms(query)
    if not terms or not text:
        return [HighlightSegment(text=text)]

    pattern = re.compile("(" + "|".join(re.escape(term) for term in terms) + ")", re.IGNORECASE)
    segments: list[HighlightSegment] = []
    for part in pattern.split(text):
        if not part:
            continue
        segments.append(HighlightSegment(text=part, matched=part.lower() in terms))
    return segments
