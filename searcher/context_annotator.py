import logging

from searcher.errors import InvalidRadiusError
from searcher.report import MatchContext, Report


def _newline_for(text):
    return "\n" if isinstance(text, str) else b"\n"


def visible_offset(text, index):
    """Number of non-newline characters in text[0:index]."""
    return index - text.count(_newline_for(text), 0, index)


def render_context(text, context_start, context_end):
    """
    Returns the span of text whose cumulative non-newline count falls in
    [context_start, context_end).

    A newline carries the count of the characters before it. It is kept only
    when it sits strictly inside the window, so line breaks between two
    rendered characters survive and a break right before the window does not.
    """
    newline = _newline_for(text)
    lo = None
    hi = None
    clean_index = 0

    for i in range(len(text)):
        is_newline = text[i:i + 1] == newline
        if is_newline:
            in_range = context_start < clean_index < context_end
        else:
            in_range = context_start <= clean_index < context_end

        if in_range:
            if lo is None:
                lo = i
            hi = i + 1

        if not is_newline:
            clean_index += 1
            if clean_index >= context_end:
                break

    if lo is None:
        return text[:0]
    return text[lo:hi]


class ContextAnnotator:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def annotate(self, original_text, matches, pattern, radius):
        """
        Builds a Report for raw match offsets.

        Offsets index the case-folded copy of original_text, which has the
        same length, so they index original_text directly. Positions and
        windows are measured in visible (newline-free) characters.
        """
        if radius < 0:
            raise InvalidRadiusError(f"radius must be non-negative, got {radius}", radius=radius)

        report = Report()
        if not matches:
            return report

        for index in matches:
            visible_index = visible_offset(original_text, index)
            context_start = max(0, visible_index - radius)
            context_end = visible_index + len(pattern) + radius

            context = render_context(original_text, context_start, context_end)
            report.entries.append(MatchContext(pattern=pattern, position=visible_index, context=context))

        self.logger.debug(f"Annotated {len(report)} matches with radius {radius}")
        return report


def annotate(original_text, matches, pattern, radius):
    return ContextAnnotator().annotate(original_text, matches, pattern, radius)
