# dubai_horizon/services/itinerary_parser.py
"""Turns free-text itineraries into a day / time-block outline.

The generator answers in loosely formatted prose, so everything here is a
best-effort heuristic: headings such as ``Day 2:`` split the text into
sections, and lines starting with ``Morning:``, ``Lunch -`` and so on split
each section into time blocks. None of these functions raise; text that
does not fit the expected shape degrades into fewer, coarser sections.
"""

import logging
import re
from typing import List, NamedTuple, Optional

from dubai_horizon.models.itinerary import CategoryTag, DaySection, TimeBlock

logger = logging.getLogger(__name__)

OVERVIEW_TITLE = "Trip Overview"
FALLBACK_TITLE = "Your Itinerary Plan"

# Checked top to bottom, first hit wins.
CATEGORY_RULES = (
    (("morning",), CategoryTag.MORNING),
    (("afternoon",), CategoryTag.AFTERNOON),
    (("evening", "night"), CategoryTag.EVENING),
    (("breakfast", "brunch", "lunch", "dinner", "supper", "food", "restaurant"), CategoryTag.MEAL),
    (("airport", "flight"), CategoryTag.FLIGHT),
    (("hotel", "check-in", "check in", "accommodation"), CategoryTag.LODGING),
    (("tour", "sightseeing", "visit"), CategoryTag.SIGHTSEEING),
    (("museum",), CategoryTag.CULTURE),
    (("shop", "mall", "market"), CategoryTag.SHOPPING),
    (("bar", "club", "lounge"), CategoryTag.NIGHTLIFE),
    (("park", "garden"), CategoryTag.NATURE),
    (("beach", "swim", "sea"), CategoryTag.WATER),
    (("ferris wheel", "eye"), CategoryTag.LANDMARK),
    (("cruise", "boat", "yacht", "abra"), CategoryTag.CRUISE),
    (("metro", "transport", "train", "bus", "taxi"), CategoryTag.TRANSIT),
    (("work", "meeting"), CategoryTag.WORK),
)

PERIOD_KEYWORDS = (
    "morning", "afternoon", "evening", "night",
    "breakfast", "brunch", "lunch", "dinner", "supper",
)

# The keyword must be followed by a colon, a dash or the end of the line,
# so "Morning tea on the terrace" stays ordinary text.
_MARKER_PATTERNS = tuple(
    (keyword, re.compile(rf"^{keyword}\s*(?:[:\-]|$)", re.IGNORECASE))
    for keyword in PERIOD_KEYWORDS
)
_LEADING_PUNCTUATION = re.compile(r"^[\s:\-]+")
_DAY_HEADING = re.compile(r"(Day\s+\d+\s*[:-]?\s*)", re.IGNORECASE)
_TRAILING_HEADING_PUNCTUATION = re.compile(r"[\s:\-]*$")


class Segmentation(NamedTuple):
    introduction: Optional[str]
    blocks: List[TimeBlock]


class _BlockDraft:
    __slots__ = ("period", "lines", "category")

    def __init__(self, period, first_line, category):
        self.period = period
        self.lines = [first_line] if first_line else []
        self.category = category

    @property
    def description(self):
        return "\n".join(self.lines)

    def has_content(self):
        return bool(self.description.strip())

    def freeze(self):
        return TimeBlock(period=self.period, description=self.description, category_hint=self.category)


def classify_period(text: Optional[str]) -> Optional[CategoryTag]:
    """Return the category tag of the first rule whose keyword occurs in ``text``."""
    if not text:
        return None
    lowered = text.lower()
    for keywords, tag in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return tag
    return None


def match_period_marker(line: str) -> Optional[str]:
    """Return the capitalized period label if ``line`` opens a time block."""
    for keyword, pattern in _MARKER_PATTERNS:
        if pattern.match(line):
            return keyword.capitalize()
    return None


def _marker_remainder(line: str, period: str) -> str:
    return _LEADING_PUNCTUATION.sub("", line[len(period):]).strip()


def segment_lines(text: Optional[str]) -> Segmentation:
    """Split one day's text into an introduction and labeled time blocks.

    Lines before the first period marker form the introduction. Each marker
    line opens a block; following unmarked lines are appended to it. If no
    marker appears at all, the prose becomes a single unlabeled block so the
    section is never rendered empty.

    Args:
        text: Body of one day section, or the whole itinerary.

    Returns:
        Segmentation with the trimmed introduction (or None) and the blocks
        in source order. Blocks with an empty description are dropped.
    """
    if not text or not text.strip():
        return Segmentation(None, [])

    lines = [line.strip() for line in text.split("\n") if line.strip()]
    introduction = []
    drafts = []
    current = None
    marker_seen = False

    for line in lines:
        period = match_period_marker(line)
        if period is not None:
            if current is not None and current.has_content():
                drafts.append(current)
            current = _BlockDraft(period, _marker_remainder(line, period), classify_period(period))
            marker_seen = True
        elif current is not None:
            current.lines.append(line)
        elif not marker_seen:
            introduction.append(line)
        else:
            # Guard: every marker leaves a block open, so this only runs if that
            # ever changes. A stray line then starts its own unlabeled block.
            current = _BlockDraft("", line, classify_period(line))

    if current is not None and current.has_content():
        drafts.append(current)

    intro_text = "\n".join(introduction).strip()
    if not drafts and intro_text:
        drafts.append(_BlockDraft("", intro_text, classify_period(intro_text)))
        intro_text = ""

    for draft in drafts:
        if draft.category is None:
            draft.category = classify_period(draft.period or draft.description)

    blocks = [draft.freeze() for draft in drafts if draft.has_content()]
    return Segmentation(intro_text or None, blocks)


def _section(title: str, body: str) -> DaySection:
    introduction, blocks = segment_lines(body)
    return DaySection(title=title, introduction=introduction, time_blocks=blocks)


def split_days(text: str) -> List[DaySection]:
    """Split a full itinerary on ``Day N`` headings.

    Text ahead of the first heading becomes a "Trip Overview" section. When
    the text has no heading at all it is returned as one "Your Itinerary
    Plan" section, so non-empty input always yields at least one section.
    """
    parts = _DAY_HEADING.split(text)
    if len(parts) == 1:
        return [_section(FALLBACK_TITLE, text)] if text.strip() else []

    sections = []
    overview = parts[0].strip()
    if overview:
        sections.append(_section(OVERVIEW_TITLE, overview))

    for heading, body in zip(parts[1::2], parts[2::2]):
        title = _TRAILING_HEADING_PUNCTUATION.sub("", heading.strip())
        sections.append(_section(title, body.strip()))
    return sections


def structure_itinerary(text: Optional[str]) -> List[DaySection]:
    """Entry point: structured outline for ``text``, empty for blank input."""
    if text is None or not text.strip():
        return []
    sections = split_days(text)
    logger.debug("Structured itinerary into %d section(s)", len(sections))
    return sections
