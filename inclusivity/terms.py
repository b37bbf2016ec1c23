"""Built-in table of non-inclusive terms and their suggested replacements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# Order matters: the first term found in a scanned text is the one reported.
_RAW_TERMS: Tuple[Tuple[str, str], ...] = (
    ("whitelist", "allow list, access list, permit"),
    ("white list", "allow list, access list, permit"),
    ("blacklist", "deny list, blocklist, exclude list"),
    ("black list", "deny list, blocklist, exclude list"),
    ("culture fit", "values fit, cultural contribution"),
    ("master", "primary, main, default, leader"),
    ("slave", "replica, standby, secondary, follower"),
    ("minority", "marginalized groups, underrepresented groups"),
    ("minorities", "marginalized groups, underrepresented groups"),
    ("brownbag", "learning session, lunch-and-learn, sack lunch"),
    ("brown bag", "learning session, lunch-and-learn, sack lunch"),
    ("whitebox", "openbox"),
    ("white-box", "open-box"),
    ("white box", "open box"),
    ("blackbox", "closedbox"),
    ("black-box", "closed-box"),
    ("black box", "closed box"),
    ("guys", "folks, you all, y'all, people, teammates, team"),
    ("he", "they"),
    ("his", "their, theirs"),
    ("him", "them"),
    ("she", "they"),
    ("her", "their"),
    ("hers", "theirs"),
    ("manpower", "person hours, engineer hours, work, workforce, personnel, team, workers"),
    ("man hours", "person hours, engineer hours, work, workforce, personnel, team, workers"),
    ("man-hours", "person hours, engineer hours, work, workforce, personnel, team, workers"),
    ("chairman", "chairperson, spokesperson, moderator, discussion leader, chair"),
    ("foreman", "chairperson, spokesperson, moderator, discussion leader, chair"),
    ("middleman", "middle person, intermediary, agent, dealer"),
    ("mother", "parent"),
    ("mothering", "parenting"),
    ("father", "parent"),
    ("fathering", "parenting"),
    ("wife", "spouse, partner, significant other"),
    ("husband", "spouse, partner, significant other"),
    ("boyfriend", "partner, significant other"),
    ("girlfriend", "partner, significant other"),
    ("girl", "woman"),
    ("girls", "women"),
    ("female", "woman"),
    ("females", "women"),
    ("boy", "man"),
    ("boys", "men"),
    ("male", "man"),
    ("males", "men"),
    ("mom test", "user test"),
    ("girlfriend test", "user test"),
    ("ninja", "professional"),
    ("rockstar", "professional"),
    ("housekeeping", "maintenance, cleanup, preparation"),
    ("opposite sex", "different sex"),
    ("grandfathered in", "exempt"),
    ("grandfathered", "exempt"),
    ("normal", "typical, healthy"),
    ("crazy", "unexpected, unpredictable, surprising"),
    ("insane", "unexpected, unpredictable, surprising"),
    ("freaky", "unexpected, unpredictable, surprising"),
    ("ocd", "organized, detail-oriented"),
    ("handicapped", "person with disabilities"),
    ("disabled", "person with disabilities"),
    ("sanity check", "quick check, confidence check, coherence check"),
    ("sane", "correct, adequate, sufficient, valid, sensible, coherent"),
    ("retard", "person with disabilities, mentally limited"),
    ("dummy value", "placeholder value, sample value"),
    ("citizen", "resident"),
    ("blackhat", "unethical hacker, malicious actor"),
    ("black hat", "unethical hacker, malicious actor"),
    ("whitehat", "ethical hacker, security researcher"),
    ("white hat", "ethical hacker, security researcher"),
    ("blackout", "outage, restriction window, freeze"),
    ("guy", "person, folks"),
    ("gentlemen", "everyone, folks, all"),
    ("spokesman", "spokesperson, representative"),
    ("mankind", "humankind, humanity, people"),
    ("manmade", "artificial, synthetic, machine-made"),
    ("man-made", "artificial, synthetic, machine-made"),
    ("unmanned", "uncrewed, automated"),
    ("manned", "staffed, crewed"),
    ("housewife", "homemaker"),
    ("workmanship", "quality, craft"),
    ("cripple", "slow down, hinder, impede"),
    ("lame", "boring, uninspiring"),
    ("dumb", "silly, unwise, foolish"),
    ("psycho", "unpredictable, erratic"),
    ("lunatic", "unpredictable, erratic"),
    ("tone deaf", "unaware, insensitive"),
    ("blind spot", "gap, unknown area"),
    ("guru", "expert, specialist"),
    ("powwow", "meeting, huddle"),
    ("spirit animal", "favorite, inspiration"),
    ("tribe", "team, group"),
    ("cakewalk", "easy task"),
    ("peanut gallery", "audience, critics"),
)


@dataclass(frozen=True)
class TermEntry:
    """One non-inclusive term with its ordered replacement suggestions."""

    term: str
    suggestions: Tuple[str, ...]

    @property
    def suggestion_text(self) -> str:
        return ", ".join(self.suggestions)


def _build_table() -> Tuple[TermEntry, ...]:
    return tuple(
        TermEntry(term=term.lower(), suggestions=tuple(part.strip() for part in raw.split(",")))
        for term, raw in _RAW_TERMS
    )


TERMS: Tuple[TermEntry, ...] = _build_table()
_BY_TERM: Dict[str, TermEntry] = {entry.term: entry for entry in TERMS}


def lookup_candidates() -> Tuple[TermEntry, ...]:
    """Return every term entry in table order."""

    return TERMS


def get_entry(term: str) -> Optional[TermEntry]:
    """Return the entry for ``term`` (case-insensitive), or ``None``."""

    if not term:
        return None
    return _BY_TERM.get(term.lower())
