"""
Heuristic labels for a commit, written to the Notion "Feature Area" and
"Impact Level" select columns.

Both classifiers are ordered keyword rule lists. The first matching rule wins,
so a message like "fix chat bug" is a Chat Interface change, not a Bug Fix.
Matching is plain lower-case substring containment.

Public API:
  classify_feature_area(message, file_paths) → FeatureArea
  classify_impact_level(message, additions, deletions) → ImpactLevel
"""
from enum import Enum
from typing import Callable, Iterable, List, Sequence, Tuple


class FeatureArea(str, Enum):
    CHAT_INTERFACE = "Chat Interface"
    BIGQUERY = "BigQuery Integration"
    AI_API = "AI/Claude API"
    DATABASE = "Database/Supabase"
    UI_UX = "UI/UX"
    TESTING = "Testing"
    DEPLOYMENT = "Deployment"
    BUG_FIX = "Bug Fix"


class ImpactLevel(str, Enum):
    MAJOR_FEATURE = "Major Feature"
    BUG_FIX = "Bug Fix"
    REFACTOR = "Refactor"
    DOCUMENTATION = "Documentation"
    MINOR_FEATURE = "Minor Feature"


MAJOR_CHANGE_THRESHOLD = 200
MINOR_CHANGE_THRESHOLD = 50


def _any_in(text: str, needles: Sequence[str]) -> bool:
    return any(n in text for n in needles)


# (label, predicate(message, files)) in priority order. Do not reorder.
_FEATURE_AREA_RULES: List[Tuple[FeatureArea, Callable[[str, str], bool]]] = [
    (FeatureArea.CHAT_INTERFACE,
     lambda m, f: "chat" in m or _any_in(f, ("chat-interface", "chat.tsx"))),
    (FeatureArea.BIGQUERY,
     lambda m, f: _any_in(m, ("bigquery", "analytics")) or "bigquery" in f),
    (FeatureArea.AI_API,
     lambda m, f: _any_in(m, ("claude", "ai", "anthropic"))),
    (FeatureArea.DATABASE,
     lambda m, f: _any_in(m, ("supabase", "database", "auth"))),
    (FeatureArea.UI_UX,
     lambda m, f: _any_in(m, ("ui", "style", "css")) or ".css" in f),
    (FeatureArea.TESTING,
     lambda m, f: "test" in m or _any_in(f, ("test", ".spec."))),
    (FeatureArea.DEPLOYMENT,
     lambda m, f: _any_in(m, ("deploy", "build")) or _any_in(f, ("vercel", "dockerfile"))),
    (FeatureArea.BUG_FIX,
     lambda m, f: _any_in(m, ("fix", "bug"))),
]

# Most commits in the tracked repo touch the chat UI, so it doubles as the default.
DEFAULT_FEATURE_AREA = FeatureArea.CHAT_INTERFACE

# (label, predicate(message, total_changes)) in priority order.
_IMPACT_RULES: List[Tuple[ImpactLevel, Callable[[str, int], bool]]] = [
    (ImpactLevel.MAJOR_FEATURE,
     lambda m, t: _any_in(m, ("feat:", "feature:")) or t > MAJOR_CHANGE_THRESHOLD),
    (ImpactLevel.BUG_FIX,
     lambda m, t: _any_in(m, ("fix:", "bug"))),
    (ImpactLevel.REFACTOR,
     lambda m, t: _any_in(m, ("refactor:", "cleanup"))),
    (ImpactLevel.DOCUMENTATION,
     lambda m, t: _any_in(m, ("docs:", "readme"))),
    (ImpactLevel.MINOR_FEATURE,
     lambda m, t: t > MINOR_CHANGE_THRESHOLD),
]

DEFAULT_IMPACT_LEVEL = ImpactLevel.MINOR_FEATURE


def classify_feature_area(message: str, file_paths: Iterable[str] = ()) -> FeatureArea:
    """Return the feature area of the first rule matching the message or changed files."""
    msg = (message or "").lower()
    files = " ".join(file_paths).lower()
    for label, matches in _FEATURE_AREA_RULES:
        if matches(msg, files):
            return label
    return DEFAULT_FEATURE_AREA


def classify_impact_level(message: str, additions: int = 0, deletions: int = 0) -> ImpactLevel:
    """Return the impact level from conventional-commit prefixes and total lines changed."""
    msg = (message or "").lower()
    total = (additions or 0) + (deletions or 0)
    for label, matches in _IMPACT_RULES:
        if matches(msg, total):
            return label
    return DEFAULT_IMPACT_LEVEL
