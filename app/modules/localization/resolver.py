"""Pick one record per localization set.

For each set, in priority order:
1. the entry in the requested locale
2. the entry in the default locale
3. the first entry seen for the set

Locales are compared case-insensitively. The result lists one entry per
set, in the order each set was first seen in the input.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from infrastructure.i18n.locales import canonical_locale
from modules.localization.models import LocalizationIndexEntry


def group_by_set(
    entries: Iterable[LocalizationIndexEntry],
) -> Dict[str, List[LocalizationIndexEntry]]:
    groups: Dict[str, List[LocalizationIndexEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.localization_set, []).append(entry)
    return groups


def _pick(
    members: Sequence[LocalizationIndexEntry],
    requested_locale: Optional[str],
    default_locale: Optional[str],
) -> Optional[LocalizationIndexEntry]:
    if not members:
        return None
    for preferred in (requested_locale, default_locale):
        if not preferred:
            continue
        wanted = canonical_locale(preferred)
        for entry in members:
            if canonical_locale(entry.locale) == wanted:
                return entry
    return members[0]


def resolve_single_per_set(
    entries: Iterable[LocalizationIndexEntry],
    requested_locale: Optional[str],
    default_locale: Optional[str],
) -> List[LocalizationIndexEntry]:
    """Return at most one entry per localization set.

    Args:
        entries: Index entries, possibly spanning many sets.
        requested_locale: Locale preferred by the caller.
        default_locale: Fallback locale.

    Returns:
        One entry per distinct set, ordered by first appearance.
    """
    resolved = []
    for members in group_by_set(entries).values():
        entry = _pick(members, requested_locale, default_locale)
        if entry is not None:
            resolved.append(entry)
    return resolved
