import logging
from enum import Enum
from typing import Iterable

from fslist.utils.entry import EntrySet

logger = logging.getLogger(__name__)


def exclude_hidden(entry_set: EntrySet) -> EntrySet:
    """Drop hidden entries in place, keeping the order of the rest."""
    entry_set.entries[:] = [entry for entry in entry_set.entries if not entry.hidden]
    return entry_set


def reverse(entry_set: EntrySet) -> EntrySet:
    """Reverse entry order in place."""
    entry_set.entries.reverse()
    return entry_set


class Transform(Enum):
    # declaration order is application order
    NON_HIDDEN = 'non-hidden'
    REVERSE = 'reverse'


_TRANSFORMS = {
    Transform.NON_HIDDEN: exclude_hidden,
    Transform.REVERSE: reverse,
}


def apply_transforms(entry_set: EntrySet, transforms: Iterable[Transform]) -> EntrySet:
    """Apply requested transforms.

    Parameters
    ----------
    entry_set : EntrySet
        Collected entries, modified in place.
    transforms : Iterable[Transform]
        Requested transforms; duplicates and request order are ignored.

    Returns
    -------
    EntrySet
        The same entry set.
    """
    requested = set(transforms)
    for transform in Transform:
        if transform in requested:
            _TRANSFORMS[transform](entry_set)
            logger.debug(f"Applied {transform.value}, {len(entry_set)} entries left")
    return entry_set
