"""Group parsed releases into per-channel lists."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from apk_index.release import CHANNELS, Channel, ReleaseRecord

logger = logging.getLogger(__name__)


def sort_releases(records: Iterable[ReleaseRecord]) -> List[ReleaseRecord]:
    """Newest first: date descending, then build number descending.

    Dates are 8-digit strings so string order is chronological. The sort
    is stable, equal (date, build) pairs keep their input order.
    """
    by_build = sorted(records, key=lambda r: r.build, reverse=True)
    return sorted(by_build, key=lambda r: r.date, reverse=True)


def group_by_channel(
    records: Iterable[ReleaseRecord],
) -> Dict[Channel, List[ReleaseRecord]]:
    groups: Dict[Channel, List[ReleaseRecord]] = {c: [] for c in CHANNELS}
    for record in records:
        groups[record.channel].append(record)
    for channel in CHANNELS:
        groups[channel] = sort_releases(groups[channel])
        logger.debug("%s: %d release(s)", channel.token, len(groups[channel]))
    return groups


__all__ = ["group_by_channel", "sort_releases"]
