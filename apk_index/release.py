"""Release records and the APK filename parser."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable, List, Optional

from apk_index.config import DEFAULT_DOWNLOAD_PREFIX

logger = logging.getLogger(__name__)

APK_EXTENSION = ".apk"

# ---------------------------------------------------------------------------#
# Channels                                                                   #
# ---------------------------------------------------------------------------#


class Channel(str, Enum):
    """Release track encoded in the filename."""

    DEV = "dev"
    STG = "stg"

    @property
    def token(self) -> str:
        return self.value


CHANNELS = (Channel.DEV, Channel.STG)

# ---------------------------------------------------------------------------#
# Records                                                                    #
# ---------------------------------------------------------------------------#


@dataclass(frozen=True)
class ReleaseRecord:
    channel: Channel
    date: str
    build: int
    version: str
    filename: str

    @property
    def version_label(self) -> str:
        return f"v{self.version}"

    @property
    def build_label(self) -> str:
        return f"c{self.build}"

    @property
    def date_label(self) -> str:
        return f"{self.date[:4]}-{self.date[4:6]}-{self.date[6:8]}"

    @property
    def release_date(self) -> date:
        return datetime.strptime(self.date, "%Y%m%d").date()

    def href(self, download_prefix: str = DEFAULT_DOWNLOAD_PREFIX) -> str:
        return f"{download_prefix}{self.filename}"


# ---------------------------------------------------------------------------#
# Parsing                                                                    #
# ---------------------------------------------------------------------------#


def _filename_pattern(prefix: str) -> re.Pattern[str]:
    channels = "|".join(c.token for c in CHANNELS)
    return re.compile(
        rf"^{re.escape(prefix)}_({channels})_(\d{{8}})_c(\d+)"
        rf"_v(\d+\.\d+\.\d+)_release\.apk$",
        re.ASCII,
    )


def parse_apk_filename(name: str, prefix: str) -> Optional[ReleaseRecord]:
    """Return a record for ``{prefix}_{dev|stg}_YYYYMMDD_cN_vX.Y.Z_release.apk``.

    Anything else returns ``None``; a non-matching name is an ordinary
    outcome, not an error.
    """
    match = _filename_pattern(prefix).fullmatch(name)
    if match is None:
        return None
    channel, yyyymmdd, build, version = match.groups()
    return ReleaseRecord(
        channel=Channel(channel),
        date=yyyymmdd,
        build=int(build),
        version=version,
        filename=name,
    )


def parse_apk_filenames(names: Iterable[str], prefix: str) -> List[ReleaseRecord]:
    records: List[ReleaseRecord] = []
    for name in names:
        record = parse_apk_filename(name, prefix)
        if record is None:
            logger.debug("Skipping %s: does not match the release pattern", name)
            continue
        records.append(record)
    return records


__all__ = [
    "APK_EXTENSION",
    "CHANNELS",
    "Channel",
    "ReleaseRecord",
    "parse_apk_filename",
    "parse_apk_filenames",
]
