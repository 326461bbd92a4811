"""Replace marker-delimited regions and branding in the download page."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from markupsafe import escape

from apk_index.config import SiteConfig
from apk_index.html_renderer import render_release_list
from apk_index.release import Channel, ReleaseRecord
from apk_index.texts import TEXT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    name: str
    start: str
    end: str

    def __str__(self) -> str:
        return f"{self.start} .. {self.end}"


class MarkerError(RuntimeError):
    def __init__(self, region: Region, reason: str):
        self.region = region
        self.reason = reason
        super().__init__(f"Marker not found or invalid order: {region} ({reason})")


CHANNEL_REGIONS: Dict[Channel, Region] = {
    Channel.DEV: Region(
        name="dev",
        start="<!-- GENERATED DEV LIST START -->",
        end="<!-- GENERATED DEV LIST END -->",
    ),
    Channel.STG: Region(
        name="stg",
        start="<!-- GENERATED STG LIST START -->",
        end="<!-- GENERATED STG LIST END -->",
    ),
}

_TITLE_RE = re.compile(r"<title>.*?" + re.escape(TEXT["title_suffix"]) + r"</title>")
_HEADING_RE = re.compile(r"<h1>[\s\S]*?" + re.escape(TEXT["heading_suffix"]) + r"</h1>")


# ---------------------------------------------------------------------------
# Marker regions
# ---------------------------------------------------------------------------


def _locate(document: str, region: Region) -> Tuple[int, int]:
    """Return (content_start, content_end) for ``region`` in ``document``."""
    start_idx = document.find(region.start)
    end_idx = document.find(region.end)
    if start_idx == -1:
        raise MarkerError(region, "start marker missing")
    if end_idx == -1:
        raise MarkerError(region, "end marker missing")
    if end_idx < start_idx:
        raise MarkerError(region, "end marker precedes start marker")
    content_start = start_idx + len(region.start)
    if end_idx < content_start:
        raise MarkerError(region, "end marker overlaps start marker")
    return content_start, end_idx


def inject_regions(
    document: str, replacements: Sequence[Tuple[Region, str]]
) -> str:
    """Replace the text between each region's markers with its fragment.

    Every marker is located in the original ``document`` before anything is
    replaced, and the result is rebuilt in a single left-to-right pass. Any
    unresolved region raises :class:`MarkerError` and nothing is returned.
    """
    spans: List[Tuple[int, int, Region, str]] = []
    for region, fragment in replacements:
        content_start, content_end = _locate(document, region)
        spans.append((content_start, content_end, region, fragment))
    spans.sort(key=lambda s: s[0])

    for (_, prev_end, prev, _), (cur_start, _, cur, _) in zip(spans, spans[1:]):
        if cur_start - len(cur.start) < prev_end + len(prev.end):
            raise MarkerError(cur, f"overlaps region {prev.name}")

    parts: List[str] = []
    cursor = 0
    for content_start, content_end, _, fragment in spans:
        parts.append(document[cursor:content_start])
        parts.append(f"\n{fragment}\n")
        cursor = content_end
    parts.append(document[cursor:])
    return "".join(parts)


# ---------------------------------------------------------------------------
# Branding
# ---------------------------------------------------------------------------


def _substitute_once(pattern: re.Pattern[str], document: str, value: str) -> str:
    updated, count = pattern.subn(lambda _m: value, document, count=1)
    if count == 0:
        logger.warning("Branding pattern %s not found, left unchanged", pattern.pattern)
    return updated


def apply_branding(document: str, config: SiteConfig, texts: dict = TEXT) -> str:
    name = escape(config.display_name_ko)
    title = f"<title>{name} {texts['title_suffix']}</title>"
    icon = f"{escape(config.icon)} " if config.icon else ""
    heading = f"<h1>{icon}{name} {texts['heading_suffix']}</h1>"

    document = _substitute_once(_TITLE_RE, document, title)
    return _substitute_once(_HEADING_RE, document, heading)


# ---------------------------------------------------------------------------
# Whole page
# ---------------------------------------------------------------------------


def update_index_html(
    document: str,
    partitions: Dict[Channel, List[ReleaseRecord]],
    config: SiteConfig,
) -> str:
    replacements = [
        (region, render_release_list(partitions.get(channel, []), config))
        for channel, region in CHANNEL_REGIONS.items()
    ]
    return apply_branding(inject_regions(document, replacements), config)


__all__ = [
    "CHANNEL_REGIONS",
    "MarkerError",
    "Region",
    "apply_branding",
    "inject_regions",
    "update_index_html",
]
