"""HTML rendering helpers using Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from apk_index.config import SiteConfig
from apk_index.release import ReleaseRecord
from apk_index.texts import TEXT

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html", "xml", "j2"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_release_item(
    release: ReleaseRecord,
    is_latest: bool,
    config: SiteConfig,
    texts: dict = TEXT,
) -> str:
    channel = release.channel.token
    if is_latest:
        subtitle = texts["subtitle_latest"][channel]
        status = texts["status_latest"]
    else:
        subtitle = texts["subtitle_previous"][channel]
        status = texts["status_previous"]

    template = _environment().get_template("release_item.html.j2")
    return template.render(
        release=release,
        icon=config.icon,
        display_name=config.display_name_ko,
        subtitle=subtitle,
        status=status,
        href=release.href(config.download_prefix),
        t=texts,
    )


def render_release_list(
    releases: Sequence[ReleaseRecord],
    config: SiteConfig,
    texts: dict = TEXT,
) -> str:
    """Render one channel's releases, newest first.

    ``releases`` must already be sorted; the first one is rendered as the
    latest build. An empty sequence yields the "no builds" placeholder.
    """
    if not releases:
        return texts["empty_list"]
    blocks: List[str] = [
        render_release_item(release, index == 0, config, texts)
        for index, release in enumerate(releases)
    ]
    return "\n".join(blocks)


__all__ = [
    "render_release_item",
    "render_release_list",
]
