"""YouTube link classification (format only, no network access)."""

import re
from urllib.parse import parse_qs, urlsplit

_VIDEO_ID = re.compile(r"^[A-Za-z0-9_-]{6,}$")
_YOUTUBE_HOSTS = frozenset(
    {"youtube.com", "www.youtube.com", "m.youtube.com", "music.youtube.com"}
)
_SHORT_HOST = "youtu.be"
_PATH_PREFIXES = ("/shorts/", "/embed/", "/live/")


def is_youtube_link(link: str | None) -> bool:
    """Return True if ``link`` points at a YouTube video."""
    if not link or not isinstance(link, str) or link != link.strip():
        return False

    try:
        parts = urlsplit(link)
    except ValueError:
        return False

    if parts.scheme not in ("http", "https"):
        return False

    host = (parts.hostname or "").lower()
    if host == _SHORT_HOST:
        return bool(_VIDEO_ID.match(parts.path.lstrip("/")))
    if host not in _YOUTUBE_HOSTS:
        return False

    if parts.path == "/watch":
        video_ids = parse_qs(parts.query).get("v", [])
        return bool(video_ids) and bool(_VIDEO_ID.match(video_ids[0]))

    for prefix in _PATH_PREFIXES:
        if parts.path.startswith(prefix):
            return bool(_VIDEO_ID.match(parts.path[len(prefix):].rstrip("/")))
    return False
