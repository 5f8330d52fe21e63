"""Extract the video ID from the many shapes a YouTube link can take."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple
from urllib.parse import SplitResult, parse_qs, urlsplit

from youtube_summary.errors import InvalidIdentifierError

VIDEO_ID_PATTERN = re.compile(r'[0-9A-Za-z_-]{11}')

YOUTUBE_HOSTS = {
    'youtube.com',
    'www.youtube.com',
    'm.youtube.com',
    'music.youtube.com',
    'youtube-nocookie.com',
    'www.youtube-nocookie.com',
}
SHORT_LINK_HOSTS = {'youtu.be', 'www.youtu.be'}


class UrlShape(Enum):
    WATCH = 'watch'
    SHORT_LINK = 'short_link'
    EMBED = 'embed'
    SHORTS = 'shorts'
    LIVE = 'live'
    BARE = 'bare'


@dataclass(frozen=True)
class VideoId:
    """An 11 character YouTube video ID.

    Validated on construction; ``shape`` records which link form it came
    from and does not take part in equality.
    """

    value: str
    shape: UrlShape = field(default=UrlShape.BARE, compare=False)

    def __post_init__(self):
        if not VIDEO_ID_PATTERN.fullmatch(self.value):
            raise InvalidIdentifierError(f"'{self.value}' is not a valid video ID")

    def __str__(self) -> str:
        return self.value

    @property
    def watch_url(self) -> str:
        return f"https://www.youtube.com/watch?v={self.value}"


def _path_segments(parts: SplitResult) -> List[str]:
    return [segment for segment in parts.path.split('/') if segment]


def _match_watch(parts: SplitResult) -> Optional[str]:
    if parts.hostname not in YOUTUBE_HOSTS or _path_segments(parts) != ['watch']:
        return None
    values = parse_qs(parts.query).get('v')
    return values[0] if values else ''


def _match_short_link(parts: SplitResult) -> Optional[str]:
    if parts.hostname not in SHORT_LINK_HOSTS:
        return None
    segments = _path_segments(parts)
    return segments[0] if segments else ''


def _prefixed_path(prefix: str) -> Callable[[SplitResult], Optional[str]]:
    # /embed/<id>, /shorts/<id>, /live/<id>: the ID is the last segment
    def matcher(parts: SplitResult) -> Optional[str]:
        if parts.hostname not in YOUTUBE_HOSTS:
            return None
        segments = _path_segments(parts)
        if not segments or segments[0] != prefix:
            return None
        return segments[-1] if len(segments) > 1 else ''

    return matcher


URL_MATCHERS: Tuple[Tuple[UrlShape, Callable[[SplitResult], Optional[str]]], ...] = (
    (UrlShape.WATCH, _match_watch),
    (UrlShape.SHORT_LINK, _match_short_link),
    (UrlShape.EMBED, _prefixed_path('embed')),
    (UrlShape.SHORTS, _prefixed_path('shorts')),
    (UrlShape.LIVE, _prefixed_path('live')),
)


def _split_url(raw: str) -> Optional[SplitResult]:
    candidate = raw if '://' in raw else f"https://{raw}"
    try:
        parts = urlsplit(candidate)
    except ValueError:
        return None
    if parts.scheme.lower() not in ('http', 'https') or not parts.hostname:
        return None
    return parts


def match_url(raw: str) -> Optional[Tuple[UrlShape, str]]:
    """Return the first matching link shape and the raw token it yields."""
    parts = _split_url(raw)
    if parts is None:
        return None
    for shape, matcher in URL_MATCHERS:
        token = matcher(parts)
        if token is not None:
            return shape, token
    return None


def extract_video_id(url: str) -> VideoId:
    """Extract the video ID from a YouTube URL or a bare ID.

    Raises InvalidIdentifierError when the input matches no known link
    shape or the token it yields is not a valid ID.
    """
    raw = url.strip()

    if VIDEO_ID_PATTERN.fullmatch(raw):
        return VideoId(raw, UrlShape.BARE)

    matched = match_url(raw)
    if matched is None:
        raise InvalidIdentifierError(f"Could not extract video ID from: {raw}")

    shape, token = matched
    if not VIDEO_ID_PATTERN.fullmatch(token):
        raise InvalidIdentifierError(
            f"'{token}' from {raw} is not a valid video ID (expected 11 characters of A-Z, a-z, 0-9, - or _)"
        )
    return VideoId(token, shape)
