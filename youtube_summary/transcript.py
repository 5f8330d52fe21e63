"""Fetch video transcripts from YouTube."""

import logging
from typing import Optional, Protocol, Sequence

from youtube_transcript_api import YouTubeTranscriptApi

from youtube_summary.errors import TranscriptFetchError
from youtube_summary.video_id import VideoId

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGES = ('en',)


class TranscriptSource(Protocol):
    def fetch(self, video_id: str, languages: Sequence[str]) -> str:
        ...


class YouTubeTranscriptSource:
    """Transcript source backed by youtube-transcript-api."""

    def __init__(self, api: Optional[YouTubeTranscriptApi] = None):
        self.api = api or YouTubeTranscriptApi()

    def fetch(self, video_id: str, languages: Sequence[str]) -> str:
        fetched = self.api.fetch(video_id, languages=list(languages))
        return ' '.join(snippet.text for snippet in fetched.snippets)


def fetch_transcript(
    video_id: VideoId,
    source: Optional[TranscriptSource] = None,
    languages: Sequence[str] = DEFAULT_LANGUAGES,
) -> str:
    """Return the transcript text for a video.

    Every failure of the source is raised as TranscriptFetchError with the
    upstream message. An empty transcript is returned unchanged.
    """
    source = source or YouTubeTranscriptSource()
    logger.debug("Fetching transcript for %s (languages: %s)", video_id, ', '.join(languages))
    try:
        text = source.fetch(video_id.value, languages)
    except TranscriptFetchError:
        raise
    except Exception as e:
        raise TranscriptFetchError(str(e) or type(e).__name__) from e

    logger.debug("Transcript fetched: %d chars", len(text))
    return text
