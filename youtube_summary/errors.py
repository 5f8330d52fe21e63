"""Error types raised by the summary pipeline."""

from typing import Optional


class YoutubeSummaryError(Exception):
    """Base error. The CLI renders these as a message and exit status 1."""

    prefix = 'Error'

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class InvalidIdentifierError(YoutubeSummaryError):
    prefix = 'Invalid YouTube URL'


class TranscriptFetchError(YoutubeSummaryError):
    prefix = 'Failed to fetch transcript'


class ConfigError(YoutubeSummaryError):
    prefix = 'Configuration error'


class ApiRequestError(YoutubeSummaryError):
    prefix = 'API request failed'

    def __init__(self, detail: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(detail)
