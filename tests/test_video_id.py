"""
Tests for video ID extraction.
"""

import pytest

from youtube_summary.errors import InvalidIdentifierError
from youtube_summary.video_id import UrlShape, VideoId, extract_video_id, match_url
from tests.conftest import VIDEO_ID


@pytest.mark.parametrize("url, shape", [
    (f"https://www.youtube.com/watch?v={VIDEO_ID}", UrlShape.WATCH),
    (f"https://youtu.be/{VIDEO_ID}", UrlShape.SHORT_LINK),
    (f"https://www.youtube.com/embed/{VIDEO_ID}", UrlShape.EMBED),
    (f"https://www.youtube.com/shorts/{VIDEO_ID}", UrlShape.SHORTS),
    (f"https://www.youtube.com/live/{VIDEO_ID}", UrlShape.LIVE),
    (VIDEO_ID, UrlShape.BARE),
])
def test_every_shape_yields_the_same_id(url, shape):
    video_id = extract_video_id(url)
    assert video_id == VideoId(VIDEO_ID)
    assert video_id.value == VIDEO_ID
    assert video_id.shape is shape


@pytest.mark.parametrize("url", [
    f"http://www.youtube.com/watch?v={VIDEO_ID}",
    f"youtube.com/watch?v={VIDEO_ID}",
    f"www.youtube.com/watch?v={VIDEO_ID}",
    f"https://m.youtube.com/watch?v={VIDEO_ID}",
    f"https://music.youtube.com/watch?v={VIDEO_ID}",
    f"https://www.youtube.com/watch?v={VIDEO_ID}&t=42s&list=PL123",
    f"https://www.youtube.com/watch?feature=share&v={VIDEO_ID}",
    f"https://www.youtube.com/watch/?v={VIDEO_ID}",
    f"youtu.be/{VIDEO_ID}",
    f"https://youtu.be/{VIDEO_ID}/",
    f"https://youtu.be/{VIDEO_ID}?si=-InVol0JhtWji-6R",
    f"https://www.youtube.com/embed/{VIDEO_ID}/",
    f"https://www.youtube-nocookie.com/embed/{VIDEO_ID}?start=10",
    f"https://youtube.com/shorts/{VIDEO_ID}?feature=share",
    f"  https://www.youtube.com/watch?v={VIDEO_ID}  ",
    f"HTTPS://WWW.YOUTUBE.COM/watch?v={VIDEO_ID}",
])
def test_variants_resolve_identically(url):
    assert extract_video_id(url).value == VIDEO_ID


@pytest.mark.parametrize("url", [
    "https://vimeo.com/123456789",
    "https://example.com/watch?v=dQw4w9WgXcQ",
    "https://www.youtube.com/",
    "https://www.youtube.com/channel/UC38IQsAvIsxxjztdMZQtwHA",
    "not a url at all",
    "",
    "   ",
    "ftp://youtube.com/watch?v=dQw4w9WgXcQ",
])
def test_unrecognized_input_is_rejected(url):
    with pytest.raises(InvalidIdentifierError, match="Could not extract video ID"):
        extract_video_id(url)


@pytest.mark.parametrize("url", [
    "https://youtu.be/abc123XYZ9",
    "https://www.youtube.com/watch?v=short",
    "https://www.youtube.com/watch?v=",
    "https://www.youtube.com/watch?list=PL123",
    "https://www.youtube.com/embed/",
    "https://www.youtube.com/shorts/dQw4w9WgXcQextra",
    "https://youtu.be/dQw4w9WgX!Q",
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ%0A",
    "https://youtu.be/dQw4w9WgXcQ%0A",
])
def test_recognized_shape_with_bad_token_is_rejected(url):
    with pytest.raises(InvalidIdentifierError, match="not a valid video ID"):
        extract_video_id(url)


@pytest.mark.parametrize("token", ["abc123XYZ9", "dQw4w9WgXcQQ", "dQw4w9WgX Q", "dQw4w9WgX.Q"])
def test_bare_tokens_of_wrong_length_or_charset_are_rejected(token):
    with pytest.raises(InvalidIdentifierError):
        extract_video_id(token)


def test_error_message_carries_prefix_and_input():
    with pytest.raises(InvalidIdentifierError) as excinfo:
        extract_video_id("https://vimeo.com/1")
    assert str(excinfo.value) == "Invalid YouTube URL: Could not extract video ID from: https://vimeo.com/1"


@pytest.mark.parametrize("token", ["too-short", f"{VIDEO_ID}\n", f"\n{VIDEO_ID}", f"{VIDEO_ID} "])
def test_video_id_cannot_be_built_from_invalid_token(token):
    with pytest.raises(InvalidIdentifierError):
        VideoId(token)


def test_trailing_newline_after_bare_id_is_trimmed():
    # Surrounding whitespace of the whole input is stripped, not accepted inside the ID
    assert extract_video_id(f"{VIDEO_ID}\n").value == VIDEO_ID


def test_video_id_helpers():
    video_id = extract_video_id(f"https://youtu.be/{VIDEO_ID}")
    assert str(video_id) == VIDEO_ID
    assert video_id.watch_url == f"https://www.youtube.com/watch?v={VIDEO_ID}"


def test_match_url_reports_shape_and_raw_token():
    assert match_url("https://youtu.be/xyz") == (UrlShape.SHORT_LINK, "xyz")
    assert match_url("https://vimeo.com/1") is None
