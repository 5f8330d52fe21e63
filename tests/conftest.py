"""
Shared fixtures for the youtube-summary tests.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated home directory with no API key in the environment."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    return home_dir


@pytest.fixture
def write_config(home):
    """Write a file under ~/.config/youtube-summary and return its path."""
    def _write(name, content):
        config_dir = home / ".config" / "youtube-summary"
        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


def make_completion(*contents):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


@pytest.fixture
def mock_client():
    """Stand-in for the OpenAI client pointed at OpenRouter."""
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion("This is the summary.")
    client.models.list.return_value = SimpleNamespace(data=[
        SimpleNamespace(
            id="anthropic/claude-haiku-4.5",
            name="Anthropic: Claude Haiku 4.5",
            context_length=200000,
            pricing={"prompt": "0.000001", "completion": "0.000005"},
        ),
        SimpleNamespace(
            id="openai/gpt-4o",
            name="OpenAI: GPT-4o",
            context_length=128000,
            pricing={"prompt": "0.0000025", "completion": "0.00001"},
        ),
        SimpleNamespace(id="meta-llama/llama-3.1-8b-instruct", name="Meta: Llama 3.1 8B Instruct"),
    ])
    return client
