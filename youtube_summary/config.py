"""Resolve the API key, model and prompt from CLI, environment and config files.

Precedence, first non-empty value wins per field:

    api_key: --api-key > OPENROUTER_API_KEY env var > credentials file > config file
    model:   --model > config file default_model > DEFAULT_MODEL
    prompt:  --prompt > DEFAULT_PROMPT
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Tuple

from youtube_summary.errors import ConfigError
from youtube_summary.kvfile import parse_key_values

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = 'OPENROUTER_API_KEY'
CREDENTIALS_API_KEY = 'OPENROUTER_API_KEY'
SETTINGS_API_KEY = 'api_key'
SETTINGS_DEFAULT_MODEL = 'default_model'

DEFAULT_MODEL = 'anthropic/claude-haiku-4.5'
DEFAULT_PROMPT = (
    "Please provide a comprehensive summary of the following YouTube video transcript. "
    "Include the main topics discussed, key points, and any important conclusions."
)

Provider = Callable[[], Optional[str]]


def config_dir(home: Optional[Path] = None) -> Path:
    return (home or Path.home()) / '.config' / 'youtube-summary'


def credentials_path(home: Optional[Path] = None) -> Path:
    return config_dir(home) / 'credentials'


def settings_path(home: Optional[Path] = None) -> Path:
    return config_dir(home) / 'config'


@dataclass(frozen=True)
class Credentials:
    api_key: Optional[str] = None

    @classmethod
    def parse(cls, content: str) -> 'Credentials':
        values = parse_key_values(content, {CREDENTIALS_API_KEY}, unquote=True)
        return cls(api_key=values.get(CREDENTIALS_API_KEY))


@dataclass(frozen=True)
class RawSettings:
    api_key: Optional[str] = None
    default_model: Optional[str] = None

    @classmethod
    def parse(cls, content: str) -> 'RawSettings':
        values = parse_key_values(content, {SETTINGS_API_KEY, SETTINGS_DEFAULT_MODEL})
        return cls(
            api_key=values.get(SETTINGS_API_KEY),
            default_model=values.get(SETTINGS_DEFAULT_MODEL),
        )


@dataclass(frozen=True)
class ConfigOverrides:
    """Values given explicitly on the command line."""

    api_key: Optional[str] = None
    model: Optional[str] = None
    prompt: Optional[str] = None
    settings_path: Optional[Path] = None


@dataclass(frozen=True)
class ResolvedConfig:
    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    prompt: str = DEFAULT_PROMPT


def first_present(providers: List[Provider]) -> Optional[str]:
    """Return the first non-empty value produced by the providers, in order."""
    for provider in providers:
        value = provider()
        if value:
            return value
    return None


def read_optional_file(path: Path, label: str) -> str:
    """Read a config file, treating a missing file as empty."""
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError:
        logger.debug("No %s file at %s", label, path)
        return ''
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read {label} file {path}: {e}") from e


def load_credentials(path: Path) -> Credentials:
    return Credentials.parse(read_optional_file(path, 'credentials'))


def load_settings(path: Path) -> RawSettings:
    return RawSettings.parse(read_optional_file(path, 'config'))


def resolve_config(
    overrides: Optional[ConfigOverrides] = None,
    environ: Optional[Mapping[str, str]] = None,
    home: Optional[Path] = None,
) -> ResolvedConfig:
    """Merge all configuration sources into a ResolvedConfig.

    Both files are re-read on every call. Raises ConfigError when no source
    supplies an API key, or when a file exists but cannot be read.
    """
    overrides = overrides or ConfigOverrides()
    environ = os.environ if environ is None else environ

    creds_file = credentials_path(home)
    settings_file = overrides.settings_path or settings_path(home)

    try:
        credentials = load_credentials(creds_file)
        settings = load_settings(settings_file)
    except ConfigError as e:
        raise ConfigError(f"{e.detail}. Checked: {creds_file}, {settings_file}") from e

    api_key_sources: List[Tuple[str, Provider]] = [
        ('--api-key option', lambda: overrides.api_key),
        (f"{API_KEY_ENV_VAR} environment variable", lambda: environ.get(API_KEY_ENV_VAR)),
        (f"{CREDENTIALS_API_KEY} in {creds_file}", lambda: credentials.api_key),
        (f"{SETTINGS_API_KEY} in {settings_file}", lambda: settings.api_key),
    ]
    api_key = first_present([provider for _, provider in api_key_sources])
    if not api_key:
        checked = ', '.join(location for location, _ in api_key_sources)
        raise ConfigError(f"No API key found. Checked: {checked}")

    model = first_present([
        lambda: overrides.model,
        lambda: settings.default_model,
    ]) or DEFAULT_MODEL

    prompt = overrides.prompt or DEFAULT_PROMPT

    logger.debug("Using model %s", model)
    return ResolvedConfig(api_key=api_key, model=model, prompt=prompt)
