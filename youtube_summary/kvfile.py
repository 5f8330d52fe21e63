"""Parser for the flat KEY=value files under ~/.config/youtube-summary."""

from typing import Dict, Iterable


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value


def parse_key_values(content: str, recognized_keys: Iterable[str], unquote: bool = False) -> Dict[str, str]:
    """Parse KEY=value lines, keeping only the recognized keys.

    Blank lines and lines starting with '#' are skipped, lines are split on
    the first '=', and a key seen twice keeps its last value. Keys are
    matched case-sensitively; anything unrecognized is dropped.
    """
    recognized = set(recognized_keys)
    values: Dict[str, str] = {}

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        key, sep, value = line.partition('=')
        if not sep:
            continue

        key = key.strip()
        if key not in recognized:
            continue

        value = value.strip()
        values[key] = _unquote(value) if unquote else value

    return values
