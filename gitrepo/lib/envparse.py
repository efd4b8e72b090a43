"""
Safe .env file parser.

Parses KEY=value files without shell execution.
Rejects values that look like shell substitution or chaining.
"""

import re
from pathlib import Path

FORBIDDEN_PATTERNS = [
    r'`',
    r'\$\(',
    r'\$\{',
    r';',
    r'&&',
    r'\|',
]

KEY_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')


def load_env(filepath: str) -> dict:
    """
    Parse env file safely, return dict.

    Raises:
        FileNotFoundError: if file doesn't exist
        ValueError: if syntax invalid or forbidden pattern found
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {filepath}")
    return parse_env(path.read_text())


def parse_env(text: str) -> dict:
    """Parse KEY=value lines; blank lines and # comments are ignored."""
    result = {}
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        if '=' not in line:
            raise ValueError(f"Line {lineno}: Invalid syntax (no '=')")

        key, _, value = line.partition('=')
        key = key.strip()
        value = value.strip()

        if not KEY_PATTERN.match(key):
            raise ValueError(f"Line {lineno}: Invalid key '{key}'")

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]

        for pattern in FORBIDDEN_PATTERNS:
            if re.search(pattern, value):
                raise ValueError(f"Line {lineno}: Forbidden pattern in value")

        result[key] = value

    return result
