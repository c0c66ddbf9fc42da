"""
REPL configuration.

Reads the optional ``[repl]`` section of ``arith.toml``:

    [repl]
    prompt = "> "
    show_tree = false
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from arith.errors import ConfigError

CONFIG_FILENAME = "arith.toml"


@dataclass
class ReplConfig:
    """Settings for the interactive loop."""

    prompt: str = "> "
    show_tree: bool = False


def load_config(path: Path | None = None) -> ReplConfig:
    """
    Load REPL settings.

    Args:
        path: Explicit config file. When omitted, ``arith.toml`` in the
            current directory is used if it exists.

    Returns:
        ReplConfig with defaults for anything not set.

    Raises:
        ConfigError: If the file is unreadable, not valid TOML, or a value
            has the wrong type.
    """
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
        if not path.exists():
            return ReplConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    repl = data.get("repl", {})
    return ReplConfig(
        prompt=_typed(repl, "prompt", str, "> "),
        show_tree=_typed(repl, "show_tree", bool, False),
    )


def _typed(section: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = section.get(key, default)
    if not isinstance(value, expected):
        raise ConfigError(
            f"repl.{key} must be {expected.__name__}, got {type(value).__name__}"
        )
    return value
