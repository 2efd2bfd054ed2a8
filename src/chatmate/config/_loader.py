# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Reading chatmate.toml files and the CHATMATE_ environment."""

import json
import os
import tomllib
from typing import TYPE_CHECKING, Any

from chatmate.exceptions import ConfigLoadError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

ENV_PREFIX = "CHATMATE_"

_TRUE = frozenset({"true", "1"})
_FALSE = frozenset({"false", "0"})


def read_toml_file(path: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ConfigLoadError: If the file is not valid TOML. The error carries
            the line and column reported by the parser.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(msg, path=path, line=e.lineno, column=e.colno) from e


def copy_value(value: Any) -> Any:  # pyright: ignore[reportExplicitAny]
    """Return an independent copy of nested dicts and lists."""
    match value:
        case dict():
            return {k: copy_value(v) for k, v in value.items()}
        case list():
            return [copy_value(v) for v in value]
        case _:
            return value


def deep_merge(
    base: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
    override: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Layer ``override`` on top of ``base`` and return a new dictionary.

    Tables merge key by key. Any other value in ``override``, lists
    included, replaces the value in ``base`` outright. Neither argument
    is modified.
    """
    merged = copy_value(dict(base))
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy_value(value)
    return merged


def parse_env_vars(
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Collect ``CHATMATE_SECTION__KEY`` variables into a nested dictionary.

    A double underscore separates nesting levels and names are lowercased,
    so ``CHATMATE_INSTALL__DESTINATION`` sets ``install.destination``.
    Values go through :func:`_parse_env_value`.
    """
    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]

    for key, raw in os.environ.items():
        name = key.removeprefix(prefix)
        if name == key or not name:
            continue
        set_nested_key(result, name.replace("__", ".").lower(), _parse_env_value(raw))

    return result


def _parse_env_value(value: str) -> Any:  # pyright: ignore[reportExplicitAny]
    """Turn an environment string into a bool, number, JSON value, or str.

    ``true``/``false``/``1``/``0`` are booleans. Whole numbers become int
    and numbers with a decimal point become float. Bracketed or braced
    text is tried as JSON. Everything else, including JSON that fails to
    parse, stays a string.
    """
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False

    for convert in (int, float):
        if convert is float and "." not in value:
            break
        try:
            return convert(value)
        except ValueError:
            continue

    if value[:1] + value[-1:] in ("[]", "{}"):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value

    return value


def set_nested_key(
    d: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    key_path: str,
    value: Any,  # pyright: ignore[reportExplicitAny]
) -> None:
    """Assign ``value`` at a dotted path, creating tables along the way.

    A scalar sitting where a table is needed is replaced.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "source.mode", "embedded")
        >>> d
        {'source': {'mode': 'embedded'}}
    """
    *parents, leaf = key_path.split(".")
    table = d
    for part in parents:
        child = table.get(part)
        if not isinstance(child, dict):
            child = table[part] = {}
        table = child
    table[leaf] = value
