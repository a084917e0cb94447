#!/usr/bin/env python3
"""
format_config.py
-------------------

Defines the FormatConfig dataclass: the literal tokens that make up the
journal text-file grammar (separators, header prefix/suffix, date
template and tag brackets).

Configs are built from partial overrides merged over DEFAULT_FORMAT.
Overrides come from stored user settings and YAML files, which use the
camelCase token names (``entrySeparator``); snake_case attribute names
(``entry_separator``) are accepted too.

Three tokens must never be empty, otherwise the parser could not find
them again: entry_separator, same_day_separator and date_format. An
empty override for those falls back to the default. The other five may
legitimately be empty strings.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

# ---- Third party ----
import yaml

# ---- Local imports ----
from thoughty.core.exceptions import FormatConfigError


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Field names -----
FIELD_NAMES: Dict[str, str] = {
    "entrySeparator": "entry_separator",
    "sameDaySeparator": "same_day_separator",
    "datePrefix": "date_prefix",
    "dateSuffix": "date_suffix",
    "dateFormat": "date_format",
    "tagOpenBracket": "tag_open_bracket",
    "tagCloseBracket": "tag_close_bracket",
    "tagSeparator": "tag_separator",
}
"""camelCase setting name -> dataclass attribute."""

_ATTRIBUTES = tuple(FIELD_NAMES.values())

REQUIRED_NON_EMPTY = frozenset({"entry_separator", "same_day_separator", "date_format"})


# ----- Dataclass -----
@dataclass(frozen=True)
class FormatConfig:
    """
    Tokens defining the journal text format.

    Attributes:
        entry_separator (str): Line closing the entries of one date.
        same_day_separator (str): Line between entries sharing a date.
        date_prefix (str): Text before the date (or index) in a header.
        date_suffix (str): Text after the date (or index) in a header.
        date_format (str): Template with the YYYY, MM and DD tokens.
        tag_open_bracket (str): Opens the tag list in a header.
        tag_close_bracket (str): Closes the tag list in a header.
        tag_separator (str): Separates tags inside the brackets.
    """

    entry_separator: str = "-" * 80
    same_day_separator: str = "*" * 80
    date_prefix: str = "---"
    date_suffix: str = "--"
    date_format: str = "YYYY-MM-DD"
    tag_open_bracket: str = "["
    tag_close_bracket: str = "]"
    tag_separator: str = ","

    # ---- Serialization ----
    def to_dict(self) -> Dict[str, str]:
        """Return the config keyed by camelCase setting names."""
        values = asdict(self)
        return {camel: values[attr] for camel, attr in FIELD_NAMES.items()}

    def tag_expression(self, tags: Optional[list] = None) -> str:
        """Render a tag list as it appears at the end of a header line."""
        return (
            self.tag_open_bracket
            + self.tag_separator.join(tags or [])
            + self.tag_close_bracket
        )


DEFAULT_FORMAT = FormatConfig()


# ----- Validation -----
def validate_format_config(
    partial: Union[FormatConfig, Mapping[str, Any], None] = None, **overrides: Any
) -> FormatConfig:
    """
    Merge partial overrides over the defaults.

    Never fails: unknown keys are ignored and missing or invalid values
    fall back to the defaults.

    Args:
        partial: FormatConfig, or mapping of camelCase or snake_case field
            names to values (anything else counts as no overrides)
        **overrides: Same as ``partial``, given as keywords (take precedence)

    Returns:
        Fully populated FormatConfig
    """
    if isinstance(partial, FormatConfig):
        partial = partial.to_dict()
    elif not isinstance(partial, Mapping):
        partial = {}

    merged: Dict[str, Any] = {}
    for source in (partial, overrides):
        for key, value in source.items():
            attr = FIELD_NAMES.get(key, key)
            if attr in _ATTRIBUTES:
                merged[attr] = value

    values: Dict[str, str] = {}
    for attr in _ATTRIBUTES:
        value = merged.get(attr)
        default = getattr(DEFAULT_FORMAT, attr)

        if attr in REQUIRED_NON_EMPTY:
            values[attr] = value if isinstance(value, str) and value else default
        else:
            values[attr] = default if value is None else str(value)

    return FormatConfig(**values)


def resolve_config(
    config: Union[FormatConfig, Mapping[str, Any], None]
) -> FormatConfig:
    """Accept a ready FormatConfig or merge partial overrides over defaults."""
    if isinstance(config, FormatConfig):
        return config
    return validate_format_config(config)


# ----- YAML files -----
def load_format_config(path: Path) -> FormatConfig:
    """
    Load a format configuration from a YAML file.

    The file holds a mapping of token names to strings; omitted tokens
    keep their defaults.

    Raises:
        FormatConfigError: If the file cannot be read or is not a mapping
            of strings
    """
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise FormatConfigError(f"Cannot read format file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FormatConfigError(f"Format file must contain a mapping: {path}")

    bad = [k for k, v in data.items() if v is not None and not isinstance(v, str)]
    if bad:
        raise FormatConfigError(
            f"Format tokens must be strings (quote them in YAML): {', '.join(map(str, bad))}"
        )

    logger.debug(f"Loaded {len(data)} format overrides from {path}")
    return validate_format_config(data)


def dump_format_config(config: FormatConfig) -> str:
    """Render a FormatConfig as YAML using camelCase setting names."""
    return yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True)
