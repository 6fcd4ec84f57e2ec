"""
Configuration validation and input parsing utilities.
"""

import importlib
from typing import List, Tuple, Optional
from .config import (
    LOGGING_CONFIG,
    UI_CONFIG,
    DISPLAY_MODES,
    SONG_DEFAULTS,
    VALIDATION_RULES,
)
from .exceptions import ConfigurationError, InvalidInputError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "rich": "rich",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    if UI_CONFIG["DEFAULT_DISPLAY"] not in DISPLAY_MODES:
        errors.append(f"DEFAULT_DISPLAY must be one of: {', '.join(DISPLAY_MODES)}")

    if UI_CONFIG["SEPARATOR_LENGTH"] < 1:
        errors.append("SEPARATOR_LENGTH must be >= 1")

    min_detailed_width = UI_CONFIG["TITLE_COLUMN_WIDTH"] + UI_CONFIG["ARTIST_COLUMN_WIDTH"] + 35
    if UI_CONFIG["DETAILED_WIDTH"] < min_detailed_width:
        errors.append(f"DETAILED_WIDTH must be >= {min_detailed_width}")

    if SONG_DEFAULTS["DURATION"] < 0:
        errors.append("Default DURATION must be >= 0")

    if VALIDATION_RULES["MIN_YEAR"] > VALIDATION_RULES["MAX_YEAR"]:
        errors.append("MIN_YEAR must not exceed MAX_YEAR")
    elif validate_year(SONG_DEFAULTS["YEAR"]) is None:
        errors.append("Default YEAR must lie between MIN_YEAR and MAX_YEAR")

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)


def validate_user_input(field_name: str, value: str, max_length: Optional[int] = None) -> str:
    """
    Validate and sanitize a free-text field.

    Args:
        field_name: Name of the field being validated (for error messages)
        value: Input value to validate
        max_length: Optional maximum length (uses VALIDATION_RULES if not provided)

    Returns:
        Validated value, trimmed

    Raises:
        ValueError: If input is not a string, is too short or is too long
    """
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")

    value = value.strip()

    min_length = VALIDATION_RULES.get(f"MIN_{field_name.upper()}_LENGTH", 1)
    if len(value) < min_length:
        raise ValueError(f"{field_name} must be at least {min_length} character(s) long")

    if max_length is None:
        max_length = VALIDATION_RULES.get(f"MAX_{field_name.upper()}_LENGTH", 500)

    if len(value) > max_length:
        raise ValueError(f"{field_name} must be at most {max_length} characters long")

    return value


def validate_year(year: Optional[int]) -> Optional[int]:
    """
    Validate year value.

    Args:
        year: Year to validate

    Returns:
        Validated year or None if invalid
    """
    if year is None:
        return None

    min_year = VALIDATION_RULES.get("MIN_YEAR", 1900)
    max_year = VALIDATION_RULES.get("MAX_YEAR", 2100)

    if not (min_year <= year <= max_year):
        return None

    return year


def parse_int(value: str, field_name: str = "value") -> int:
    """
    Parse an integer typed by the user.

    Raises:
        InvalidInputError: If the text is not a whole number
    """
    try:
        return int(value.strip())
    except (AttributeError, ValueError):
        raise InvalidInputError(f"Invalid {field_name}: {value!r} is not a number")


def parse_id_list(text: str) -> Tuple[List[int], List[str]]:
    """
    Parse a comma-separated list of song ids.

    Blank entries are ignored; tokens that are not numbers are collected
    separately so the caller can report them.

    Returns:
        Tuple of (ids in input order, rejected tokens)
    """
    ids = []
    rejected = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            ids.append(int(token))
        except ValueError:
            rejected.append(token)
    return ids, rejected
