"""
Rules loader - Read and validate the inputguard rules file.

Loading fails fast: a missing file, bad YAML or a schema violation raises
immediately instead of falling back to defaults. An empty file is the one
exception and yields the built-in rules.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from inputguard.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "inputguard_rules.yaml"
RULES_PATH_ENV = "INPUTGUARD_RULES_PATH"


class RulesValidationError(ValueError):
    """
    Raised when a rules file does not match the schema.

    Carries one readable line per problem found.
    """

    def __init__(self, errors: list[str], message: str | None = None) -> None:
        self.errors = errors
        if message is None:
            message = "Rules validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


def resolve_rules_path() -> Path:
    """Rules file location: $INPUTGUARD_RULES_PATH, else ./inputguard_rules.yaml."""
    override = os.environ.get(RULES_PATH_ENV)
    if override:
        return Path(override)
    return Path.cwd() / DEFAULT_RULES_PATH


def load_rules(path: Path | str | None = None) -> Rules:
    """
    Load and validate the rules file.

    Args:
        path: Rules file. Defaults to resolve_rules_path().

    Returns:
        Validated Rules.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the YAML is invalid.
        RulesValidationError: If the schema is invalid.
    """
    path = Path(path) if path is not None else resolve_rules_path()
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    content = path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(_strip_markdown_fences(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        logger.debug("Rules file %s is empty, using built-in rules", path)
        return Rules()

    if not isinstance(data, dict):
        raise RulesValidationError([f"top level must be a mapping, got {type(data).__name__}"])

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise RulesValidationError(_format_errors(e)) from e

    logger.debug("Loaded rules version %s from %s", rules.rules_version, path)
    return rules


def _format_errors(error: ValidationError) -> list[str]:
    """One line per pydantic error, prefixed with its dotted location."""
    lines = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        lines.append(f"{location}: {item['msg']}")
    return lines


def _strip_markdown_fences(content: str) -> str:
    """
    Return the first ```yaml block of a markdown-wrapped file.

    Content without such a block is returned unchanged.
    """
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        stripped = line.strip()
        if stripped.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and stripped.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content
