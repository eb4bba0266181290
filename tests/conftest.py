from pathlib import Path

import pytest

from inputguard.rules.loader import load_rules
from inputguard.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The real rules file at the project root."""
    return PROJECT_ROOT / "inputguard_rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    """Rules loaded from the real rules file. Fails fast if it is missing."""
    return load_rules(rules_path)


@pytest.fixture
def write_rules(tmp_path: Path):
    """Write rules file content to a temp file and return its path."""

    def _write(content: str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
