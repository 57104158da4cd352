"""
Pytest configuration and fixtures for fieldrules tests

This module provides shared fixtures for unit and integration tests.
"""
import pytest

from fieldrules.core.rules import RuleEngine
from fieldrules.core.validators import default_registry


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for models, validators and rules"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that drive the CLI and rule files end to end"
    )


# =======================
# ENGINE FIXTURES
# =======================

@pytest.fixture(scope="session")
def registry():
    """
    Built-in validator registry

    Returns:
        The process-wide ValidatorRegistry
    """
    return default_registry()


@pytest.fixture(scope="function")
def engine(registry) -> RuleEngine:
    """
    Rule engine over the built-in validators

    Returns:
        RuleEngine instance
    """
    return RuleEngine(registry)


# =======================
# FILE FIXTURES
# =======================

RULES_YAML = """
rules:
  username:
    - required
    - "min:3"
    - "max:20"
    - alpha-numeric

  age:
    numeric: {}
    "gt:":
      pattern: "17"
      message: Must be an adult

  nickname:
"""


@pytest.fixture(scope="function")
def rules_file(tmp_path) -> str:
    """
    Write a YAML rules file covering both rule set shapes

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to the rules file
    """
    path = tmp_path / "rules.yaml"
    path.write_text(RULES_YAML)
    return str(path)
