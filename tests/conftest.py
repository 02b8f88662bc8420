from pathlib import Path

import pytest

from guarding.config import GuardingSettings, ParserSettings, get_settings, set_settings

FIXTURES = Path(__file__).parent / "fixtures"

java_payroll = FIXTURES / "java" / "PayrollService.java"
rules_architecture = FIXTURES / "rules" / "architecture.guarding"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Give every test default settings, unaffected by the environment of other tests."""
    original_settings = get_settings()
    set_settings(GuardingSettings())

    yield

    set_settings(original_settings)


@pytest.fixture
def strict_settings() -> ParserSettings:
    """Parser settings that reject unmodeled forms."""
    return ParserSettings(strict_unsupported=True)


@pytest.fixture
def unquoted_settings() -> ParserSettings:
    """Parser settings that strip literal quotes."""
    return ParserSettings(keep_literal_quotes=False)
