"""Settings — required policy key, aliases and defaults."""

import pytest
from pydantic import ValidationError

from beerpong.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("POLICY_API_KEY", "API_KEY", "POLICY_PDP_URL", "REDIS_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_policy_key_is_fatal(clean_env):
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_blank_policy_key_is_fatal(clean_env):
    clean_env.setenv("POLICY_API_KEY", "   ")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_api_key_alias_accepted(clean_env):
    clean_env.setenv("API_KEY", "from-api-key")
    assert Settings(_env_file=None).policy_api_key == "from-api-key"


def test_defaults(clean_env):
    clean_env.setenv("POLICY_API_KEY", "k")
    s = Settings(_env_file=None)
    assert s.policy_pdp_url == "https://cloudpdp.api.permit.io"
    assert s.policy_timeout_seconds == 10.0
    assert s.cup_action == "beer"
    assert s.default_role == "user"
    assert s.redis_url == "redis://127.0.0.1:6379/0"
    assert s.port == 1224


def test_pdp_url_trailing_slash_stripped(clean_env):
    clean_env.setenv("POLICY_API_KEY", "k")
    clean_env.setenv("POLICY_PDP_URL", "http://localhost:7766/")
    assert Settings(_env_file=None).policy_pdp_url == "http://localhost:7766"
