"""Root conftest — shared test configuration."""

import os

# Ensure tests don't accidentally use a real policy API key or Redis
os.environ.setdefault("POLICY_API_KEY", "permit_key_test_fake")
os.environ.setdefault("REDIS_URL", "redis://127.0.0.1:6399/15")
