from __future__ import annotations

import os

# config.settings exits the process when required variables are missing
_TEST_ENV = {
    "APP_ENV": "test",
    "REDIS_URL": "redis://localhost:6379/15",
    "PERSISTENCE_TTL_SECONDS": "7200",
    "ALLOWED_ORIGIN": "http://localhost:3000",
    "RATE_LIMIT_TIMES": "20",
    "RATE_LIMIT_SECONDS": "60",
    "MAX_FILE_MB": "25",
    "TRUST_PROXY": "false",
    "ANTHROPIC_API_URL": "https://api.anthropic.test/v1/messages",
    "ANTHROPIC_MODEL": "test-model",
    "ANTHROPIC_VERSION": "2023-06-01",
}

for _key, _value in _TEST_ENV.items():
    os.environ.setdefault(_key, _value)
