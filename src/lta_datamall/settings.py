"""Client settings loaded from the environment.

Environment variables:
  LTA_ACCOUNT_KEY      - DataMall AccountKey (required for data calls)
  LTA_BASE_URL         - override the DataMall host, e.g. for a caching proxy
  LTA_TIMEOUT_SECONDS  - per-request transport timeout (default 30)

A `.env` file is read first if present; real environment variables win.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from lta_datamall.endpoints import BASE_URL

ACCOUNT_KEY_ENV_VAR = "LTA_ACCOUNT_KEY"
BASE_URL_ENV_VAR = "LTA_BASE_URL"
TIMEOUT_ENV_VAR = "LTA_TIMEOUT_SECONDS"

DEFAULT_TIMEOUT_SECONDS = 30.0


class ClientSettings(BaseModel):
    api_key: str | None = None
    base_url: str = BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> ClientSettings:
        """Read settings from environment variables, after loading a .env file."""
        load_dotenv(env_file)

        raw_timeout = os.environ.get(TIMEOUT_ENV_VAR, "")
        timeout = DEFAULT_TIMEOUT_SECONDS
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ValueError(
                    f"Environment variable '{TIMEOUT_ENV_VAR}' must be a number, got {raw_timeout!r}"
                ) from e

        return cls(
            api_key=os.environ.get(ACCOUNT_KEY_ENV_VAR) or None,
            base_url=os.environ.get(BASE_URL_ENV_VAR) or BASE_URL,
            timeout_seconds=timeout,
        )
