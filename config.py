"""Environment configuration for the movies API.

All process-wide settings are read here once, after loading an optional
``.env`` file. Required values are validated at import time to fail fast
during application startup.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

ENV_DATABASE_URL = "DATABASE_URL"
ENV_SECRET_KEY = "SECRET_KEY"
ENV_ALGORITHM = "ALGORITHM"
ENV_ACCESS_EXPIRE = "ACCESS_TOKEN_EXPIRE_MINUTES"

DATABASE_URL: Optional[str] = os.getenv(ENV_DATABASE_URL)
SECRET_KEY: Optional[str] = os.getenv(ENV_SECRET_KEY)
ALGORITHM: str = os.getenv(ENV_ALGORITHM, "HS256")
_access_exp = os.getenv(ENV_ACCESS_EXPIRE)

if not DATABASE_URL:
    raise ValueError(f"{ENV_DATABASE_URL} must be set in the environment")

if not SECRET_KEY:
    raise ValueError(f"{ENV_SECRET_KEY} must be set in the environment")

ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None
if _access_exp:
    try:
        ACCESS_TOKEN_EXPIRE_MINUTES = int(_access_exp)
    except ValueError as exc:
        raise ValueError(f"{ENV_ACCESS_EXPIRE} must be an integer") from exc

SQL_ECHO: bool = os.getenv("SQL_ECHO", "").lower() in ("1", "true", "yes")
ROOT_PATH: str = os.getenv("ROOT_PATH", "")
PORT: int = int(os.getenv("PORT", "8080"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
