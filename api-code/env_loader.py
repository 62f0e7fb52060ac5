from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional


logger = logging.getLogger("echobot.env")


def should_load_local_env(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Local .env files are a development convenience; production relies on the host."""
    env = os.environ if environ is None else environ
    return env.get("APP_ENV", "").strip().lower() != "production"


def load_local_env(env_path: Path | str = Path(".env")) -> List[str]:
    """Load key=value pairs from a local .env file without extra dependencies.

    Variables already present in the process environment take precedence.
    Returns the keys that were set.
    """
    path = Path(env_path)
    if not path.exists():
        return []

    loaded: List[str] = []
    for raw_line in path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            logger.warning("Skipping malformed .env line: %s", raw_line)
            continue

        key, value = line.split("=", 1)
        clean_key = key.strip()
        if not clean_key:
            logger.warning("Skipping malformed .env line: %s", raw_line)
            continue
        if clean_key in os.environ:
            continue
        clean_value = value.strip().strip('"').strip("'")
        os.environ[clean_key] = clean_value
        loaded.append(clean_key)

    if loaded:
        logger.info("Loaded %d variable(s) from %s", len(loaded), path)
    return loaded
