from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False


def load_env() -> None:
    global _LOADED
    if _LOADED:
        return
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    # Project root first, then the working directory.
    candidates = [
        base_dir.parent / ".env",
        Path.cwd() / ".env",
    ]

    for path in candidates:
        if not path.exists():
            continue
        # Real environment variables win over .env entries.
        load_dotenv(dotenv_path=path, override=False)
        logger.debug("env.loaded path=%s", path)
