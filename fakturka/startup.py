from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from .data import Database
from .env import load_env
from .logging_setup import setup_logging
from .settings import CompanyProfile, database_path, load_company_profile

logger = logging.getLogger(__name__)


def open_workspace(path: Optional[Union[str, Path]] = None) -> Tuple[Database, CompanyProfile]:
    """Load the environment, start logging, then read the profile and the database.

    Logs go to ``logs/`` beside the database file.
    """
    load_env()
    db_path = Path(path) if path is not None else database_path()
    setup_logging(db_path.parent / "logs", debug=os.getenv("FAKTURKA_DEBUG") == "1")
    profile = load_company_profile()
    db = Database.load(db_path)
    logger.info("workspace.open db=%s seller=%s", db_path, profile.name or "-")
    return db, profile
