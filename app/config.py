# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_LOGS_DIR = os.getenv("PROJECTS_LOGS_DIR", None)
_LOG_LEVEL = os.getenv("PROJECTS_LOG_LEVEL", "INFO").upper()
_DEV_MODE = os.getenv("PROJECTS_DEV_MODE", "false").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Projects"
    APP_TITLE: str = "Project Management Desktop"
    VERSION: str = "1.0.0"

    # Development Mode
    DEV_MODE: bool = _DEV_MODE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_CONSOLE_LEVEL: str = _LOG_LEVEL

    # Create Project Wizard
    WIZARD_REFERENCE_PREFIX: str = "PRJ"
    DELIVERABLE_ID_PREFIX: str = "dlv"
    METRIC_ID_PREFIX: str = "mt"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"
