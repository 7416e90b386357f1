# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
from dotenv import load_dotenv

load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

_DATA_DIR = Path(os.getenv("SURVEY_DATA_DIR", str(_PROJECT_ROOT / "data")))
_LOGS_DIR = Path(os.getenv("SURVEY_LOGS_DIR", str(_PROJECT_ROOT / "logs")))
_EXPORT_DIR = Path(os.getenv("SURVEY_EXPORT_DIR", str(_PROJECT_ROOT / "exports")))
_CATALOG_PATH = os.getenv("SURVEY_CATALOG_PATH", None)
_LOG_LEVEL = os.getenv("SURVEY_LOG_LEVEL", "DEBUG")
_CONSOLE_LOG_LEVEL = os.getenv("SURVEY_CONSOLE_LOG_LEVEL", "INFO")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Damage Survey"
    APP_TITLE: str = "Lebanon War Damage Assessment"
    APP_TITLE_AR: str = "استمارة حصر أضرار الحرب"
    VERSION: str = "1.0.0"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = _DATA_DIR
    LOGS_DIR: Path = _LOGS_DIR
    EXPORT_DIR: Path = _EXPORT_DIR

    # Local storage (SQLite key-value file)
    DB_NAME: str = "survey.db"
    DB_PATH: Path = DATA_DIR / DB_NAME

    # Location catalog (JSON file); the seeded sample catalog is used when unset
    CATALOG_PATH: Optional[str] = _CATALOG_PATH

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOGGER_NAME: str = "damage_survey"
    LOG_LEVEL: str = _LOG_LEVEL
    CONSOLE_LOG_LEVEL: str = _CONSOLE_LOG_LEVEL
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    CONSOLE_LOG_FORMAT: str = "%(levelname)-8s | %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # Form
    TOTAL_STEPS: int = 4
    MAX_SUBMISSIONS: int = 3

    # Storage keys
    SUBMISSION_KEY_PREFIX: str = "submission_"
    DRAFT_KEY: str = "currentFormData"

    # Export
    EXPORT_SHEET_TITLE: str = "حصر الأضرار"
    EXPORT_FILE_PREFIX: str = "حصر_الأضرار"
    EXPORT_DATE_FORMAT: str = "%Y-%m-%d"
    TIMESTAMP_DISPLAY_FORMAT: str = "%d/%m/%Y %H:%M"
