"""
Configuration management for the meeting action item extractor.

Loads settings from environment variables with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file from project root
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / '.env'
if _env_file.exists():
    load_dotenv(_env_file)


class Config:
    """Configuration settings loaded from environment."""

    # Extraction
    DUE_DATE_WINDOW_CHARS: int = int(os.getenv('DUE_DATE_WINDOW_CHARS', '100'))
    DEFAULT_MEETING_TITLE: str = os.getenv('DEFAULT_MEETING_TITLE', 'Untitled Meeting')

    # Runner
    PROCESSED_RETENTION: int = int(os.getenv('PROCESSED_RETENTION', '500'))

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')


# Singleton config instance
config = Config()
