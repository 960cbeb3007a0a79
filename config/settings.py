"""
Configuration settings loader.
Loads environment variables from .env file and exposes data locations
and analysis switches for the earnings trend pipeline.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

from .constants import DATA_EARNINGS, DATA_MACRO, DATA_REPORTS

# Load environment variables from .env
project_root = Path(__file__).parent.parent
env_path = project_root / '.env'
load_dotenv(dotenv_path=env_path)

QUARTER_ORDERINGS = ('lexicographic', 'chronological')


class Settings:
    """Application settings resolved from the environment."""

    def __init__(self):
        self.project_root = project_root
        self.earnings_data_dir = self._resolve_dir('EARNINGS_DATA_DIR', DATA_EARNINGS)
        self.macro_data_dir = self._resolve_dir('MACRO_DATA_DIR', DATA_MACRO)
        self.reports_dir = self._resolve_dir('REPORTS_DIR', DATA_REPORTS)

        ordering = os.getenv('QUARTER_ORDERING', 'lexicographic').strip().lower()
        if ordering not in QUARTER_ORDERINGS:
            raise ValueError(
                f"QUARTER_ORDERING must be one of {QUARTER_ORDERINGS}, got '{ordering}'"
            )
        self.quarter_ordering = ordering

    def _resolve_dir(self, env_name: str, default: str) -> Path:
        """
        Resolve a data directory from the environment.

        Relative paths are anchored at the project root so scripts behave
        the same regardless of the working directory.
        """
        path = Path(os.getenv(env_name, default))
        if not path.is_absolute():
            path = self.project_root / path
        return path


# Global settings instance
settings = Settings()
