"""Central configuration manager.

This module merges static parameters (download behaviour, export years and
paths) with values read from the environment and an optional ``.env`` file, and
exposes them through dictionary-style and method-based access.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv


class ParameterLoader:
    """Centralized configuration manager for calendar and market-data parameters."""

    _CALENDAR_EXPORT_FILEPATH = "data/monthly_options_calendar.json"

    _ENV_FILEPATH = ".env"

    def __init__(self, now: Optional[datetime] = None):
        self.env_filepath = Path(ParameterLoader._ENV_FILEPATH)
        load_dotenv(dotenv_path=self.env_filepath)
        self.now = datetime.now() if now is None else now
        self._parameters: Dict[str, Any] = self._initialize_parameters()

    def _initialize_parameters(self) -> Dict[str, Any]:
        """Initializes the parameters dictionary by merging static and dynamic values."""
        dynamic_params = {
            "export_end_year": self.now.year,
        }
        constant_params = {
            "auto_adjust": False,
            "download_retries": 3,
            "export_start_year": 2000,
            "market_tz": "America/New_York",
            "price_interval": "1d",
            "retry_sleep_seconds": 1,
        }
        env_params = {
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "proxy": os.getenv("HTTP_PROXY"),
        }
        path_params = {
            "calendar_export_filepath": self._CALENDAR_EXPORT_FILEPATH,
        }
        return {**env_params, **dynamic_params, **constant_params, **path_params}

    def get_all(self) -> Any:
        """Return all parameter."""
        return self._parameters

    def get(self, key: str, default: Any = None) -> Any:
        """Return parameter value if exists, else None."""
        try:
            return self._parameters[key]
        except KeyError:
            return default

    def __getitem__(self, key: str) -> Any:
        """Allow dict-style access to parameters."""
        return self._parameters[key]
