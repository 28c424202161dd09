"""Module for reading and writing JSON exports."""

import json
import os
from datetime import date, datetime
from typing import Any, Optional

import pandas as pd  # type: ignore

from src.utils.io.logger import Logger


class JsonManager:
    """Class for handling JSON file operations."""

    @staticmethod
    def exists(filepath: str) -> bool:
        """Check if a file exists at the given path."""
        return os.path.exists(filepath)

    @staticmethod
    def load(filepath: Optional[str]) -> Any:
        """Load JSON data from a file, returning ``None`` on any failure."""
        if not filepath or not filepath.strip():
            Logger.error("filepath is empty")
            return None
        if not JsonManager.exists(filepath):
            Logger.warning(f"File not found: {filepath}")
            return None
        try:
            with open(filepath, "r", encoding="utf-8") as file:
                return json.load(file)
        except (OSError, TypeError, json.JSONDecodeError) as e:
            Logger.error(f"Error loading JSON file {filepath}: {e}")
            return None

    @staticmethod
    def _serialize(obj: Any) -> str:
        if isinstance(obj, (pd.Timestamp, datetime, date)):
            return obj.isoformat()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    @staticmethod
    def save(data: Any, filepath: Optional[str]) -> bool:
        """Save data to a JSON file, creating parent folders as needed."""
        if not filepath or not filepath.strip():
            Logger.error("filepath is empty")
            return False
        try:
            directory = os.path.dirname(filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(filepath, "w", encoding="utf-8") as file:
                json.dump(
                    data,
                    file,
                    indent=4,
                    default=JsonManager._serialize,
                    ensure_ascii=True,
                )
            return True
        except (OSError, TypeError) as e:
            Logger.error(f"Error saving JSON file {filepath}: {e}")
            return False
