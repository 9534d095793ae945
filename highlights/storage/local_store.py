"""
Local fallback storage: one JSON file per collection
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from highlights.storage.errors import MalformedData
from highlights.utils.file_handler import FileHandler

logger = logging.getLogger(__name__)


class LocalStore:
    """Key-value store holding each collection as <key>.json in a directory"""

    def __init__(self, store_dir: Path):
        """
        Args:
            store_dir: Directory holding the collection files
        """
        self.store_dir = Path(store_dir)
        self.file_handler = FileHandler()

    def _path(self, key: str) -> Path:
        return self.store_dir / f'{key}.json'

    def load(self, key: str) -> List[Dict[str, Any]]:
        """
        Load a collection

        Returns:
            Stored list, or an empty list if nothing was saved under key

        Raises:
            MalformedData: If the file is not a JSON array
        """
        path = self._path(key)
        try:
            data = self.file_handler.read_json(path)
        except FileNotFoundError:
            return []
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Local collection '{key}' at {path} is not valid JSON: {e}")
            raise MalformedData(f"Local collection '{key}' is not valid JSON: {e}") from e

        if not isinstance(data, list):
            logger.error(f"Local collection '{key}' at {path} is not a JSON array")
            raise MalformedData(f"Local collection '{key}' is not a JSON array")
        return data

    def save(self, key: str, collection: List[Dict[str, Any]]) -> None:
        """Replace the stored collection"""
        self.file_handler.write_json_atomic(self._path(key), collection)
