"""
File and directory handling utilities
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Any


class FileHandler:
    """Utility class for JSON document files on local disk"""

    @staticmethod
    def ensure_directory(path: Path) -> None:
        """
        Ensure directory exists, create if not

        Args:
            path: Directory path
        """
        path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def read_json(file_path: Path) -> Any:
        """
        Read JSON file

        Args:
            file_path: Path to JSON file

        Returns:
            Decoded JSON value

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If JSON is invalid
        """
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @staticmethod
    def write_json_atomic(file_path: Path, data: Any, indent: int = 2) -> None:
        """
        Atomically write data to JSON file using temp file + rename

        If the write fails, the original file remains intact.

        Args:
            file_path: Path to JSON file
            data: Data to write
            indent: JSON indentation (default: 2)
        """
        FileHandler.ensure_directory(file_path.parent)

        temp_fd, temp_path = tempfile.mkstemp(
            dir=file_path.parent,
            prefix=f'.{file_path.name}.',
            suffix='.tmp'
        )

        try:
            with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=indent, ensure_ascii=False)

            os.replace(temp_path, file_path)
        except Exception:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise
