"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal primitives: permanent unlink or move to the system trash.
"""
import os
from pathlib import Path
from send2trash import send2trash


class FileService:
    """
    Cross-platform file removal.
    Every failure surfaces as OSError so callers handle one exception family.
    """

    @staticmethod
    def remove_file(file_path: str):
        """Permanently deletes a file. Directories are refused."""
        path = Path(file_path)

        if path.is_dir() and not path.is_symlink():
            raise IsADirectoryError(f"Refusing to delete a directory: {path}")

        os.remove(path)

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).absolute()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except OSError:
            raise
        except Exception as e:
            raise OSError(f"Failed to move to trash: {e}") from e

