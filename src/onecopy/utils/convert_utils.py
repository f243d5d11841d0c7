"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""

BYTES_PER_MB = 1024 * 1024


class ConvertUtils:
    @staticmethod
    def bytes_to_mb(size_bytes: int) -> str:
        """Bytes as megabytes with two decimals, e.g. 5242880 -> '5.00'."""
        return f"{size_bytes / BYTES_PER_MB:.2f}"

    @staticmethod
    def display_path(path: str) -> str:
        """
        Printable form of a path from os.walk.
        Undecodable filename bytes come back from the OS as surrogates; show them as U+FFFD.
        """
        return path.encode("utf-8", "surrogateescape").decode("utf-8", "replace")

    @staticmethod
    def is_affirmative(answer: str) -> bool:
        """True for 'y' or 'yes', case-insensitive, surrounding blanks ignored."""
        return answer.strip().lower() in ("y", "yes")
