"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Binary (1024-based) size conversions for --sample-size and the space report.
"""
import re

_UNITS = {"": 1, "K": 1024, "M": 1024 ** 2, "G": 1024 ** 3, "T": 1024 ** 4}

# number, optional unit letter, optional trailing B: 8M, 512KB, 1.5G, 4096, 10B
_SIZE_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)\s*([KMGT]?)B?$")


class ConvertUtils:
    @staticmethod
    def bytes_to_human(size_bytes: int) -> str:
        """
        Convert bytes to human-readable string (e.g., 1.50KB, 8.00MB).
        """
        if size_bytes < 0:
            return "0B"

        value = float(size_bytes)
        for unit in ("B", "KB", "MB", "GB"):
            if value < 1024:
                return f"{value:.2f}{unit}"
            value /= 1024
        return f"{value:.2f}TB"

    @staticmethod
    def human_to_bytes(size_str: str) -> int:
        """
        Convert human-readable size string to bytes.
        Accepts '8M', '512K', '1.5GB', '4096', '10B'. Suffixes are case-insensitive.
        Raises ValueError for negative sizes or invalid formats.
        """
        match = _SIZE_PATTERN.match(size_str.strip().upper())
        if not match:
            raise ValueError(
                f"Invalid size format: '{size_str}'. "
                f"Use a byte count or a K/M/G/T suffix, e.g. 512K, 8M, 1.5G"
            )

        number, unit = match.groups()
        value = float(number)
        if value < 0:
            raise ValueError(f"Negative size not allowed: '{size_str}'")
        return int(value * _UNITS[unit])

    @staticmethod
    def is_valid_size_format(size_str: str) -> bool:
        try:
            ConvertUtils.human_to_bytes(size_str)
            return True
        except ValueError:
            return False
