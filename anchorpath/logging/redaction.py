"""User path redaction for structured logging."""

from __future__ import annotations

import os
import re
from typing import Any, Dict, List, Optional, Pattern, Union

# A home prefix only counts at the start of a value or after whitespace.
_START = r"(?:^|(?<=\s))"


class DataRedactor:
    """Hide user-identifying directory prefixes in log data.

    Path values logged by the library would otherwise leak home directories
    and account names into log files. The redactor keeps everything below the
    home directory so entries stay useful for debugging.
    """

    def __init__(self, custom_patterns: Optional[List[Pattern[str]]] = None) -> None:
        """Initialize redactor with standard and custom patterns.

        Args:
            custom_patterns: Additional regex patterns to redact
        """
        self.patterns = [
            # Windows profile directories, either separator
            re.compile(_START + r"[A-Za-z]:[\\/]Users[\\/][^\\/\s]+", re.IGNORECASE),
            # POSIX home directories
            re.compile(_START + r"/home/[^/\s]+"),
            re.compile(_START + r"/Users/[^/\s]+"),
            re.compile(_START + r"/root(?=/|$|\s)"),
        ]

        if custom_patterns:
            self.patterns.extend(custom_patterns)

    def redact_string(self, text: str) -> str:
        """Replace every matching prefix in ``text`` with ``[REDACTED]``."""
        result = text
        for pattern in self.patterns:
            result = pattern.sub("[REDACTED]", result)
        return result

    def redact_path(self, path: Union[str, "os.PathLike[str]"]) -> str:
        """Redact a path-like value while preserving the part below the home directory."""
        return self.redact_string(os.fspath(path))

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact path data from dictionary.

        Args:
            data: Dictionary to redact

        Returns:
            Dictionary with user path prefixes redacted
        """
        result: Dict[str, Any] = {}

        for key, value in data.items():
            if isinstance(value, dict):
                result[key] = self.redact_dict(value)
            elif isinstance(value, list):
                result[key] = [
                    self.redact_dict(item) if isinstance(item, dict)
                    else self.redact_string(item) if isinstance(item, str)
                    else item
                    for item in value
                ]
            elif isinstance(value, str):
                result[key] = self.redact_string(value)
            elif isinstance(value, os.PathLike):
                result[key] = self.redact_path(value)
            else:
                result[key] = value

        return result

    def add_pattern(self, pattern: Union[str, Pattern[str]]) -> None:
        """Add custom redaction pattern.

        Args:
            pattern: Regex pattern (string or compiled) to add
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.patterns.append(pattern)
