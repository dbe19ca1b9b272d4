"""
Configuration settings for parenlex.

This module contains default configuration values and settings used
by the lexer and the command-line interface.
"""

import codecs
from dataclasses import dataclass


@dataclass
class Settings:
    """Lexer settings and configuration.

    Attributes:
        encoding: Encoding used to decode binary input
        chunk_size: Number of units read from a stream at a time
        track_lines: Whether to advance line/column counters while scanning
        reclassify_numbers: Whether to run the numeric reclassification pass
    """
    encoding: str = "utf-8"
    chunk_size: int = 4096
    track_lines: bool = True
    reclassify_numbers: bool = True

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        # Raises LookupError for unknown encodings
        codecs.lookup(self.encoding)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
