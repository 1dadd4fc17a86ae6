"""Data models for the normalization pipeline"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Suffix appended to the original path while re-encoding in place
TEMP_SUFFIX = '.temp.wav'
WAV_EXTENSION = '.wav'


@dataclass(frozen=True)
class AudioFile:
    """An audio file identified by its filesystem path."""
    path: str

    @property
    def extension(self) -> str:
        """Lower-cased extension including the leading dot ('' if none)."""
        return os.path.splitext(self.path)[1].lower()

    @property
    def basename(self) -> str:
        return os.path.basename(self.path)

    @property
    def stem(self) -> str:
        return os.path.splitext(self.basename)[0]

    @property
    def directory(self) -> str:
        return os.path.dirname(self.path)

    @property
    def is_wav(self) -> bool:
        return self.extension == WAV_EXTENSION

    def with_extension(self, extension: str) -> str:
        """Sibling path with the same directory and stem but a new extension."""
        return os.path.join(self.directory, f"{self.stem}{extension}")

    def temp_path(self) -> str:
        """Transient sibling used while re-encoding in place."""
        return f"{self.path}{TEMP_SUFFIX}"


class ConversionAction(Enum):
    """What the normalizer did to produce the outcome."""
    UNCHANGED = 'unchanged'
    REENCODED_IN_PLACE = 'reencoded_in_place'
    ENCODED_NEW_FILE = 'encoded_new_file'


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of a single normalization call."""
    path: str
    action: ConversionAction
    source: Optional[str] = None

    @property
    def changed(self) -> bool:
        return self.action is not ConversionAction.UNCHANGED
