"""Error taxonomy for WAV normalization"""

from typing import Optional

TOOL_TAG = "[wav-normalizer]"


class NormalizationError(Exception):
    """Base class for every failure surfaced by the normalizer."""

    def __init__(self, message: str):
        super().__init__(f"{TOOL_TAG} {message}")


class FileReadError(NormalizationError):
    """Raised when the header of the input file cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to read header of {path}: {reason}")


class EncoderFailure(NormalizationError):
    """Raised when the encoder backend exits with a non-zero status."""

    def __init__(self, exit_code: int, stderr: Optional[str] = ""):
        self.exit_code = exit_code
        self.stderr = stderr or ""
        super().__init__(f"Failed to convert audio file: {self.stderr.strip()}")


class RenameFailure(NormalizationError):
    """Raised when the encoded temp file cannot replace the original."""

    def __init__(self, temp_path: str, target_path: str, reason: str):
        self.temp_path = temp_path
        self.target_path = target_path
        super().__init__(f"Failed to replace {target_path} with {temp_path}: {reason}")
