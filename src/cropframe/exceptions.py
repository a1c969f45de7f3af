"""Custom exceptions for cropframe collaborators.

The geometric solvers never raise for rejected gestures; they report
"no change" instead. These exceptions cover the I/O collaborators around
the core: reading images and saved editing sessions.
"""

from pathlib import Path


class CropframeError(Exception):
    """Base exception for all cropframe errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize error with optional path context.

        Args:
            message: Human-readable error description.
            path: Path to the file that caused the error.
        """
        self.path = Path(path) if path else None
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with path context if available."""
        if self.path:
            return f"{self.message} (path: {self.path})"
        return self.message


class ImageSourceError(CropframeError):
    """Raised when an image file cannot be opened or measured.

    This error is raised when:
    - The file does not exist
    - The file is not an image Pillow can identify
    - The reported dimensions are not positive
    """

    pass


class StateFileError(CropframeError):
    """Raised when a saved editing session cannot be read.

    This error is raised when:
    - The file is not valid JSON
    - The JSON does not describe a valid geometric state
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        *,
        key: str | None = None,
    ) -> None:
        """Initialize state file error with the session key.

        Args:
            message: Human-readable error description.
            path: Path to the state file.
            key: Session key the file was stored under.
        """
        self.key = key
        super().__init__(message, path)

    def _format_message(self) -> str:
        """Format error message with key and path context."""
        parts = [self.message]
        if self.key is not None:
            parts.append(f"key={self.key}")
        if self.path:
            parts.append(f"path={self.path}")

        if len(parts) == 1:
            return parts[0]
        return f"{parts[0]} ({', '.join(parts[1:])})"
