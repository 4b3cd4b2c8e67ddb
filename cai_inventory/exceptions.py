"""Exception hierarchy for inventory exports."""

from typing import Any, Dict, List, Optional


class InventoryError(Exception):
    """Base exception for cai-inventory.

    Attributes:
        message: Human-readable error message
        cause: Underlying exception, if any
        details: Extra context for diagnostics
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Return the error as a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


class ConstructionError(InventoryError):
    """Invalid scope or destination bucket."""


class ManifestError(InventoryError):
    """Manifest file missing or malformed."""


class SubmissionError(InventoryError):
    """The inventory service rejected an export request."""

    def __init__(self, destination_uri: str, cause: Optional[Exception] = None):
        super().__init__(f"destination = {destination_uri}", cause)
        self.destination_uri = destination_uri
        self.details["destination_uri"] = destination_uri


class OperationError(InventoryError):
    """An accepted export job failed remotely."""

    def __init__(
        self,
        destination_uri: str,
        cause: Optional[Exception] = None,
        message: Optional[str] = None,
    ):
        super().__init__(message or f"export to {destination_uri} failed", cause)
        self.destination_uri = destination_uri
        self.details["destination_uri"] = destination_uri


class ExportTimeoutError(OperationError):
    """Waiting on an export job exceeded the caller's timeout."""

    def __init__(self, destination_uri: str, timeout: float):
        super().__init__(
            destination_uri, message=f"export to {destination_uri} timed out after {timeout}s"
        )
        self.timeout = timeout
        self.details["timeout"] = timeout


class ExportCancelledError(OperationError):
    """The caller cancelled the wait on an export job."""

    def __init__(self, destination_uri: str):
        super().__init__(destination_uri, message=f"export to {destination_uri} was cancelled")


class InventoryExportError(InventoryError):
    """One or more export jobs in a run failed.

    ``errors`` maps each failed content type to its error, so callers can tell
    which export failed, or whether both did.
    """

    def __init__(self, errors: Dict[str, InventoryError], summary: Any = None):
        failed = ", ".join(errors)
        super().__init__(f"inventory export failed for {failed}")
        self.errors = errors
        self.summary = summary
        self.details["failed"] = list(errors)

    def __str__(self) -> str:
        lines: List[str] = [self.message]
        for content_type, error in self.errors.items():
            lines.append(f"  {content_type}: {error}")
        return "\n".join(lines)
