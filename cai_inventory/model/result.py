"""Export result models."""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel

from .inventory import ContentType


class JobStatus(str, Enum):
    """Lifecycle of a single export job."""

    BUILT = "built"
    SUBMITTED = "submitted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ExportJobResult(BaseModel):
    """Outcome of one export job."""

    content_type: ContentType
    destination_uri: str
    status: JobStatus = JobStatus.BUILT
    error: Optional[str] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> Optional[float]:
        """Wall time from submission to completion."""
        if self.started_at and self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return None


class ExportSummary(BaseModel):
    """Outcome of an export run across all content types."""

    parent: str
    results: List[ExportJobResult] = []

    @property
    def succeeded(self) -> bool:
        """True if every job succeeded."""
        return bool(self.results) and all(
            r.status == JobStatus.SUCCEEDED for r in self.results
        )

    @property
    def failed(self) -> List[ExportJobResult]:
        """Jobs that failed."""
        return [r for r in self.results if r.status == JobStatus.FAILED]

    @property
    def errors(self) -> Dict[str, str]:
        """Error messages keyed by content type."""
        return {r.content_type.value: r.error or "" for r in self.failed}

    @property
    def destination_uris(self) -> List[str]:
        """Destination URIs in export order."""
        return [r.destination_uri for r in self.results]
