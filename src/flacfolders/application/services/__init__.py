"""Application services."""

from .organize_service import OrganizeFlacService, OrganizeRequest
from .processing_types import ProcessingEvent, ProcessResult

__all__ = ["OrganizeFlacService", "OrganizeRequest", "ProcessResult", "ProcessingEvent"]
