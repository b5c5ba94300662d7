from audit_trail.schemas.version import ErrorResponse, MessageResponse, VersionCreate, VersionSummary

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "VersionCreate",
    "VersionSummary",
]
