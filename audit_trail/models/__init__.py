from audit_trail.models.version import VersionRecord

__all__ = ["VersionRecord"]
