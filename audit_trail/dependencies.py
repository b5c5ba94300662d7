from fastapi import Request

from audit_trail.services.version_store import VersionStore


def get_version_store(request: Request) -> VersionStore:
    return request.app.state.version_store
