"""Application ports package."""

from .auth_provider import AuthProviderPort
from .database import DatabaseEnginePort
from .record_repository import RecordRepositoryPort

__all__ = [
    "AuthProviderPort",
    "DatabaseEnginePort",
    "RecordRepositoryPort",
]
