from __future__ import annotations
from enum import Enum

__all__ = [
    "FailureKind",
    "InflaterError",
    "SourceUnreadableError",
    "CorruptInputError",
    "SinkUnwritableError",
    "NoAvailableNameError",
    "PermissionDeniedError",
]


class FailureKind(str, Enum):
    SOURCE_UNREADABLE = "source_unreadable"
    CORRUPT_INPUT = "corrupt_input"
    SINK_UNWRITABLE = "sink_unwritable"
    NO_AVAILABLE_NAME = "no_available_name"
    PERMISSION_DENIED = "permission_denied"  # levé par la découverte du dossier, jamais par le core


class InflaterError(Exception):
    """Base des erreurs typées ; `kind` est repris tel quel dans `Failure`."""

    kind: FailureKind

    def __init__(self, message: str, kind: FailureKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind

    @property
    def message(self) -> str:
        return str(self)


class SourceUnreadableError(InflaterError):
    kind = FailureKind.SOURCE_UNREADABLE


class CorruptInputError(InflaterError, ValueError):
    kind = FailureKind.CORRUPT_INPUT


class SinkUnwritableError(InflaterError):
    kind = FailureKind.SINK_UNWRITABLE


class NoAvailableNameError(InflaterError):
    kind = FailureKind.NO_AVAILABLE_NAME


class PermissionDeniedError(InflaterError):
    kind = FailureKind.PERMISSION_DENIED
