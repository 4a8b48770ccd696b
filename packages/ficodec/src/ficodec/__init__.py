# packages/ficodec/src/ficodec/__init__.py
from __future__ import annotations

"""FileInflater - codec (public surface).

Flux zlib (deflate/inflate), dérivation du stem et résolution de chemins
de sortie sans écrasement. Aucun accès disque hors `paths.resolve`.
"""

__version__ = "1.0.0"

# API publique (stable)
from .config import CodecConfig, INT_MAX
from .errors import (
    FailureKind,
    InflaterError,
    SourceUnreadableError,
    CorruptInputError,
    SinkUnwritableError,
    NoAvailableNameError,
    PermissionDeniedError,
)
from .stream import Direction, transform, compress_bytes, decompress_bytes
from .naming import derive_stem, extension_for
from .paths import CandidatePath, PathsConfig, resolve

__all__ = [
    "__version__",
    "CodecConfig", "INT_MAX",
    "FailureKind", "InflaterError",
    "SourceUnreadableError", "CorruptInputError", "SinkUnwritableError",
    "NoAvailableNameError", "PermissionDeniedError",
    "Direction", "transform", "compress_bytes", "decompress_bytes",
    "derive_stem", "extension_for",
    "CandidatePath", "PathsConfig", "resolve",
]
