# packages/ficodec/src/ficodec/stream.py
# -----------------------------------------------------------------------------
# StreamCodec : source d'octets -> deflate/inflate zlib -> bytes
# Aucun accès disque ici : le module travaille sur des flux/bytes en mémoire.

from __future__ import annotations
import io
import zlib
from enum import Enum
from typing import BinaryIO, Iterator

from .config import CodecConfig
from .errors import CorruptInputError, SourceUnreadableError

__all__ = [
    "Direction",
    "iter_chunks", "transform",
    "compress_bytes", "decompress_bytes",
]


class Direction(str, Enum):
    COMPRESS = "compress"
    DECOMPRESS = "decompress"


# -----------------------------------------------------------------------------
# Lecture de la source
# -----------------------------------------------------------------------------
def iter_chunks(source: BinaryIO, chunk_size: int) -> Iterator[bytes]:
    """
    Lit `source` séquentiellement jusqu'à épuisement (`read` renvoie `b""`).

    La source n'est ni fermée ni conservée : elle appartient à l'appelant.
    Toute erreur de lecture devient `SourceUnreadableError`.
    """
    while True:
        try:
            chunk = source.read(chunk_size)
        except (OSError, ValueError) as e:
            raise SourceUnreadableError(f"read failed: {e}") from e
        if chunk is None:
            # flux non bloquant sans données disponibles : on ne devine pas
            raise SourceUnreadableError("read returned None (non-blocking source)")
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise SourceUnreadableError(
                f"source must yield bytes, got {type(chunk).__name__}"
            )
        if not chunk:
            return
        yield bytes(chunk)


# -----------------------------------------------------------------------------
# Filtres
# -----------------------------------------------------------------------------
def _deflate(chunks: Iterator[bytes], cfg: CodecConfig) -> bytes:
    c = zlib.compressobj(cfg.level, zlib.DEFLATED, cfg.wbits)
    out = [c.compress(chunk) for chunk in chunks]
    out.append(c.flush())
    return b"".join(out)


def _inflate(chunks: Iterator[bytes], cfg: CodecConfig) -> bytes:
    d = zlib.decompressobj(cfg.wbits)
    out: list[bytes] = []
    seen = 0
    try:
        for chunk in chunks:
            seen += len(chunk)
            out.append(d.decompress(chunk))
        out.append(d.flush())
    except zlib.error as e:
        raise CorruptInputError(f"invalid zlib stream after {seen} bytes: {e}") from e
    if not d.eof:
        raise CorruptInputError(f"truncated zlib stream ({seen} bytes read, end of stream missing)")
    if d.unused_data:
        raise CorruptInputError(
            f"{len(d.unused_data)} trailing bytes after end of zlib stream"
        )
    return b"".join(out)


def transform(direction: Direction | str, source: BinaryIO, cfg: CodecConfig | None = None) -> bytes:
    """
    Applique la transformation `direction` à toute la source.

    Paramètres
    ----------
    direction : Direction | str
        `Direction.COMPRESS` (deflate, framing zlib) ou `Direction.DECOMPRESS`.
    source : BinaryIO
        Flux binaire lisible une seule fois, jusqu'à épuisement.
    cfg : CodecConfig | None
        Niveau, fenêtre et taille de lecture. `CodecConfig()` par défaut.

    Retour
    ------
    bytes
        Flux compressé (une source vide donne un flux zlib valide non vide),
        ou octets d'origine.

    Exceptions
    ----------
    SourceUnreadableError si la lecture échoue.
    CorruptInputError si le flux à décompresser est invalide, tronqué, ou
    suivi d'octets parasites. Aucune sortie partielle n'est renvoyée.
    """
    cfg = cfg or CodecConfig()
    direction = Direction(direction)
    chunks = iter_chunks(source, cfg.chunk_size)
    if direction is Direction.COMPRESS:
        return _deflate(chunks, cfg)
    return _inflate(chunks, cfg)


# -----------------------------------------------------------------------------
# Helpers en mémoire
# -----------------------------------------------------------------------------
def compress_bytes(data: bytes, cfg: CodecConfig | None = None) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("compress_bytes: data must be bytes-like")
    return transform(Direction.COMPRESS, io.BytesIO(bytes(data)), cfg)


def decompress_bytes(data: bytes, cfg: CodecConfig | None = None) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("decompress_bytes: data must be bytes-like")
    return transform(Direction.DECOMPRESS, io.BytesIO(bytes(data)), cfg)
