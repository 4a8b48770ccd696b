# packages/ficodec/src/ficodec/config.py
from __future__ import annotations
from dataclasses import dataclass

__all__ = ["CodecConfig", "INT_MAX"]

#: Borne haute du désambiguïsateur `(N)` (entier signé 32 bits).
INT_MAX: int = 2**31 - 1


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """
    Configuration **publique et stable** du codec FileInflater.

    Cette config est consommée par `ficodec.stream.transform`,
    `ficodec.naming.extension_for` et `ficodec.paths.resolve`.

    Champs
    ------
    level : int, default=9
        Niveau zlib (-1 = défaut zlib, 0 = stocké, 9 = max).
    wbits : int, default=15
        Taille de fenêtre zlib. 9..15 => framing zlib (header + Adler-32),
        le format écrit par un `DeflaterOutputStream` standard.
    chunk_size : int, default=65536
        Taille des lectures successives sur la source. Doit être > 0.
    compress_ext : str, default=".zlib"
        Extension des sorties compressées.
    decompress_ext : str, default=".txt"
        Extension des sorties décompressées.
    max_index : int, default=INT_MAX
        Dernier `(N)` essayé avant `NoAvailableNameError`.

    Notes
    -----
    - La dataclass est **immuable** (`frozen=True`).
    - Aucune conversion n'est appliquée : les validations lèvent une `ValueError`
      si les bornes sont violées.
    """

    # zlib
    level: int = 9
    wbits: int = 15

    # Lecture
    chunk_size: int = 64 * 1024

    # Nommage
    compress_ext: str = ".zlib"
    decompress_ext: str = ".txt"
    max_index: int = INT_MAX

    def __post_init__(self) -> None:
        if not (-1 <= int(self.level) <= 9):
            raise ValueError("CodecConfig.level must be in [-1..9]")
        if not (9 <= int(self.wbits) <= 15):
            raise ValueError("CodecConfig.wbits must be in [9..15] (zlib framing)")
        if self.chunk_size <= 0:
            raise ValueError("CodecConfig.chunk_size must be > 0")
        for ext in (self.compress_ext, self.decompress_ext):
            if not isinstance(ext, str) or not ext.startswith("."):
                raise ValueError("CodecConfig extensions must be strings starting with '.'")
            if "/" in ext or "\\" in ext:
                raise ValueError("CodecConfig extensions must not contain path separators")
        if not (1 <= int(self.max_index) <= INT_MAX):
            raise ValueError("CodecConfig.max_index must be in [1..2^31-1]")
