from __future__ import annotations

from .config import CodecConfig
from .stream import Direction

__all__ = ["FALLBACK_STEMS", "derive_stem", "extension_for"]

FALLBACK_STEMS = {
    Direction.COMPRESS: "compressed",
    Direction.DECOMPRESS: "decompressed",
}


def _last_segment(name: str) -> str:
    # Le nom affiché est du texte : on ne garde que ce qui suit le dernier séparateur.
    cut = max(name.rfind("/"), name.rfind("\\"))
    return name[cut + 1:] if cut != -1 else name


def derive_stem(display_name: str | None, direction: Direction | str) -> str:
    """
    Dérive le stem de sortie depuis le nom affiché de la source.

    Règle unique : seul le **dernier** suffixe `.xxx` est retiré
    (`name.rsplit(".", 1)[0]`).

      - "archive.tar.gz" -> "archive.tar"
      - "README"         -> "README"   (pas de point : nom complet)
      - "file."          -> "file"
      - ".bashrc"        -> ""         (compat : point initial unique => stem vide)

    Nom absent/vide (ou vide après retrait des séparateurs) => stem de repli
    "compressed" / "decompressed" selon `direction`. Un nom fait d'espaces
    n'est pas vide : il est gardé tel quel ("   .txt" -> "   ").
    """
    direction = Direction(direction)
    if display_name is None:
        return FALLBACK_STEMS[direction]
    name = _last_segment(str(display_name).replace("\x00", ""))
    if not name:
        return FALLBACK_STEMS[direction]
    return name.rsplit(".", 1)[0]


def extension_for(direction: Direction | str, cfg: CodecConfig | None = None) -> str:
    cfg = cfg or CodecConfig()
    if Direction(direction) is Direction.COMPRESS:
        return cfg.compress_ext
    return cfg.decompress_ext
