# packages/ficodec/src/ficodec/paths.py
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import CodecConfig
from .errors import NoAvailableNameError, SinkUnwritableError

__all__ = ["CandidatePath", "PathsConfig", "render", "resolve"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidatePath:
    """`directory/stem(N).extension` ; `disambiguator=None` => pas de `(N)`."""
    directory: Path
    stem: str
    extension: str
    disambiguator: int | None = None

    @property
    def path(self) -> Path:
        return render(self.directory, self.stem, self.extension, self.disambiguator)

    @property
    def name(self) -> str:
        return self.path.name


def render(directory: Path | str, stem: str, extension: str, disambiguator: int | None = None) -> Path:
    if disambiguator is None:
        return Path(directory) / f"{stem}{extension}"
    return Path(directory) / f"{stem}({disambiguator}){extension}"


def _claim(path: Path) -> bool:
    """Création exclusive (O_EXCL). False si le nom est déjà pris."""
    try:
        fd = os.open(str(path), os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
    except FileExistsError:
        return False
    except OSError as e:
        raise SinkUnwritableError(f"cannot create {path}: {e}") from e
    os.close(fd)
    return True


def resolve(
    directory: Path | str,
    stem: str,
    extension: str,
    *,
    claim: bool = True,
    max_index: int | None = None,
) -> CandidatePath:
    """
    Choisit le premier nom libre parmi `stem.ext`, `stem(1).ext`, `stem(2).ext`, ...

    Paramètres
    ----------
    directory : Path | str
        Dossier déjà choisi et inscriptible (non créé ici).
    stem, extension : str
        Stem dérivé (`ficodec.naming.derive_stem`) et extension avec son point.
    claim : bool, par défaut True
        True  => chaque candidat est créé atomiquement (O_CREAT|O_EXCL) ; seule une
                 collision signalée par cette création fait avancer `(N)`. Le chemin
                 renvoyé existe (fichier vide) et appartient à l'appelant.
        False => simple test d'existence, sans création (sujet aux courses).
    max_index : int | None
        Dernier `(N)` essayé ; `CodecConfig().max_index` par défaut.

    Exceptions
    ----------
    NoAvailableNameError si tous les candidats sont pris.
    SinkUnwritableError si la création échoue pour une autre raison qu'une collision.
    """
    directory = Path(directory)
    limit = CodecConfig().max_index if max_index is None else int(max_index)

    disambiguator: int | None = None
    while True:
        cand = CandidatePath(directory, stem, extension, disambiguator)
        p = cand.path
        taken = not _claim(p) if claim else p.exists()
        if not taken:
            log.debug("resolved output path %s", p)
            return cand
        log.debug("output path taken: %s", p)
        nxt = 1 if disambiguator is None else disambiguator + 1
        if nxt > limit:
            raise NoAvailableNameError(
                f"no free name for {stem!r}{extension} in {directory} (tried up to ({limit}))"
            )
        disambiguator = nxt


@dataclass(frozen=True)
class PathsConfig:
    """Dossier de sortie explicite.

    ENV keys
    --------
    FI_OUTPUT_DIR → dossier où écrire les sorties (jamais écrasées)
    """
    output_dir: Path | None = None

    @staticmethod
    def from_env() -> "PathsConfig":
        return PathsConfig(output_dir=_opt_env("FI_OUTPUT_DIR"))

    # Accessor (explicit → ENV fallback)
    def outputs(self) -> Path | None: return self.output_dir or _opt_env("FI_OUTPUT_DIR")


def _opt_env(name: str) -> Path | None:
    v = os.getenv(name)
    return Path(v).expanduser() if v else None
