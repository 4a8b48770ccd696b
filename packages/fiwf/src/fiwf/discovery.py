from __future__ import annotations
import os, logging
from pathlib import Path

from ficodec import PathsConfig, PermissionDeniedError

__all__ = ["PRIVATE_SUBDIR", "candidate_dirs", "find_output_dir"]

log = logging.getLogger(__name__)

PRIVATE_SUBDIR = Path(".fileinflater") / "downloads"

def _writable_dir(p: Path) -> bool:
    return p.is_dir() and os.access(p, os.W_OK)

def candidate_dirs(preferred: Path | str | None = None, paths: PathsConfig | None = None,
                   home: Path | None = None) -> list[Path]:
    """Ordre : explicite, FI_OUTPUT_DIR, ~/Download, ~/Downloads (public)."""
    paths = paths or PathsConfig.from_env()
    home = Path(home) if home is not None else Path.home()
    out: list[Path] = []
    if preferred is not None:
        out.append(Path(preferred).expanduser())
    if paths.outputs() is not None:
        out.append(paths.outputs())
    out += [home / "Download", home / "Downloads"]
    return out

def find_output_dir(preferred: Path | str | None = None, paths: PathsConfig | None = None,
                    home: Path | None = None) -> Path:
    """Premier dossier public inscriptible, sinon le dossier privé de l'app (créé).

    Lève `PermissionDeniedError` si aucun n'est utilisable.
    """
    home = Path(home) if home is not None else Path.home()
    for p in candidate_dirs(preferred, paths, home):
        if _writable_dir(p):
            log.debug("output dir: %s", p)
            return p
        log.debug("output dir skipped (missing or read-only): %s", p)

    private = home / PRIVATE_SUBDIR
    try:
        private.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PermissionDeniedError(f"no writable output directory ({private}: {e})") from e
    if not _writable_dir(private):
        raise PermissionDeniedError(f"no writable output directory ({private} is read-only)")
    log.debug("output dir (private fallback): %s", private)
    return private
