from __future__ import annotations
import os, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Dict, Union

from ficodec import (
    CodecConfig,
    INT_MAX,
    Direction,
    FailureKind,
    InflaterError,
    SinkUnwritableError,
    SourceUnreadableError,
    derive_stem,
    extension_for,
    resolve,
    transform,
)

__all__ = ["RunCfg", "Success", "Failure", "OperationResult", "run", "run_path"]

log = logging.getLogger(__name__)

# --- Résultats ---------------------------------------------------------------

@dataclass(frozen=True)
class Success:
    final_path: Path
    bytes_written: int

    @property
    def ok(self) -> bool:
        return True

@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False

OperationResult = Union[Success, Failure]

# --- Config ------------------------------------------------------------------

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}

def _env_bool(v: str) -> bool:
    s = v.strip().lower()
    if s in _TRUE:
        return True
    if s in _FALSE:
        return False
    raise ValueError("expected one of 1/true/yes/on or 0/false/no/off")

@dataclass
class RunCfg:
    level: int = 9
    chunk_size: int = 64 * 1024
    cleanup_partial: bool = False
    max_index: int = INT_MAX

    @staticmethod
    def from_sources(cfg: Dict[str, Any] | None, read_env: bool = True) -> "RunCfg":
        base: Dict[str, Any] = dict(level=9, chunk_size=64 * 1024, cleanup_partial=False, max_index=INT_MAX)
        if cfg:
            base.update({k: v for k, v in cfg.items() if k in base and v is not None})
        if read_env:
            def _envf(name, cast, default):
                v = os.getenv(name)
                if v is None:
                    return default
                try:
                    return cast(v)
                except ValueError as e:
                    raise ValueError(f"{name}={v!r}: {e}") from e
            base["level"] = _envf("FI_LEVEL", int, base["level"])
            base["chunk_size"] = _envf("FI_CHUNK_SIZE", int, base["chunk_size"])
            base["cleanup_partial"] = _envf("FI_CLEANUP_PARTIAL", _env_bool, base["cleanup_partial"])
        return RunCfg(**base)

    def to_codec_cfg(self) -> CodecConfig:
        # valide level/chunk_size/max_index (ValueError)
        return CodecConfig(level=self.level, chunk_size=self.chunk_size, max_index=self.max_index)

# --- Sink --------------------------------------------------------------------

def _open_sink(path: Path) -> BinaryIO:
    # rouvre le fichier réservé par resolve() : pas de O_CREAT, pas de lien suivi
    fd = os.open(str(path), os.O_WRONLY | os.O_TRUNC | getattr(os, "O_NOFOLLOW", 0))
    return os.fdopen(fd, "wb")

def _write_all(path: Path, data: bytes, chunk_size: int) -> int:
    written = 0
    view = memoryview(data)
    with _open_sink(path) as f:
        for off in range(0, len(view), chunk_size):
            chunk = view[off:off + chunk_size]
            f.write(chunk)
            written += len(chunk)
        f.flush()
        os.fsync(f.fileno())
    return written

def _drop_partial(path: Path) -> None:
    try:
        path.unlink()
        log.info("partial output removed: %s", path)
    except FileNotFoundError:
        pass
    except OSError as e:
        log.warning("could not remove partial output %s: %s", path, e)

# --- Public Orchestration API ------------------------------------------------

def run(direction: Direction | str, source: BinaryIO, display_name: str | None,
        directory: Path | str, cfg: RunCfg | None = None) -> OperationResult:
    """Read → transform → resolve → write. Every taxonomy error comes back as `Failure`.

    `source` belongs to the caller and is never closed here. The output file is
    created exclusively and never overwrites an existing file. On a write error
    the partially written file is kept unless `cfg.cleanup_partial` is set.
    """
    cfg = cfg or RunCfg.from_sources(None)
    direction = Direction(direction)
    codec_cfg = cfg.to_codec_cfg()
    stage = "reading"
    out_p: Path | None = None
    try:
        log.debug("[%s] %s: %r", stage, direction.value, display_name)
        data = transform(direction, source, codec_cfg)

        stage = "resolving"
        stem = derive_stem(display_name, direction)
        cand = resolve(directory, stem, extension_for(direction, codec_cfg),
                       claim=True, max_index=codec_cfg.max_index)
        out_p = cand.path

        stage = "writing"
        try:
            n = _write_all(out_p, data, codec_cfg.chunk_size)
        except OSError as e:
            raise SinkUnwritableError(f"write to {out_p} failed: {e}") from e
    except InflaterError as e:
        if stage == "writing" and out_p is not None:
            if cfg.cleanup_partial:
                _drop_partial(out_p)
            else:
                log.info("partial output left in place: %s", out_p)
        log.warning("%s failed while %s (%s): %s", direction.value, stage, e.kind.value, e)
        return Failure(e.kind, e.message)

    log.info("%s OK → %s (%d bytes)", direction.value, out_p, n)
    return Success(out_p, n)

def run_path(direction: Direction | str, path: Path | str, directory: Path | str,
             cfg: RunCfg | None = None) -> OperationResult:
    """Same as `run` for a local file; its basename is the display name."""
    path = Path(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        err = SourceUnreadableError(f"cannot open {path}: {e}")
        log.warning("%s failed while opening (%s): %s", Direction(direction).value, err.kind.value, err)
        return Failure(err.kind, err.message)
    with f:
        return run(direction, f, path.name, directory, cfg)
