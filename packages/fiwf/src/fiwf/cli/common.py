from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import Optional

from ficodec import Direction, PermissionDeniedError

from ..api import append_stats, describe, result_event
from ..discovery import find_output_dir
from ..orchestrator import RunCfg, run_path

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers, force=True)

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def build_parser(direction: Direction) -> argparse.ArgumentParser:
    verb = direction.value
    p = argparse.ArgumentParser(description=f"FileInflater: {verb} files (zlib), never overwriting outputs")
    p.add_argument("files", nargs="+", help=f"Fichiers à {'compresser' if direction is Direction.COMPRESS else 'décompresser'}")
    p.add_argument("--out", default=None, help="Dossier de sortie (sinon FI_OUTPUT_DIR, ~/Download(s), dossier privé)")
    p.add_argument("--level", type=int, default=None, help="Niveau zlib -1..9 (compress)")
    p.add_argument("--chunk-size", type=int, default=None)
    p.add_argument("--cleanup-partial", action="store_true", help="Supprimer la sortie partielle si l'écriture échoue")
    p.add_argument("--stats-jsonl", default=None, help="(Optionnel) JSONL, un événement par fichier")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p

def run_cli(direction: Direction, argv=None) -> int:
    args = build_parser(direction).parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    try:
        cfg = RunCfg.from_sources({
            "level": args.level,
            "chunk_size": args.chunk_size,
            "cleanup_partial": True if args.cleanup_partial else None,
        })
        cfg.to_codec_cfg()
    except ValueError as e:
        logging.error("Config invalide: %s", e)
        return 2

    try:
        if args.out:
            out_dir = Path(args.out); ensure_dir(out_dir)
        else:
            out_dir = find_output_dir()
    except (OSError, PermissionDeniedError) as e:
        logging.error("Aucun dossier de sortie utilisable: %s", e)
        return 2

    ok = 0
    for i, src in enumerate(args.files, 1):
        logging.info("[%d/%d] %s: %s", i, len(args.files), direction.value, src)
        res = run_path(direction, src, out_dir, cfg)
        if res.ok:
            logging.info("→ %s", describe(res, direction))
            ok += 1
        else:
            logging.error("→ %s: %s", describe(res, direction), res.message)
        if args.stats_jsonl:
            append_stats(args.stats_jsonl, result_event(res, direction, str(src)))

    logging.info("Terminé: %d/%d OK", ok, len(args.files))
    return 0 if ok == len(args.files) else 1
