from __future__ import annotations
import json, time
from pathlib import Path
from typing import Any

from ficodec import Direction

from .orchestrator import OperationResult, Success

def describe(result: OperationResult, direction: Direction | str) -> str:
    """Message utilisateur : un succès nommé, ou une catégorie d'erreur générique."""
    if isinstance(result, Success):
        return f"File {Direction(direction).value}ed to {result.final_path}"
    return f"File error ({result.kind.value})"

def append_stats(path: Path | str, event: dict[str, Any]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(event, ensure_ascii=False) + "\n")

def result_event(result: OperationResult, direction: Direction | str, src: str) -> dict[str, Any]:
    ev: dict[str, Any] = {"event": f"{Direction(direction).value}_done", "in": src, "ts": time.time()}
    if isinstance(result, Success):
        ev.update(ok=True, out=str(result.final_path), bytes=result.bytes_written)
    else:
        ev.update(ok=False, kind=result.kind.value, error=result.message)
    return ev
