# packages/fiwf/src/fiwf/__init__.py
from __future__ import annotations

from .orchestrator import RunCfg, Success, Failure, OperationResult, run, run_path
from .discovery import find_output_dir
from .api import describe, append_stats

__all__ = [
    "RunCfg", "Success", "Failure", "OperationResult",
    "run", "run_path",
    "find_output_dir",
    "describe", "append_stats",
    # on n’importe PAS le sous-module cli ici (argparse/logging config au top-level)
]

__version__ = "1.0.0"
