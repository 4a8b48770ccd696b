"""FileInflater: unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import fileinflater as fi
    res = fi.run_path("compress", "report.pdf", fi.find_output_dir())
    print(fi.describe(res, "compress"))

Or detailed modules:

    from fileinflater import codec, wf
"""

__version__ = "1.0.0"

# Bring subpackages into a single namespace
import ficodec as codec
import fiwf as wf

# High-level convenience re-exports (top-level functions)
from ficodec import (
    CodecConfig, Direction, FailureKind, InflaterError,
    compress_bytes, decompress_bytes, transform,
    derive_stem, resolve, CandidatePath,
)
from fiwf import (
    RunCfg, Success, Failure, run, run_path,
    find_output_dir, describe,
)

__all__ = [
    # sub-namespaces
    "codec", "wf",
    # convenience
    "CodecConfig", "Direction", "FailureKind", "InflaterError",
    "compress_bytes", "decompress_bytes", "transform",
    "derive_stem", "resolve", "CandidatePath",
    "RunCfg", "Success", "Failure", "run", "run_path",
    "find_output_dir", "describe",
    "__version__",
]
