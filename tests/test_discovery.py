from __future__ import annotations
import os

import pytest

from ficodec import FailureKind, PathsConfig, PermissionDeniedError
from fiwf.discovery import PRIVATE_SUBDIR, candidate_dirs, find_output_dir

NO_ENV = PathsConfig()


def test_preferred_wins(tmp_path):
    pref = tmp_path / "pref"; pref.mkdir()
    (tmp_path / "Download").mkdir()
    assert find_output_dir(pref, NO_ENV, home=tmp_path) == pref


def test_env_dir(tmp_path, monkeypatch):
    env_dir = tmp_path / "env"; env_dir.mkdir()
    monkeypatch.setenv("FI_OUTPUT_DIR", str(env_dir))
    assert find_output_dir(home=tmp_path) == env_dir


def test_download_then_downloads(tmp_path):
    (tmp_path / "Downloads").mkdir()
    assert find_output_dir(paths=NO_ENV, home=tmp_path) == tmp_path / "Downloads"
    (tmp_path / "Download").mkdir()
    assert find_output_dir(paths=NO_ENV, home=tmp_path) == tmp_path / "Download"


def test_private_fallback_is_created(tmp_path):
    got = find_output_dir(tmp_path / "missing", NO_ENV, home=tmp_path)
    assert got == tmp_path / PRIVATE_SUBDIR
    assert got.is_dir()


def test_candidate_order(tmp_path):
    c = candidate_dirs("x", PathsConfig(output_dir=tmp_path / "e"), home=tmp_path)
    assert [p.name for p in c] == ["x", "e", "Download", "Downloads"]


def test_nothing_writable_is_permission_denied(tmp_path):
    # un fichier à la place du dossier privé : mkdir échoue même en root
    (tmp_path / ".fileinflater").write_bytes(b"")
    with pytest.raises(PermissionDeniedError) as ei:
        find_output_dir(paths=NO_ENV, home=tmp_path)
    assert ei.value.kind is FailureKind.PERMISSION_DENIED


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores directory modes")
def test_read_only_download_is_skipped(tmp_path):
    ro = tmp_path / "Download"; ro.mkdir()
    ro.chmod(0o500)
    try:
        assert find_output_dir(paths=NO_ENV, home=tmp_path) == tmp_path / PRIVATE_SUBDIR
    finally:
        ro.chmod(0o700)
