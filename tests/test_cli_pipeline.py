import json
import zlib
from pathlib import Path

import pytest

from fiwf.cli.compress import main as compress_main
from fiwf.cli.decompress import main as decompress_main


def test_cli_compress_decompress_roundtrip(tmp_path):
    src = tmp_path / "in"; src.mkdir()
    a = src / "a.log"; a.write_bytes(b"line\n" * 500)
    b = src / "b.tar.gz"; b.write_bytes(bytes(range(256)) * 8)
    out = tmp_path / "out"
    stats = tmp_path / "artifacts" / "run.jsonl"

    rc = compress_main([str(a), str(b), "--out", str(out), "--stats-jsonl", str(stats)])
    assert rc == 0
    assert sorted(p.name for p in out.iterdir()) == ["a.zlib", "b.tar.zlib"]
    assert zlib.decompress((out / "a.zlib").read_bytes()) == a.read_bytes()

    events = [json.loads(l) for l in stats.read_text(encoding="utf-8").splitlines()]
    assert [e["ok"] for e in events] == [True, True]
    assert events[0]["event"] == "compress_done"

    # seconde passe : jamais d'écrasement
    rc = compress_main([str(a), "--out", str(out)])
    assert rc == 0
    assert (out / "a(1).zlib").exists()

    back = tmp_path / "back"
    rc = decompress_main([str(out / "a.zlib"), str(out / "b.tar.zlib"), "--out", str(back)])
    assert rc == 0
    assert (back / "a.txt").read_bytes() == a.read_bytes()
    assert (back / "b.tar.txt").read_bytes() == b.read_bytes()


def test_cli_reports_failures(tmp_path):
    bad = tmp_path / "bad.zlib"; bad.write_bytes(b"definitely not zlib")
    out = tmp_path / "out"
    stats = tmp_path / "run.jsonl"
    log_file = tmp_path / "logs" / "fi.log"
    rc = decompress_main([str(bad), str(tmp_path / "missing.zlib"), "--out", str(out),
                          "--stats-jsonl", str(stats), "--log-file", str(log_file)])
    assert rc == 1
    events = [json.loads(l) for l in stats.read_text(encoding="utf-8").splitlines()]
    assert [e["kind"] for e in events] == ["corrupt_input", "source_unreadable"]
    assert list(out.iterdir()) == []
    assert "File error (corrupt_input)" in log_file.read_text(encoding="utf-8")


def test_cli_uses_discovered_dir(tmp_path, monkeypatch):
    dl = tmp_path / "env_out"; dl.mkdir()
    monkeypatch.setenv("FI_OUTPUT_DIR", str(dl))
    f = tmp_path / "x.bin"; f.write_bytes(b"\x00" * 64)
    assert compress_main([str(f), "--level", "1"]) == 0
    assert (dl / "x.zlib").exists()


def test_cli_out_is_a_file(tmp_path):
    f = tmp_path / "x.bin"; f.write_bytes(b"x")
    blocker = tmp_path / "out"; blocker.write_bytes(b"")
    assert compress_main([str(f), "--out", str(blocker)]) == 2


@pytest.mark.parametrize("opts", [
    ["--level", "42"],
    ["--level", "-5"],
    ["--chunk-size", "0"],
])
def test_cli_bad_options_exit_2(tmp_path, opts):
    f = tmp_path / "x.bin"; f.write_bytes(b"x")
    out = tmp_path / "out"
    assert compress_main([str(f), "--out", str(out), *opts]) == 2
    assert not out.exists() or list(out.iterdir()) == []


@pytest.mark.parametrize("var, raw", [
    ("FI_LEVEL", "fast"),
    ("FI_CHUNK_SIZE", "-1"),
    ("FI_CLEANUP_PARTIAL", "maybe"),
])
def test_cli_bad_env_exit_2(tmp_path, monkeypatch, var, raw):
    monkeypatch.setenv(var, raw)
    f = tmp_path / "x.bin"; f.write_bytes(b"x")
    out = tmp_path / "out"
    assert compress_main([str(f), "--out", str(out)]) == 2
    assert not out.exists() or list(out.iterdir()) == []
