"""Integration tests running ``python -m boilerplate`` in a subprocess.

These exercise the real entry point, exit codes and working directory
handling.  No network access is required.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(args: list[str], cwd: Path) -> subprocess.CompletedProcess[str]:
    env = {**os.environ, "NO_COLOR": "1", "PYTHONIOENCODING": "utf-8"}
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(REPO_ROOT), env.get("PYTHONPATH", "")) if p
    )
    env.pop("BOILERPLATE_QUIET", None)
    return subprocess.run(
        [sys.executable, "-m", "boilerplate", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
        timeout=60,
    )


@pytest.mark.integration
class TestCliEndToEnd:
    def test_generates_project(self, workdir: Path):
        result = _run(["demo"], workdir)
        assert result.returncode == 0, result.stderr
        root = workdir / "demo"
        assert sorted(p.name for p in root.iterdir()) == [
            "index.html",
            "script.js",
            "style.css",
        ]
        html = (root / "index.html").read_text(encoding="utf-8")
        assert "<title>demo</title>" in html
        assert "cd demo" in result.stdout

    def test_existing_file_is_left_alone(self, workdir: Path):
        target = workdir / "demo"
        target.write_text("original", encoding="utf-8")
        result = _run(["demo"], workdir)
        assert result.returncode == 1
        assert "já existe" in result.stderr
        assert target.read_text(encoding="utf-8") == "original"

    @pytest.mark.parametrize("args", [[], ["one", "two"], ["one", "--"], ["--", "one"]])
    def test_bad_invocation(self, workdir: Path, args: list[str]):
        result = _run(args, workdir)
        assert result.returncode == 1
        assert "Uso incorreto." in result.stdout
        assert list(workdir.iterdir()) == []

    def test_dash_prefixed_name(self, workdir: Path):
        result = _run(["-site"], workdir)
        assert result.returncode == 0, result.stderr
        assert (workdir / "-site" / "index.html").is_file()
