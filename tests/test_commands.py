import subprocess
import sys
from pathlib import Path
from typing import List

import pytest

from react_instant.config import ScaffoldConfig
from react_instant.scaffold import commands


def test_run_command_success(tmp_path: Path) -> None:
    marker = tmp_path / "ran.txt"
    script = f"open({str(marker)!r}, 'w').write('ok')"

    assert commands.run_command([sys.executable, "-c", script], cwd=tmp_path) is True
    assert marker.read_text() == "ok"


def test_run_command_non_zero_exit(tmp_path: Path) -> None:
    assert commands.run_command([sys.executable, "-c", "raise SystemExit(3)"], cwd=tmp_path) is False


def test_run_command_missing_executable(tmp_path: Path) -> None:
    assert commands.run_command(["react-instant-no-such-tool", "install"], cwd=tmp_path) is False


def test_run_command_non_executable_file(tmp_path: Path) -> None:
    tool = tmp_path / "npm"
    tool.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    tool.chmod(0o644)

    assert commands.run_command([str(tool), "install"], cwd=tmp_path) is False


def test_run_command_cwd_is_a_file(tmp_path: Path) -> None:
    not_a_dir = tmp_path / "package.json"
    not_a_dir.write_text("{}", encoding="utf-8")

    assert commands.run_command([sys.executable, "-c", "pass"], cwd=not_a_dir) is False


def test_dev_server_interrupt_is_normal_exit(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted(args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(subprocess, "run", interrupted)

    assert commands.start_dev_server(tmp_path, ScaffoldConfig()) is True


def test_update_packages_reports_failures_and_continues(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen: List[List[str]] = []

    def fake_run(args, **kwargs):
        seen.append(list(args))
        if args[0] == "npx":
            raise subprocess.CalledProcessError(1, args)
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)

    failed = commands.update_packages(tmp_path, ScaffoldConfig())

    assert failed == ["npx npm-check-updates -u --silent"]
    assert seen == [
        ["npx", "npm-check-updates", "-u", "--silent"],
        ["npm", "install", "--silent"],
    ]


def test_install_dependencies_collects_failures(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(args, **kwargs):
        if "--silent" in args:
            raise PermissionError(13, "Permission denied", args[0])
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(subprocess, "run", fake_run)
    config = ScaffoldConfig(extra_packages=["axios"])

    assert commands.install_dependencies(tmp_path, config) == ["npm install axios --silent"]
