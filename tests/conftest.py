import json
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest
from typer.testing import CliRunner

from react_instant.scaffold import commands


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class FakeNpm:
    """
    Stand-in for the package-manager subprocesses.

    The generator call creates a minimal Vite project; install calls leave a
    nested node_modules behind so cleanup has something to remove.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[List[str], Optional[Path]]] = []
        self.failing: List[List[str]] = []
        self.with_lockfile = False

    def fail(self, *prefix: str) -> None:
        self.failing.append(list(prefix))

    def commands(self) -> List[List[str]]:
        return [args for args, _ in self.calls]

    def __call__(self, args: Sequence[str], *, cwd: Optional[Path] = None) -> bool:
        args = list(args)
        cwd = Path(cwd) if cwd else None
        self.calls.append((args, cwd))
        if any(args[: len(prefix)] == prefix for prefix in self.failing):
            return False
        if args[:3] == ["npm", "create", "vite@latest"]:
            project = cwd / args[3]
            project.mkdir()
            manifest = {"name": args[3], "private": True, "scripts": {"dev": "vite"}}
            (project / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
            if self.with_lockfile:
                (project / "package-lock.json").write_text("{}", encoding="utf-8")
        elif args in (["npm", "install"], ["npm", "ci"]) and cwd is not None:
            (cwd / "node_modules" / "react").mkdir(parents=True, exist_ok=True)
            (cwd / "src" / "legacy" / "node_modules" / "left-pad").mkdir(parents=True, exist_ok=True)
        return True


@pytest.fixture
def fake_npm(monkeypatch: pytest.MonkeyPatch) -> FakeNpm:
    fake = FakeNpm()
    monkeypatch.setattr(commands, "run_command", fake)
    return fake
