import json
from pathlib import Path

import pytest

from react_instant.config import ScaffoldConfig
from react_instant.scaffold import ManifestError, merge_scripts


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_merges_scripts_and_preserves_other_keys(tmp_path: Path) -> None:
    manifest = _write(
        tmp_path / "package.json",
        {
            "name": "demo",
            "version": "0.0.0",
            "scripts": {"dev": "vite", "build": "old build"},
            "dependencies": {"react": "^19.0.0"},
        },
    )

    merge_scripts(manifest, ScaffoldConfig().scripts)

    data = json.loads(manifest.read_text(encoding="utf-8"))
    assert data["name"] == "demo"
    assert data["dependencies"] == {"react": "^19.0.0"}
    assert data["scripts"]["dev"] == "vite"
    assert data["scripts"]["build"] == "vite build"
    assert data["scripts"]["preview"] == "vite preview"
    assert data["scripts"]["lint"].startswith("eslint . --ext js,jsx")


def test_written_with_two_space_indent(tmp_path: Path) -> None:
    manifest = _write(tmp_path / "package.json", {"name": "demo"})

    merge_scripts(manifest, {"build": "vite build"})

    text = manifest.read_text(encoding="utf-8")
    assert text.startswith('{\n  "name": "demo",\n  "scripts": {\n    "build": "vite build"')
    assert text.endswith("}\n")


def test_missing_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(ManifestError):
        merge_scripts(tmp_path / "package.json", {"build": "vite build"})


def test_invalid_manifest_raises(tmp_path: Path) -> None:
    manifest = tmp_path / "package.json"
    manifest.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError):
        merge_scripts(manifest, {"build": "vite build"})


def test_non_object_manifest_raises(tmp_path: Path) -> None:
    manifest = _write(tmp_path / "package.json", ["not", "an", "object"])

    with pytest.raises(ManifestError):
        merge_scripts(manifest, {"build": "vite build"})
