from pathlib import Path
import textwrap

import pytest

from react_instant.config import ConfigError, ScaffoldConfig, load_config


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "react-instant.toml"
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_defaults_match_vite_react_setup() -> None:
    config = ScaffoldConfig()

    assert config.default_folder == "my-vite-app"
    assert config.generator_command("shop") == [
        "npm", "create", "vite@latest", "shop", "--", "--template", "react",
    ]
    assert config.dependency_dirs == ["node_modules"]
    assert config.vcs_dirs == [".git"]
    assert set(config.scripts) == {"build", "preview", "lint"}


def test_loads_overrides(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
        default_folder = "playground"
        extra_packages = ["axios"]
        dependency_dirs = ["node_modules", "bower_components"]
        update_packages = false

        [scripts]
        build = "vite build --mode production"
        """,
    )

    config = load_config(path)

    assert config.default_folder == "playground"
    assert config.extra_packages == ["axios"]
    assert config.dependency_dirs == ["node_modules", "bower_components"]
    assert config.update_packages is False
    assert config.scripts == {"build": "vite build --mode production"}
    assert config.start_dev_server is True


def test_rejects_unknown_keys(tmp_path: Path) -> None:
    path = _write_config(tmp_path, 'unexpected = "nope"')

    with pytest.raises(ConfigError) as exc:
        load_config(path)

    assert "extra" in str(exc.value).lower()


def test_rejects_empty_dependency_dirs(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "dependency_dirs = []")

    with pytest.raises(ConfigError) as exc:
        load_config(path)

    assert "dependency_dirs" in str(exc.value)


def test_rejects_blank_default_folder(tmp_path: Path) -> None:
    path = _write_config(tmp_path, 'default_folder = "   "')

    with pytest.raises(ConfigError):
        load_config(path)


def test_rejects_invalid_toml(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "default_folder = ")

    with pytest.raises(ConfigError) as exc:
        load_config(path)

    assert "Invalid TOML" in str(exc.value)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc:
        load_config(tmp_path / "absent.toml")

    assert "not found" in str(exc.value)
