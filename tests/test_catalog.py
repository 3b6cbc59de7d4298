from pathlib import Path
import textwrap

import pytest

from react_instant.reference import CatalogError, ReferenceCatalog, load_builtin_catalog, load_catalog_file


def _write_catalog(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "catalog.toml"
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_js_chapters_keep_registration_order() -> None:
    catalog = load_builtin_catalog("js_chapters")

    assert len(catalog.names) == 23
    assert catalog.names[0] == "1. Introduction"
    assert catalog.names[-1] == "23. Debugging & Best Practices"
    assert catalog.item_label == "chapter"
    assert all(catalog.tables_for(name) for name in catalog.names)


def test_js_chapter_content_is_verbatim() -> None:
    catalog = load_builtin_catalog("js_chapters")

    (strings,) = catalog.tables_for("9. Strings")
    assert strings.columns == ("Method/Property", "Description", "Example")
    assert len(strings.rows) == 14
    assert strings.rows[-1] == ("Template literals", "String interpolation with backticks", "`Value: ${x}`")

    (syntax,) = catalog.tables_for("2. Basic Syntax")
    assert syntax.rows[2][2] == "// single line\n/* multi-line */"

    (regex,) = catalog.tables_for("12. Regular Expressions")
    assert regex.rows[2][2] == '/\\d+/.exec("12abc")'


def test_git_catalog_is_numbered() -> None:
    catalog = load_builtin_catalog("git_commands")

    assert catalog.numbered is True
    (basics,) = catalog.tables_for(catalog.names[0])
    assert basics.columns == ("Command", "Description")
    assert basics.rows[0] == ("git init", "Initialize a new Git repository in the current directory")


def test_builtin_catalog_is_loaded_once() -> None:
    assert load_builtin_catalog("js_chapters") is load_builtin_catalog("js_chapters")


def test_catalog_index_is_read_only() -> None:
    catalog = load_builtin_catalog("js_chapters")

    with pytest.raises(TypeError):
        catalog.tables["new"] = ()  # type: ignore[index]


def test_unknown_and_empty_topics_have_no_tables() -> None:
    catalog = ReferenceCatalog.model_validate(
        {"title": "Demo", "topic": [{"name": "Empty"}, {"name": "Full", "table": [{"columns": ["A"], "rows": [["x"]]}]}]}
    )

    assert catalog.names == ("Empty", "Full")
    assert catalog.tables_for("Empty") == ()
    assert catalog.tables_for("Missing") == ()
    assert catalog.tables_for("Full")[0].rows == (("x",),)


def test_rejects_ragged_rows(tmp_path: Path) -> None:
    path = _write_catalog(
        tmp_path,
        """
        title = "Broken"

        [[topic]]
        name = "One"

        [[topic.table]]
        columns = ["A", "B"]
        rows = [["only one"]]
        """,
    )

    with pytest.raises(CatalogError) as exc:
        load_catalog_file(path)

    assert "expected 2" in str(exc.value)


def test_rejects_duplicate_topics(tmp_path: Path) -> None:
    path = _write_catalog(
        tmp_path,
        """
        title = "Dupes"

        [[topic]]
        name = "One"

        [[topic]]
        name = "One"
        """,
    )

    with pytest.raises(CatalogError) as exc:
        load_catalog_file(path)

    assert "duplicate" in str(exc.value)


def test_unknown_builtin_catalog() -> None:
    with pytest.raises(CatalogError):
        load_builtin_catalog("python_chapters")


def test_missing_catalog_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogError):
        load_catalog_file(tmp_path / "absent.toml")
