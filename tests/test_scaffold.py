from __future__ import annotations

from pathlib import Path

import pytest

from compgen.config import GenerationConfig
from compgen.errors import UnsupportedVariantError
from compgen.generator import ComponentGenerator
from compgen.scaffold import ComponentScaffolder
from compgen.variants import FileKind


@pytest.fixture()
def scaffolder() -> ComponentScaffolder:
    return ComponentScaffolder(ComponentGenerator())


def test_scaffolder_creates_expected_structure(tmp_path: Path, scaffolder: ComponentScaffolder):
    config = GenerationConfig()
    written = scaffolder.create("button", config, tmp_path)

    component_dir = tmp_path.resolve() / "button"
    assert written == [
        component_dir / "button.js",
        component_dir / "index.js",
        component_dir / "button.test.js",
    ]
    assert (component_dir / "index.js").read_text(encoding="utf-8") == (
        "export { default } from './button';\n"
    )


def test_scaffolder_uses_identifier_for_upper_case_typescript_files(
    tmp_path: Path, scaffolder: ComponentScaffolder
):
    config = GenerationConfig(language="typescript", upper_case_file=True)
    kinds = [FileKind.COMPONENT, FileKind.INDEX, FileKind.TEST, FileKind.STORY]
    scaffolder.create("my-widget", config, tmp_path, kinds=kinds)

    component_dir = tmp_path / "MyWidget"
    expected_files = [
        component_dir / "MyWidget.tsx",
        component_dir / "index.ts",
        component_dir / "MyWidget.test.tsx",
        component_dir / "MyWidget.stories.tsx",
    ]
    for path in expected_files:
        assert path.exists(), f"expected {path} to exist"
    assert "from './MyWidget';" in (component_dir / "index.ts").read_text(encoding="utf-8")


def test_scaffolder_respects_force(tmp_path: Path, scaffolder: ComponentScaffolder):
    config = GenerationConfig()
    scaffolder.create("demo", config, tmp_path)
    component = tmp_path / "demo" / "demo.js"
    component.write_text("custom", encoding="utf-8")

    with pytest.raises(FileExistsError):
        scaffolder.create("demo", config, tmp_path)
    assert component.read_text(encoding="utf-8") == "custom"

    scaffolder.create("demo", config, tmp_path, force=True)
    assert component.read_text(encoding="utf-8").startswith("import React")


def test_scaffolder_writes_nothing_for_unsupported_kind(tmp_path: Path, scaffolder: ComponentScaffolder):
    with pytest.raises(UnsupportedVariantError):
        scaffolder.create("demo", GenerationConfig(), tmp_path, kinds=["component", "styles"])
    assert not (tmp_path / "demo").exists()


def test_create_folder_index(tmp_path: Path, scaffolder: ComponentScaffolder):
    for name in ("gamma", "alpha", "beta", ".cache"):
        (tmp_path / name).mkdir()
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")

    destination = scaffolder.create_folder_index(tmp_path)

    assert destination == tmp_path.resolve() / "index.js"
    assert destination.read_text(encoding="utf-8") == (
        "import alpha from './alpha' \n"
        "import beta from './beta' \n"
        "import gamma from './gamma' \n"
        "export {\n"
        "    alpha, \n"
        "beta, \n"
        "gamma\n"
        "}\n"
    )


def test_create_folder_index_typescript_and_force(tmp_path: Path, scaffolder: ComponentScaffolder):
    (tmp_path / "button").mkdir()
    scaffolder.create_folder_index(tmp_path, language="typescript")
    assert (tmp_path / "index.ts").exists()

    with pytest.raises(FileExistsError):
        scaffolder.create_folder_index(tmp_path, language="typescript")
    scaffolder.create_folder_index(tmp_path, language="typescript", force=True)


def test_create_folder_index_requires_directory(tmp_path: Path, scaffolder: ComponentScaffolder):
    with pytest.raises(FileNotFoundError):
        scaffolder.create_folder_index(tmp_path / "missing")
