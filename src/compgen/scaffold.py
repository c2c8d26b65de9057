"""Write generated component sources to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .config import GenerationConfig
from .generator import ComponentGenerator
from .naming import component_file_name
from .variants import FileKind, Language, coerce_file_kind

__all__ = ["DEFAULT_KINDS", "ComponentScaffolder"]


LOGGER = logging.getLogger(__name__)

DEFAULT_KINDS: tuple[FileKind, ...] = (FileKind.COMPONENT, FileKind.INDEX, FileKind.TEST)


def _write_all(files: list[tuple[Path, str]], *, force: bool) -> list[Path]:
    if not force:
        for destination, _ in files:
            if destination.exists():
                raise FileExistsError(f"{destination} already exists")

    written: list[Path] = []
    for destination, content in files:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
        LOGGER.debug("wrote %s", destination)
        written.append(destination)
    return written


@dataclass(slots=True)
class ComponentScaffolder:
    """Create a component folder with its companion files."""

    generator: ComponentGenerator

    def __init__(self, generator: ComponentGenerator | None = None) -> None:
        self.generator = generator or ComponentGenerator()

    @staticmethod
    def file_name(name: str, kind: FileKind, config: GenerationConfig) -> str:
        """Return the on-disk file name of the ``kind`` artifact for ``name``."""

        stem = component_file_name(name, config.upper_case_file)
        extension = config.source_extension
        if kind is FileKind.INDEX:
            return f"index.{config.index_extension}"
        if kind is FileKind.TEST:
            return f"{stem}.test.{extension}"
        if kind is FileKind.STORY:
            return f"{stem}.stories.{extension}"
        return f"{stem}.{extension}"

    def create(
        self,
        name: str,
        config: GenerationConfig,
        target_dir: str | Path,
        *,
        kinds: Iterable[FileKind | str] = DEFAULT_KINDS,
        force: bool = False,
    ) -> list[Path]:
        """Render ``kinds`` for ``name`` into a new folder inside ``target_dir``.

        Every artifact is rendered before anything is written, so an
        unsupported kind or an existing file leaves the target untouched.
        """

        component_dir = Path(target_dir).expanduser().resolve() / component_file_name(
            name, config.upper_case_file
        )

        files: list[tuple[Path, str]] = []
        for kind in dict.fromkeys(coerce_file_kind(value) for value in kinds):
            content = self.generator.render(kind, name, config)
            files.append((component_dir / self.file_name(name, kind, config), content))

        written = _write_all(files, force=force)
        LOGGER.info("created %s with %d file(s)", component_dir, len(written))
        return written

    def create_folder_index(
        self,
        directory: str | Path,
        *,
        language: Language | str = Language.PLAIN,
        force: bool = False,
    ) -> Path:
        """Write an index module re-exporting every sub-folder of ``directory``."""

        directory = Path(directory).expanduser().resolve()
        if not directory.is_dir():
            raise FileNotFoundError(directory)

        folders = sorted(
            entry.name for entry in directory.iterdir() if entry.is_dir() and not entry.name.startswith(".")
        )
        config = GenerationConfig.from_options(language=language, folder_names=tuple(folders))
        destination = directory / f"index.{config.index_extension}"
        content = self.generator.render(FileKind.INDEX, directory.name, config)
        _write_all([(destination, content)], force=force)
        LOGGER.info("indexed %d folder(s) in %s", len(folders), destination)
        return destination
