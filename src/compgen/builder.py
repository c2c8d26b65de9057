"""Small builder that lays out generated module sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from .variants import Language

__all__ = ["SourceBuilder"]


@dataclass(slots=True)
class SourceBuilder:
    """Collect imports, declaration blocks and an export, then render them.

    The rendered layout is the import lines, a blank line, each block
    separated by a blank line, and the ``export default`` statement when one
    was requested. The result always ends with exactly one newline.
    """

    imports: list[str] = field(default_factory=list)
    blocks: list[str] = field(default_factory=list)
    default_export: str | None = None

    def add_import(self, line: str) -> "SourceBuilder":
        self.imports.append(line)
        return self

    def import_default(self, binding: str, module: str) -> "SourceBuilder":
        return self.add_import(f"import {binding} from '{module}';")

    def import_namespace(self, binding: str, module: str) -> "SourceBuilder":
        return self.add_import(f"import * as {binding} from '{module}';")

    def import_named(
        self,
        names: Iterable[str],
        module: str,
        *,
        default: str | None = None,
    ) -> "SourceBuilder":
        named = "{ " + ", ".join(names) + " }"
        bindings = f"{default}, {named}" if default else named
        return self.add_import(f"import {bindings} from '{module}';")

    def import_react(self, language: Language, *named: str) -> "SourceBuilder":
        """Import React with the syntax ``language`` expects.

        TypeScript sources always use the namespace form and reach members
        through ``React.``; ``named`` only applies to plain sources.
        """

        if language is Language.TYPESCRIPT:
            return self.import_namespace("React", "react")
        if named:
            return self.import_named(named, "react", default="React")
        return self.import_default("React", "react")

    def add_block(self, text: str) -> "SourceBuilder":
        self.blocks.append(text.strip("\n"))
        return self

    def export_default(self, name: str) -> "SourceBuilder":
        self.default_export = name
        return self

    def render(self) -> str:
        sections: list[str] = []
        if self.imports:
            sections.append("\n".join(self.imports))
        sections.extend(self.blocks)
        if self.default_export is not None:
            sections.append(f"export default {self.default_export};")
        return "\n\n".join(sections) + "\n"
