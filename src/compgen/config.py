"""Configuration helpers shared by the generators, the scaffolder and the CLI."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import GenerationError, UnsupportedVariantError
from .naming import capitalize_first, component_file_name, normalize_identifier
from .variants import FileKind, Framework, Language, Style

__all__ = ["CONFIG_TABLE", "GenerationConfig", "load_defaults"]


CONFIG_TABLE = "compgen"


class GenerationConfig(BaseModel):
    """Resolved options describing which source file to generate.

    Attributes
    ----------
    framework:
        ``web`` renders DOM markup, ``native`` renders React Native views.
    style:
        ``class`` or ``functional`` component declarations.
    language:
        ``plain`` JavaScript or ``typescript``. Only import syntax and type
        annotations differ between the two.
    with_props:
        Whether prop validation scaffolding is emitted.
    file_kind:
        The artifact to render when no explicit kind is passed to the
        generator.
    upper_case_file:
        Whether the component lives in a file named after its normalised
        identifier rather than the raw name. Index, test and story files
        import from that path.
    folder_names:
        When set, an ``index`` render aggregates these folders instead of
        re-exporting a single component.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    framework: Framework = Field(default=Framework.WEB, description="Rendering target.")
    style: Style = Field(default=Style.CLASS, description="Component declaration style.")
    language: Language = Field(default=Language.PLAIN, description="Plain JavaScript or TypeScript output.")
    with_props: bool = Field(default=False, description="Emit prop validation scaffolding.")
    file_kind: FileKind = Field(default=FileKind.COMPONENT, description="Artifact rendered by default.")
    upper_case_file: bool = Field(default=False, description="Component file is named after its identifier.")
    folder_names: Tuple[str, ...] | None = Field(
        default=None, description="Ordered folders aggregated by an index render."
    )

    @classmethod
    def from_options(cls, **options: Any) -> "GenerationConfig":
        """Build a config from loosely typed option values.

        ``None`` values are ignored so CLI namespaces can be passed through
        without filtering. Values outside an enumerated domain raise
        :class:`UnsupportedVariantError`.
        """

        values = {key: value for key, value in options.items() if value is not None}
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise UnsupportedVariantError(f"invalid generation options: {exc}", variant=values) from exc

    @property
    def is_typescript(self) -> bool:
        return self.language is Language.TYPESCRIPT

    @property
    def source_extension(self) -> str:
        """Extension used for component, test and story files."""

        return "tsx" if self.is_typescript else "js"

    @property
    def index_extension(self) -> str:
        return "ts" if self.is_typescript else "js"

    def context(self, name: str) -> Mapping[str, str]:
        """Return the placeholder values used to render fragments for ``name``."""

        return {
            "name": name,
            "identifier": normalize_identifier(name),
            "label": capitalize_first(name),
            "file_name": component_file_name(name, self.upper_case_file),
        }


def load_defaults(path: str | Path) -> Dict[str, Any]:
    """Read option defaults from the ``[compgen]`` table of a TOML file."""

    path = Path(path)
    if not path.is_file():
        return {}

    with path.open("rb") as handle:
        try:
            document = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise GenerationError(f"cannot parse {path}: {exc}") from exc

    table = document.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise GenerationError(f"[{CONFIG_TABLE}] in {path} must be a table")
    return {key.replace("-", "_"): value for key, value in table.items()}
