"""Closed enumeration of the template variants compgen knows how to render."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Tuple

from .errors import UnsupportedVariantError

if TYPE_CHECKING:  # pragma: no cover
    from .config import GenerationConfig


class Framework(str, Enum):
    """Rendering target of the generated component."""

    WEB = "web"
    NATIVE = "native"


class Style(str, Enum):
    """Declaration style of the generated component."""

    CLASS = "class"
    FUNCTIONAL = "functional"


class Language(str, Enum):
    """Surface language of the generated sources."""

    PLAIN = "plain"
    TYPESCRIPT = "typescript"


class FileKind(str, Enum):
    """Artifacts that can be rendered for a component."""

    COMPONENT = "component"
    INDEX = "index"
    TEST = "test"
    STORY = "story"


VariantAxes = Tuple[Framework, Style, Language, bool]


class ComponentVariant(str, Enum):
    """One component template per ``(framework, style, language, with_props)``."""

    REACT_CLASS = "react-class"
    REACT_CLASS_WITH_PROPS = "react-class-props"
    REACT_FUNCTIONAL = "react-functional"
    REACT_FUNCTIONAL_WITH_PROPS = "react-functional-props"
    TS_REACT_CLASS = "ts-react-class"
    TS_REACT_CLASS_WITH_PROPS = "ts-react-class-props"
    TS_REACT_FUNCTIONAL = "ts-react-functional"
    TS_REACT_FUNCTIONAL_WITH_PROPS = "ts-react-functional-props"
    NATIVE_CLASS = "native-class"
    NATIVE_CLASS_WITH_PROPS = "native-class-props"
    NATIVE_FUNCTIONAL = "native-functional"
    NATIVE_FUNCTIONAL_WITH_PROPS = "native-functional-props"
    TS_NATIVE_CLASS = "ts-native-class"
    TS_NATIVE_CLASS_WITH_PROPS = "ts-native-class-props"
    TS_NATIVE_FUNCTIONAL = "ts-native-functional"
    TS_NATIVE_FUNCTIONAL_WITH_PROPS = "ts-native-functional-props"

    @property
    def axes(self) -> VariantAxes:
        return _AXES[self]

    @property
    def framework(self) -> Framework:
        return self.axes[0]

    @property
    def style(self) -> Style:
        return self.axes[1]

    @property
    def language(self) -> Language:
        return self.axes[2]

    @property
    def with_props(self) -> bool:
        return self.axes[3]


_W, _N = Framework.WEB, Framework.NATIVE
_C, _F = Style.CLASS, Style.FUNCTIONAL
_P, _T = Language.PLAIN, Language.TYPESCRIPT

_AXES: dict[ComponentVariant, VariantAxes] = {
    ComponentVariant.REACT_CLASS: (_W, _C, _P, False),
    ComponentVariant.REACT_CLASS_WITH_PROPS: (_W, _C, _P, True),
    ComponentVariant.REACT_FUNCTIONAL: (_W, _F, _P, False),
    ComponentVariant.REACT_FUNCTIONAL_WITH_PROPS: (_W, _F, _P, True),
    ComponentVariant.TS_REACT_CLASS: (_W, _C, _T, False),
    ComponentVariant.TS_REACT_CLASS_WITH_PROPS: (_W, _C, _T, True),
    ComponentVariant.TS_REACT_FUNCTIONAL: (_W, _F, _T, False),
    ComponentVariant.TS_REACT_FUNCTIONAL_WITH_PROPS: (_W, _F, _T, True),
    ComponentVariant.NATIVE_CLASS: (_N, _C, _P, False),
    ComponentVariant.NATIVE_CLASS_WITH_PROPS: (_N, _C, _P, True),
    ComponentVariant.NATIVE_FUNCTIONAL: (_N, _F, _P, False),
    ComponentVariant.NATIVE_FUNCTIONAL_WITH_PROPS: (_N, _F, _P, True),
    ComponentVariant.TS_NATIVE_CLASS: (_N, _C, _T, False),
    ComponentVariant.TS_NATIVE_CLASS_WITH_PROPS: (_N, _C, _T, True),
    ComponentVariant.TS_NATIVE_FUNCTIONAL: (_N, _F, _T, False),
    ComponentVariant.TS_NATIVE_FUNCTIONAL_WITH_PROPS: (_N, _F, _T, True),
}

_BY_AXES: dict[VariantAxes, ComponentVariant] = {axes: variant for variant, axes in _AXES.items()}


def select_variant(config: "GenerationConfig") -> ComponentVariant:
    """Return the component variant matching the flags of ``config``."""

    axes = (config.framework, config.style, config.language, config.with_props)
    try:
        return _BY_AXES[axes]
    except (KeyError, TypeError) as exc:
        raise UnsupportedVariantError(
            "no component template for framework={!r} style={!r} language={!r} with_props={!r}".format(*axes),
            variant=axes,
        ) from exc


def coerce_file_kind(value: FileKind | str) -> FileKind:
    """Return ``value`` as a :class:`FileKind`."""

    try:
        return FileKind(value)
    except ValueError as exc:
        choices = ", ".join(kind.value for kind in FileKind)
        raise UnsupportedVariantError(
            f"unsupported file kind {value!r}; expected one of: {choices}",
            variant=value,
        ) from exc


__all__ = [
    "ComponentVariant",
    "FileKind",
    "Framework",
    "Language",
    "Style",
    "coerce_file_kind",
    "select_variant",
]
