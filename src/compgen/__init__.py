"""Scaffolding generator for React and React Native components.

The package turns a component name and a handful of options into the source
text of a component, its index module, a test and a story. Name
normalisation and template selection are pure functions; the scaffolder and
the command line interface take care of writing the results to disk.
"""

from __future__ import annotations

from .config import GenerationConfig, load_defaults
from .errors import DegenerateNameError, GenerationError, UnsupportedVariantError
from .generator import ComponentGenerator, render, render_folder_index
from .naming import capitalize_first, component_file_name, normalize_identifier
from .scaffold import ComponentScaffolder
from .template import TemplateRenderer, TemplateRenderingError
from .variants import ComponentVariant, FileKind, Framework, Language, Style, select_variant

__all__ = [
    "ComponentGenerator",
    "ComponentScaffolder",
    "ComponentVariant",
    "DegenerateNameError",
    "FileKind",
    "Framework",
    "GenerationConfig",
    "GenerationError",
    "Language",
    "Style",
    "TemplateRenderer",
    "TemplateRenderingError",
    "UnsupportedVariantError",
    "capitalize_first",
    "component_file_name",
    "load_defaults",
    "normalize_identifier",
    "render",
    "render_folder_index",
    "select_variant",
]

__version__ = "0.1.0"
