"""Select and render the source templates for a component."""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from .builder import SourceBuilder
from .config import GenerationConfig
from .errors import UnsupportedVariantError
from .template import TemplateRenderer
from .variants import ComponentVariant, FileKind, Framework, Language, Style, coerce_file_kind, select_variant

__all__ = ["ComponentGenerator", "render", "render_folder_index"]


LOGGER = logging.getLogger(__name__)


WEB_MARKUP = """<React.Fragment>
  {{ identifier }}
</React.Fragment>"""

NATIVE_MARKUP = """<View>
  <Text>{{ identifier }}</Text>
</View>"""

CLASS_TEMPLATE = """class {{ identifier }} extends {{ base }} {
  {{ method }}render() {
    return (
{{ markup }}
    );
  }
}"""

CLASS_WITH_PROPS_TEMPLATE = """class {{ identifier }} extends {{ base }} {
  {{ method }}static propTypes = {
    className: PropTypes.string,
  };

  {{ method }}static defaultProps = {
    className: '{{ identifier }}',
  };

  {{ method }}render() {
    const { className } = this.props;
    return <span className={className}>{{ identifier }}</span>;
  }
}"""

FUNCTIONAL_TEMPLATE = """const {{ identifier }}{{ annotation }} = () => {
  return (
{{ markup }}
  );
};"""

PROP_TYPES_TEMPLATE = "{{ identifier }}.propTypes = {};"

TEST_TEMPLATE = """describe('<{{ identifier }} />', () => {
  it('renders', () => {
    expect(shallow(<{{ identifier }} />).exists()).toBe(true);
  });
});"""

STORY_TEMPLATE = """storiesOf('{{ label|js }}', module)
  .add('{{ label|js }}', () => (
    <React.Fragment>
      <{{ identifier }} />
    </React.Fragment>
  ));"""


def render_folder_index(folder_names: Iterable[str]) -> str:
    """Aggregate ``folder_names`` into a single barrel module.

    Each folder is imported under its own name, in the given order, and all
    of them are re-exported from one ``export`` list.
    """

    folders = list(folder_names)
    imports = "".join(f"import {folder} from './{folder}' \n" for folder in folders)
    exported = ", \n".join(folders)
    return f"{imports}export {{\n    {exported}\n}}\n"


@dataclass(slots=True)
class ComponentGenerator:
    """Render component, index, test and story sources."""

    renderer: TemplateRenderer

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(
        self,
        file_kind: FileKind | str,
        component_name: str,
        config: GenerationConfig | None = None,
    ) -> str:
        """Render the ``file_kind`` artifact for ``component_name``.

        Raises
        ------
        UnsupportedVariantError
            If ``file_kind`` or the flags of ``config`` are outside the known
            template variants.
        DegenerateNameError
            If ``component_name`` cannot be turned into an identifier.
        """

        kind = coerce_file_kind(file_kind)
        config = config or GenerationConfig()
        handlers: Mapping[FileKind, Callable[[str, GenerationConfig], str]] = {
            FileKind.COMPONENT: self._render_component,
            FileKind.INDEX: self._render_index,
            FileKind.TEST: self._render_test,
            FileKind.STORY: self._render_story,
        }
        try:
            handler = handlers[kind]
        except KeyError as exc:  # pragma: no cover - FileKind is closed
            raise UnsupportedVariantError(f"no renderer for {kind!r}", variant=kind) from exc
        return handler(component_name, config)

    def render_artifact(self, component_name: str, config: GenerationConfig) -> str:
        """Render the artifact selected by ``config.file_kind``."""

        return self.render(config.file_kind, component_name, config)

    def _fill(self, template: str, context: Mapping[str, str]) -> str:
        return self.renderer.render_string(template, context, missing="error")

    def _render_component(self, name: str, config: GenerationConfig) -> str:
        variant = select_variant(config)
        LOGGER.debug("rendering %s component for %r", variant.value, name)
        context = dict(config.context(name))

        builder = SourceBuilder()
        if variant.style is Style.CLASS:
            builder.import_react(variant.language, self._class_base(variant))
        else:
            builder.import_react(variant.language)
        if variant.framework is Framework.NATIVE:
            builder.import_named(["View", "Text"], "react-native")
        if variant.with_props:
            if variant.language is Language.TYPESCRIPT:
                builder.import_namespace("PropTypes", "prop-types")
            else:
                builder.import_default("PropTypes", "prop-types")

        builder.add_block(self._declaration(variant, context))
        if variant.with_props and not self._props_in_class_body(variant):
            builder.add_block(self._fill(PROP_TYPES_TEMPLATE, context))
        return builder.export_default(context["identifier"]).render()

    @staticmethod
    def _class_base(variant: ComponentVariant) -> str:
        if variant.framework is Framework.WEB and variant.with_props:
            return "PureComponent"
        return "Component"

    @staticmethod
    def _props_in_class_body(variant: ComponentVariant) -> bool:
        return variant.style is Style.CLASS and variant.framework is Framework.WEB

    def _declaration(self, variant: ComponentVariant, context: dict[str, str]) -> str:
        typescript = variant.language is Language.TYPESCRIPT
        markup = WEB_MARKUP if variant.framework is Framework.WEB else NATIVE_MARKUP

        if variant.style is Style.FUNCTIONAL:
            context["annotation"] = ": React.FunctionComponent<any>" if typescript else ""
            context["markup"] = textwrap.indent(self._fill(markup, context), " " * 4)
            return self._fill(FUNCTIONAL_TEMPLATE, context)

        base = self._class_base(variant)
        context["base"] = f"React.{base}<any, any>" if typescript else base
        context["method"] = "public " if typescript else ""
        if variant.with_props and self._props_in_class_body(variant):
            return self._fill(CLASS_WITH_PROPS_TEMPLATE, context)
        context["markup"] = textwrap.indent(self._fill(markup, context), " " * 6)
        return self._fill(CLASS_TEMPLATE, context)

    def _render_index(self, name: str, config: GenerationConfig) -> str:
        if config.folder_names is not None:
            LOGGER.debug("rendering folder index for %d folders", len(config.folder_names))
            return render_folder_index(config.folder_names)
        context = config.context(name)
        return self._fill("export { default } from './{{ file_name|js }}';\n", context)

    def _render_test(self, name: str, config: GenerationConfig) -> str:
        context = config.context(name)
        builder = SourceBuilder()
        builder.import_react(config.language)
        builder.import_named(["shallow"], "enzyme")
        builder.add_block(self._fill("import {{ identifier }} from './{{ file_name|js }}';", context))
        builder.add_block(self._fill(TEST_TEMPLATE, context))
        return builder.render()

    def _render_story(self, name: str, config: GenerationConfig) -> str:
        context = config.context(name)
        builder = SourceBuilder()
        builder.import_react(config.language)
        builder.import_named(["storiesOf"], "@storybook/react")
        builder.add_block(self._fill("import {{ identifier }} from './{{ file_name|js }}';", context))
        builder.add_block(self._fill(STORY_TEMPLATE, context))
        return builder.render()


_DEFAULT_GENERATOR = ComponentGenerator()


def render(
    file_kind: FileKind | str,
    component_name: str,
    config: GenerationConfig | None = None,
) -> str:
    """Render ``file_kind`` for ``component_name`` with a shared generator."""

    return _DEFAULT_GENERATOR.render(file_kind, component_name, config)
