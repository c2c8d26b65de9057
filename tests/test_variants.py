from __future__ import annotations

from itertools import product

import pytest

from compgen.config import GenerationConfig
from compgen.errors import UnsupportedVariantError
from compgen.variants import (
    ComponentVariant,
    FileKind,
    Framework,
    Language,
    Style,
    coerce_file_kind,
    select_variant,
)

AXES = list(product(Framework, Style, Language, (False, True)))


@pytest.mark.parametrize("framework, style, language, with_props", AXES)
def test_every_combination_selects_a_matching_variant(framework, style, language, with_props):
    config = GenerationConfig(framework=framework, style=style, language=language, with_props=with_props)
    variant = select_variant(config)
    assert variant.axes == (framework, style, language, with_props)


def test_variants_cover_the_configuration_space_without_overlap():
    selected = [
        select_variant(
            GenerationConfig(framework=framework, style=style, language=language, with_props=with_props)
        )
        for framework, style, language, with_props in AXES
    ]
    assert len(set(selected)) == len(AXES) == len(ComponentVariant)


def test_variant_properties():
    variant = ComponentVariant.TS_NATIVE_FUNCTIONAL_WITH_PROPS
    assert variant.framework is Framework.NATIVE
    assert variant.style is Style.FUNCTIONAL
    assert variant.language is Language.TYPESCRIPT
    assert variant.with_props is True


def test_select_variant_rejects_values_outside_the_domain():
    config = GenerationConfig.model_construct(framework="desktop")
    with pytest.raises(UnsupportedVariantError):
        select_variant(config)


@pytest.mark.parametrize("value", ["component", "index", "test", "story", FileKind.STORY])
def test_coerce_file_kind(value):
    assert coerce_file_kind(value) is FileKind(value)


@pytest.mark.parametrize("value", ["styles", "", "Component"])
def test_coerce_file_kind_rejects_unknown_kinds(value):
    with pytest.raises(UnsupportedVariantError) as excinfo:
        coerce_file_kind(value)
    assert excinfo.value.variant == value


def test_variant_table_matches_configuration_space():
    assert {variant.axes for variant in ComponentVariant} == set(AXES)
    for variant in ComponentVariant:
        framework, style, language, with_props = variant.axes
        config = GenerationConfig(framework=framework, style=style, language=language, with_props=with_props)
        assert select_variant(config) is variant
