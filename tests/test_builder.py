from __future__ import annotations

from compgen.builder import SourceBuilder
from compgen.variants import Language


def test_render_lays_out_sections():
    source = (
        SourceBuilder()
        .import_default("React", "react")
        .import_named(["View", "Text"], "react-native")
        .add_block("\nconst Demo = () => null;\n")
        .export_default("Demo")
        .render()
    )
    assert source == (
        "import React from 'react';\n"
        "import { View, Text } from 'react-native';\n"
        "\n"
        "const Demo = () => null;\n"
        "\n"
        "export default Demo;\n"
    )


def test_render_without_export_ends_with_single_newline():
    source = SourceBuilder().import_namespace("React", "react").add_block("describe();").render()
    assert source == "import * as React from 'react';\n\ndescribe();\n"


def test_import_react_plain_with_named_members():
    builder = SourceBuilder().import_react(Language.PLAIN, "Component")
    assert builder.imports == ["import React, { Component } from 'react';"]


def test_import_react_plain_default_only():
    builder = SourceBuilder().import_react(Language.PLAIN)
    assert builder.imports == ["import React from 'react';"]


def test_import_react_typescript_ignores_named_members():
    builder = SourceBuilder().import_react(Language.TYPESCRIPT, "Component")
    assert builder.imports == ["import * as React from 'react';"]
