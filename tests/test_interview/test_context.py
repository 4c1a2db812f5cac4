"""Tests for the interview context models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from recipe_generator.interview.context import (
    ComposerInfo,
    ConfigImport,
    Dependency,
    InterviewContext,
    merge_config_imports,
)


pytestmark = pytest.mark.unit


class TestDependency:
    def test_blank_version_means_any(self):
        assert Dependency(name="drupal/token").constraint == "*"

    def test_version_kept(self):
        assert Dependency(name="drupal/token", version="^1.0").constraint == "^1.0"


class TestComposerInfo:
    def test_defaults(self):
        info = ComposerInfo()
        assert info.vendor_name == "drupal"
        assert info.package_name == "my-custom-recipe"
        assert info.author_name == "Developer"
        assert info.dependencies == []

    def test_package(self):
        assert ComposerInfo(vendor_name="acme", package_name="demo").package == "acme/demo"

    def test_require_map(self):
        info = ComposerInfo(
            dependencies=[
                Dependency(name="drupal/pathauto", version="^1.0"),
                Dependency(name="drupal/token"),
            ]
        )
        assert info.require() == {"drupal/pathauto": "^1.0", "drupal/token": "*"}


class TestConfigImport:
    def test_wildcard_default(self):
        assert ConfigImport(module_name="node").config == "*"

    def test_rejects_other_strings(self):
        with pytest.raises(ValidationError):
            ConfigImport(module_name="node", config="node.settings")


class TestToVars:
    def test_empty_context(self):
        variables = InterviewContext().to_vars()
        assert variables["composer"] == {}
        assert variables["modules"] == []
        assert variables["config"] == {"import": []}

    def test_composer_vars(self):
        context = InterviewContext(
            composer=ComposerInfo(
                vendor_name="acme",
                package_name="demo",
                author_name="Jane",
                dependencies=[Dependency(name="drupal/pathauto", version="^1.0")],
            )
        )
        composer = context.to_vars()["composer"]

        assert composer["package"] == "acme/demo"
        assert composer["author_name"] == "Jane"
        assert composer["dependencies"] == [{"name": "drupal/pathauto", "version": "^1.0"}]
        assert composer["require"] == {"drupal/pathauto": "^1.0"}

    def test_config_import_vars(self):
        context = InterviewContext(
            config_imports=[
                ConfigImport(module_name="node", config=["node.settings"]),
                ConfigImport(module_name="user"),
            ]
        )
        assert context.to_vars()["config"]["import"] == [
            {"module_name": "node", "config": ["node.settings"]},
            {"module_name": "user", "config": "*"},
        ]

    def test_repeated_module_merged_in_vars(self):
        context = InterviewContext(
            config_imports=[
                ConfigImport(module_name="node", config=["node.settings"]),
                ConfigImport(module_name="node", config=["node.type.article"]),
            ]
        )

        assert len(context.config_imports) == 2
        assert context.to_vars()["config"]["import"] == [
            {"module_name": "node", "config": ["node.settings", "node.type.article"]},
        ]


class TestMergeConfigImports:
    def test_distinct_modules_keep_order(self):
        imports = [ConfigImport(module_name="user"), ConfigImport(module_name="node")]
        assert [i.module_name for i in merge_config_imports(imports)] == ["user", "node"]

    def test_file_lists_joined_without_repeats(self):
        merged = merge_config_imports([
            ConfigImport(module_name="node", config=["node.settings", "node.type.page"]),
            ConfigImport(module_name="node", config=["node.type.page", "node.type.article"]),
        ])
        assert merged == [
            ConfigImport(
                module_name="node",
                config=["node.settings", "node.type.page", "node.type.article"],
            )
        ]

    @pytest.mark.parametrize("wildcard_first", [True, False])
    def test_wildcard_wins(self, wildcard_first):
        records = [
            ConfigImport(module_name="node"),
            ConfigImport(module_name="node", config=["node.settings"]),
        ]
        if not wildcard_first:
            records.reverse()

        assert merge_config_imports(records) == [ConfigImport(module_name="node", config="*")]

    def test_input_records_untouched(self):
        first = ConfigImport(module_name="node", config=["node.settings"])
        merge_config_imports([first, ConfigImport(module_name="node", config=["node.type.page"])])
        assert first.config == ["node.settings"]
