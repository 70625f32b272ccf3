"""Tests for the manifest builder and engine tables."""

from __future__ import annotations

import json
from typing import Sequence

import pytest
from pydantic import ValidationError

from express_generator.errors import ContractViolationError
from express_generator.generator.engines import (
    BASELINE_DEPENDENCIES,
    CSS_ENGINES,
    TSCONFIG_FLAVORS,
    VIEW_ENGINES,
)
from express_generator.generator.manifest import (
    FLAVOR_QUESTION,
    build_manifest,
    build_tsconfig_build,
)
from express_generator.models.manifest import BuildConfig, Manifest
from express_generator.models.options import CssEngine, OptionSet, ViewEngine


class FlavorRecorder:
    """Flavor chooser that records every question it is asked."""

    def __init__(self, answer: str = "node16") -> None:
        self.answer = answer
        self.calls: list[tuple[str, list[str]]] = []

    def __call__(self, question: str, choices: Sequence[str]) -> str:
        self.calls.append((question, list(choices)))
        return self.answer


def _no_prompt(question: str, choices: Sequence[str]) -> str:
    raise AssertionError("flavor prompt should not be shown")


def _build(view: ViewEngine = ViewEngine.pug, css: CssEngine = CssEngine.plain):
    options = OptionSet(view_engine=view, css_engine=css, ts_config_flavor="recommended")
    return build_manifest(options, "my-app", _no_prompt)


class TestEngineTables:
    """Every enum member has exactly one table entry."""

    def test_every_view_engine_has_entry(self) -> None:
        assert set(VIEW_ENGINES) == set(ViewEngine) - {ViewEngine.none}

    def test_every_css_engine_has_entry(self) -> None:
        assert set(CSS_ENGINES) == set(CssEngine)

    def test_tables_are_immutable(self) -> None:
        with pytest.raises(TypeError):
            VIEW_ENGINES[ViewEngine.pug] = VIEW_ENGINES[ViewEngine.ejs]  # type: ignore[index]


class TestDependencies:
    """Tests for the dependency set derived from options."""

    @pytest.mark.parametrize("view", list(ViewEngine))
    @pytest.mark.parametrize("css", list(CssEngine))
    def test_dependency_keys_sorted(self, view: ViewEngine, css: CssEngine) -> None:
        manifest, _ = _build(view, css)
        keys = list(manifest.to_dict()["dependencies"])
        assert keys == sorted(keys)

    def test_baseline_always_present(self) -> None:
        manifest, _ = _build(ViewEngine.none, CssEngine.plain)
        for name, version in BASELINE_DEPENDENCIES.items():
            assert manifest.dependencies[name] == version
        assert set(manifest.dependencies) == set(BASELINE_DEPENDENCIES)

    @pytest.mark.parametrize("css", [c for c in CssEngine if c is not CssEngine.plain])
    def test_one_css_dependency(self, css: CssEngine) -> None:
        manifest, _ = _build(ViewEngine.none, css)
        extra = set(manifest.dependencies) - set(BASELINE_DEPENDENCIES)
        assert extra == {CSS_ENGINES[css].dependency}

    def test_view_engine_adds_engine_and_error_helper(self) -> None:
        manifest, _ = _build(ViewEngine.pug)
        assert manifest.dependencies["pug"] == "2.0.0-beta11"
        assert manifest.dependencies["http-errors"] == "~1.6.3"
        assert "@types/http-errors" in manifest.dev_dependencies

    def test_dust_uses_adaro(self) -> None:
        manifest, _ = _build(ViewEngine.dust)
        assert manifest.dependencies["adaro"] == "~1.0.4"

    def test_no_view_has_no_view_dependencies(self) -> None:
        manifest, _ = _build(ViewEngine.none, CssEngine.sass)
        assert "http-errors" not in manifest.dependencies
        view_deps = {spec.dependency for spec in VIEW_ENGINES.values()}
        assert not view_deps & set(manifest.dependencies)
        assert manifest.dependencies["node-sass-middleware"] == "0.11.0"

    def test_unknown_view_engine_is_contract_violation(self) -> None:
        options = OptionSet.model_construct(
            view_engine="mustache", css_engine=CssEngine.plain, ts_config_flavor="node16"
        )
        with pytest.raises(ContractViolationError):
            build_manifest(options, "my-app", _no_prompt)

    def test_unknown_css_engine_is_contract_violation(self) -> None:
        options = OptionSet.model_construct(
            view_engine=ViewEngine.none, css_engine="postcss", ts_config_flavor="node16"
        )
        with pytest.raises(ContractViolationError):
            build_manifest(options, "my-app", _no_prompt)


class TestFlavor:
    """Tests for the tsconfig flavor selection."""

    def test_prompts_exactly_once_when_unset(self) -> None:
        chooser = FlavorRecorder("node14")
        options = OptionSet(view_engine=ViewEngine.ejs)
        manifest, build_config = build_manifest(options, "my-app", chooser)

        assert chooser.calls == [(FLAVOR_QUESTION, list(TSCONFIG_FLAVORS))]
        assert manifest.dev_dependencies["@tsconfig/node14"] == "^1.0.0"
        assert build_config.extends == "@tsconfig/node14/tsconfig.json"

    def test_preselected_flavor_skips_prompt(self) -> None:
        _, build_config = _build()
        assert build_config.extends == "@tsconfig/recommended/tsconfig.json"

    def test_build_config_is_frozen(self) -> None:
        _, build_config = _build()
        with pytest.raises(ValidationError):
            build_config.extends = "other"  # type: ignore[misc]

    def test_extends_is_first_key(self) -> None:
        _, build_config = _build()
        data = json.loads(build_config.to_json())
        assert list(data)[0] == "extends"
        assert data["compilerOptions"]["outDir"] == "./dist"

    def test_tsconfig_build_copied(self) -> None:
        assert build_tsconfig_build()["extends"] == "./tsconfig.json"


class TestSerialization:
    """Tests for Manifest and BuildConfig serialization."""

    def test_manifest_name_first_and_template_fields_kept(self) -> None:
        manifest, _ = _build()
        data = json.loads(manifest.to_json())
        assert list(data)[0] == "name"
        assert data["name"] == "my-app"
        assert data["private"] is True
        assert "start" in data["scripts"]

    def test_manifest_json_has_trailing_newline(self) -> None:
        manifest, _ = _build()
        text = manifest.to_json()
        assert text.endswith("}\n")
        assert '\n  "dependencies": {\n' in text

    def test_sorting_happens_at_serialization(self) -> None:
        manifest = Manifest(name="x", dependencies={"zeta": "1", "alpha": "2", "mid": "3"})
        assert list(manifest.to_dict()["dependencies"]) == ["alpha", "mid", "zeta"]

    def test_identical_options_identical_bytes(self) -> None:
        first, first_cfg = _build(ViewEngine.hbs, CssEngine.less)
        second, second_cfg = _build(ViewEngine.hbs, CssEngine.less)
        assert first.to_json() == second.to_json()
        assert first_cfg.to_json() == second_cfg.to_json()

    def test_override_wins_over_extends(self) -> None:
        config = BuildConfig(extends="@tsconfig/node16/tsconfig.json", overrides={"extends": "./base.json"})
        assert config.to_dict() == {"extends": "./base.json"}
