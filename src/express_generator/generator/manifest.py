"""Build the package manifest and tsconfig for a generated project.

Starts from the JSON templates under ``templates/config`` and layers the
dependencies implied by the selected engines on top. The tsconfig base
flavor is chosen exactly once per build, either from the options or by
asking the caller-supplied chooser.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Sequence

from express_generator.generator.engines import (
    BASELINE_DEPENDENCIES,
    ERROR_HELPER,
    ERROR_HELPER_TYPES,
    TSCONFIG_FLAVOR_VERSION,
    TSCONFIG_FLAVORS,
    css_engine_spec,
    view_engine_spec,
)
from express_generator.models.manifest import BuildConfig, Manifest
from express_generator.models.options import OptionSet, ViewEngine
from express_generator.scaffold.templates import get_templates_dir

FLAVOR_QUESTION = "which tsconfig version you want to use ?"

# (question, choices) -> chosen flavor
FlavorChooser = Callable[[str, Sequence[str]], str]


def load_config_template(name: str, template_dir: Path | None = None) -> dict[str, Any]:
    """Load a JSON document from the templates' ``config`` directory."""
    base = template_dir or get_templates_dir()
    return json.loads((base / "config" / name).read_text(encoding="utf-8"))


def build_manifest(
    options: OptionSet,
    name: str,
    choose_flavor: FlavorChooser,
    template_dir: Path | None = None,
) -> tuple[Manifest, BuildConfig]:
    """Derive package.json and tsconfig.json contents from the options.

    Args:
        options: Canonical generation options.
        name: npm package name for the generated project.
        choose_flavor: Called once with the flavor question and choices
            when ``options.ts_config_flavor`` is None.
        template_dir: Override for the template root (tests).

    Returns:
        Tuple of (manifest, build config).

    Raises:
        ContractViolationError: If an engine outside its enumeration
            reaches this function.
    """
    pkg = load_config_template("package.json", template_dir)
    tsconfig = load_config_template("tsconfig.json", template_dir)

    dependencies: dict[str, str] = dict(pkg.get("dependencies", {}))
    dev_dependencies: dict[str, str] = dict(pkg.get("devDependencies", {}))

    dependencies.update(BASELINE_DEPENDENCIES)

    css = css_engine_spec(options.css_engine)
    if css.dependency is not None:
        dependencies[css.dependency] = css.version

    if options.view_engine is not ViewEngine.none:
        view = view_engine_spec(options.view_engine)
        dependencies[view.dependency] = view.version
        dependencies[ERROR_HELPER[0]] = ERROR_HELPER[1]
        dev_dependencies[ERROR_HELPER_TYPES[0]] = ERROR_HELPER_TYPES[1]

    flavor = options.ts_config_flavor
    if flavor is None:
        flavor = choose_flavor(FLAVOR_QUESTION, TSCONFIG_FLAVORS)
    base_package = f"@tsconfig/{flavor}"
    dev_dependencies[base_package] = TSCONFIG_FLAVOR_VERSION

    manifest = Manifest(
        name=name,
        dependencies=dependencies,
        dev_dependencies=dev_dependencies,
        fields=pkg,
    )
    build_config = BuildConfig(
        extends=f"{base_package}/tsconfig.json",
        overrides=tsconfig,
    )
    return manifest, build_config


def build_tsconfig_build(template_dir: Path | None = None) -> dict[str, Any]:
    """Return the tsconfig.build.json document, copied from the template."""
    return load_config_template("tsconfig.build.json", template_dir)
