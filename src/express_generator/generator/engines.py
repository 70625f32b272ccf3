"""Lookup tables keyed by engine identifier.

Each table is an immutable mapping over its closed enumeration, so every
engine member has exactly one entry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple

from express_generator.errors import ContractViolationError
from express_generator.models.options import CssEngine, ViewEngine


class ViewEngineSpec(NamedTuple):
    """Dependency and registration details for a view engine."""

    dependency: str
    version: str
    pattern: str
    module: str | None = None
    render: str | None = None


class CssEngineSpec(NamedTuple):
    """Dependency and middleware details for a stylesheet engine.

    ``dependency`` is None for plain CSS, which needs no middleware.
    """

    pattern: str
    dependency: str | None = None
    version: str | None = None
    variable: str | None = None
    use: str | None = None


VIEW_ENGINES: Mapping[ViewEngine, ViewEngineSpec] = MappingProxyType({
    ViewEngine.dust: ViewEngineSpec(
        "adaro", "~1.0.4", "*.dust", module="adaro", render="adaro.dust()"
    ),
    ViewEngine.ejs: ViewEngineSpec("ejs", "~2.6.1", "*.ejs"),
    ViewEngine.hbs: ViewEngineSpec("hbs", "~4.0.4", "*.hbs"),
    ViewEngine.hjs: ViewEngineSpec("hjs", "~0.0.6", "*.hjs"),
    ViewEngine.jade: ViewEngineSpec("jade", "~1.11.0", "*.jade"),
    ViewEngine.pug: ViewEngineSpec("pug", "2.0.0-beta11", "*.pug"),
    ViewEngine.twig: ViewEngineSpec("twig", "~0.10.3", "*.twig"),
    ViewEngine.vash: ViewEngineSpec("vash", "~0.12.6", "*.vash"),
})

CSS_ENGINES: Mapping[CssEngine, CssEngineSpec] = MappingProxyType({
    CssEngine.plain: CssEngineSpec("*.css"),
    CssEngine.less: CssEngineSpec(
        "*.less",
        "less-middleware",
        "~2.2.1",
        "lessMiddleware",
        "lessMiddleware(path.join(__dirname, 'public'))",
    ),
    CssEngine.stylus: CssEngineSpec(
        "*.styl",
        "stylus",
        "0.54.5",
        "stylus",
        "stylus.middleware(path.join(__dirname, 'public'))",
    ),
    CssEngine.compass: CssEngineSpec(
        "*.scss",
        "node-compass",
        "0.2.3",
        "compass",
        "compass({ mode: 'expanded' })",
    ),
    CssEngine.sass: CssEngineSpec(
        "*.sass",
        "node-sass-middleware",
        "0.11.0",
        "sassMiddleware",
        "sassMiddleware({\n"
        "  src: path.join(__dirname, 'public'),\n"
        "  dest: path.join(__dirname, 'public'),\n"
        "  indentedSyntax: true, // true = .sass and false = .scss\n"
        "  sourceMap: true\n"
        "})",
    ),
})

# Installed whatever the options.
BASELINE_DEPENDENCIES: Mapping[str, str] = MappingProxyType({
    "cookie-parser": "~1.4.4",
    "debug": "~2.6.9",
    "express": "~4.16.1",
    "morgan": "~1.9.1",
})

# Added alongside any view engine; the generated app uses it for 404s.
ERROR_HELPER: tuple[str, str] = ("http-errors", "~1.6.3")
ERROR_HELPER_TYPES: tuple[str, str] = ("@types/http-errors", "^1.8.1")

# Base configurations published under @tsconfig/<flavor>.
TSCONFIG_FLAVORS: tuple[str, ...] = (
    "recommended",
    "create-react-app",
    "cypress",
    "deno",
    "docusaurus",
    "next",
    "node10",
    "node12",
    "node14",
    "node16",
    "nuxt",
    "react-native",
    "svelte",
)

TSCONFIG_FLAVOR_VERSION = "^1.0.0"

# Accepted spellings for --view that are not enum values.
VIEW_ALIASES: Mapping[str, ViewEngine] = MappingProxyType({
    "hogan": ViewEngine.hjs,
})


def view_engine_spec(engine: ViewEngine) -> ViewEngineSpec:
    """Return the table entry for a selected view engine.

    Raises:
        ContractViolationError: If ``engine`` is not a selectable member.
    """
    try:
        return VIEW_ENGINES[engine]
    except (KeyError, TypeError):
        raise ContractViolationError(
            f"no view engine entry for {engine!r}"
        ) from None


def css_engine_spec(engine: CssEngine) -> CssEngineSpec:
    """Return the table entry for a stylesheet engine.

    Raises:
        ContractViolationError: If ``engine`` is not a CssEngine member.
    """
    try:
        return CSS_ENGINES[engine]
    except (KeyError, TypeError):
        raise ContractViolationError(
            f"no stylesheet engine entry for {engine!r}"
        ) from None
