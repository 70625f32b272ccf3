"""Resolve raw command-line flags into a canonical OptionSet.

Normalization is pure: warnings are returned to the caller rather than
printed, so the result can be checked without touching the terminal.
"""

from __future__ import annotations

import re
from pathlib import Path

from express_generator.errors import InvalidOptionError
from express_generator.generator.engines import TSCONFIG_FLAVORS, VIEW_ALIASES
from express_generator.models.options import (
    CssEngine,
    OptionSet,
    RawOptions,
    ViewEngine,
)

DEFAULT_VIEW_ENGINE = ViewEngine.jade
DEFAULT_APP_NAME = "hello-world"

# Deprecated flag -> (engine it implies, replacement shown in the warning).
# Order matches precedence: a later entry overrides an earlier one.
_LEGACY_VIEW_FLAGS: tuple[tuple[str, ViewEngine, str], ...] = (
    ("ejs", ViewEngine.ejs, "--view=ejs"),
    ("hbs", ViewEngine.hbs, "--view=hbs"),
    ("hogan", ViewEngine.hjs, "--view=hogan"),
    ("pug", ViewEngine.pug, "--view=pug"),
)

_DEFAULT_VIEW_WARNING = (
    "the default view engine will not be jade in future releases\n"
    "use `--view=jade' or `--help' for additional options"
)


def normalize_options(raw: RawOptions) -> tuple[OptionSet, list[str]]:
    """Resolve raw flags into an OptionSet.

    Args:
        raw: Flags as received from the command line.

    Returns:
        Tuple of (canonical options, warning messages). Warnings may
        contain embedded newlines; each line is displayed separately.

    Raises:
        InvalidOptionError: If --view, --css or --tsconfig carry a value
            outside their accepted set.
    """
    warnings: list[str] = []

    implied: ViewEngine | None = None
    for flag, engine, replacement in _LEGACY_VIEW_FLAGS:
        if getattr(raw, flag):
            warnings.append(
                f"option `--{flag}' has been renamed to `{replacement}'"
            )
            implied = engine

    if raw.no_view:
        view_engine = ViewEngine.none
    elif raw.view is not None:
        view_engine = parse_view_engine(raw.view)
    elif implied is not None:
        view_engine = implied
    else:
        warnings.append(_DEFAULT_VIEW_WARNING)
        view_engine = DEFAULT_VIEW_ENGINE

    css_engine = CssEngine.plain if raw.css is None else parse_css_engine(raw.css)

    flavor = raw.tsconfig
    if flavor is not None and flavor not in TSCONFIG_FLAVORS:
        raise InvalidOptionError("--tsconfig", flavor, list(TSCONFIG_FLAVORS))

    options = OptionSet(
        view_engine=view_engine,
        css_engine=css_engine,
        include_git_init=raw.git,
        force=raw.force,
        ts_config_flavor=flavor,
    )
    return options, warnings


def parse_view_engine(value: str) -> ViewEngine:
    """Map a --view value (or alias) to a ViewEngine member."""
    name = value.strip().lower()
    if name in VIEW_ALIASES:
        return VIEW_ALIASES[name]
    try:
        return ViewEngine(name)
    except ValueError:
        choices = [e.value for e in ViewEngine] + sorted(VIEW_ALIASES)
        raise InvalidOptionError("--view", value, choices) from None


def parse_css_engine(value: str) -> CssEngine:
    """Map a --css value to a CssEngine member."""
    name = value.strip().lower()
    try:
        return CssEngine(name)
    except ValueError:
        raise InvalidOptionError(
            "--css", value, [e.value for e in CssEngine]
        ) from None


def create_app_name(path: str | Path) -> str:
    """Derive an npm-safe package name from a directory path.

    Runs of characters other than letters, digits, ``.`` and ``-`` become
    ``-``; leading ``-``, ``_`` and ``.`` and trailing ``-`` are stripped.
    Falls back to ``hello-world`` when nothing is left.
    """
    name = Path(path).name
    name = re.sub(r"[^A-Za-z0-9.-]+", "-", name)
    name = re.sub(r"^[-_.]+|-+$", "", name)
    return name.lower() or DEFAULT_APP_NAME
