"""Option models for application generation.

RawOptions mirrors the command line as received, including deprecated
flags. OptionSet is the canonical, fully-resolved form every downstream
component works from.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ViewEngine(str, Enum):
    """Template engines the generated application can render views with."""

    none = "none"
    dust = "dust"
    ejs = "ejs"
    hbs = "hbs"
    hjs = "hjs"
    jade = "jade"
    pug = "pug"
    twig = "twig"
    vash = "vash"


class CssEngine(str, Enum):
    """Stylesheet engines served by the generated application."""

    plain = "plain"
    less = "less"
    stylus = "stylus"
    compass = "compass"
    sass = "sass"


class RawOptions(BaseModel):
    """Options exactly as supplied on the command line."""

    model_config = {"extra": "forbid"}

    view: str | None = None
    no_view: bool = False
    css: str | None = None
    git: bool = False
    force: bool = False
    tsconfig: str | None = None

    # Deprecated shorthands for --view
    ejs: bool = False
    pug: bool = False
    hbs: bool = False
    hogan: bool = False


class OptionSet(BaseModel):
    """Canonical generation parameters.

    ``ts_config_flavor`` is None when the flavor should be chosen
    interactively while building the manifest.
    """

    model_config = {"extra": "forbid", "frozen": True}

    view_engine: ViewEngine = ViewEngine.jade
    css_engine: CssEngine = CssEngine.plain
    include_git_init: bool = False
    force: bool = False
    ts_config_flavor: str | None = None
