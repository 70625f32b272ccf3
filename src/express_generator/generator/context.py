"""Assemble the template contexts for the generated entry points.

The application context lists module imports, middleware registrations,
router mounts and the view-engine descriptor. Middleware order is the
request-processing order of the generated app:

    logger -> JSON body parser -> URL-encoded body parser -> cookie parser
    -> stylesheet middleware (if any) -> static files
"""

from __future__ import annotations

from dataclasses import dataclass

from express_generator.generator.engines import css_engine_spec, view_engine_spec
from express_generator.models.context import (
    AppContext,
    Mount,
    ServerContext,
    ViewDescriptor,
)
from express_generator.models.manifest import Manifest
from express_generator.models.options import OptionSet, ViewEngine

STATIC_MIDDLEWARE = "express.static(path.join(__dirname, 'public'))"


@dataclass(frozen=True)
class TemplateContexts:
    """One context per rendered template."""

    app: AppContext
    server: ServerContext


def assemble_contexts(options: OptionSet, manifest: Manifest) -> TemplateContexts:
    """Build the contexts for ``src/app.ts`` and ``bin/www.ts``."""
    return TemplateContexts(
        app=build_app_context(options),
        server=ServerContext(name=manifest.name),
    )


def build_app_context(options: OptionSet) -> AppContext:
    """Build the application entry-point context for the given options."""
    modules: dict[str, str] = {}
    local_modules: dict[str, str] = {}
    uses: list[str] = []
    mounts: list[Mount] = []

    # Request logger
    modules["logger"] = "morgan"
    uses.append("logger('dev')")

    # Body parsers
    uses.append("express.json()")
    uses.append("express.urlencoded({ extended: false })")

    # Cookie parser
    modules["cookieParser"] = "cookie-parser"
    uses.append("cookieParser()")

    css = css_engine_spec(options.css_engine)
    if css.dependency is not None:
        modules[css.variable] = css.dependency
        uses.append(css.use)

    # Routers
    local_modules["indexRouter"] = "./routes/index"
    mounts.append(Mount(path="/", code="indexRouter"))
    local_modules["usersRouter"] = "./routes/users"
    mounts.append(Mount(path="/users", code="usersRouter"))

    view: ViewDescriptor | bool = False
    if options.view_engine is not ViewEngine.none:
        spec = view_engine_spec(options.view_engine)
        if spec.module is not None:
            modules[spec.module] = spec.dependency
        view = ViewDescriptor(engine=options.view_engine.value, render=spec.render)

    uses.append(STATIC_MIDDLEWARE)

    return AppContext(
        modules=modules,
        local_modules=local_modules,
        uses=tuple(uses),
        mounts=tuple(mounts),
        view=view,
    )
