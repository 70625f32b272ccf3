"""Declarative file-tree plan for a generated project.

A plan is an ordered tuple of operations with destination paths relative
to the project root. Operations are appended parent-first, so executing
them in order never writes into a directory that does not exist yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from express_generator.generator.context import TemplateContexts
from express_generator.generator.engines import css_engine_spec, view_engine_spec
from express_generator.models.context import AppContext, ServerContext
from express_generator.models.manifest import BuildConfig, Manifest
from express_generator.models.options import OptionSet, ViewEngine

MODE_FILE = 0o644
MODE_EXECUTABLE = 0o755


@dataclass(frozen=True)
class CreateDir:
    """Ensure ``path`` exists."""

    path: str


@dataclass(frozen=True)
class CopyFile:
    """Copy ``template`` from the template root to ``dest``."""

    template: str
    dest: str
    mode: int = MODE_FILE


@dataclass(frozen=True)
class CopyGlob:
    """Copy every file in template ``source_dir`` matching ``pattern``."""

    source_dir: str
    dest_dir: str
    pattern: str


@dataclass(frozen=True)
class RenderTemplate:
    """Render ``template`` with ``context`` into ``dest``."""

    template: str
    context: Union[AppContext, ServerContext]
    dest: str
    mode: int = MODE_FILE


@dataclass(frozen=True)
class WriteFile:
    """Write already-serialized ``content`` to ``dest``."""

    dest: str
    content: str
    mode: int = MODE_FILE


Operation = Union[CreateDir, CopyFile, CopyGlob, RenderTemplate, WriteFile]
TreePlan = tuple[Operation, ...]


def build_plan(
    options: OptionSet,
    manifest: Manifest,
    build_config: BuildConfig,
    build_overrides_json: str,
    contexts: TemplateContexts,
) -> TreePlan:
    """Lay out every directory and file of the generated project.

    Args:
        options: Canonical generation options.
        manifest: Serialized to ``package.json``.
        build_config: Serialized to ``tsconfig.json``.
        build_overrides_json: Serialized ``tsconfig.build.json``.
        contexts: Contexts for ``src/app.ts`` and ``bin/www.ts``.

    Returns:
        The ordered plan.
    """
    ops: list[Operation] = [
        CreateDir("."),
        CreateDir("src"),
        CreateDir("src/public"),
        CreateDir("src/public/javascripts"),
        CreateDir("src/public/images"),
        CreateDir("src/public/stylesheets"),
        CreateDir("src/routes"),
        CopyGlob("ts/routes", "src/routes", "*.ts"),
        CreateDir("src/utils"),
        CopyGlob("ts/utils", "src/utils", "*.ts"),
    ]

    if options.view_engine is ViewEngine.none:
        ops.append(CopyFile("ts/index.html", "src/public/index.html"))
    else:
        view = view_engine_spec(options.view_engine)
        ops.append(CreateDir("src/views"))
        ops.append(CopyGlob("views", "src/views", view.pattern))

    css = css_engine_spec(options.css_engine)
    ops.append(CopyGlob("css", "src/public/stylesheets", css.pattern))

    ops.extend([
        CopyFile("ts/gitignore", ".gitignore"),
        RenderTemplate("ts/app.ts", contexts.app, "src/app.ts"),
        WriteFile("package.json", manifest.to_json()),
        WriteFile("tsconfig.json", build_config.to_json()),
        WriteFile("tsconfig.build.json", build_overrides_json),
        CreateDir("bin"),
        RenderTemplate("ts/www.ts", contexts.server, "bin/www.ts", MODE_EXECUTABLE),
        CreateDir("etc"),
        CopyFile("etc/build.sh", "etc/build.sh"),
    ])
    return tuple(ops)
