"""Execute a tree plan against a destination directory.

Directory creation is idempotent and every write overwrites, so running
the same plan twice yields the same tree. There is no rollback: an
``OSError`` part way through propagates and leaves what was written.
"""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape

from express_generator.generator.plan import (
    MODE_EXECUTABLE,
    MODE_FILE,
    CopyFile,
    CopyGlob,
    CreateDir,
    Operation,
    RenderTemplate,
    TreePlan,
    WriteFile,
)
from express_generator.scaffold.templates import TemplateRenderer, get_templates_dir

console = Console(highlight=False)

Reporter = Callable[[Path, bool], None]


def console_reporter(target: Console) -> Reporter:
    """Return a reporter printing ``create : <path>`` lines to ``target``."""

    def report(path: Path, is_dir: bool) -> None:
        shown = f"{path}/" if is_dir else str(path)
        target.print(f"   [cyan]create[/cyan] : {escape(shown)}", soft_wrap=True)

    return report


report_created = console_reporter(console)


class Materializer:
    """Writes planned directories and files under a destination root.

    Args:
        template_dir: Root the ``CopyFile``/``CopyGlob`` sources and
            templates are resolved against.
        renderer: Renders ``RenderTemplate`` operations.
        report: Called with each directory and file path as it is created.
    """

    def __init__(
        self,
        template_dir: Path | None = None,
        renderer: TemplateRenderer | None = None,
        report: Reporter = report_created,
    ) -> None:
        self.template_dir = Path(template_dir) if template_dir else get_templates_dir()
        self.renderer = renderer or TemplateRenderer(self.template_dir)
        self.report = report

    def execute(self, plan: TreePlan, root: Path) -> list[Path]:
        """Run every operation of ``plan`` in order under ``root``.

        Returns:
            Paths of the files written, in write order.
        """
        written: list[Path] = []
        for op in plan:
            written.extend(self._apply(op, root))
        return written

    def _apply(self, op: Operation, root: Path) -> list[Path]:
        if isinstance(op, CreateDir):
            self._mkdir(root / op.path)
            return []
        if isinstance(op, CopyFile):
            content = (self.template_dir / op.template).read_text(encoding="utf-8")
            return [self._write(root / op.dest, content, op.mode)]
        if isinstance(op, CopyGlob):
            return self._copy_glob(op, root)
        if isinstance(op, RenderTemplate):
            content = self.renderer.render(op.template, op.context.template_vars())
            return [self._write(root / op.dest, content, op.mode)]
        if isinstance(op, WriteFile):
            return [self._write(root / op.dest, op.content, op.mode)]
        raise TypeError(f"Unknown plan operation: {op!r}")

    def _copy_glob(self, op: CopyGlob, root: Path) -> list[Path]:
        source = self.template_dir / op.source_dir
        names = sorted(
            entry.name
            for entry in source.iterdir()
            if entry.is_file() and fnmatch.fnmatchcase(entry.name, op.pattern)
        )
        written: list[Path] = []
        for name in names:
            content = (source / name).read_text(encoding="utf-8")
            written.append(self._write(root / op.dest_dir / name, content, MODE_FILE))
        return written

    def _mkdir(self, path: Path) -> None:
        path.mkdir(mode=MODE_EXECUTABLE, parents=True, exist_ok=True)
        self.report(path, True)

    def _write(self, path: Path, content: str, mode: int) -> Path:
        path.write_text(content, encoding="utf-8")
        path.chmod(mode)
        self.report(path, False)
        return path
