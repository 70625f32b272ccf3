"""Generation orchestrator.

Runs one invocation end to end:

    check destination -> (confirm) -> generating -> done | aborted

Options are normalized before the destination is inspected, so invalid
flags fail before anything is asked or written. Once generating starts
the plan runs to completion or the error propagates; nothing is rolled
back.
"""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from rich.console import Console

from express_generator.cli.output import print_next_steps, print_warning
from express_generator.generator.context import assemble_contexts
from express_generator.generator.manifest import build_manifest, build_tsconfig_build
from express_generator.generator.normalizer import create_app_name, normalize_options
from express_generator.generator.plan import TreePlan, build_plan
from express_generator.models.manifest import dump_json
from express_generator.models.options import OptionSet, RawOptions
from express_generator.scaffold.materializer import Materializer, console_reporter

if TYPE_CHECKING:
    from express_generator.cli.prompts import Prompter

CONFIRM_MESSAGE = "destination is not empty, continue? [y/N] "


class GenerationState(str, Enum):
    """States of a single generation run."""

    check_destination = "check_destination"
    confirm = "confirm"
    generating = "generating"
    done = "done"
    aborted = "aborted"


@dataclass
class GenerationResult:
    """Outcome of :meth:`Orchestrator.run`."""

    state: GenerationState
    app_name: str
    options: OptionSet
    written: list[Path] = field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return 0 if self.state is GenerationState.done else 1


def is_empty_directory(path: Path) -> bool:
    """Return True if ``path`` has no entries or does not exist.

    Raises:
        OSError: For any listing failure other than a missing directory.
    """
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except FileNotFoundError:
        return True


def git_init(directory: Path) -> None:
    """Initialise a git repository in ``directory``."""
    subprocess.run(["git", "init"], cwd=directory, check=True)


class Orchestrator:
    """Sequences normalization, manifest, contexts, plan and materialization.

    Args:
        prompter: Answers the non-empty-destination confirmation and the
            tsconfig flavor choice.
        console: Receives progress, created-path and next-step output.
        err_console: Receives warnings and the abort notice.
        materializer: Executes the plan. Defaults to the packaged templates.
        vcs_init: Called with the destination when ``--git`` is set.
        windows_cmd: Force the next-step wording; None detects it.
    """

    def __init__(
        self,
        prompter: Prompter,
        console: Console | None = None,
        err_console: Console | None = None,
        materializer: Materializer | None = None,
        vcs_init: Callable[[Path], None] = git_init,
        windows_cmd: bool | None = None,
    ) -> None:
        self.prompter = prompter
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.materializer = materializer or Materializer(
            report=console_reporter(self.console)
        )
        self.vcs_init = vcs_init
        self.windows_cmd = windows_cmd
        self.state = GenerationState.check_destination

    def run(self, destination: str | Path, raw: RawOptions) -> GenerationResult:
        """Generate an application into ``destination``.

        Raises:
            InvalidOptionError: If a flag carries an unsupported value.
            OSError: If listing the destination or writing a file fails.
        """
        destination = Path(destination)
        options, warnings = normalize_options(raw)
        for message in warnings:
            print_warning(message, self.err_console)

        app_name = create_app_name(destination.resolve())

        self.state = GenerationState.check_destination
        if not (options.force or is_empty_directory(destination)):
            self.state = GenerationState.confirm
            if not self.prompter.confirm(CONFIRM_MESSAGE):
                self.err_console.print("aborting")
                self.state = GenerationState.aborted
                return GenerationResult(self.state, app_name, options)

        self.state = GenerationState.generating
        written = self.generate(options, app_name, destination)
        self.state = GenerationState.done
        return GenerationResult(self.state, app_name, options, written)

    def generate(self, options: OptionSet, app_name: str, destination: Path) -> list[Path]:
        """Build everything in memory, then write it under ``destination``."""
        self.console.print()
        plan = self.build_plan(options, app_name)
        written = self.materializer.execute(plan, destination)

        if options.include_git_init:
            self._init_vcs(destination)

        print_next_steps(app_name, self.console, self.windows_cmd)
        return written

    def build_plan(self, options: OptionSet, app_name: str) -> TreePlan:
        template_dir = self.materializer.template_dir
        manifest, build_config = build_manifest(
            options, app_name, self.prompter.select, template_dir
        )
        contexts = assemble_contexts(options, manifest)
        build_overrides = dump_json(build_tsconfig_build(template_dir))
        return build_plan(options, manifest, build_config, build_overrides, contexts)

    def _init_vcs(self, destination: Path) -> None:
        try:
            self.vcs_init(destination)
        except (OSError, subprocess.CalledProcessError) as exc:
            print_warning(f"git init failed: {exc}", self.err_console)
