"""Jinja2 template rendering for project generation.

Templates under ``scaffold/templates/`` produce TypeScript source, not
markup, so values are never HTML-escaped. Instead the renderer takes an
escape strategy and exposes it as the ``inspect`` filter; the default,
:func:`js_inspect`, turns a Python value into a JavaScript literal.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Callable

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATE_SUFFIX = ".j2"


def get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return _DEFAULT_TEMPLATE_DIR


# ---------------------------------------------------------------------------
# Code-safe escaping
# ---------------------------------------------------------------------------

_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


def _quote(value: str) -> str:
    quote = "'"
    if "'" in value:
        if '"' not in value:
            quote = '"'
        elif "`" not in value and "${" not in value:
            quote = "`"

    out: list[str] = []
    for ch in value:
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch == quote:
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02X}")
        else:
            out.append(ch)
    return quote + "".join(out) + quote


def js_inspect(value: Any) -> str:
    """Render ``value`` as a JavaScript literal.

    Strings are single-quoted unless they contain a single quote, in which
    case double quotes (or backticks) are used, mirroring Node's
    ``util.inspect``. Booleans and None map to ``true``/``false``/``null``.
    """
    if isinstance(value, str):
        return _quote(value)
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return str(int(value)) if value.is_integer() else repr(value)
    return json.dumps(value, ensure_ascii=False)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders ``.j2`` templates with a pluggable escape strategy.

    Args:
        template_dir: Template root. Defaults to the packaged templates.
        escape: Function used by the ``inspect`` filter to turn context
            values into source-code literals.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        escape: Callable[[Any], str] = js_inspect,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["inspect"] = escape

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory, with or
                without the ``.j2`` suffix (e.g. ``"ts/app.ts"``).
            context: Variables available inside the template.

        Returns:
            The rendered template content.
        """
        if not template_path.endswith(TEMPLATE_SUFFIX):
            template_path += TEMPLATE_SUFFIX
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string with the provided context."""
        template = self.env.from_string(template_string)
        return template.render(**context)
