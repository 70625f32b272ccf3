"""Template rendering and file-tree materialization."""

from express_generator.scaffold.materializer import Materializer
from express_generator.scaffold.templates import TemplateRenderer, js_inspect

__all__ = [
    "Materializer",
    "TemplateRenderer",
    "js_inspect",
]
