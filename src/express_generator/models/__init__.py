"""Generator data models - re-exports all public model classes."""

from express_generator.models.context import (
    AppContext,
    Mount,
    ServerContext,
    ViewDescriptor,
)
from express_generator.models.manifest import BuildConfig, Manifest
from express_generator.models.options import (
    CssEngine,
    OptionSet,
    RawOptions,
    ViewEngine,
)

__all__ = [
    "AppContext",
    "BuildConfig",
    "CssEngine",
    "Manifest",
    "Mount",
    "OptionSet",
    "RawOptions",
    "ServerContext",
    "ViewDescriptor",
    "ViewEngine",
]
