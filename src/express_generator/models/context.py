"""Template context models.

One context is built per rendered file and never modified after it is
handed to the renderer.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class ViewDescriptor(BaseModel):
    """How the generated app registers its view engine."""

    model_config = {"extra": "forbid", "frozen": True}

    engine: str
    render: str | None = None


class Mount(BaseModel):
    """A router mounted on the application at ``path``."""

    model_config = {"extra": "forbid", "frozen": True}

    path: str
    code: str


class AppContext(BaseModel):
    """Values for the application entry-point template (src/app.ts)."""

    model_config = {"extra": "forbid", "frozen": True}

    modules: dict[str, str] = Field(default_factory=dict)
    local_modules: dict[str, str] = Field(default_factory=dict)
    uses: tuple[str, ...] = ()
    mounts: tuple[Mount, ...] = ()
    view: ViewDescriptor | Literal[False] = False

    def template_vars(self) -> dict[str, Any]:
        return {
            "modules": dict(self.modules),
            "local_modules": dict(self.local_modules),
            "uses": list(self.uses),
            "mounts": list(self.mounts),
            "view": self.view,
        }


class ServerContext(BaseModel):
    """Values for the server bootstrap template (bin/www.ts)."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str

    def template_vars(self) -> dict[str, Any]:
        return {"name": self.name}
