"""Package manifest and build-config models.

Both serialize to the JSON documents written into the generated project.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field


def dump_json(data: dict[str, Any]) -> str:
    """Serialize ``data`` with 2-space indent and a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


class Manifest(BaseModel):
    """The generated project's package.json.

    ``fields`` holds the remaining fixed template fields (version, scripts,
    ...) in template order; ``name`` is always emitted first.
    """

    model_config = {"extra": "forbid"}

    name: str
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict)
    fields: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the package.json document with dependencies sorted like npm."""
        data: dict[str, Any] = {"name": self.name}
        for key, value in self.fields.items():
            if key in ("name", "dependencies", "devDependencies"):
                continue
            data[key] = value
        data["dependencies"] = dict(sorted(self.dependencies.items()))
        data["devDependencies"] = dict(self.dev_dependencies)
        return data

    def to_json(self) -> str:
        return dump_json(self.to_dict())


class BuildConfig(BaseModel):
    """tsconfig.json: an ``extends`` pointer merged with static overrides.

    Keys present in ``overrides`` win over the ``extends`` entry
    (shallow merge).
    """

    model_config = {"extra": "forbid", "frozen": True}

    extends: str
    overrides: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        merged: dict[str, Any] = {"extends": self.extends}
        merged.update(self.overrides)
        return merged

    def to_json(self) -> str:
        return dump_json(self.to_dict())
