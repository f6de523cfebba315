"""
config.py

Responsibility: Turn the process environment into a typed `GenerationRequest`.

This is the only module that reads environment variables. Everything downstream
receives the request object explicitly.

Validation is left to the generator so that failures are reported in a fixed
order (template first, then version).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

VERSION_ENV = "VER"

TAP_DIRNAME = "homebrew-tap"
FORMULA_NAME = "agent-align"


class PlatformKey(str, Enum):
    DARWIN_ARM = "darwin_arm"
    DARWIN_AMD = "darwin_amd"
    LINUX_AMD = "linux_amd"
    LINUX_ARM = "linux_arm"

    @property
    def env_var(self) -> str:
        return f"{self.value.upper()}_SHA"

    @property
    def template_var(self) -> str:
        return f"{self.value}_sha"


@dataclass(frozen=True)
class FormulaPaths:
    """Fixed template/output locations inside the sibling tap checkout."""

    template_path: Path
    output_path: Path

    @classmethod
    def for_root(cls, root: str | Path) -> "FormulaPaths":
        formula_dir = Path(root).resolve().parent / TAP_DIRNAME / "Formula"
        return cls(
            template_path=formula_dir / f"{FORMULA_NAME}.rb.erb",
            output_path=formula_dir / f"{FORMULA_NAME}.rb",
        )


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed for one formula render."""

    template_path: Path
    output_path: Path
    version: str
    checksums: Mapping[PlatformKey, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "checksums", MappingProxyType(dict(self.checksums)))

    def checksum(self, key: PlatformKey) -> str:
        return self.checksums.get(key) or ""

    def context(self) -> dict[str, str]:
        # Every checksum name is always present; absent ones render as "".
        ctx = {"ver": self.version}
        for key in PlatformKey:
            ctx[key.template_var] = self.checksum(key)
        return ctx


def find_project_root(start: str | Path) -> Path:
    """
    Return the nearest directory at or above `start` holding a `.git` entry.

    Falls back to `start` itself outside a checkout.
    """
    start_path = Path(start).resolve()
    for candidate in (start_path, *start_path.parents):
        if (candidate / ".git").exists():
            return candidate
    return start_path


def load_request(
    env: Mapping[str, str] | None = None,
    *,
    root: str | Path | None = None,
) -> GenerationRequest:
    """
    Build a `GenerationRequest` from environment variables.

    - `VER`: release version (required by the generator; empty when unset here)
    - `DARWIN_ARM_SHA`, `DARWIN_AMD_SHA`, `LINUX_AMD_SHA`, `LINUX_ARM_SHA`: optional

    Values are passed through verbatim. `root` is the project checkout; it defaults
    to the git checkout containing the current working directory.
    """
    source = os.environ if env is None else env
    paths = FormulaPaths.for_root(find_project_root(Path.cwd()) if root is None else root)

    checksums = {key: source.get(key.env_var) or "" for key in PlatformKey}

    return GenerationRequest(
        template_path=paths.template_path,
        output_path=paths.output_path,
        version=source.get(VERSION_ENV) or "",
        checksums=checksums,
    )
