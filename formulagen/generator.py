"""
generator.py

Responsibility: One-shot formula generation (validate -> render -> write).

Nothing is written unless the template exists, the version is set and the
template renders cleanly. The output file is overwritten in place; concurrent
runs against the same path are not serialised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from formulagen.config import GenerationRequest
from formulagen.renderer import RenderError, render_text

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    pass


class TemplateNotFound(GenerationError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Template not found: {path}")
        self.path = path


class MissingRequiredParameter(GenerationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required parameter: {name}")
        self.name = name


class TemplateRenderFailure(GenerationError):
    pass


class WriteFailure(GenerationError):
    pass


@dataclass(frozen=True)
class WrittenFile:
    path: Path
    version: str
    bytes_written: int


def generate(request: GenerationRequest) -> WrittenFile:
    """
    Render `request.template_path` and write it to `request.output_path`.

    Raises a `GenerationError` subclass on the first failed step.
    """
    template_path = Path(request.template_path).resolve()
    output_path = Path(request.output_path).resolve()

    if not template_path.is_file():
        raise TemplateNotFound(template_path)
    if not request.version.strip():
        raise MissingRequiredParameter("version")

    try:
        text = template_path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateRenderFailure(f"Failed reading template {template_path}: {e}") from e

    try:
        rendered = render_text(text, request.context())
    except RenderError as e:
        raise TemplateRenderFailure(f"{template_path}: {e}") from e

    data = rendered.encode("utf-8")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise WriteFailure(f"Failed writing {output_path}: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(data), output_path)
    return WrittenFile(path=output_path, version=request.version, bytes_written=len(data))
