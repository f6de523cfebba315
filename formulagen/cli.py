"""
cli.py

Responsibility: CLI entrypoint for formulagen.

High-level flow (no subcommands, no positional arguments):
1) Read release parameters from the environment -> `GenerationRequest`
2) Render the tap's formula template and write the formula
3) Report the written path, or print the error and exit non-zero

Template and output locations are fixed relative to the project root
(see `config.FormulaPaths`), so there are no path flags.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Mapping

from formulagen import __version__
from formulagen.config import load_request
from formulagen.generator import GenerationError, generate

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="formulagen",
        description=(
            "Render the Homebrew formula from its template. "
            "Reads VER (required) and DARWIN_ARM_SHA, DARWIN_AMD_SHA, LINUX_AMD_SHA, "
            "LINUX_ARM_SHA (optional) from the environment."
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(
    argv: list[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
    root: str | Path | None = None,
) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    request = load_request(env, root=root)
    logger.debug("Template: %s", request.template_path)
    logger.debug("Output: %s", request.output_path)

    try:
        written = generate(request)
    except GenerationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote formula to {written.path} (VER={written.version})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
