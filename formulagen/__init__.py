"""
formulagen package

Renders the Homebrew formula for a release from a template, a version string
and per-platform checksums.

Key responsibilities are split across modules:
- `config.py`: read release parameters from the environment into a `GenerationRequest`
- `renderer.py`: Jinja2 rendering with ERB-style `<%= name %>` delimiters
- `generator.py`: validate -> render -> write the formula file
- `cli.py`: CLI entrypoint (exit codes, user-facing messages)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
