from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_TEMPLATE = Path(__file__).resolve().parents[1] / "templates" / "agent-align.rb.erb"


@pytest.fixture()
def sample_template() -> Path:
    return SAMPLE_TEMPLATE


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "agent-align"
    root.mkdir()
    return root


@pytest.fixture()
def formula_dir(project_root: Path) -> Path:
    return project_root.parent / "homebrew-tap" / "Formula"


@pytest.fixture()
def write_template(formula_dir: Path):
    def _write(text: str) -> Path:
        formula_dir.mkdir(parents=True, exist_ok=True)
        path = formula_dir / "agent-align.rb.erb"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
