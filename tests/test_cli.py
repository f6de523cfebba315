from pathlib import Path

import pytest

from formulagen import __version__
from formulagen.cli import main


def test_success_prints_path_and_version(project_root: Path, formula_dir: Path, write_template, capsys) -> None:
    write_template('version "<%= ver %>"\nsha256 "<%= linux_amd_sha %>"\n')

    rc = main([], env={"VER": "1.2.3", "LINUX_AMD_SHA": "abc"}, root=project_root)

    assert rc == 0
    output = (formula_dir / "agent-align.rb").resolve()
    assert output.read_text(encoding="utf-8") == 'version "1.2.3"\nsha256 "abc"\n'
    out = capsys.readouterr().out
    assert out.strip() == f"Wrote formula to {output} (VER=1.2.3)"


def test_missing_version_exits_non_zero(project_root: Path, formula_dir: Path, write_template, capsys) -> None:
    write_template('version "<%= ver %>"\n')

    rc = main([], env={}, root=project_root)

    assert rc == 1
    assert "version" in capsys.readouterr().err
    assert not (formula_dir / "agent-align.rb").exists()


def test_missing_template_exits_non_zero(project_root: Path, formula_dir: Path, capsys) -> None:
    rc = main([], env={"VER": "1.2.3"}, root=project_root)

    assert rc == 1
    err = capsys.readouterr().err
    assert err.startswith("error: Template not found:")
    assert "agent-align.rb.erb" in err
    assert not formula_dir.exists()


def test_rejects_positional_arguments(project_root: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["somewhere.rb"], env={"VER": "1.2.3"}, root=project_root)
    assert exc.value.code == 2


def test_version_flag(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out
