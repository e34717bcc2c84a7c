from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def quiet_console() -> Console:
    """Console writing into a buffer so prompts do not clutter test output."""

    return Console(file=io.StringIO(), force_terminal=False, width=120)


@pytest.fixture()
def module_root(tmp_path: Path) -> Path:
    """A module skeleton with one shared and one file per module type."""

    root = tmp_path / "kaiseki-wp-billing"
    (root / "templates" / "shared").mkdir(parents=True)
    (root / "templates" / "core").mkdir()
    (root / "templates" / "wordpress" / "src").mkdir(parents=True)
    (root / "templates" / "shared" / "a.txt").write_text("Hello %namespace%", encoding="utf-8")
    (root / "templates" / "core" / "b.txt").write_text("%package_name_dash%", encoding="utf-8")
    (root / "templates" / "wordpress" / "src" / "ConfigProvider.php").write_text(
        "namespace Kaiseki\\WordPress\\%namespace%;\n'%config_base_key%' => '%package_name_dash%'\n",
        encoding="utf-8",
    )
    (root / "composer.json").write_text("{}", encoding="utf-8")
    (root / "README.md").write_text("# skeleton", encoding="utf-8")
    return root
