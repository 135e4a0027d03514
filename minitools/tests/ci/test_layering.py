from __future__ import annotations

from pathlib import Path

import pytest


PACKAGE_ROOT = Path(__file__).resolve().parents[2]


def _imports_in(directory: Path, needle: str) -> list[str]:
    matches: list[str] = []
    for file_path in directory.rglob("*.py"):
        for line_no, line in enumerate(file_path.read_text(encoding="utf-8").splitlines(), start=1):
            stripped = line.strip()
            if stripped.startswith(("import ", "from ")) and needle in stripped:
                rel_path = file_path.relative_to(PACKAGE_ROOT.parent)
                matches.append(f"{rel_path}:{line_no}: {stripped}")
    return matches


@pytest.mark.parametrize("layer", ["domain", "usecases", "viewmodels"])
@pytest.mark.parametrize("toolkit", ["tkinter", "nicegui"])
def test_inner_layers_do_not_import_ui_toolkits(layer: str, toolkit: str) -> None:
    matches = _imports_in(PACKAGE_ROOT / layer, toolkit)
    assert not matches, f"'{layer}' must stay toolkit-free:\n" + "\n".join(matches)


@pytest.mark.parametrize("layer", ["domain", "usecases"])
def test_core_does_not_import_adapters(layer: str) -> None:
    matches = _imports_in(PACKAGE_ROOT / layer, "adapters")
    assert not matches, f"'{layer}' must depend on ports only:\n" + "\n".join(matches)
