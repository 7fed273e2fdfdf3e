"""
Architecture check: the domain layer imports no framework or outer layer.
"""
import ast
from pathlib import Path

import pytest

import checkout.domain

DOMAIN_ROOT = Path(checkout.domain.__file__).parent

FORBIDDEN_PREFIXES = (
    "sqlalchemy",
    "fastapi",
    "pydantic",
    "stripe",
    "checkout.application",
    "checkout.data",
    "checkout.infrastructure",
    "checkout.settings",
    "apps",
)


def imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            yield node.module


@pytest.mark.parametrize(
    "path", sorted(DOMAIN_ROOT.rglob("*.py")), ids=lambda p: str(p.relative_to(DOMAIN_ROOT))
)
def test_domain_module_is_pure(path):
    violations = [m for m in imported_modules(path) if m.startswith(FORBIDDEN_PREFIXES)]
    assert violations == [], f"{path.name} imports {violations}"
