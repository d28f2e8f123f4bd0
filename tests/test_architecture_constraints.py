"""
Tests to enforce architecture constraints and prevent regressions.

These tests verify that the layered architecture is maintained:
- Domain layer: Pure data and rules, no dependency on shuffler or services
- Shuffler: Depends on domain and utils, never on services
- Service layer: Orchestration, converts domain errors to Result values
"""

import ast
from pathlib import Path


def get_project_root() -> Path:
    """Get the project root directory."""
    # Tests are in tests/, so go up one level
    return Path(__file__).parent.parent


def get_imports_from_file(file_path: Path) -> set[str]:
    """Extract all import statements from a Python file."""
    with open(file_path, encoding="utf-8") as f:
        tree = ast.parse(f.read(), filename=str(file_path))

    imports = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.add(node.module)
    return imports


def get_all_python_files(directory: Path) -> list[Path]:
    return list(directory.rglob("*.py"))


class TestDomainLayerConstraints:
    """Tests for domain layer architecture constraints."""

    def test_domain_has_no_service_or_shuffler_imports(self):
        """Domain code should not import from services or the shuffler."""
        domain = get_project_root() / "domain"

        for file_path in get_all_python_files(domain):
            imports = get_imports_from_file(file_path)
            bad = [imp for imp in imports if imp.startswith("services") or imp == "shuffler"]
            assert not bad, (
                f"{file_path.name} imports {bad}. "
                "Domain code should not depend on outer layers."
            )

    def test_domain_has_no_config_imports(self):
        """Domain code takes its settings as arguments, not from config."""
        domain = get_project_root() / "domain"

        for file_path in get_all_python_files(domain):
            assert "config" not in get_imports_from_file(file_path), (
                f"{file_path.name} imports config"
            )


class TestShufflerConstraints:
    """Tests for the shuffler module."""

    def test_shuffler_has_no_service_imports(self):
        imports = get_imports_from_file(get_project_root() / "shuffler.py")
        assert not [imp for imp in imports if imp.startswith("services")]

    def test_no_module_level_random_calls(self):
        """Randomness must come from an injected random.Random, not the global generator."""
        root = get_project_root()
        files = [root / "shuffler.py", *get_all_python_files(root / "domain")]

        for file_path in files:
            tree = ast.parse(file_path.read_text(encoding="utf-8"))
            for node in ast.walk(tree):
                if (
                    isinstance(node, ast.Call)
                    and isinstance(node.func, ast.Attribute)
                    and isinstance(node.func.value, ast.Name)
                    and node.func.value.id == "random"
                ):
                    assert node.func.attr == "Random", (
                        f"{file_path.name} calls random.{node.func.attr}()"
                    )
