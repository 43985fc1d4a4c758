"""
Structure lint tests.
Verify that the component skeleton exists and follows conventions.
"""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent

COMPONENTS = ["collections", "tagjoin", "listing", "detail", "calendar", "pages"]


class TestProjectStructure:
    """Verify project structure follows the component conventions."""

    def test_core_directories_exist(self) -> None:
        """Ports live under core."""
        assert (PROJECT_ROOT / "src" / "core" / "ports").is_dir()
        assert (PROJECT_ROOT / "src" / "domain").is_dir()

    def test_adapters_directory_exists(self) -> None:
        """Adapters directory must exist."""
        assert (PROJECT_ROOT / "src" / "adapters").is_dir()

    def test_rules_file_exists(self) -> None:
        """rules.yaml ships at the project root."""
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    def test_tests_structure_exists(self) -> None:
        """Test directories must follow conventions."""
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()
        assert (PROJECT_ROOT / "tests" / "api").is_dir()


class TestComponentLayout:
    """Each component is a package of models, component and tests."""

    @pytest.mark.parametrize("name", COMPONENTS)
    def test_component_files(self, name: str) -> None:
        root = PROJECT_ROOT / "src" / "components" / name
        assert (root / "__init__.py").is_file()
        assert (root / "models.py").is_file()
        assert (root / "component.py").is_file()
        assert (root / "tests" / "test_unit.py").is_file()

    @pytest.mark.parametrize("name", COMPONENTS)
    def test_component_exports(self, name: str) -> None:
        """Public names are declared in __all__."""
        text = (PROJECT_ROOT / "src" / "components" / name / "__init__.py").read_text()
        assert "__all__" in text
