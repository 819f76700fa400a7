"""Test that the package layout is correct."""


def test_directories_exist(project_root):
    """Test that all expected directories exist."""
    assert (project_root / "openhue" / "core").exists()
    assert (project_root / "openhue" / "models").exists()
    assert (project_root / "openhue" / "commands").exists()
    assert (project_root / "tests").exists()


def test_init_files_exist(project_root):
    """Test that all __init__.py files exist."""
    assert (project_root / "openhue" / "__init__.py").exists()
    assert (project_root / "openhue" / "core" / "__init__.py").exists()
    assert (project_root / "openhue" / "models" / "__init__.py").exists()
    assert (project_root / "openhue" / "commands" / "__init__.py").exists()


def test_entry_point_exists(project_root):
    """Test that the CLI entry point exists."""
    assert (project_root / "openhue" / "cli.py").exists()
    assert (project_root / "openhue" / "__main__.py").exists()
