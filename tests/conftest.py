"""
Common pytest fixtures for testing.
"""
import pathlib
import shutil
import logging

import pytest


@pytest.fixture
def fixture_path():
    """Return the path to the fixtures directory."""
    return pathlib.Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_tasks_path(fixture_path):
    """Return the path to the sample task file (ids 3 and 1, in that order)."""
    return fixture_path / "sample_tasks.csv"


@pytest.fixture
def empty_tasks_path(fixture_path):
    """Return the path to the empty task file."""
    return fixture_path / "empty_tasks.csv"


@pytest.fixture
def malformed_tasks_path(fixture_path):
    """Return the path to a task file mixing good and broken lines."""
    return fixture_path / "malformed_tasks.csv"


@pytest.fixture
def temp_task_file(tmp_path):
    """Path to a task file that does not exist yet."""
    task_file = tmp_path / "tasks.csv"
    yield task_file
    # Cleanup if needed
    if task_file.exists():
        task_file.unlink()


@pytest.fixture
def sample_task_copy(sample_tasks_path, tmp_path):
    """A writable copy of the sample task file."""
    task_file = tmp_path / "sample_copy.csv"
    shutil.copy(sample_tasks_path, task_file)
    return task_file


@pytest.fixture
def temp_config(tmp_path, temp_task_file):
    """A tasklist.toml pointing at temp_task_file."""
    cfg_file = tmp_path / "tasklist.toml"
    cfg_file.write_text(
        "[tasks]\n"
        f"file = {str(temp_task_file)!r}\n",
        encoding="utf-8",
    )
    return cfg_file


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging to ensure caplog fixtures work correctly."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s  %(name)s:%(module)s.py:%(lineno)d %(message)s',
        force=True  # Override any existing configuration
    )
    yield
