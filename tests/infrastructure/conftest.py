"""Pytest fixtures for infrastructure tests."""

from pathlib import Path

import pytest

from samples_iac.core.stack import Stack


@pytest.fixture
def iac_project_root():
    """Return the samples_iac package directory."""
    return Path(__file__).parent.parent.parent / "samples_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the samples_iac package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def stack():
    """Stack used by most declaration tests."""
    return Stack(stack_id="sample-stack", environment="dev")


@pytest.fixture
def other_stack():
    """Second stack with a different identifier."""
    return Stack(stack_id="other-stack", environment="dev")
