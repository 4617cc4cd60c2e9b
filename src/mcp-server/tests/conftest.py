"""
Pytest fixtures for Autocomment MCP Server tests.

Every test works inside a throwaway project directory. Source files are
written through the write_source factory so that line endings stay explicit.
"""

import pytest
from pathlib import Path


SAMPLE_JS = (
    "function calculateSum(a, b) {\n"
    "    const total = a + b;\n"
    "    return total;\n"
    "}\n"
)


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Working directory handed to the file tool."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_source(project_dir):
    """Factory writing a source file below the project directory."""
    def write(name: str, content: str) -> Path:
        path = project_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path
    return write


@pytest.fixture
def outside_file(project_dir) -> Path:
    """A file next to the project directory, never reachable from it."""
    path = project_dir.parent / "secret.py"
    path.write_text("x = 1\n")
    return path


@pytest.fixture
def sample_source(write_source):
    """Small JavaScript file with one function."""
    return write_source("math.js", SAMPLE_JS)
