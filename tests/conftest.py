"""
Shared pytest fixtures for the gtm test suite.

Every test runs with HOME pointed at a temp directory and without
GTM_* environment overrides, so user config never leaks in.
"""

import subprocess

import pytest
from tests.factories import GTMTestFactory, git_is_available


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Isolate HOME and drop GTM_* overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in ("GTM_DATA_DIR", "GTM_COLOR", "GTM_PARALLEL_ENABLED",
                "GTM_IO_WORKERS", "GTM_PROJECT_PATH"):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def gtm_factory(tmp_path):
    """
    Create an empty GTMTestFactory instance.

    Example:
        def test_all_projects(gtm_factory):
            gtm_factory.create_project("a")
            cli = gtm_factory.create_cli()
    """
    return GTMTestFactory(tmp_path)


@pytest.fixture
def git_repo(tmp_path):
    """Create a temporary git repository with one commit."""
    if not git_is_available():
        pytest.skip("Git is not available")

    repo = tmp_path / "repo"
    repo.mkdir()
    try:
        subprocess.run(["git", "init"], cwd=repo, capture_output=True, check=True)
        subprocess.run(["git", "config", "user.email", "test@test.com"], cwd=repo, capture_output=True)
        subprocess.run(["git", "config", "user.name", "Test User"], cwd=repo, capture_output=True)
        (repo / "README.md").write_text("# Test")
        subprocess.run(["git", "add", "."], cwd=repo, capture_output=True, check=True)
        subprocess.run(["git", "commit", "-m", "Initial commit"], cwd=repo, capture_output=True, check=True)
    except subprocess.CalledProcessError:
        pytest.skip("Could not create git repository")
    return repo
