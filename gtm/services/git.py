"""
Git Integration — Repository lookups used by the status pipeline

Read-only: resolves the repository root and working tree file status.
Nothing here writes to the repository.
"""

import subprocess
from pathlib import Path
from typing import Optional, List, Dict


# Porcelain status codes mapped to the single-letter report status
STATUS_MODIFIED = "m"
STATUS_DELETED = "d"
STATUS_READ = "r"


class GitIntegration:
    """Git repository integration."""

    def __init__(self, repo_path: Optional[Path] = None):
        """
        Initialize git integration.

        Args:
            repo_path: Path inside a git repository. If None, uses current directory.
        """
        self.repo_path = Path(repo_path) if repo_path else Path.cwd()

    def _run_git(self, args: List[str], check: bool = True) -> Optional[str]:
        """Run a git command and return stdout, or None on failure."""
        try:
            result = subprocess.run(
                ["git"] + args,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=check
            )
            return result.stdout
        except subprocess.CalledProcessError:
            return None
        except OSError:
            # git missing or repo_path gone
            return None

    def root_path(self) -> Optional[str]:
        """Top level directory of the repository, or None outside a repo."""
        output = self._run_git(["rev-parse", "--show-toplevel"])
        if not output or not output.strip():
            return None
        return str(Path(output.strip()).resolve())

    def file_statuses(self) -> Optional[Dict[str, str]]:
        """
        Working tree status keyed by repository-relative path.

        Returns:
            {"path": "m" | "d"} for changed files (unlisted files are "r"),
            or None if git status could not be read.
        """
        output = self._run_git(["status", "--porcelain", "--untracked-files=all"])
        if output is None:
            return None

        statuses = {}
        for line in output.splitlines():
            if len(line) < 4:
                continue
            code = line[:2]
            path = line[3:]
            if " -> " in path:
                # Rename: report the new path
                path = path.split(" -> ", 1)[1]
            path = path.strip('"')
            statuses[path] = STATUS_DELETED if "D" in code else STATUS_MODIFIED
        return statuses
