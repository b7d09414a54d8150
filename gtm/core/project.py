"""
Project Index — Registry of tracked projects and their tags

The index lives in the gtm data directory as project.json:
a JSON object of project path -> registration timestamp.
Insertion order is registration order and is preserved on save.

Tags live beside each project in .gtm/tags, one tag per line.
"""

import orjson
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ..errors import RegistryError
from ..services.git import GitIntegration
from .note import GTM_DIR


INDEX_FILE = "project.json"
TAGS_FILE = "tags"


def parse_tags(tags: str) -> List[str]:
    """
    Turn a comma separated tag string into a tag filter.

    Each segment is stripped and kept verbatim, order preserved.
    An empty string means no tag filter.

    Examples:
        parse_tags("a, b ,c") -> ["a", "b", "c"]
        parse_tags("")        -> []
    """
    if tags == "":
        return []
    return [t.strip() for t in tags.split(",")]


def tags_path(project_path) -> Path:
    return Path(project_path) / GTM_DIR / TAGS_FILE


def load_tags(project_path) -> List[str]:
    """Read tags for a project (missing tags file means no tags)."""
    path = tags_path(project_path)
    if not path.exists():
        return []
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Unable to read tags for {project_path}: {e}") from e
    return [line.strip() for line in text.splitlines() if line.strip()]


def save_tags(project_path, tags: Sequence[str]) -> None:
    """Write tags for a project, one per line."""
    path = tags_path(project_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{t}\n" for t in tags), encoding="utf-8")


class ProjectIndex:
    """
    Registered projects, queried by tag or in full.

    Load failures and unreadable index files raise RegistryError.
    A missing index file is an empty registry.
    """

    def __init__(self, data_dir: Path, cwd: Optional[Path] = None):
        self.data_dir = Path(data_dir)
        self.cwd = Path(cwd) if cwd else Path.cwd()
        self._projects: Dict[str, str] = self._load()
        self.clean()

    @property
    def index_path(self) -> Path:
        return self.data_dir / INDEX_FILE

    def _load(self) -> Dict[str, str]:
        if not self.index_path.exists():
            return {}
        try:
            data = orjson.loads(self.index_path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            raise RegistryError(f"Unable to load project index {self.index_path}: {e}") from e
        if not isinstance(data, dict):
            raise RegistryError(f"Unable to load project index {self.index_path}: not a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def save(self) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self.index_path.write_bytes(orjson.dumps(self._projects, option=orjson.OPT_INDENT_2))
        except OSError as e:
            raise RegistryError(f"Unable to save project index {self.index_path}: {e}") from e

    def clean(self) -> None:
        """Forget projects whose directory no longer exists (in memory)."""
        self._projects = {p: ts for p, ts in self._projects.items() if Path(p).is_dir()}

    def projects(self) -> List[str]:
        """All registered project paths, in registration order."""
        return list(self._projects)

    def register(self, project_path) -> str:
        """Add a project to the index and persist it. Returns the stored key."""
        key = str(Path(project_path).resolve())
        if key not in self._projects:
            self._projects[key] = datetime.now(timezone.utc).isoformat()
            self.save()
        return key

    def get(self, tag_filter: Sequence[str], all: bool = False) -> List[str]:
        """
        Resolve the project set for a status query.

        Args:
            tag_filter: Tags to match (any), empty for no filter
            all: Return every registered project, ignoring tag_filter

        Returns:
            Project paths in registration order, or the current project
            when neither all nor a tag filter is given.

        Raises:
            RegistryError: no repository at cwd, or it has no .gtm directory
                (an uninitialized repository is never registered)
        """
        if all:
            return self.projects()

        if tag_filter:
            wanted = set(tag_filter)
            return [p for p in self._projects if wanted.intersection(load_tags(p))]

        root = GitIntegration(self.cwd).root_path()
        if root is None:
            raise RegistryError(f"Unable to find git repository at {self.cwd}")
        if not (Path(root) / GTM_DIR).is_dir():
            raise RegistryError(
                f"Time tracking is not initialized for {root} (missing {GTM_DIR} directory)"
            )
        return [self.register(root)]
