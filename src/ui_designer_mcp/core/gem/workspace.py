"""Discovery of design-system, component and steering files in a project."""

import json
import logging
import re
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

DESIGN_SYSTEM_DIRS = (
    "design-system",
    "docs/design-system",
    "design",
    "styles/design-system",
)
COMPONENT_DIRS = ("src/components", "components", "src/ui", "ui")
COMPONENT_EXTENSIONS = (".tsx", ".ts", ".jsx", ".js")
STEERING_DIRS = ("steering", ".kiro/steering", "power/steering")
MAX_COMPONENT_EXAMPLES = 5
DEFAULT_PROJECT_NAME = "Project"

_REPO_NAME_RE = re.compile(r"[/:]([^/:]+?)(?:\.git)?/?$")


@dataclass
class DetectedFiles:
    """Files found by :meth:`Workspace.detect_files`, relative to the root."""

    design_system_files: List[str] = field(default_factory=list)
    codebase_examples: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SourceDocument:
    """A file read from the workspace for prompt building."""

    path: str
    content: str
    origin: Optional[str] = None


class Workspace:
    """Project directory scanned for Gem inputs.

    Paths handed back to callers are relative to ``root`` using forward
    slashes, matching how they are stored in the Gem config.
    """

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root).expanduser().resolve()

    def detect_files(self) -> DetectedFiles:
        """Find design-system markdown files and a handful of component examples.

        Component examples come from the first candidate directory that holds
        any matching source files.
        """
        detected = DetectedFiles()

        for rel_dir in DESIGN_SYSTEM_DIRS:
            for name in self._list_files(rel_dir):
                if name.endswith(".md"):
                    detected.design_system_files.append(f"{rel_dir}/{name}")

        for rel_dir in COMPONENT_DIRS:
            names = [
                name
                for name in self._list_files(rel_dir)
                if name.endswith(COMPONENT_EXTENSIONS)
            ]
            if names:
                detected.codebase_examples = [
                    f"{rel_dir}/{name}" for name in names[:MAX_COMPONENT_EXAMPLES]
                ]
                break

        logger.debug(
            "Detected %d design-system files and %d component examples in %s",
            len(detected.design_system_files),
            len(detected.codebase_examples),
            self.root,
        )
        return detected

    def read_steering_files(self) -> List[SourceDocument]:
        """Read every markdown file from the steering directories."""
        documents: List[SourceDocument] = []
        for rel_dir in STEERING_DIRS:
            for name in self._list_files(rel_dir):
                if not name.endswith(".md"):
                    continue
                path = self.root / rel_dir / name
                try:
                    content = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as exc:
                    logger.warning("Could not read steering file %s: %s", path, exc)
                    continue
                documents.append(
                    SourceDocument(path=name, content=content, origin=str(self.root / rel_dir))
                )
        return documents

    def read_files(self, paths: Iterable[str]) -> List[SourceDocument]:
        """Read the given files, skipping (and logging) unreadable ones."""
        documents: List[SourceDocument] = []
        for rel_path in paths:
            path = self.resolve(rel_path)
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Could not read %s: %s", rel_path, exc)
                continue
            documents.append(SourceDocument(path=rel_path, content=content))
        return documents

    def resolve(self, rel_path: str) -> Path:
        path = Path(rel_path).expanduser()
        return path if path.is_absolute() else self.root / path

    def project_name(self) -> str:
        """Name from package.json, else the git remote's repository name."""
        package_json = self.root / "package.json"
        try:
            name = json.loads(package_json.read_text(encoding="utf-8")).get("name")
        except (OSError, ValueError, AttributeError):
            name = None
        else:
            if name:
                return str(name)
            return DEFAULT_PROJECT_NAME

        return self._git_repository_name() or DEFAULT_PROJECT_NAME

    def _git_repository_name(self) -> Optional[str]:
        try:
            completed = subprocess.run(
                ["git", "config", "--get", "remote.origin.url"],
                cwd=self.root,
                capture_output=True,
                text=True,
                timeout=5,
                check=True,
            )
        except (OSError, subprocess.SubprocessError):
            return None
        match = _REPO_NAME_RE.search(completed.stdout.strip())
        return match.group(1) if match else None

    def _list_files(self, rel_dir: str) -> List[str]:
        directory = self.root / rel_dir
        try:
            return sorted(entry.name for entry in directory.iterdir() if entry.is_file())
        except OSError:
            return []
