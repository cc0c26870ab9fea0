"""Tests for workspace file discovery."""

import json
import subprocess
from unittest.mock import patch

from ui_designer_mcp.core.gem import Workspace


class TestDetectFiles:
    def test_design_system_markdown_only(self, project):
        detected = Workspace(project).detect_files()

        assert detected.design_system_files == [
            "design-system/colors.md",
            "design-system/tokens.md",
        ]

    def test_component_examples_capped_at_five(self, project):
        detected = Workspace(project).detect_files()

        assert detected.codebase_examples == [
            "src/components/Alert.tsx",
            "src/components/Button.tsx",
            "src/components/Card.tsx",
            "src/components/Dialog.jsx",
            "src/components/Input.ts",
        ]

    def test_first_component_directory_wins(self, project):
        (project / "components").mkdir()
        (project / "components" / "Other.tsx").write_text("")

        detected = Workspace(project).detect_files()

        assert all(path.startswith("src/components/") for path in detected.codebase_examples)

    def test_falls_through_empty_component_directories(self, tmp_path):
        (tmp_path / "src" / "components").mkdir(parents=True)
        (tmp_path / "ui").mkdir()
        (tmp_path / "ui" / "Badge.jsx").write_text("")

        detected = Workspace(tmp_path).detect_files()

        assert detected.codebase_examples == ["ui/Badge.jsx"]

    def test_empty_project(self, tmp_path):
        detected = Workspace(tmp_path).detect_files()

        assert detected.design_system_files == []
        assert detected.codebase_examples == []


class TestReading:
    def test_steering_files(self, project):
        documents = Workspace(project).read_steering_files()

        assert len(documents) == 1
        assert documents[0].path == "ui-guidelines.md"
        assert documents[0].content == "Use 8px spacing."
        assert documents[0].origin == str(project.resolve() / ".kiro/steering")

    def test_read_files_skips_missing(self, project):
        documents = Workspace(project).read_files(
            ["design-system/tokens.md", "design-system/missing.md"]
        )

        assert [doc.path for doc in documents] == ["design-system/tokens.md"]
        assert "primary: #0055ff" in documents[0].content


class TestProjectName:
    def test_from_package_json(self, project):
        assert Workspace(project).project_name() == "acme-web"

    def test_package_json_without_name(self, tmp_path):
        (tmp_path / "package.json").write_text(json.dumps({"version": "1.0.0"}))
        assert Workspace(tmp_path).project_name() == "Project"

    def test_from_git_remote(self, tmp_path):
        completed = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="git@github.com:acme/design-app.git\n"
        )
        with patch("ui_designer_mcp.core.gem.workspace.subprocess.run", return_value=completed):
            assert Workspace(tmp_path).project_name() == "design-app"

    def test_https_remote_without_suffix(self, tmp_path):
        completed = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="https://github.com/acme/portal\n"
        )
        with patch("ui_designer_mcp.core.gem.workspace.subprocess.run", return_value=completed):
            assert Workspace(tmp_path).project_name() == "portal"

    def test_default_when_nothing_found(self, tmp_path):
        error = subprocess.CalledProcessError(1, ["git"])
        with patch("ui_designer_mcp.core.gem.workspace.subprocess.run", side_effect=error):
            assert Workspace(tmp_path).project_name() == "Project"
