"""Fixtures for core tests: a sample frontend project on disk."""

import json

import pytest


@pytest.fixture
def project(tmp_path):
    """Project with a design system, components and steering docs."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "acme-web"}))

    design = tmp_path / "design-system"
    design.mkdir()
    (design / "tokens.md").write_text("# Tokens\nprimary: #0055ff")
    (design / "colors.md").write_text("# Colors")
    (design / "notes.txt").write_text("ignored")

    components = tmp_path / "src" / "components"
    components.mkdir(parents=True)
    for name in ["Alert.tsx", "Button.tsx", "Card.tsx", "Dialog.jsx", "Input.ts", "Menu.js", "Table.tsx"]:
        (components / name).write_text(f"export const {name.split('.')[0]} = () => null;")
    (components / "styles.css").write_text("")

    steering = tmp_path / ".kiro" / "steering"
    steering.mkdir(parents=True)
    (steering / "ui-guidelines.md").write_text("Use 8px spacing.")

    return tmp_path
