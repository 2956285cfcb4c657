"""Unit tests for the console helpers (jsscaffold.utils)."""

from __future__ import annotations

import pytest
from rich.console import Console

from jsscaffold import utils
from jsscaffold.models import ArchetypeId


@pytest.fixture
def recorded_console(monkeypatch: pytest.MonkeyPatch) -> Console:
    """Swap the shared console for one that records plain text."""
    console = Console(record=True, width=100, force_terminal=False)
    monkeypatch.setattr(utils, "console", console)
    return console


# ---------------------------------------------------------------------------
# next_steps
# ---------------------------------------------------------------------------


class TestNextSteps:
    @pytest.mark.unit
    @pytest.mark.parametrize("archetype", [ArchetypeId.NEXTJS, ArchetypeId.ELECTRON])
    def test_dev_server_archetypes(self, archetype):
        assert utils.next_steps("app", archetype) == ["cd app", "npm install", "npm run dev"]

    @pytest.mark.unit
    def test_react_native(self):
        assert utils.next_steps("app", ArchetypeId.REACT_NATIVE)[2:] == [
            "npx react-native run-android",
            "# or npx react-native run-ios",
        ]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "archetype",
        [ArchetypeId.NODEJS, ArchetypeId.EXPRESS, ArchetypeId.REACT, ArchetypeId.NEST],
    )
    def test_npm_start_archetypes(self, archetype):
        assert utils.next_steps("app", archetype)[-1] == "npm start"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestPrinters:
    @pytest.mark.unit
    def test_print_success(self, recorded_console):
        utils.print_success("done")
        assert "done" in recorded_console.export_text()

    @pytest.mark.unit
    def test_print_error(self, recorded_console):
        utils.print_error("boom")
        assert "boom" in recorded_console.export_text()

    @pytest.mark.unit
    def test_print_summary_table(self, recorded_console):
        utils.print_summary_table({"Project": "my-app", "Type": "React"}, title="Plan")
        text = recorded_console.export_text()
        assert "Plan" in text
        assert "my-app" in text
        assert "React" in text

    @pytest.mark.unit
    def test_print_next_steps(self, recorded_console):
        utils.print_next_steps("my-app", ArchetypeId.EXPRESS)
        text = recorded_console.export_text()
        assert "cd my-app" in text
        assert "npm start" in text
