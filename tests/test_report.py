"""
Tests for StatusReport — rendering one project's pending time

Covers:
- Total-only output (compact and long) without escape sequences
- Category switches applied to breakdown and total alike
- Color forced by option, automatic on interactive sinks, absent otherwise
- Project name and tags on the total line
"""

import re
from pathlib import Path

import pytest

from gtm.core.note import CommitNote, FileDetail
from gtm.core.project import save_tags
from gtm.errors import RegistryError, RenderError
from gtm.presentation.report import OutputOptions, StatusReport


ANSI = re.compile(r"\x1b\[")


def make_note():
    """90 minutes pending: 60m source, 20m terminal, 10m browser."""
    return CommitNote(files=[
        FileDetail(source_file="main.go", time_spent=3600, status="m"),
        FileDetail(source_file=".gtm/terminal.app", time_spent=1200),
        FileDetail(source_file=".gtm/browser.app", time_spent=600),
    ])


@pytest.fixture
def project(tmp_path):
    path = tmp_path / "gtm-project"
    path.mkdir()
    return str(path)


class TestTotalOnly:
    """Single duration for prompts and scripts."""

    def test_compact(self, project):
        out = StatusReport().render(make_note(), OutputOptions(total_only=True), project)
        assert out == "1h30m"

    def test_long_duration(self, project):
        options = OutputOptions(total_only=True, long_duration=True)
        out = StatusReport().render(make_note(), options, project)
        assert out == "1 hour 30 minutes"

    def test_never_colored(self, project):
        options = OutputOptions(total_only=True, long_duration=True, color=True)
        out = StatusReport(interactive=True).render(make_note(), options, project)
        assert not ANSI.search(out)

    def test_terminal_off(self, project):
        options = OutputOptions(total_only=True, terminal_off=True)
        assert StatusReport().render(make_note(), options, project) == "1h10m"

    def test_application_off(self, project):
        options = OutputOptions(total_only=True, application_off=True)
        assert StatusReport().render(make_note(), options, project) == "1h20m"


class TestDetail:
    """Per-file breakdown with a project total line."""

    def test_lists_files_and_total(self, project):
        out = StatusReport().render(make_note(), OutputOptions(), project)

        assert "main.go" in out
        assert "Terminal" in out
        assert "Browser" in out
        assert "[m] main.go" in out
        assert "66.7%" in out
        last = out.rstrip("\n").splitlines()[-1]
        assert "1h30m" in last
        assert "gtm-project" in last

    def test_terminal_off_excluded_everywhere(self, project):
        out = StatusReport().render(make_note(), OutputOptions(terminal_off=True), project)

        assert "Terminal" not in out
        last = out.rstrip("\n").splitlines()[-1]
        assert "1h10m" in last

    def test_application_off_excluded_everywhere(self, project):
        out = StatusReport().render(make_note(), OutputOptions(application_off=True), project)

        assert "Browser" not in out
        assert "Terminal" in out

    def test_terminal_round_trip_difference(self, project):
        """Totals with and without terminal differ by exactly the terminal time."""
        note = make_note()
        on = note.total(terminal_off=False)
        off = note.total(terminal_off=True)
        assert on - off == note.terminal_time == 1200

        report = StatusReport()
        with_terminal = report.render(note, OutputOptions(total_only=True), project)
        without = report.render(note, OutputOptions(total_only=True, terminal_off=True), project)
        assert (with_terminal, without) == ("1h30m", "1h10m")

    def test_tags_on_total_line(self, project):
        save_tags(project, ["work", "oss"])
        out = StatusReport().render(make_note(), OutputOptions(), project)
        assert out.rstrip("\n").splitlines()[-1].endswith("gtm-project [work oss]")

    def test_empty_note(self, project):
        out = StatusReport().render(CommitNote(), OutputOptions(), project)
        assert "0s" in out
        assert "gtm-project" in out

    def test_starts_with_blank_line(self, project):
        out = StatusReport().render(make_note(), OutputOptions(), project)
        assert out.startswith("\n")


class TestColor:
    """Color decision."""

    def test_plain_on_non_interactive_sink(self, project):
        out = StatusReport(interactive=False).render(make_note(), OutputOptions(), project)
        assert not ANSI.search(out)

    def test_forced_on_non_interactive_sink(self, project):
        out = StatusReport(interactive=False).render(make_note(), OutputOptions(color=True), project)
        assert ANSI.search(out)

    def test_automatic_on_interactive_sink(self, project):
        out = StatusReport(interactive=True).render(make_note(), OutputOptions(), project)
        assert ANSI.search(out)


class TestRenderErrors:

    def test_not_a_note(self, project):
        with pytest.raises(RenderError):
            StatusReport().render(None, OutputOptions(), project)

    def test_negative_duration(self, project):
        note = CommitNote(files=[FileDetail(source_file="a.go", time_spent=-5)])
        with pytest.raises(RenderError, match="Negative duration"):
            StatusReport().render(note, OutputOptions(total_only=True), project)

    def test_unreadable_tags_surface_as_registry_error(self, project):
        (Path(project) / ".gtm").mkdir()
        (Path(project) / ".gtm" / "tags").write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(RegistryError, match="Unable to read tags"):
            StatusReport().render(make_note(), OutputOptions(), project)
