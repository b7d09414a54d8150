"""
StatusCommand — Pending time for one or many projects

Pipeline:
1. Validate the request (total-only excludes -all and -tags)
2. Resolve the project set from the project index
3. Per project, in index order: compute the commit note, render it
4. Emit the concatenated report, or nothing at all on any failure

A report with silently missing projects is worse than no report:
the first failure aborts the whole command with exit code 1.
"""

from dataclasses import dataclass

from ..commands.base import BaseCommand
from ..core.project import parse_tags
from ..errors import ConfigurationConflict, GTMError
from ..orchestrator import run_ordered, TimeTracker
from ..presentation.report import OutputOptions, StatusReport


TOTAL_ONLY_CONFLICT = "-tags and -all options not allowed with -total-only"


@dataclass(frozen=True)
class StatusRequest:
    """Everything one status invocation needs, already parsed."""
    total_only: bool = False
    long_duration: bool = False
    terminal_off: bool = False
    application_off: bool = False
    color: bool = False
    tags: str = ""
    all: bool = False
    profile: bool = False

    def validate(self) -> None:
        """Raise ConfigurationConflict for contradictory selections."""
        if self.total_only and (self.all or self.tags != ""):
            raise ConfigurationConflict(TOTAL_ONLY_CONFLICT)

    def output_options(self) -> OutputOptions:
        return OutputOptions(
            total_only=self.total_only,
            long_duration=self.long_duration,
            terminal_off=self.terminal_off,
            application_off=self.application_off,
            color=self.color,
        )


class StatusCommand(BaseCommand):
    """Command for reporting pending time."""

    def run(self, request: StatusRequest) -> int:
        """
        Run a status report.

        Writes the report to the Ui report channel (raw for total-only)
        and any failure message to the error channel.

        Returns:
            0 on success, 1 on any failure
        """
        timer = TimeTracker(enabled=request.profile, ui=self.ui)
        with timer.track("status.run"):
            try:
                output = self.collect(request, timer)
            except GTMError as e:
                self.ui.write_error(str(e))
                return 1

            if request.total_only:
                # Plain output, safe to embed in prompts and pipes
                self.ui.write_raw(output)
            else:
                self.ui.write_output(output)
        return 0

    def collect(self, request: StatusRequest, timer: TimeTracker = None) -> str:
        """
        Build the full report text without emitting it.

        Raises:
            ConfigurationConflict, RegistryError, MetricProcessingError, RenderError
        """
        timer = timer or TimeTracker()
        request.validate()

        tag_filter = parse_tags(request.tags)
        with timer.track("project.index"):
            index = self._cli.open_index()
            projects = index.get(tag_filter, request.all)

        options = request.output_options()
        report = StatusReport(interactive=self.ui.is_interactive)

        def project_status(project_path: str) -> str:
            with timer.track(f"status {project_path}"):
                note = self.processor.process(project_path)
                return report.render(note, options, project_path)

        fragments = run_ordered(project_status, projects, self.orchestrator_config)
        return "".join(fragments)


# =============================================================================
# Command Registration (Self-Registration Pattern)
# =============================================================================

def register_parser(subparsers):
    """Register status command parser."""
    p = subparsers.add_parser(
        'status',
        help='Show pending time',
        description='Show pending time for git repositories.'
    )
    p.add_argument('--terminal-off', '-terminal-off', action='store_true',
                   help='Exclude time spent in terminal (Terminal plug-in is required)')
    p.add_argument('--application-off', '-application-off', action='store_true',
                   help='Exclude time spent in applications')
    p.add_argument('--color', '-color', action='store_true',
                   help="Always output color even if no terminal is detected, i.e 'gtm status -color | less -R'")
    p.add_argument('--total-only', '-total-only', action='store_true',
                   help='Only display total pending time')
    p.add_argument('--long-duration', '-long-duration', action='store_true',
                   help='If total-only, display total pending time in long duration format')
    p.add_argument('--tags', '-tags', default="",
                   help='Project tags to report status for, i.e --tags tag1,tag2')
    p.add_argument('--all', '-all', action='store_true',
                   help='Show status for all projects')
    p.add_argument('--profile', '-profile', action='store_true',
                   help='Enable profiling (timings on stderr)')
    return p


def handle(cli, args):
    """Handle status command dispatch."""
    defaults = cli.config.status
    request = StatusRequest(
        total_only=args.total_only,
        long_duration=args.long_duration or defaults.long_duration,
        terminal_off=args.terminal_off or defaults.terminal_off,
        application_off=args.application_off or defaults.application_off,
        color=args.color or defaults.color,
        tags=args.tags,
        all=args.all,
        profile=getattr(args, 'profile', False),
    )
    return cli.status_cmd.run(request)
