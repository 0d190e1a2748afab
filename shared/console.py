"""
Passgen Console
================

Thin wrapper over :class:`rich.console.Console` with the passgen theme.
The CLI keeps two of these: one on stdout for results and one on stderr,
which the ``--quiet`` flag silences, for the banner and status messages.

Anything user-supplied (secrets, finding text) is rendered through
:class:`rich.text.Text`, never interpolated into markup.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from shared.models import Finding, Severity

_PASSGEN_THEME = Theme(
    {
        "passgen.banner": "bold bright_cyan",
        "passgen.section": "bold bright_magenta",
        "passgen.dim": "dim white",
        "passgen.success": "bold green",
        "passgen.warning": "bold yellow",
        "passgen.error": "bold red",
    }
)

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.CRITICAL: "bold white on red",
    Severity.HIGH: "bold red",
    Severity.MEDIUM: "bold yellow",
    Severity.LOW: "bold bright_cyan",
    Severity.INFO: "bold bright_blue",
}

_TAGLINE = "Password & passphrase generator and strength checker"


class PassgenConsole:
    """Themed console for passgen output.

    Args:
        quiet: Drop everything printed (``--quiet``).
        record: Keep a copy for :meth:`rich.console.Console.export_text`.
        stderr: Print to stderr instead of stdout.
    """

    def __init__(self, *, quiet: bool = False, record: bool = False,
                 stderr: bool = False) -> None:
        self._console = Console(
            theme=_PASSGEN_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
            stderr=stderr,
        )

    @property
    def rich(self) -> Console:
        return self._console

    def banner(self, version: str) -> None:
        title = Text("passgen", style="passgen.banner")
        title.append(f"\n{_TAGLINE}  |  v{version}", style="passgen.dim")
        self._console.print(
            Panel(Align.center(title), border_style="bright_cyan", padding=(0, 2))
        )

    def section(self, title: str) -> None:
        self._console.rule(f"  {title}  ", style="passgen.section", characters="─")
        self._console.print()

    def success(self, message: str) -> None:
        self._status("✔", "SUCCESS", "passgen.success", message)

    def warning(self, message: str) -> None:
        self._status("⚠", "WARNING", "passgen.warning", message)

    def error(self, message: str) -> None:
        self._status("✘", "ERROR", "passgen.error", message)

    def _status(self, icon: str, label: str, style: str, message: str) -> None:
        line = Text(f"[{icon}] {label}: ", style=style)
        line.append(message)
        self._console.print(line)

    def findings_table(self, findings: Sequence[Finding]) -> None:
        """Numbered table of findings, severity-coloured; nothing if empty."""
        if not findings:
            return

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=12)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            tbl.add_row(
                str(idx),
                Text(finding.severity.value, style=_SEVERITY_STYLES[finding.severity]),
                Text(finding.title),
                Text(finding.description),
            )
        self._console.print(tbl)
