"""
Passgen Console Output
=======================

Rich-based renderers for passgen results: a colour-coded entropy meter,
a details table for strength checks, and plain listings for generated
secrets.

Generated values are wrapped in :class:`rich.text.Text` so characters
such as ``[`` are never interpreted as console markup.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import PassgenConsole
from passgen.core.models import (
    Classification,
    GeneratedSecret,
    PasswordCheck,
    SafetyVerdict,
)


_CLASSIFICATION_COLOURS: dict[str, str] = {
    "weak": "bold red",
    "medium": "bold yellow",
    "strong": "bold green",
    "very_strong": "bold bright_green",
}

_VERDICT_LABELS: dict[SafetyVerdict, str] = {
    SafetyVerdict.SAFE: "[green]Safe[/green]",
    SafetyVerdict.EMPTY: "[bold red]Unsafe: empty password[/bold red]",
    SafetyVerdict.KNOWN_WORD: "[bold red]Unsafe: dictionary word[/bold red]",
    SafetyVerdict.WORD_COMBINATION: "[bold red]Unsafe: combination of dictionary words[/bold red]",
}

# Entropy at which the meter is full; comfortably above the top tier.
_METER_MAX_BITS = 80.0


class PassgenConsoleOutput:
    """Console renderers for passgen results.

    Usage::

        output = PassgenConsoleOutput(PassgenConsole())
        output.display_check(check)
        output.display_generated(secrets)
    """

    def __init__(self, console: Optional[PassgenConsole] = None) -> None:
        self.console = console or PassgenConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Strength check
    # ------------------------------------------------------------------ #

    def display_check(self, check: PasswordCheck) -> None:
        """Display a strength meter, details table, and safety verdict."""
        self.console.section("Password Check")

        if check.strength is not None:
            self._rich.print(
                Panel(
                    self._entropy_meter(
                        check.strength.entropy, check.strength.classification
                    ),
                    title="Strength Meter",
                    border_style="cyan",
                )
            )

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        tbl.add_row("Password", Text(check.password_masked))
        if check.strength is not None:
            report = check.strength
            colour = _CLASSIFICATION_COLOURS[report.classification.value]
            tbl.add_row("Length", str(report.length))
            tbl.add_row("Alphabet", f"{report.alphabet.value} ({report.alphabet_size} chars)")
            tbl.add_row("Entropy", f"{report.entropy:.2f} bits")
            tbl.add_row("Strength", f"[{colour}]{report.classification.label}[/{colour}]")
        else:
            tbl.add_row("Strength", Text(check.strength_error or "not computed", style="red"))
        tbl.add_row(
            "Dictionary",
            f"{_VERDICT_LABELS[check.safety.verdict]} "
            f"[dim]({check.safety.corpus.value}, {check.safety.corpus_size:,} words)[/dim]",
        )

        self._rich.print(tbl)

    @staticmethod
    def _entropy_meter(bits: float, tier: Classification) -> Text:
        meter_width = 40
        filled = int(min(bits, _METER_MAX_BITS) / _METER_MAX_BITS * meter_width)

        meter = Text()
        meter.append("Entropy: ", style="bold")
        meter.append(f"{bits:6.2f} bits  ")
        meter.append("[", style="dim")
        for i in range(meter_width):
            if i >= filled:
                meter.append("░", style="dim")
                continue
            cell_bits = (i + 1) * _METER_MAX_BITS / meter_width
            if cell_bits <= 28:
                meter.append("█", style="red")
            elif cell_bits <= 40:
                meter.append("█", style="yellow")
            elif cell_bits <= 60:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append(tier.label.upper(), style=_CLASSIFICATION_COLOURS[tier.value])
        return meter

    # ------------------------------------------------------------------ #
    #  Generated secrets
    # ------------------------------------------------------------------ #

    def display_generated(self, secrets: Sequence[GeneratedSecret]) -> None:
        """Print one generated secret per line, with its tier when known."""
        for item in secrets:
            line = Text(item.value)
            if item.classification is not None:
                line.append(" [", style="dim")
                line.append(
                    item.classification.label,
                    style=_CLASSIFICATION_COLOURS[item.classification.value],
                )
                line.append("]", style="dim")
            self._rich.print(line, soft_wrap=True)
