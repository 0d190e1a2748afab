"""
Passgen CLI
============

Click-based command-line interface for generating passwords and
passphrases and checking password strength.

Usage::

    passgen generate --length 16 --alphabet full --strength
    passgen generate --custom "abc123" --count 5
    passgen check "Password123!" --alphabet full
    passgen check "marylisa" --common-words female-names
    passgen passphrase --words 6 --separator - --wordlist eff-short-1

Any option left out falls back to the ``[passgen]`` section of the config
file.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Optional, TypeVar

import click

from shared.config import PassgenConfig, PassgenSettings
from shared.console import PassgenConsole
from shared.logger import configure_logging
from shared.models import ScanResult

from passgen import __version__
from passgen.core.engine import PassgenEngine
from passgen.core.models import (
    PRESET_ALPHABETS,
    Alphabet,
    CorpusName,
    GeneratedSecret,
    PasswordCheck,
    WordListName,
)
from passgen.corpora.common import CommonWords
from passgen.corpora.loader import iter_lines
from passgen.corpora.wordlist import WordList, expected_size, is_complete
from passgen.output.console import PassgenConsoleOutput
from passgen.output.report import PassgenReportGenerator

_ALPHABET_CHOICES = [kind.value for kind in PRESET_ALPHABETS]
_CORPUS_CHOICES = [c.value for c in CorpusName if c is not CorpusName.CUSTOM]
_WORDLIST_CHOICES = [w.value for w in WordListName if w is not WordListName.CUSTOM]

_T = TypeVar("_T")


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="passgen")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a passgen configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSON output to this file instead of stdout.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--debug", "-d",
    count=True,
    help="Debug message verbosity (-d for info, -dd for debug).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    debug: int,
) -> None:
    """Passgen -- password generator and strength checker.

    Generate random passwords and passphrases, classify password strength
    by entropy, and check passwords against dictionaries of common words.
    """
    ctx.ensure_object(dict)

    passgen_config = PassgenConfig.load(config)
    settings = passgen_config.global_settings

    log_level = settings.log_level
    if settings.debug or debug >= 2:
        log_level = "DEBUG"
    elif debug == 1:
        log_level = "INFO"
    configure_logging(
        log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )

    console = PassgenConsole()
    status = PassgenConsole(quiet=quiet, stderr=True)

    ctx.obj["config"] = passgen_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["status"] = status
    ctx.obj["engine"] = PassgenEngine(passgen_config)
    ctx.obj["display"] = PassgenConsoleOutput(console)
    ctx.obj["reporter"] = PassgenReportGenerator(version=__version__)

    if output == "console":
        status.banner(version=__version__)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _resolve_alphabet(alphabet: Optional[str], custom: Optional[str],
                      settings: PassgenSettings) -> Alphabet:
    if alphabet is not None and custom is not None:
        raise click.UsageError("Cannot specify both --alphabet and --custom.")
    if custom is not None:
        return Alphabet.custom(custom)
    if alphabet is not None:
        return Alphabet.from_name(alphabet)
    return _named_setting(Alphabet.from_name, settings, "default_alphabet", _ALPHABET_CHOICES)


def _invalid_setting(key: str, value: object, expected: str) -> click.UsageError:
    return click.UsageError(
        f"Invalid config value [passgen] {key} = {value!r}: expected {expected}."
    )


def _named_setting(factory: Callable[[str], _T], settings: PassgenSettings,
                   key: str, choices: list[str]) -> _T:
    """Resolve a name-valued config default, as a usage error when unknown."""
    value = getattr(settings, key)
    expected = "one of " + ", ".join(choices)
    if not isinstance(value, str):
        raise _invalid_setting(key, value, expected)
    try:
        return factory(value)
    except ValueError as exc:
        raise _invalid_setting(key, value, expected) from exc


def _int_setting(settings: PassgenSettings, key: str, minimum: int) -> int:
    value = getattr(settings, key)
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise _invalid_setting(key, value, f"an integer >= {minimum}")
    return value


def _read_words_file(path: str) -> list[str]:
    """Read a one-word-per-line file, skipping blank lines."""
    text = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in iter_lines(text) if line.strip()]


def _emit_json(ctx: click.Context, payload: str) -> None:
    output_file = ctx.obj["output_file"]
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload + "\n", encoding="utf-8")
        ctx.obj["status"].success(f"JSON output saved to: {path}")
    else:
        click.echo(payload)


def _emit_generated(ctx: click.Context, generated: list[GeneratedSecret]) -> None:
    if ctx.obj["output_format"] == "json":
        _emit_json(
            ctx,
            json.dumps(
                [g.model_dump(mode="json", exclude_none=True) for g in generated],
                indent=2,
                ensure_ascii=False,
            ),
        )
    else:
        ctx.obj["display"].display_generated(generated)


def _handle_check_output(ctx: click.Context, result: ScanResult) -> None:
    if ctx.obj["output_format"] == "json":
        reporter: PassgenReportGenerator = ctx.obj["reporter"]
        _emit_json(ctx, reporter.render_json(result))
        return

    display: PassgenConsoleOutput = ctx.obj["display"]
    display.display_check(PasswordCheck(**result.metadata))
    ctx.obj["console"].findings_table(result.findings)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.option("--length", "-l", type=click.IntRange(min=0), default=None,
              help="Length of the generated password.")
@click.option("--alphabet", "-a", type=click.Choice(_ALPHABET_CHOICES), default=None,
              help="Alphabet to draw characters from.")
@click.option("--custom", "-C", default=None,
              help="Custom alphabet (the literal characters to draw from).")
@click.option("--strength", "-s", is_flag=True, default=False,
              help="Print the strength of each generated password.")
@click.option("--count", "-n", type=click.IntRange(min=1), default=None,
              help="Number of passwords to generate.")
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    alphabet: Optional[str],
    custom: Optional[str],
    strength: bool,
    count: Optional[int],
) -> None:
    """Generate random passwords."""
    settings = ctx.obj["config"].passgen
    engine: PassgenEngine = ctx.obj["engine"]

    chosen = _resolve_alphabet(alphabet, custom, settings)
    if length is None:
        length = _int_setting(settings, "default_length", 0)
    if count is None:
        count = _int_setting(settings, "default_count", 1)
    if length > 0 and chosen.size == 0:
        raise click.BadParameter("The custom alphabet is empty.", param_hint="--custom")

    generated = engine.generate_passwords(
        length,
        chosen,
        count=count,
        with_strength=strength or settings.show_strength,
    )
    _emit_generated(ctx, generated)


@cli.command()
@click.argument("password")
@click.option("--alphabet", "-a", type=click.Choice(_ALPHABET_CHOICES), default=None,
              help="Alphabet used for the strength calculation.")
@click.option("--custom", "-C", default=None,
              help="Custom alphabet used for the strength calculation.")
@click.option("--common-words", "-w", type=click.Choice(_CORPUS_CHOICES), default=None,
              help="Bundled dictionary to check the password against.")
@click.option("--words-file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Check against the words in this file (one per line) instead.")
@click.pass_context
def check(
    ctx: click.Context,
    password: str,
    alphabet: Optional[str],
    custom: Optional[str],
    common_words: Optional[str],
    words_file: Optional[str],
) -> None:
    """Check the strength and dictionary safety of PASSWORD."""
    settings = ctx.obj["config"].passgen
    engine: PassgenEngine = ctx.obj["engine"]

    chosen = _resolve_alphabet(alphabet, custom, settings)
    if common_words is not None and words_file is not None:
        raise click.UsageError("Cannot specify both --common-words and --words-file.")
    if words_file is not None:
        corpus = CommonWords.from_custom(_read_words_file(words_file))
    elif common_words is not None:
        corpus = CommonWords.from_name(common_words)
    else:
        corpus = _named_setting(
            CommonWords.from_name, settings, "default_common_words", _CORPUS_CHOICES
        )

    result = engine.check_password(password, chosen, corpus)
    _handle_check_output(ctx, result)

    if result.metadata.get("strength_error"):
        ctx.obj["status"].error(result.metadata["strength_error"])
        ctx.exit(1)


@cli.command()
@click.option("--words", "-w", "word_count", type=click.IntRange(min=0), default=None,
              help="Number of words in the passphrase.")
@click.option("--separator", "-s", default=None,
              help="Separator placed between words.")
@click.option("--wordlist", "-l", type=click.Choice(_WORDLIST_CHOICES), default=None,
              help="Bundled wordlist to draw words from.")
@click.option("--words-file", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Draw words from this file (one per line) instead.")
@click.option("--count", "-n", type=click.IntRange(min=1), default=None,
              help="Number of passphrases to generate.")
@click.option("--strength", is_flag=True, default=False,
              help="Print the strength of each passphrase, rated on the wordlist size.")
@click.pass_context
def passphrase(
    ctx: click.Context,
    word_count: Optional[int],
    separator: Optional[str],
    wordlist: Optional[str],
    words_file: Optional[str],
    count: Optional[int],
    strength: bool,
) -> None:
    """Generate random passphrases from a wordlist."""
    settings = ctx.obj["config"].passgen
    engine: PassgenEngine = ctx.obj["engine"]
    status: PassgenConsole = ctx.obj["status"]

    if wordlist is not None and words_file is not None:
        raise click.UsageError("Cannot specify both --wordlist and --words-file.")
    if words_file is not None:
        chosen = WordList.from_custom(_read_words_file(words_file))
    elif wordlist is not None:
        chosen = WordList.from_name(wordlist)
    else:
        chosen = _named_setting(
            WordList.from_name, settings, "default_wordlist", _WORDLIST_CHOICES
        )
    if word_count is None:
        word_count = _int_setting(settings, "default_word_count", 0)
    if count is None:
        count = _int_setting(settings, "default_count", 1)

    size = len(chosen.words())
    if size == 0:
        status.warning("The wordlist is empty; no words to draw from.")
    elif chosen.name is not WordListName.CUSTOM and not is_complete(chosen.name):
        status.warning(
            f"Bundled {chosen.name.value} wordlist holds {size} of "
            f"{expected_size(chosen.name)} words ({chosen.bits_per_word():.2f} bits per word)."
        )

    generated = engine.generate_passphrases(
        word_count,
        settings.default_separator if separator is None else separator,
        chosen,
        count=count,
        with_strength=strength or settings.show_strength,
    )
    _emit_generated(ctx, generated)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the passgen CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
