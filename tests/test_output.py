from shared.console import PassgenConsole

from passgen.core.engine import PassgenEngine
from passgen.core.models import Classification, GeneratedSecret, PasswordCheck
from passgen.corpora.common import CommonWords
from passgen.output.console import PassgenConsoleOutput


def _recorder():
    console = PassgenConsole(record=True)
    console.rich.width = 160
    return console, PassgenConsoleOutput(console)


def test_generated_values_are_not_markup():
    console, output = _recorder()
    output.display_generated([
        GeneratedSecret(value="[bold]x[/bold]"),
        GeneratedSecret(value="abc", classification=Classification.STRONG),
    ])
    text = console.rich.export_text()
    assert "[bold]x[/bold]" in text
    assert "abc [Strong]" in text


def test_check_panel(full):
    console, output = _recorder()
    result = PassgenEngine().check_password(
        "marylisa", full, CommonWords.from_custom(["mary", "lisa"])
    )
    output.display_check(PasswordCheck(**result.metadata))
    text = console.rich.export_text()

    assert "Strength Meter" in text
    assert "STRONG" in text
    assert "m******a" in text
    assert "combination of dictionary words" in text
    assert "marylisa" not in text


def test_check_without_strength(lower):
    console, output = _recorder()
    result = PassgenEngine().check_password("Zebra", lower, CommonWords.from_custom([]))
    output.display_check(PasswordCheck(**result.metadata))
    text = console.rich.export_text()

    assert "Strength Meter" not in text
    assert "not in the lower-case alphabet" in text
