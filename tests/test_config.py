import pytest

from shared.config import GlobalConfig, PassgenConfig, PassgenSettings


def test_defaults():
    config = PassgenConfig()
    assert config.passgen == PassgenSettings()
    assert config.global_settings == GlobalConfig()
    assert config.passgen.default_length == 12
    assert config.passgen.default_alphabet == "full"
    assert config.passgen.default_common_words == "all"


def test_load_sections(tmp_path):
    path = tmp_path / "passgen.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "log_json = true\n"
        "\n"
        "[passgen]\n"
        "default_length = 20\n"
        'default_alphabet = "lower-case"\n'
        'default_separator = " "\n',
        encoding="utf-8",
    )
    config = PassgenConfig.load(path)

    assert config.global_settings.log_level == "DEBUG"
    assert config.global_settings.log_json is True
    assert config.passgen.default_length == 20
    assert config.passgen.default_alphabet == "lower-case"
    assert config.passgen.default_separator == " "
    assert config.passgen.default_word_count == 6


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "passgen.toml"
    path.write_text("[passgen]\nflux_capacitor = 88\ndefault_count = 3\n", encoding="utf-8")
    assert PassgenConfig.load(path).passgen.default_count == 3


def test_explicit_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        PassgenConfig.load(tmp_path / "absent.toml")


def test_to_dict():
    data = PassgenConfig().to_dict()
    assert data["passgen"]["default_wordlist"] == "eff_large"
    assert data["global_settings"]["log_level"] == "WARNING"


def test_shared_package_exports_loader_only():
    import shared

    assert shared.__all__ == ["PassgenConfig"]
    assert not hasattr(shared.config, "get_config")
