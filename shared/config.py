"""
Passgen Configuration
======================

Defaults for every passgen command, read from a TOML file with two tables::

    [global]
    log_level = "INFO"
    log_file = "passgen.log"

    [passgen]
    default_length = 16
    default_alphabet = "full"
    default_common_words = "all"

Anything absent keeps its dataclass default, and keys passgen does not
know are dropped, so an older passgen can read a newer file.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_SectionT = TypeVar("_SectionT")

# Looked up beside the source tree when no path is given.
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


@dataclass(slots=True)
class PassgenSettings:
    """Fallbacks for options left off the command line."""

    # generate
    default_length: int = 12
    default_alphabet: str = "full"
    default_count: int = 1
    show_strength: bool = False

    # passphrase
    default_word_count: int = 6
    default_separator: str = "-"
    default_wordlist: str = "eff_large"

    # check
    default_common_words: str = "all"


@dataclass(slots=True)
class GlobalConfig:
    """Logging setup shared by all commands."""

    log_level: str = "WARNING"
    log_file: str | None = None
    log_json: bool = False
    debug: bool = False
    version: str = "0.3.0"


@dataclass(slots=True)
class PassgenConfig:
    """The ``[global]`` and ``[passgen]`` tables of a config file.

    Usage:
        >>> config = PassgenConfig.load()
        >>> config.passgen.default_length
        12
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    passgen: PassgenSettings = field(default_factory=PassgenSettings)

    @classmethod
    def load(cls, path: str | Path | None = None) -> PassgenConfig:
        """Read *path*, or the default ``config.toml`` when *path* is None.

        A missing default file just means "use the defaults".

        Raises:
            FileNotFoundError: *path* was given and does not exist.
        """
        if path is None:
            if not _DEFAULT_CONFIG_PATH.is_file():
                return cls()
            config_path = _DEFAULT_CONFIG_PATH
        else:
            config_path = Path(path)
            if not config_path.is_file():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with config_path.open("rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=_section(GlobalConfig, raw.get("global", {})),
            passgen=_section(PassgenSettings, raw.get("passgen", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _section(kind: type[_SectionT], table: dict[str, Any]) -> _SectionT:
    known = {f.name for f in fields(kind)}  # type: ignore[arg-type]
    return kind(**{k: v for k, v in table.items() if k in known})
