"""Random password and passphrase generators."""

from passgen.generators.passphrase import generate_passphrase
from passgen.generators.password import generate_password

__all__ = ["generate_password", "generate_passphrase"]
