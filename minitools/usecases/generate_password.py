"""Random password text for the password page.

Call context:
    ``ApplyEvent`` builds one :class:`GeneratePasswordText` bound to the
    runtime's ``RandomPort`` and calls it for every ``GeneratePassword``
    event.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..domain.ports import RandomPort
from ..domain.session import PASSWORD_ALPHABET, PASSWORD_LENGTH


@dataclass
class GeneratePasswordText:
    """Draw a human-usable random string; not meant for secret material."""

    rng: RandomPort
    alphabet: str = PASSWORD_ALPHABET
    length: int = PASSWORD_LENGTH

    def __call__(self) -> str:
        size = len(self.alphabet)
        return "".join(
            self.alphabet[self.rng.next_uniform(0, size)] for _ in range(self.length)
        )
