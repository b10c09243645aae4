"""Reference alphabet for fiscal codes.

Upper case is canonical: every encoder and checksum works on upper-case
letters, and input text is upper-cased before it reaches them.
"""

from __future__ import annotations

from dataclasses import dataclass


ALPHABET_SIZE = 26


@dataclass(frozen=True)
class Alphabet:
    """Ordered letters plus their vowel and consonant subsets."""

    letters: str
    vowels: str

    def __post_init__(self) -> None:
        if len(self.letters) != ALPHABET_SIZE:
            msg = f"Alphabet must have {ALPHABET_SIZE} letters, got {len(self.letters)}"
            raise ValueError(msg)
        if len(set(self.letters)) != len(self.letters):
            msg = "Alphabet letters must be distinct"
            raise ValueError(msg)
        if not set(self.vowels) <= set(self.letters):
            msg = "Vowels must be a subset of the alphabet"
            raise ValueError(msg)

    @property
    def consonants(self) -> str:
        """Letters that are not vowels, in alphabetical order."""
        return "".join(c for c in self.letters if c not in self.vowels)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, index: int) -> str:
        return self.letters[index]

    def index(self, letter: str) -> int:
        return self.letters.index(letter)

    def is_vowel(self, char: str) -> bool:
        return char in self.vowels


ITALIAN_ALPHABET = Alphabet(letters="ABCDEFGHIJKLMNOPQRSTUVWXYZ", vowels="AEIOU")
