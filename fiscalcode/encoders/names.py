"""Phonetic reduction of surnames and given names.

Consonants first, then vowels, then filler:
  ROSSI  → RSS
  MARIO  → MRA
  EVA    → VEA
  LI     → LIX
"""

from __future__ import annotations

from fiscalcode.alphabet import ITALIAN_ALPHABET
from fiscalcode.config import settings

NAME_CODE_LENGTH = 3


def reduce_name(
    text: str,
    width: int = NAME_CODE_LENGTH,
    filler: str | None = None,
    vowels: str = ITALIAN_ALPHABET.vowels,
) -> str:
    """Reduce a surname or given name to its fixed-width code.

    Characters that are not vowels count as consonants, so anything
    outside the alphabet is passed through untouched.

    Args:
        text: Surname or given name, any case.
        width: Output width.
        filler: Padding character. Defaults to ``settings.name_filler``.
        vowels: Vowel subset of the reference alphabet.

    Returns:
        Exactly ``width`` upper-case characters.
    """
    if filler is None:
        filler = settings.name_filler
    upper = text.upper()

    code = [c for c in upper if c not in vowels][:width]
    if len(code) < width:
        code.extend([c for c in upper if c in vowels][: width - len(code)])
    code.extend(filler * (width - len(code)))
    return "".join(code)
