"""
Finglish -> Farsi transliteration engine.

Single left-to-right scan. At each position a digraph (base letter + "h")
is tried before the single-letter rule; anything without a rule is copied
through unchanged. Only lowercase Latin letters are mapped.
"""

from types import MappingProxyType

SINGLE_LETTERS = MappingProxyType({
    "a": "ا",
    "b": "ب",
    "c": "س",
    "d": "د",
    "e": "ع",
    "f": "ف",
    "g": "گ",
    "h": "ه",
    "i": "ی",
    "j": "ج",
    "k": "ک",
    "l": "ل",
    "m": "م",
    "n": "ن",
    "o": "و",
    "p": "پ",
    "q": "ک",
    "r": "ر",
    "s": "س",
    "t": "ت",
    "u": "ی",
    "v": "و",
    "w": "و",
    "x": "خ",
    "y": "ی",
    "z": "ز",
})

DIGRAPHS = MappingProxyType({
    "ch": "چ",
    "gh": "غ",
    "kh": "خ",
    "sh": "ش",
})

DIGRAPH_BASES = frozenset(d[0] for d in DIGRAPHS)


def convert(text: str) -> str:
    """Transliterate Finglish text into Farsi script. Never raises."""
    out = []
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c in DIGRAPH_BASES and i + 1 < n:
            glyph = DIGRAPHS.get(text[i:i + 2])
            if glyph is not None:
                out.append(glyph)
                i += 2
                continue
        out.append(SINGLE_LETTERS.get(c, c))
        i += 1
    return "".join(out)
