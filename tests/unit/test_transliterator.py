"""
Unit tests for the transliteration engine.
"""

import pytest

from finglish.transliterator import DIGRAPH_BASES, DIGRAPHS, SINGLE_LETTERS, convert


class TestConvert:
    """Tests for convert()."""

    def test_empty(self):
        """Empty input gives empty output."""
        assert convert("") == ""

    def test_salam(self):
        """No digraph fires when s is followed by a vowel."""
        assert convert("salam") == "سالام"

    def test_shoma(self):
        """sh is consumed as one glyph."""
        assert convert("shoma") == "شوما"

    def test_khoobi(self):
        """kh digraph followed by single letters."""
        assert convert("khoobi") == "خووبی"

    @pytest.mark.parametrize("digraph,glyph", [
        ("ch", "چ"),
        ("gh", "غ"),
        ("kh", "خ"),
        ("sh", "ش"),
    ])
    def test_digraph_alone(self, digraph, glyph):
        """A lone digraph yields exactly one glyph, with no leftover h."""
        assert convert(digraph) == glyph

    @pytest.mark.parametrize("letter,glyph", [
        ("c", "س"),
        ("g", "گ"),
        ("k", "ک"),
        ("s", "س"),
    ])
    def test_trailing_digraph_base(self, letter, glyph):
        """A digraph base letter at the end falls back to its single mapping."""
        assert convert(letter) == glyph
        assert convert("a" + letter) == "ا" + glyph

    def test_h_after_digraph_not_reprocessed(self):
        """Scanning resumes after the consumed h."""
        assert convert("shh") == "شه"
        assert convert("chkh") == "چخ"

    def test_lone_h(self):
        """h without a base letter maps to he."""
        assert convert("h") == "ه"
        assert convert("ah") == "اه"

    def test_u_maps_to_ye(self):
        """u maps to ye."""
        assert convert("u") == "ی"

    def test_passthrough(self):
        """Digits and punctuation are copied unchanged."""
        assert convert("123!") == "123!"

    def test_whitespace_preserved(self):
        """Spaces and newlines survive conversion."""
        assert convert("man\nto") == "مان\nتو"
        assert convert("salam khoobi") == "سالام خووبی"

    def test_uppercase_passthrough(self):
        """Rules only apply to lowercase letters."""
        assert convert("A") == "A"
        assert convert("Sh") == "Sه"
        assert convert("sH") == "سH"

    def test_persian_input_is_fixed_point(self):
        """Converting already-Farsi output changes nothing."""
        once = convert("salam, khoobi? 2 ta!")
        assert convert(once) == once

    def test_deterministic(self):
        """Same input always yields the same output."""
        assert convert("chetori") == convert("chetori")


class TestRuleTables:
    """Tests for the static rule tables."""

    def test_every_lowercase_letter_mapped(self):
        """All 26 lowercase letters have a single-letter rule."""
        assert set(SINGLE_LETTERS) == set("abcdefghijklmnopqrstuvwxyz")

    def test_digraph_bases(self):
        """Only c, g, k, s start a digraph."""
        assert DIGRAPH_BASES == frozenset("cgks")
        assert all(d.endswith("h") for d in DIGRAPHS)

    def test_tables_read_only(self):
        """Rule tables cannot be mutated."""
        with pytest.raises(TypeError):
            SINGLE_LETTERS["a"] = "x"
        with pytest.raises(TypeError):
            DIGRAPHS["th"] = "x"
