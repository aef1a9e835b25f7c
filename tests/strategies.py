"""Hypothesis strategies for Fission property-based testing.

Usage:
    from hypothesis import given
    from tests.strategies import source_text, astral_text

    @given(text=source_text)
    def test_roundtrip(text):
        ...
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

__all__ = [
    "astral_text",
    "counts",
    "line_text",
    "prefix_split",
    "source_text",
]

# Any text without surrogate code points (hypothesis excludes Cs by default).
source_text = st.text(max_size=200)

# Text that always contains characters outside the BMP.
astral_text = st.text(
    alphabet=st.characters(min_codepoint=0x10000, max_codepoint=0x1FFFF),
    min_size=1,
    max_size=20,
)

# Lookahead counts, including zero and negative values.
counts = st.integers(min_value=-5, max_value=300)

# Single line content: no LF, no CR.
line_text = st.text(
    alphabet=st.characters(exclude_characters="\r\n"),
    max_size=50,
)


@composite
def prefix_split(draw: st.DrawFn) -> tuple[str, str]:
    """Draw text split into (prefix, remainder) at a random code point."""
    text = draw(source_text)
    cut = draw(st.integers(min_value=0, max_value=len(text)))
    event(f"prefix_len={min(cut, 10)}")
    return text[:cut], text[cut:]
