"""Characters the matchers treat specially.

ASCII_WHITESPACE is the separator set for alt-text words; alt_text.py builds
its splitting pattern from it, and the word invariants in the test suite
check results against it. IMAGE_MARKER is what link mode looks for in front
of a ``[``.
"""

# Vertical tab (\v) is not a word separator.
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\f\r")

IMAGE_MARKER = "!"
