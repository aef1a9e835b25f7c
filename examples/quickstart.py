"""Quickstart example for fission.

This example demonstrates reading text through a CharSource and writing a
tiny hand-written parser on top of it.

Note: Examples catch FissionError only where a failure is part of the
demonstration. In production, handle FileReadError around every file load.
"""

import tempfile
from pathlib import Path

from fission import (
    END_OF_SOURCE,
    FileReadError,
    InvalidStateError,
    chars,
    is_digit,
    is_letter,
    read_lines,
    read_string,
)

# Example 1: Reading characters
print("=" * 50)
print("Example 1: Reading Characters")
print("=" * 50)

source = chars("abc")
while source.has_next():
    print(source.read_char(), end=" ")
print()
# Output: a b c

print(source.read())
# Output: -1

# Example 2: Lookahead
print("\n" + "=" * 50)
print("Example 2: Lookahead")
print("=" * 50)

source = chars("->x")
print(source.peek_ahead(2) == (ord("-"), ord(">")))
# Output: True
print(source.position)
# Output: 0

# Example 3: Tokens with helpers
print("\n" + "=" * 50)
print("Example 3: Reading Tokens")
print("=" * 50)

source = chars("version = 42")
key = source.read_while(is_letter)
source.skip_whitespace()
source.consume("=")
source.skip_whitespace()
value = int(source.read_while(is_digit))
print(f"{key!r} -> {value}")
# Output: 'version' -> 42

# Example 4: Backtracking
print("\n" + "=" * 50)
print("Example 4: Backtracking with mark/reset")
print("=" * 50)

source = chars("nullable")
source.mark()
if source.consume("null") and is_letter(source.peek()):
    # Not the keyword, just an identifier starting with "null"
    source.reset()
    print("identifier:", source.read_while(is_letter))
else:
    source.commit()
    print("keyword: null")
# Output: identifier: nullable

try:
    chars("x").reset()
except InvalidStateError as e:
    print(e.diagnostic.format_error() if e.diagnostic else e)
# Output:
# error[NO_MARK_SET]: No mark set
#   --> position 0
#   = help: Call mark() before reset()

# Example 5: Files
print("\n" + "=" * 50)
print("Example 5: Reading Files")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    path = Path(tmp) / "settings.conf"
    path.write_text("# settings\nname = demo\r\nport = 8080\n", encoding="utf-8")

    print(read_lines(path))
    # Output: ['# settings', 'name = demo', 'port = 8080']

    print(len(read_string(path)))
    # Output: 36

    settings = {}
    with chars(path) as file_source:
        while file_source.has_next():
            if file_source.consume("#"):
                file_source.read_line()
                continue
            name = file_source.read_while(is_letter)
            file_source.skip_whitespace()
            file_source.consume("=")
            file_source.skip_whitespace()
            settings[name] = file_source.read_line()
    print(settings)
    # Output: {'name': 'demo', 'port': '8080'}

    print(file_source.read() == END_OF_SOURCE)
    # Output: True

    try:
        read_string(Path(tmp) / "missing.conf")
    except FileReadError as e:
        print(type(e).__name__)
    # Output: SourceNotFoundError
