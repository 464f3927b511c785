"""Fixed limits and I/O parameters for file validation and counting."""

from __future__ import annotations

MAX_FILE_SIZE: int = 100 * 1024 * 1024
READ_BUFFER_SIZE: int = 64 * 1024

TEXT_ENCODING: str = "utf-8"
DECODE_ERRORS: str = "replace"

# The 25 Unicode White_Space code points. Bare str.strip() also removes
# U+001C..U+001F, which are not White_Space.
UNICODE_WHITESPACE: str = (
    "\u0009\u000a\u000b\u000c\u000d\u0020\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
