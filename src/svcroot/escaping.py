"""Percent-escape helpers for escaped URI paths.

The escaped path is the wire form; routing works on the unescaped form.
These helpers only search and decode. Nothing here re-escapes, because
decoding loses hex-digit case and unnecessary escapes.
"""

import re
from urllib.parse import unquote_to_bytes

# "/" as a percent-escape
ESCAPED_SLASH = "%2F"

_ESCAPED_SLASH_RE = re.compile(re.escape(ESCAPED_SLASH), re.IGNORECASE)
_ESCAPE_RUN_RE = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def last_slash_index(text: str, end: int) -> int:
    """Index of the rightmost ``/`` in ``text[:end]``, or -1."""
    return text.rfind("/", 0, end)


def last_escaped_slash_index(text: str, end: int) -> int:
    """Index of the rightmost ``%2F`` (any case) lying wholly in ``text[:end]``, or -1."""
    index = -1
    for match in _ESCAPED_SLASH_RE.finditer(text, 0, max(end, 0)):
        index = match.start()
    return index


def _decode_escape_run(match: re.Match[str]) -> str:
    run = match.group()
    data = unquote_to_bytes(run)
    chars: list[str] = []
    i = 0
    while i < len(data):
        for size in range(1, 5):
            try:
                chars.append(data[i : i + size].decode("utf-8"))
            except UnicodeDecodeError:
                continue
            i += size
            break
        else:
            # Not valid UTF-8: keep this byte's escape exactly as written.
            chars.append(run[3 * i : 3 * i + 3])
            i += 1
    return "".join(chars)


def unescape_data_string(text: str) -> str:
    """Percent-decode *text* as UTF-8.

    ``+`` stays a plus sign and no Unicode normalization is applied.
    Escapes that do not form valid UTF-8 are left as written, so
    ``"a%E8"`` decodes to ``"a%E8"`` rather than a replacement character.
    """
    return _ESCAPE_RUN_RE.sub(_decode_escape_run, text)


def ends_with_escaped_slash(text: str) -> bool:
    return _ESCAPED_SLASH_RE.fullmatch(text[-len(ESCAPED_SLASH) :]) is not None


def strip_escaped_slash(text: str) -> str:
    """Remove one trailing ``%2F`` token, if present."""
    if ends_with_escaped_slash(text):
        return text[: -len(ESCAPED_SLASH)]
    return text
