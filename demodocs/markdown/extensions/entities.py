# demodocs/markdown/extensions/entities.py
"""
Restore characters that an upstream HTML sanitizer turned into numeric
character references.

Demo markup is often pasted from tooling that re-serialises HTML and writes
every non-ASCII character as a ``&#xHHHH;`` reference:

    <el-button>&#x4F60;&#x597D;</el-button>

The live demo slot must show the original characters:

    <el-button>你好</el-button>

Only references with exactly four hex digits are decoded; anything else is
left as it was written.
"""

import re
from urllib.parse import quote

_REFERENCE_RE = re.compile(r"&#x([0-9a-f]{4});", re.IGNORECASE)

# The reference after percent-encoding: "&#x4F60;" -> "%26%23x4F60%3B"
_ENCODED_REFERENCE_RE = re.compile(r"%26%23x([0-9a-f]{4})%3B", re.IGNORECASE)

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _decode_reference(match: re.Match) -> str:
    # Percent-encode first so "&", "#" and ";" are literal, then pull the
    # four hex digits back out of the encoded form.
    encoded = quote(match.group(0), safe="")
    hex_digits = _ENCODED_REFERENCE_RE.sub(r"\1", encoded)
    return chr(int(hex_digits, 16))


def _join_surrogates(text: str) -> str:
    """
    Combine decoded UTF-16 surrogate pairs into single characters.

    A surrogate without its partner cannot be encoded as UTF-8, so it goes
    back to being a ``&#xHHHH;`` reference.
    """
    if not _SURROGATE_RE.search(text):
        return text
    joined = text.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )
    return _SURROGATE_RE.sub(lambda match: f"&#x{ord(match.group(0)):04X};", joined)



def normalize_entities(text: str) -> str:
    """
    Replace every ``&#xHHHH;`` reference in ``text`` with its character.

    Decoding repeats until no reference is left, so a second call returns the
    text unchanged. Unpaired surrogates stay written as references.

    Args:
        text: HTML-ish text, typically the body of a demo container

    Returns:
        Text with four-digit hex references decoded
    """
    previous = None
    while previous != text:
        previous = text
        text = _REFERENCE_RE.sub(_decode_reference, text)
    return _join_surrogates(text)
