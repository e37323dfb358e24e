"""
Preprocessor that normalises line endings before tokenizing.

Windows checkouts produce CRLF sources; container markers and fences are
matched per line, and a stray "\r" would end up in demo payloads.
"""

_BOM = "\ufeff"


def normalize_line_endings(text: str, context: dict) -> str:
    """Convert CRLF/CR to LF and drop a leading byte order mark."""
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    return text.replace("\r\n", "\n").replace("\r", "\n")
