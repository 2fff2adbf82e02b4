"""
String literal decoding for extracted call-site arguments.

Decoding happens in two steps:
1. cook_literal() turns the quoted source text of a JavaScript/TypeScript
   string literal into the value the compiler sees (\\n, \\x41, \\u{1F600} ...).
2. unescape_string() then resolves the fixed set of two-character escapes in
   UNESCAPE_MAP. Any other backslash sequence is kept as it is, so
   translators can write doubly escaped text like 'Line\\\\nBreak' in code.
"""
import re
import logging

from .constants import UNESCAPE_MAP

logger = logging.getLogger(__name__)

# Single-character escapes of the JavaScript grammar
_SIMPLE_ESCAPES = {
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
}

_ESCAPE_RE = re.compile(
    r"\\(?:"
    r"x(?P<hex>[0-9a-fA-F]{2})"
    r"|u\{(?P<code_point>[0-9a-fA-F]+)\}"
    r"|u(?P<unicode>[0-9a-fA-F]{4})"
    r"|(?P<octal>[0-3][0-7]{0,2}|[4-7][0-7]?)"
    r"|(?P<continuation>\r\n|[\n\r\u2028\u2029])"
    r"|(?P<char>.)"
    r")",
    re.DOTALL,
)

QUOTE_CHARS = ('"', "'")


def _replace_escape(match: re.Match) -> str:
    if match.group('hex'):
        return chr(int(match.group('hex'), 16))
    if match.group('code_point'):
        code_point = int(match.group('code_point'), 16)
        if code_point > 0x10FFFF:
            # Not a valid escape; keep the source text
            return match.group(0)
        return chr(code_point)
    if match.group('unicode'):
        return chr(int(match.group('unicode'), 16))
    if match.group('octal'):
        return chr(int(match.group('octal'), 8))
    if match.group('continuation') is not None:
        return ''
    char = match.group('char')
    return _SIMPLE_ESCAPES.get(char, char)


def literal_body(source_text: str) -> str:
    """Strip the surrounding quotes of a string literal's source text."""
    if len(source_text) >= 2 and source_text[0] in QUOTE_CHARS and source_text[-1] == source_text[0]:
        return source_text[1:-1]
    return source_text


def cook_literal(source_text: str) -> str:
    """
    Return the runtime value of a quoted JavaScript string literal.

    Args:
        source_text: Literal exactly as written in the source, quotes included

    Returns:
        The literal's value with all JavaScript escape sequences resolved.
    """
    value = _ESCAPE_RE.sub(_replace_escape, literal_body(source_text))
    # \uXXXX pairs may encode one astral character as two surrogates
    try:
        return value.encode('utf-16-le', 'surrogatepass').decode('utf-16-le')
    except UnicodeDecodeError:
        logger.debug(f"Lone surrogate kept in literal {source_text!r}")
        return value


def unescape_string(text: str) -> str:
    """
    Replace the two-character escapes of UNESCAPE_MAP with their meaning.
    Unknown sequences keep both the backslash and the following character.
    """
    result = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if ch == '\\' and i + 1 < length:
            replacement = UNESCAPE_MAP.get(text[i + 1])
            if replacement is not None:
                result.append(replacement)
                i += 2
                continue
        result.append(ch)
        i += 1
    return ''.join(result)


def decode_literal(source_text: str) -> str:
    """Cook a string literal, then resolve the extra two-character escapes."""
    return unescape_string(cook_literal(source_text))
