"""DKI Template Parser — token detection and extraction for headline templates.

Invariants:
    - Keyword tokens are exactly {KW}, {kw}, {Kw} (case-sensitive, no other casings)
    - Only the FIRST keyword token and the FIRST {DEFAULT:...} token are recognized
    - {DEFAULT:...} literal is captured non-greedily up to the first '}' and is non-empty
    - Total: every str is a valid template, nothing here raises

Design Decisions:
    - Named predicates/extractors over inline regex: the renderer reads as stage calls
    - Replacements go through a function, never a replacement string: keywords
      containing backslashes or group refs are inserted literally
"""

import re
from dataclasses import dataclass

from adcopy.core.domain_types import KeywordFormat


_KEYWORD_TOKEN = re.compile(r"\{(KW|kw|Kw)\}")
_DEFAULT_TOKEN = re.compile(r"\{DEFAULT:([^}]+)\}")


@dataclass(frozen=True)
class ParsedTemplate:
    """Template plus the facts the renderer needs. Derived once per render."""
    template: str
    has_keyword_token: bool
    default_fallback: str | None = None


def parse_template(template: str) -> ParsedTemplate:
    return ParsedTemplate(
        template=template,
        has_keyword_token=has_keyword_token(template),
        default_fallback=extract_default(template),
    )


def has_keyword_token(template: str) -> bool:
    return _KEYWORD_TOKEN.search(template) is not None


def detect_keyword_format(template: str) -> KeywordFormat:
    """Format of the first keyword token. KW when there is none."""
    match = _KEYWORD_TOKEN.search(template)
    if match is None:
        return KeywordFormat.TITLE
    return KeywordFormat(match.group(1))


def extract_default(template: str) -> str | None:
    match = _DEFAULT_TOKEN.search(template)
    return match.group(1) if match else None


def replace_keyword_token(template: str, replacement: str) -> str:
    """Replace the first keyword token only. Later tokens stay literal."""
    return _KEYWORD_TOKEN.sub(lambda _m: replacement, template, count=1)


def replace_default_token(text: str, replacement: str) -> str:
    return _DEFAULT_TOKEN.sub(lambda _m: replacement, text, count=1)


def strip_default_token(text: str) -> str:
    return replace_default_token(text, "")
