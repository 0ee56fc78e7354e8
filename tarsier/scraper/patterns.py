"""Tag-matching rules and the terminal markup vocabulary.

These are regular expressions over a flat tag stream, not an HTML parser:
paragraphs are not nesting-aware (the first ``</p>`` closes a block) and
every match is the shortest one possible.
"""

from __future__ import annotations

import re

_FLAGS = re.IGNORECASE | re.DOTALL

TITLE_RULE = re.compile(r"<title>(.*?)</title>", _FLAGS)

PARAGRAPH_RULE = re.compile(r"(<p>.*?</p>)", _FLAGS)

# Every ANCHOR_FULL_RULE match is also an ANCHOR_OPEN_RULE match, so the full
# rule must always be applied first.
ANCHOR_OPEN_RULE = re.compile(r'<a\s[^>]*?href="([^"]+)"[^>]*>', _FLAGS)

ANCHOR_FULL_RULE = re.compile(r'<a\s[^>]*?href="([^"]+)"[^>]*>(.*?)</a>', _FLAGS)

# ---------------------------------------------------------------------------
# Terminal markup vocabulary
# ---------------------------------------------------------------------------

RESET_TOKEN = "</>"
LINK_TOKEN = "<blue>"
TITLE_TOKEN = "<cyan>"

INLINE_TAG_TOKENS = {
    "em": "<red>",
    "strong": "<bold>",
    "b": "<bold>",
    "code": "<green>",
}

INLINE_TAG_RULE = re.compile(
    r"<(/?)(%s)>" % "|".join(INLINE_TAG_TOKENS), re.IGNORECASE
)

PARAGRAPH_TAG_RULE = re.compile(r"</?p>", re.IGNORECASE)
