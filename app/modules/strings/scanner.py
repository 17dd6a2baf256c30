"""Comment recovery from the raw text of a catalog.

The structured decoder drops comments, so the catalog text is re-read and
scanned for ``/* ... */`` blocks together with the quoted key that follows
each one. The rest of every record is skipped: the decoder owns the values.

Grammar handled by the scanner::

    record   ::= comment key "=" value ";"
    comment  ::= "/*" text "*/"
    key      ::= quoted
    value    ::= quoted
    quoted   ::= '"' (char | "\\" char)* '"'

Anything that does not fit is skipped until the next ``/*``. The scanner
never raises; malformed input only means fewer comments are found.
"""

from typing import Dict, Optional

START_COMMENT = "/*"
END_COMMENT = "*/"
QUOTE = '"'
ESCAPE = "\\"

# Only these escapes are decoded; any other escaped character is kept as is
# (a backslash-u escape such as ``\u00e9`` becomes ``u00e9``).
_ESCAPES = {
    "n": "\n",
    "t": "\t",
    '"': '"',
}


class CommentScanner:
    """Left-to-right cursor over catalog text.

    Outside quoted strings, whitespace and newlines before a token are
    skipped implicitly. Inside quoted strings every character counts.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def is_at_end(self) -> bool:
        """Check whether the whole text has been consumed."""
        return self.pos >= len(self.text)

    def skip_whitespace(self) -> None:
        """Advance past whitespace and newlines."""
        while not self.is_at_end() and self.text[self.pos].isspace():
            self.pos += 1

    def scan_string(self, literal: str) -> bool:
        """Consume ``literal`` if it comes next, after optional whitespace."""
        self.skip_whitespace()
        if self.text.startswith(literal, self.pos):
            self.pos += len(literal)
            return True
        return False

    def scan_up_to(self, literal: str) -> Optional[str]:
        """Consume text up to (not including) ``literal``.

        Leading whitespace is skipped first. When ``literal`` does not occur
        the rest of the text is consumed.

        Returns:
            The consumed text, or None if nothing was consumed.
        """
        self.skip_whitespace()
        start = self.pos
        end = self.text.find(literal, start)
        if end == -1:
            end = len(self.text)
        self.pos = end
        if end == start:
            return None
        return self.text[start:end]

    def scan_comment(self) -> Optional[str]:
        """Scan the next ``/* ... */`` block.

        Returns:
            The trimmed comment text, or None if there is no further comment,
            the block is empty, or it is never closed. An unclosed block
            consumes the rest of the text.
        """
        self.scan_up_to(START_COMMENT)
        if not self.scan_string(START_COMMENT):
            return None

        body_start = self.pos
        end = self.text.find(END_COMMENT, body_start)
        if end == -1:
            self.pos = len(self.text)
            return None

        self.pos = end + len(END_COMMENT)
        comment = self.text[body_start:end].strip()
        return comment or None

    def scan_quoted_string(self) -> Optional[str]:
        """Scan a double-quoted string, decoding its escapes.

        Returns:
            The unescaped string, or None if no string starts here or it is
            never closed. An unclosed string consumes the rest of the text.
        """
        if not self.scan_string(QUOTE):
            return None

        chars = []
        while not self.is_at_end():
            character = self.text[self.pos]
            self.pos += 1
            if character == QUOTE:
                return "".join(chars)
            if character == ESCAPE:
                escaped = self._scan_escaped_character()
                if escaped is None:
                    break
                chars.append(escaped)
            else:
                chars.append(character)
        return None

    def _scan_escaped_character(self) -> Optional[str]:
        if self.is_at_end():
            return None
        character = self.text[self.pos]
        self.pos += 1
        return _ESCAPES.get(character, character)

    def skip_value(self) -> None:
        """Skip the value of the current record."""
        self.scan_up_to(QUOTE)
        self.scan_quoted_string()

    def scan(self) -> Dict[str, str]:
        """Scan the whole text.

        Returns:
            Mapping of key to the comment preceding it. A key scanned twice
            keeps its last comment.
        """
        comments: Dict[str, str] = {}
        while not self.is_at_end():
            comment = self.scan_comment()
            if comment is None:
                continue

            key = self.scan_quoted_string()
            if key is None:
                continue

            comments[key] = comment
            self.skip_value()
        return comments


def scan_comments(text: str) -> Dict[str, str]:
    """Return the comments of a catalog text, keyed by the key they precede."""
    return CommentScanner(text).scan()
