"""
Allowlist HTML sanitizer for rich-text note content.

Only known formatting tags survive. Links keep ``href``/``name``/``target``,
images keep ``src``/``alt``, and any tag may keep ``style``. URLs with a
scheme other than http(s), mailto or a relative path are dropped, as is the
text inside ``script`` and ``style`` elements.
"""

import html
import re
from html.parser import HTMLParser

ALLOWED_TAGS = frozenset({
    "address", "article", "aside", "footer", "header",
    "h1", "h2", "h3", "h4", "h5", "h6", "hgroup",
    "main", "nav", "section",
    "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure",
    "hr", "li", "ol", "p", "pre", "ul",
    "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn",
    "em", "i", "kbd", "mark", "q", "rb", "rp", "rt", "rtc", "ruby", "s",
    "samp", "small", "span", "strong", "sub", "sup", "time", "u", "var", "wbr",
    "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th",
    "thead", "tr",
    "img",
})

ALLOWED_ATTRIBUTES = {
    "a": frozenset({"href", "name", "target"}),
    "img": frozenset({"src", "alt"}),
    "*": frozenset({"style"}),
}

VOID_TAGS = frozenset({"br", "col", "hr", "img", "wbr"})
DROP_CONTENT_TAGS = frozenset({"script", "style", "textarea", "noscript", "iframe", "object"})
URL_ATTRIBUTES = frozenset({"href", "src"})

_SAFE_URL = re.compile(r"^(https?:|mailto:|/|#|\.{0,2}/|[^:/?#]*$)", re.IGNORECASE)
_UNSAFE_STYLE = re.compile(r"expression\s*\(|url\s*\(|javascript:", re.IGNORECASE)


def _is_safe_url(value: str) -> bool:
    # Browsers ignore embedded whitespace/control characters in schemes.
    compact = re.sub(r"[\x00-\x20]+", "", value)
    return bool(_SAFE_URL.match(compact))


class _NoteHTMLSanitizer(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self._parts: list[str] = []
        self._open: list[str] = []
        self._skip_depth = 0

    def _clean_attrs(self, tag: str, attrs) -> str:
        allowed = ALLOWED_ATTRIBUTES.get(tag, frozenset()) | ALLOWED_ATTRIBUTES["*"]
        pieces = []
        for name, value in attrs:
            name = name.lower()
            value = (value or "").strip()
            if name not in allowed:
                continue
            if name in URL_ATTRIBUTES and not _is_safe_url(value):
                continue
            if name == "style" and _UNSAFE_STYLE.search(value):
                continue
            pieces.append(f'{name}="{html.escape(value, quote=True)}"')
        return f" {' '.join(pieces)}" if pieces else ""

    def handle_starttag(self, tag, attrs):
        tag = tag.lower()
        if tag in DROP_CONTENT_TAGS:
            self._skip_depth += 1
            return
        if self._skip_depth or tag not in ALLOWED_TAGS:
            return
        self._parts.append(f"<{tag}{self._clean_attrs(tag, attrs)}>")
        if tag not in VOID_TAGS:
            self._open.append(tag)

    def handle_endtag(self, tag):
        tag = tag.lower()
        if tag in DROP_CONTENT_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
            return
        if self._skip_depth or tag not in ALLOWED_TAGS or tag in VOID_TAGS:
            return
        if tag not in self._open:
            return
        # Close anything left open inside this element.
        while self._open:
            current = self._open.pop()
            self._parts.append(f"</{current}>")
            if current == tag:
                break

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)
        if tag.lower() not in VOID_TAGS:
            self.handle_endtag(tag)

    def handle_data(self, data):
        if data and not self._skip_depth:
            self._parts.append(html.escape(data, quote=False))

    def get_html(self) -> str:
        while self._open:
            self._parts.append(f"</{self._open.pop()}>")
        return "".join(self._parts).strip()


def sanitize_html(raw_html: str) -> str:
    """Return ``raw_html`` reduced to the allowed tags and attributes."""
    sanitizer = _NoteHTMLSanitizer()
    sanitizer.feed(raw_html or "")
    sanitizer.close()
    return sanitizer.get_html()
