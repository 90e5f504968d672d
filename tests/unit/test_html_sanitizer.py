"""
Unit tests for the note HTML sanitizer.
"""

from focus_hub.utils.html_sanitizer import sanitize_html


def test_keeps_formatting():
    html = "<p>Hello <strong>world</strong> <em>again</em></p>"
    assert sanitize_html(html) == html


def test_drops_script_and_its_content():
    assert sanitize_html("<p>ok</p><script>alert(1)</script>") == "<p>ok</p>"


def test_drops_style_element_content():
    assert sanitize_html("<style>p{color:red}</style><p>x</p>") == "<p>x</p>"


def test_unknown_tags_removed_text_kept():
    assert sanitize_html("<blink>hey</blink>") == "hey"


def test_event_handlers_removed():
    assert sanitize_html('<p onclick="evil()">x</p>') == "<p>x</p>"


def test_javascript_href_removed():
    assert sanitize_html('<a href="javascript:alert(1)">x</a>') == "<a>x</a>"
    assert sanitize_html('<a href="java\tscript:alert(1)">x</a>') == "<a>x</a>"


def test_allowed_link_and_image_attributes():
    html = '<a href="https://example.com" target="_blank" rel="x">x</a><img src="/a.png" alt="a" width="3">'
    assert sanitize_html(html) == (
        '<a href="https://example.com" target="_blank">x</a><img src="/a.png" alt="a">'
    )


def test_style_attribute_allowed_on_any_tag():
    assert sanitize_html('<span style="color: red">r</span>') == '<span style="color: red">r</span>'


def test_unclosed_tags_are_closed():
    assert sanitize_html("<ul><li>one") == "<ul><li>one</li></ul>"


def test_text_is_escaped():
    assert sanitize_html("1 < 2 & 3") == "1 &lt; 2 &amp; 3"


def test_empty_input():
    assert sanitize_html("") == ""
    assert sanitize_html(None) == ""
