"""HTML string <-> document helpers.

Documents are :class:`bs4.BeautifulSoup` trees built with the lxml HTML
parser.  Parsing is lenient: lxml recovers from broken markup on its own and
any warning bs4 raises about the input is discarded.
"""

from __future__ import annotations

import warnings

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from moderngov import settings


class _SourceOrderFormatter(HTMLFormatter):
    """Minimal escaping, no "/>" on void elements, attributes in source order."""

    def attributes(self, tag: Tag) -> list[tuple[str, str]]:
        return list(tag.attrs.items())


_FORMATTER = _SourceOrderFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


def to_dom(html: str) -> BeautifulSoup:
    """Parse *html* into a document, never failing on malformed markup.

    Attribute values are kept as plain strings so that ``class`` and ``rel``
    survive a round trip exactly as written.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        return BeautifulSoup(
            html,
            settings.HTML_PARSER,
            multi_valued_attributes=None,
        )


def to_html(node: BeautifulSoup | Tag) -> str:
    """Serialize a whole document or a single element."""
    return node.decode(formatter=_FORMATTER)


def create_wrapper(soup: BeautifulSoup, class_name: str = "") -> Tag:
    """Return a new, detached ``<div>`` carrying *class_name* if given."""
    wrapper = soup.new_tag("div")
    if class_name:
        wrapper["class"] = class_name
    return wrapper


def document_positions(soup: BeautifulSoup) -> dict[int, int]:
    """Map ``id(element)`` to its index in document order."""
    return {id(tag): index for index, tag in enumerate(soup.find_all(True))}


def is_ancestor(candidate: Tag, node: Tag) -> bool:
    """True when *candidate* is one of *node*'s ancestors."""
    return any(parent is candidate for parent in node.parents)

