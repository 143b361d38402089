"""Page region extraction: header, footer and emptied main content.

Header output example::

    <div class="scripts-n-links">
      <link rel="stylesheet" href="https://example.net/theme.css">
      <script src="https://example.net/script0.js"></script>
    </div>

    <div class="pre-header-body-scripts">
      <script>alert('foo')</script>
    </div>

    <header>
      ...
    </header>

Footer output example::

    <footer>
      ...
    </footer>

    <div class="post-footer-body-scripts">
      <script src="https://example.net/script2.js"></script>
    </div>

Extracted scripts and stylesheets are *moved* into their wrapper, so the
rest of the document should be discarded afterwards.  Only the first
``<header>``, ``<footer>`` and visible ``<main>`` are ever processed.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from moderngov import settings
from moderngov.dom import create_wrapper, document_positions, is_ancestor, to_html

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Whole-document variants
# ---------------------------------------------------------------------------

def full_document(soup: BeautifulSoup) -> BeautifulSoup:
    return soup


def empty_main_content(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove every child of the first visible ``<main>``.

    A document must not have more than one ``<main>`` without the ``hidden``
    attribute.  When it does anyway, only the first one is emptied.
    """
    visible = [main for main in soup.find_all("main") if not main.has_attr("hidden")]
    if not visible:
        logger.debug("No visible <main> element; nothing to empty")
        return soup

    visible[0].clear()
    return soup


# ---------------------------------------------------------------------------
# Header and footer
# ---------------------------------------------------------------------------

def prepare_header(soup: BeautifulSoup) -> str:
    """Header markup preceded by head assets and pre-header body scripts."""
    header = soup.find("header")
    if header is None:
        logger.debug("No <header> element found")
        return ""
    header_html = to_html(header)

    parts = (
        extract_head_scripts_and_styles(soup),
        extract_pre_header_scripts(soup),
        header_html,
    )
    return settings.REGION_SEPARATOR.join(part for part in parts if part).strip()


def prepare_footer(soup: BeautifulSoup) -> str:
    """Footer markup followed by any body scripts that come after it."""
    footer = soup.find("footer")
    if footer is None:
        logger.debug("No <footer> element found")
        return ""
    footer_html = to_html(footer)

    parts = (footer_html, extract_post_footer_scripts(soup))
    return settings.REGION_SEPARATOR.join(part for part in parts if part).strip()


def extract_head_scripts_and_styles(soup: BeautifulSoup) -> str:
    return extract_markup(
        soup, head_scripts_and_styles(soup), settings.HEAD_ASSETS_WRAPPER_CLASS,
    )


def extract_pre_header_scripts(soup: BeautifulSoup) -> str:
    return extract_markup(
        soup, pre_header_scripts(soup), settings.PRE_HEADER_SCRIPTS_WRAPPER_CLASS,
    )


def extract_post_footer_scripts(soup: BeautifulSoup) -> str:
    return extract_markup(
        soup, post_footer_scripts(soup), settings.POST_FOOTER_SCRIPTS_WRAPPER_CLASS,
    )


def extract_markup(soup: BeautifulSoup, nodes: Iterable[Tag], wrapper_class: str = "") -> str:
    """Move *nodes* into a new wrapper ``<div>`` and return its markup.

    *nodes* must already be in document order.  Each node is detached from
    its parent with its subtree intact.  An empty selection yields ``""``
    rather than an empty wrapper.
    """
    nodes = list(nodes)
    if not nodes:
        return ""

    wrapper = create_wrapper(soup, wrapper_class)
    for node in nodes:
        wrapper.append(node)
    logger.debug("Moved %d elements into wrapper %r", len(nodes), wrapper_class)
    return to_html(wrapper)


# ---------------------------------------------------------------------------
# Node selection
# ---------------------------------------------------------------------------

def head_scripts_and_styles(soup: BeautifulSoup) -> list[Tag]:
    """``<script>`` and ``<link rel="stylesheet">`` children of ``<head>``."""
    head = soup.find("head")
    if head is None:
        return []
    return [
        child for child in head.find_all(["script", "link"], recursive=False)
        if child.name == "script" or child.get("rel") == "stylesheet"
    ]


def pre_header_scripts(soup: BeautifulSoup) -> list[Tag]:
    """Body scripts with a ``<header>`` somewhere after them.

    "After" follows the XPath ``following`` axis: later in document order
    and not inside the script itself.
    """
    return _body_scripts_relative_to(soup, "header", following=True)


def post_footer_scripts(soup: BeautifulSoup) -> list[Tag]:
    """Body scripts with a ``<footer>`` somewhere before them.

    "Before" follows the XPath ``preceding`` axis: earlier in document
    order and not an ancestor of the script.
    """
    return _body_scripts_relative_to(soup, "footer", following=False)


def _body_scripts_relative_to(soup: BeautifulSoup, landmark: str, *, following: bool) -> list[Tag]:
    body = soup.find("body")
    if body is None:
        return []
    landmarks = soup.find_all(landmark)
    if not landmarks:
        return []

    positions = document_positions(soup)
    selected = []
    for script in body.find_all("script"):
        here = positions[id(script)]
        for mark in landmarks:
            there = positions[id(mark)]
            if following and there > here and not is_ancestor(script, mark):
                selected.append(script)
                break
            if not following and there < here and not is_ancestor(mark, script):
                selected.append(script)
                break
    return selected
