"""Post-processing of the ModernGov template page.

Processing steps:

- Converts all root-relative URLs in the page to absolute URLs.
- Empties the ``<main>`` element when the ``nocontent`` query flag is present.
- Returns the ``<header>`` with its scripts and stylesheets when the
  ``header`` query flag is present.
- Otherwise returns the ``<footer>`` with its trailing scripts when the
  ``footer`` query flag is present.

Usage::

    from moderngov.postprocess import PageFlags, postprocess_page

    flags = PageFlags.from_query({"header": ""})
    fragment = postprocess_page(html, "https://www.example.org", flags)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from moderngov import settings
from moderngov.dom import to_dom, to_html
from moderngov.extractors.regions import (
    empty_main_content,
    full_document,
    prepare_footer,
    prepare_header,
)
from moderngov.extractors.urlabs import absolutize

if TYPE_CHECKING:
    from collections.abc import Container

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageFlags:
    """Which transforms to apply on top of URL absolutizing.

    ``header`` wins over ``footer`` when both are set.
    """

    nocontent: bool = False
    header: bool = False
    footer: bool = False

    @classmethod
    def from_query(cls, query: Container[str]) -> PageFlags:
        """Build flags from query parameter *names*; values are ignored."""
        return cls(
            nocontent=settings.NOCONTENT_PARAM in query,
            header=settings.HEADER_PARAM in query,
            footer=settings.FOOTER_PARAM in query,
        )


def should_postprocess(
    route_name: str | None,
    is_html: bool,
    template_route: str | None = None,
) -> bool:
    """True only for HTML responses of the template page route."""
    expected = template_route or settings.TEMPLATE_ROUTE_NAME
    return is_html and route_name == expected


def postprocess_page(html: str, scheme_and_host: str, flags: PageFlags | None = None) -> str:
    """Absolutize URLs in *html*, then apply the region transform *flags* select.

    Returns either the full serialized document or a header/footer fragment.
    Header and footer fragments are ``""`` when the page has no such element.
    """
    flags = flags or PageFlags()
    soup = absolutize(to_dom(html), scheme_and_host)

    if flags.nocontent:
        soup = empty_main_content(soup)

    if flags.header:
        logger.debug("Extracting header region")
        return prepare_header(soup)
    if flags.footer:
        logger.debug("Extracting footer region")
        return prepare_footer(soup)
    return to_html(full_document(soup))
