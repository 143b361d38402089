"""Tests for the page post-processing orchestration."""

from __future__ import annotations

import pytest

from moderngov import settings
from moderngov.dom import to_dom
from moderngov.postprocess import PageFlags, postprocess_page, should_postprocess

HOST = "https://www.example.org"


class TestPageFlags:
    def test_defaults(self):
        assert PageFlags() == PageFlags(nocontent=False, header=False, footer=False)

    def test_presence_not_value(self):
        flags = PageFlags.from_query({"nocontent": "", "footer": "0"})
        assert flags == PageFlags(nocontent=True, header=False, footer=True)

    def test_unrelated_params_ignored(self):
        assert PageFlags.from_query({"page": "2", "q": "header"}) == PageFlags()


class TestShouldPostprocess:
    def test_template_route_html(self):
        assert should_postprocess(settings.TEMPLATE_ROUTE_NAME, is_html=True) is True

    def test_other_route(self):
        assert should_postprocess("node:view", is_html=True) is False

    def test_no_route(self):
        assert should_postprocess(None, is_html=True) is False

    def test_not_html(self):
        assert should_postprocess(settings.TEMPLATE_ROUTE_NAME, is_html=False) is False

    def test_custom_route(self):
        assert should_postprocess("council:template", True, template_route="council:template") is True
        assert should_postprocess(settings.TEMPLATE_ROUTE_NAME, True, "council:template") is False


class TestPostprocessPage:
    def test_full_document_absolutized(self, template_page_html):
        result = postprocess_page(template_page_html, HOST)
        assert result.startswith("<!DOCTYPE html>")
        assert 'href="https://www.example.org/themes/custom/favicon.ico"' in result
        assert 'action="https://www.example.org/search"' in result
        assert "{content}" in result

    def test_nocontent_empties_main(self, template_page_html):
        result = postprocess_page(template_page_html, HOST, PageFlags(nocontent=True))
        assert '<main id="main-content"></main>' in result
        assert "{content}" not in result
        assert "{breadcrumb}" in result

    def test_header_fragment(self, template_page_html):
        result = postprocess_page(template_page_html, HOST, PageFlags(header=True))
        assert result.startswith('<div class="scripts-n-links">')
        assert result.endswith("</header>")
        assert 'src="https://www.example.org/core/misc/drupal.js"' in result
        assert "<footer" not in result

    def test_footer_fragment(self, template_page_html):
        result = postprocess_page(template_page_html, HOST, PageFlags(footer=True))
        assert result.startswith('<footer class="site-footer">')
        assert 'href="https://www.example.org/accessibility"' in result
        assert 'src="https://www.example.org/themes/custom/js/app.js"' in result
        assert "<header" not in result

    def test_header_wins_over_footer(self, template_page_html):
        both = postprocess_page(template_page_html, HOST, PageFlags(header=True, footer=True))
        header_only = postprocess_page(template_page_html, HOST, PageFlags(header=True))
        assert both == header_only

    def test_header_missing(self):
        assert postprocess_page("<html><body><p>x</p></body></html>", HOST, PageFlags(header=True)) == ""

    def test_footer_missing(self):
        assert postprocess_page("<html><body><p>x</p></body></html>", HOST, PageFlags(footer=True)) == ""

    @pytest.mark.parametrize(
        "html",
        [
            "",
            "<div><p>unclosed",
            "<html><body></div></span><a href='/x'>x</body>",
            "<<<>>>",
            "plain text, no markup",
        ],
    )
    def test_malformed_input_never_raises(self, html):
        for flags in (PageFlags(), PageFlags(nocontent=True), PageFlags(header=True), PageFlags(footer=True)):
            assert isinstance(postprocess_page(html, HOST, flags), str)

    def test_recovered_markup_is_absolutized(self):
        result = postprocess_page("<div><a href='/x'>x", HOST)
        soup = to_dom(result)
        assert soup.find("a")["href"] == "https://www.example.org/x"
