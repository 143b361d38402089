"""Root-relative URL to absolute URL rewriting for whole HTML documents.

Every URL-bearing attribute is examined, in ``<head>`` as well as
``<body>``.  Only root-relative values (``/path``, but not ``//host/path``)
are rewritten; absolute, protocol-relative and relative URLs are left alone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from moderngov import settings

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_SRCSET = "srcset"


def is_root_relative(value: str | None) -> bool:
    """Return True if *value* starts with a single ``/``.

    A lone ``/`` counts as root-relative.  Empty values never do.
    """
    return bool(value) and value[0] == "/" and value[1:2] != "/"


def absolutize_srcset(srcset: str, scheme_and_host: str) -> str:
    """Rewrite each root-relative image candidate in a ``srcset`` value.

    Candidates are stripped and rejoined with ``", "`` whatever the original
    separators looked like.  Descriptors (``2x``, ``480w``) are kept.
    """
    candidates = [candidate.strip() for candidate in srcset.split(",")]
    return ", ".join(
        scheme_and_host + candidate if is_root_relative(candidate) else candidate
        for candidate in candidates
    )


def absolutize(soup: BeautifulSoup, scheme_and_host: str) -> BeautifulSoup:
    """Convert all root-relative URLs in *soup* to absolute URLs in place.

    Args:
        soup:            Parsed document.  Mutated and returned.
        scheme_and_host: Scheme, host and optional port, e.g.
                         ``https://example.org``.  Prepended verbatim.

    Returns:
        The same document object.
    """
    plain_attrs = [attr for attr in settings.URI_ATTRIBUTES if attr != _SRCSET]
    rewritten = 0

    for tag in soup.find_all(True):
        for attr in plain_attrs:
            value = tag.get(attr)
            if is_root_relative(value):
                tag[attr] = scheme_and_host + value
                rewritten += 1

        srcset = tag.get(_SRCSET)
        if srcset is not None:
            tag[_SRCSET] = absolutize_srcset(srcset, scheme_and_host)

    logger.debug("Absolutized %d root-relative URLs against %s", rewritten, scheme_and_host)
    return soup
