"""Default settings for ModernGov template page post-processing.

Projects embedding the Django middleware can override the template route
with the ``MODERNGOV_TEMPLATE_ROUTE_NAME`` Django setting.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Routing
# ---------------------------------------------------------------------------
# Resolved view name of the ModernGov template page.  Responses for any other
# route pass through untouched.
TEMPLATE_ROUTE_NAME = "localgov_moderngov:modern_gov"

# ---------------------------------------------------------------------------
# Query flags
# ---------------------------------------------------------------------------
NOCONTENT_PARAM = "nocontent"
HEADER_PARAM = "header"
FOOTER_PARAM = "footer"

# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
HTML_PARSER = "lxml"

# Attributes that may carry a URL.
URI_ATTRIBUTES: tuple[str, ...] = (
    "href",
    "poster",
    "src",
    "cite",
    "data",
    "action",
    "formaction",
    "srcset",
    "about",
)

# ---------------------------------------------------------------------------
# Region wrappers
# ---------------------------------------------------------------------------
HEAD_ASSETS_WRAPPER_CLASS = "scripts-n-links"
PRE_HEADER_SCRIPTS_WRAPPER_CLASS = "pre-header-body-scripts"
POST_FOOTER_SCRIPTS_WRAPPER_CLASS = "post-footer-body-scripts"

# Blank line between the parts of an extracted region.
REGION_SEPARATOR = "\n\n"
