"""Document transforms: URL absolutizing and page region extraction."""

from .regions import (
    empty_main_content,
    extract_markup,
    full_document,
    prepare_footer,
    prepare_header,
)
from .urlabs import absolutize, absolutize_srcset, is_root_relative

__all__ = [
    "absolutize",
    "absolutize_srcset",
    "empty_main_content",
    "extract_markup",
    "full_document",
    "is_root_relative",
    "prepare_footer",
    "prepare_header",
]
