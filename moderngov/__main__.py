"""CLI entry point: python -m moderngov FILE --base-url URL [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from urllib.parse import urlparse

from moderngov.postprocess import PageFlags, postprocess_page

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moderngov",
        description=(
            "Post-process a rendered ModernGov template page.\n"
            "Makes root-relative URLs absolute and optionally extracts the\n"
            "header or footer region, or empties the main content."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("file", metavar="FILE",
                        help="HTML file to process, or '-' to read stdin")
    parser.add_argument("--base-url", required=True, metavar="URL",
                        help="Scheme and host prepended to root-relative URLs "
                             "(e.g. https://www.example.org)")
    parser.add_argument("--nocontent", action="store_true", default=False,
                        help="Empty the first visible <main> element")
    region = parser.add_mutually_exclusive_group()
    region.add_argument("--header", action="store_true", default=False,
                        help="Output the header region with its scripts and stylesheets")
    region.add_argument("--footer", action="store_true", default=False,
                        help="Output the footer region with its trailing scripts")
    parser.add_argument("--out", default=None, metavar="FILE",
                        help="Write the result here instead of stdout")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _validate_base_url(base_url: str) -> str | None:
    """Return an error message if *base_url* is not scheme://host, else None."""
    parsed = urlparse(base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return f"--base-url must look like https://host[:port], got {base_url!r}"
    if parsed.path.strip("/") or parsed.query or parsed.fragment:
        return f"--base-url must not carry a path, query or fragment, got {base_url!r}"
    return None


def _read_input(name: str) -> str:
    if name == "-":
        return sys.stdin.read()
    return Path(name).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    url_err = _validate_base_url(args.base_url)
    if url_err:
        print(f"ERROR: {url_err}", file=sys.stderr)
        return 1

    try:
        html = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"ERROR: Could not read {args.file}: {exc}", file=sys.stderr)
        return 1

    flags = PageFlags(nocontent=args.nocontent, header=args.header, footer=args.footer)
    result = postprocess_page(html, args.base_url.rstrip("/"), flags)
    logger.info("Processed %s (%s): %d characters out", args.file, flags, len(result))

    if args.out:
        Path(args.out).write_text(result, encoding="utf-8")
    else:
        sys.stdout.write(result)
        if result and not result.endswith("\n"):
            sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
