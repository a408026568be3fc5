"""Locate the per-film blocks on a listing page."""

import logging
from collections.abc import Sequence

from cartelera.scrapers.document import HtmlNode

logger = logging.getLogger(__name__)

# One "movie card" each, most specific layout first
CONTAINER_SELECTORS: tuple[str, ...] = (
    ".col-12.col-md-6.col-lg-4.float-left",
    ".col-12.col-sm-6.col-lg-4.float-left",
    ".col-12.col-md-6.col-xl-3.float-left",
    ".col-12.col-lg-4.float-left",
    ".cartelera-card",
    ".movie-card",
)

# Bold uppercase paragraph holding the film title
TITLE_SELECTOR = "p.font-weight-bold.text-uppercase.text-decoration-none.text-black"

# Columns checked for a title marker when the layout drifts
FALLBACK_COLUMN_SELECTOR = "div.col-12"


def locate_containers(
    tree: HtmlNode,
    selectors: Sequence[str] = CONTAINER_SELECTORS,
    title_selector: str = TITLE_SELECTOR,
    fallback_selector: str = FALLBACK_COLUMN_SELECTOR,
) -> list[HtmlNode]:
    """
    Find candidate movie blocks in a parsed listing page.

    Every selector pattern is applied in turn; a column matched by more than
    one pattern is only kept once. Columns that match no pattern but contain
    the title marker are added as well.

    Args:
        tree: Parsed listing page
        selectors: Card selector patterns, most specific first
        title_selector: Pattern of the title marker used by the fallback scan
        fallback_selector: Pattern of the block-level nodes the fallback scans

    Returns:
        Candidate nodes, de-duplicated by node identity
    """
    candidates: dict[int, HtmlNode] = {}

    for selector in selectors:
        matches = tree.select_all(selector)
        logger.debug(f"Selector {selector!r} matched {len(matches)} nodes")
        for node in matches:
            candidates.setdefault(node.identity, node)

    fallback_added = 0
    for column in tree.select_all(fallback_selector):
        if column.identity in candidates:
            continue
        if column.first_match(title_selector) is not None:
            candidates[column.identity] = column
            fallback_added += 1

    if fallback_added:
        logger.debug(f"Fallback scan added {fallback_added} columns with a title marker")

    return list(candidates.values())
