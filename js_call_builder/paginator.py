"""Render pagination links from a request with a page-number parameter."""

import html
import logging
import math
from dataclasses import dataclass

from js_call_builder.request import Request

logger = logging.getLogger(__name__)

PREVIOUS_TEXT = "&laquo;"
NEXT_TEXT = "&raquo;"


@dataclass
class PageLink:
    """A link to one page of results."""

    number: int
    text: str
    call: str
    is_current: bool = False


def paginate(
    request: Request,
    current_page: int,
    total_items: int,
    items_per_page: int,
    max_pages: int = 10,
) -> list[PageLink]:
    """Build the links for a paginated list.

    Each link calls the request with its page number in place of the
    page-number parameter. The request is left set to the current page.

    Args:
        request: Request with a page-number parameter
        current_page: The page being displayed (clamped to the valid range)
        total_items: Total number of items in the list
        items_per_page: Number of items on a page
        max_pages: Maximum number of numbered links

    Returns:
        Previous link, numbered links and next link. Empty when everything
        fits on one page.

    Raises:
        ValueError: If the request has no page-number parameter, or
            items_per_page or max_pages is less than 1
    """
    if not request.has_page_number():
        raise ValueError(f"Request {request.name} has no page-number parameter")
    if items_per_page < 1:
        raise ValueError(f"items_per_page must be at least 1, got {items_per_page}")
    if max_pages < 1:
        raise ValueError(f"max_pages must be at least 1, got {max_pages}")

    page_count = math.ceil(total_items / items_per_page) if total_items > 0 else 0
    if page_count <= 1:
        logger.info(f"{total_items} items fit on one page, no links for {request.name}")
        return []

    current_page = min(max(current_page, 1), page_count)

    start = max(1, current_page - max_pages // 2)
    end = min(page_count, start + max_pages - 1)
    start = max(1, end - max_pages + 1)

    links = []
    if current_page > 1:
        links.append(_link(request, current_page - 1, PREVIOUS_TEXT))
    for number in range(start, end + 1):
        link = _link(request, number, str(number))
        link.is_current = number == current_page
        links.append(link)
    if current_page < page_count:
        links.append(_link(request, current_page + 1, NEXT_TEXT))

    request.set_page_number(current_page)
    logger.info(
        f"Generated {len(links)} links for {request.name}: "
        f"page {current_page} of {page_count}"
    )
    return links


def _link(request: Request, number: int, text: str) -> PageLink:
    return PageLink(
        number=number, text=text, call=request.set_page_number(number).get_script()
    )


def render_links(links: list[PageLink]) -> str:
    """Render pagination links as an HTML list.

    The current page is rendered without a click handler.
    """
    if not links:
        return ""

    lines = ['<ul class="pagination">']
    for link in links:
        if link.is_current:
            lines.append(
                f'  <li class="active"><a href="javascript:;">{link.text}</a></li>'
            )
        else:
            onclick = html.escape(f"{link.call};return false;", quote=True)
            lines.append(
                f'  <li><a href="javascript:;" onclick="{onclick}">{link.text}</a></li>'
            )
    lines.append("</ul>")
    return "\n".join(lines)
