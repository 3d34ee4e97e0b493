# course_report/etl/dom_query.py

from bs4 import BeautifulSoup, Comment, NavigableString


def parse_document(html_content):
    """Parses raw HTML text into a queryable tree (lxml backend)."""
    return BeautifulSoup(html_content, 'lxml')


def find_first(root, selector):
    """
    Returns the first element under `root` matching the CSS selector, or None.

    Args:
        root (Tag): The element (or whole document) to search beneath.
        selector (str): A CSS selector, e.g. 'table#scrollable'.
    """
    return root.select_one(selector)


def find_all(root, selector):
    """Returns every element under `root` matching the CSS selector, in document order."""
    return root.select(selector)


def first_text(element):
    """
    Returns the stripped text of the element's first child node.

    Only a plain text node counts: if the first child is a nested tag or a
    comment, or the element has no children at all, the result is "".
    """
    if element is None or not element.contents:
        return ""

    first_child = element.contents[0]
    if isinstance(first_child, NavigableString) and not isinstance(first_child, Comment):
        return str(first_child).strip()
    return ""
