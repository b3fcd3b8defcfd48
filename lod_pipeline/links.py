"""
Rendering of entity links.

A link carries RDFa (`property="name"`) relating its text to the identifier
in `href`, and keeps the canonical name and collection as data attributes
for client-side scripts. For example:

    <a data-name="James Minahan" data-collection="people" property="name"
       href="/ed/people/james-minahan/">James</a>
"""

from bs4 import BeautifulSoup, Tag

from lod_pipeline.index import url_for
from lod_pipeline.markup import FORMATTER


def build_link(
    soup: BeautifulSoup,
    display_text: str,
    name: str,
    collection: str,
    base_url: str = "",
    as_markup: bool = False,
) -> Tag:
    """
    Create an entity link element owned by `soup`.

    The collection must already be resolved; callers leave unresolved
    names as plain text. With `as_markup` the display text is rendered
    HTML (a template value such as `Smith &amp; Co` or `<em>James</em>`)
    and is kept as markup instead of being escaped again.
    """
    link = soup.new_tag(
        "a",
        attrs={
            "data-name": name,
            "data-collection": collection,
            "property": "name",
            "href": url_for(collection, name, base_url),
        },
    )
    if as_markup:
        fragment = BeautifulSoup(display_text, "html.parser")
        for child in list(fragment.contents):
            link.append(child.extract())
    else:
        link.string = display_text
    return link


def render_link(display_text: str, name: str, collection: str, base_url: str = "") -> str:
    """Entity link as an HTML string; `display_text` is taken as markup."""
    soup = BeautifulSoup("", "html.parser")
    link = build_link(soup, display_text, name, collection, base_url, as_markup=True)
    return link.decode(formatter=FORMATTER)
