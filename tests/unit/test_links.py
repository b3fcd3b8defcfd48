"""Unit tests for entity link rendering."""

from bs4 import BeautifulSoup

from lod_pipeline.links import build_link, render_link


class TestRenderLink:
    """Tests for render_link function."""

    def test_full_markup(self):
        html = render_link("James Minahan", "James Minahan", "people", "/ed")
        assert html == (
            '<a data-name="James Minahan" data-collection="people" '
            'property="name" href="/ed/people/james-minahan/">James Minahan</a>'
        )

    def test_display_text_differs_from_name(self):
        link = BeautifulSoup(render_link("James", "James Minahan", "people"), "html.parser").a
        assert link.get_text() == "James"
        assert link["data-name"] == "James Minahan"
        assert link["href"] == "/people/james-minahan/"

    def test_attributes(self):
        link = BeautifulSoup(render_link("Melbourne", "Melbourne", "places", "/ed"), "html.parser").a
        assert link["property"] == "name"
        assert link["data-collection"] == "places"
        assert link["href"] == "/ed/places/melbourne/"

    def test_text_is_escaped(self):
        html = render_link("Smith & Sons", "Smith & Sons", "organisations")
        assert "Smith &amp; Sons</a>" in html
        assert 'href="/organisations/smith-sons/"' in html

    def test_entity_reference_not_escaped_twice(self):
        html = render_link("Smith &amp; Sons", "Smith & Sons", "organisations")
        assert "Smith &amp; Sons</a>" in html
        assert "&amp;amp;" not in html

    def test_inline_markup_kept(self):
        link = BeautifulSoup(render_link("<em>James</em>", "James Minahan", "people"), "html.parser").a
        assert link.em.get_text() == "James"
        assert link["data-name"] == "James Minahan"


class TestBuildLink:
    """Tests for build_link function."""

    def test_tag_belongs_to_soup(self):
        soup = BeautifulSoup("<p></p>", "lxml")
        link = build_link(soup, "Kate", "Kate Minahan", "people")
        soup.p.append(link)
        assert soup.p.a["data-name"] == "Kate Minahan"
        assert soup.p.a.string == "Kate"
