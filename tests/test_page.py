"""Tests for page data extraction and the markup view."""

from analyzers import Heading, Image, MarkupView, PageData
from analyzers.page import collect_schema_types


class TestPageData:
    def test_from_html_extracts_title_and_description(self):
        html = (
            "<html><head><title> Hello World </title>"
            '<meta name="Description" content=" A short summary. "></head></html>'
        )
        page = PageData.from_html("https://example.com", html)
        assert page.title == "Hello World"
        assert page.meta_description == "A short summary."
        assert page.raw_markup == html

    def test_empty_markup(self):
        page = PageData.from_html("https://example.com", "")
        assert page.title == ""
        assert page.meta_description == ""
        assert page.view.headings() == []
        assert page.view.text() == ""

    def test_view_is_cached(self):
        page = PageData(url="https://example.com", raw_markup="<p>hi</p>")
        assert page.view is page.view


class TestMarkupView:
    def test_headings_in_document_order(self):
        view = MarkupView("<h2>Second</h2><h1>First <em>title</em></h1><h6>Deep</h6>")
        assert view.headings() == [
            Heading(2, "Second"),
            Heading(1, "First title"),
            Heading(6, "Deep"),
        ]

    def test_links(self):
        view = MarkupView('<a href=" /contact ">Contact</a><a>No href</a><a href="mailto:a@b.com">Mail</a>')
        assert view.links() == ["/contact", "mailto:a@b.com"]

    def test_structured_data_blocks(self):
        view = MarkupView(
            '<script TYPE="APPLICATION/LD+JSON">{"@type": "Article"}</script>'
            '<script type="text/javascript">var x = 1;</script>'
            '<script type="application/ld+json">{broken</script>'
        )
        assert view.structured_data_blocks() == ['{"@type": "Article"}', "{broken"]
        documents, invalid = view.structured_data
        assert documents == [{"@type": "Article"}]
        assert invalid == 1

    def test_images_distinguish_missing_and_empty_alt(self):
        view = MarkupView('<img src="a.jpg" alt="A cat"><img src="b.jpg" alt=""><img src="c.jpg">')
        assert view.images() == [Image("a.jpg", "A cat"), Image("b.jpg", ""), Image("c.jpg", None)]

    def test_text_skips_scripts_styles_and_comments(self):
        view = MarkupView(
            "<head><title>Title</title><style>p { color: red }</style></head>"
            "<body><p>Visible  words</p><script>var hidden = 1;</script>"
            "<!-- a comment --><noscript>Enable JS</noscript><p>More</p></body>"
        )
        assert view.text() == "Visible words More"
        assert view.lines() == "Visible words\nMore"

    def test_microdata_and_meta_tags(self):
        view = MarkupView(
            '<head><meta property="og:title" content="T"><meta name="twitter:card" content="summary">'
            '</head><body><div itemscope itemtype="https://schema.org/Person"></div></body>'
        )
        assert view.has_microdata()
        assert view.meta_tags("og:") == {"og:title": "T"}
        assert view.meta_tags("twitter:") == {"twitter:card": "summary"}
        assert not MarkupView("<p>plain</p>").has_microdata()

    def test_author_hints(self):
        view = MarkupView(
            '<head><meta name="author" content="Jane Doe"></head>'
            '<body><a rel="author" href="/about/john">John Smith</a>'
            '<span itemprop="author"><span itemprop="name">Ada Lovelace</span></span></body>'
        )
        assert view.author_hints() == ["Jane Doe", "John Smith", "Ada Lovelace"]

    def test_page_kind(self):
        assert MarkupView("<article><p>Story</p></article>").page_kind() == "article"
        assert (
            MarkupView('<script type="application/ld+json">{"@type": "BlogPosting"}</script>').page_kind()
            == "article"
        )
        form = '<form><input type="text"><input type="number"><select></select></form>'
        assert MarkupView(form).page_kind() == "utility"
        assert MarkupView("<p>Hi</p>").page_kind("Mortgage Calculator") == "utility"
        assert MarkupView("<p>Hi</p>").page_kind("About us") == "general"


def test_collect_schema_types_walks_graph_and_nested_objects():
    documents = [
        {
            "@context": "https://schema.org",
            "@graph": [
                {"@type": "WebSite", "name": "Site"},
                {"@type": ["Article", "BlogPosting"], "author": {"@type": "Person"}},
            ],
        },
        {"@type": "Article"},
    ]
    assert collect_schema_types(documents) == ["WebSite", "Article", "BlogPosting", "Person"]
