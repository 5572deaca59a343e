"""Tests for markup and frontmatter transforms."""

from obsidian_zola.transforms.frontmatter import FrontmatterStrategy, build_output, split_frontmatter
from obsidian_zola.transforms.links import emphasis, markdown_image, markdown_link


class TestLinkTransforms:
    """Tests for link markup factories."""

    def test_markdown_link(self):
        transform = markdown_link()
        assert transform("My Note", "@/my-note.md") == "[My Note](@/my-note.md)"

    def test_markdown_link_with_title(self):
        transform = markdown_link()
        assert transform("My Note", "@/my-note.md", "Read it") == '[My Note](@/my-note.md "Read it")'

    def test_title_with_double_quotes(self):
        transform = markdown_link()
        assert transform("x", "y", 'say "hi"') == "[x](y 'say \"hi\"')"

    def test_markdown_image(self):
        transform = markdown_image()
        assert transform("Logo", "/logo.png") == "![Logo](/logo.png)"

    def test_emphasis(self):
        assert emphasis()("missing") == "*missing*"
        assert emphasis("_")("missing") == "_missing_"


class TestFrontmatter:
    """Tests for frontmatter splitting and output."""

    def test_split(self):
        frontmatter, body = split_frontmatter("---\ntitle: Test\ntags: [a]\n---\n# Body\n")
        assert frontmatter == "title: Test\ntags: [a]\n"
        assert body == "# Body\n"

    def test_split_without_frontmatter(self):
        assert split_frontmatter("# Just content\n") == ("", "# Just content\n")

    def test_split_empty_frontmatter(self):
        assert split_frontmatter("---\n---\nBody") == ("", "Body")

    def test_split_unclosed(self):
        raw = "---\ntitle: Test\n# Body\n"
        assert split_frontmatter(raw) == ("", raw)

    def test_split_invalid_yaml(self):
        raw = "---\ntitle: [unclosed\n---\nBody"
        assert split_frontmatter(raw) == ("", raw)

    def test_split_non_mapping(self):
        raw = "---\njust text\n---\nBody"
        assert split_frontmatter(raw) == ("", raw)

    def test_frontmatter_passed_through_verbatim(self):
        raw = "---\n# comment\ntitle:   Spaced\n---\nBody"
        frontmatter, body = split_frontmatter(raw)
        assert build_output(frontmatter, body, FrontmatterStrategy.ALWAYS) == raw

    def test_build_always_without_frontmatter(self):
        assert build_output("", "Body", FrontmatterStrategy.ALWAYS) == "---\n---\nBody"

    def test_build_auto(self):
        assert build_output("", "Body", FrontmatterStrategy.AUTO) == "Body"
        assert build_output("a: 1\n", "Body", FrontmatterStrategy.AUTO) == "---\na: 1\n---\nBody"

    def test_build_never(self):
        assert build_output("a: 1\n", "Body", FrontmatterStrategy.NEVER) == "Body"

    def test_split_crlf(self):
        assert split_frontmatter("---\r\nt: 1\r\n---\r\nbody") == ("t: 1\r\n", "body")

    def test_crlf_frontmatter_round_trip(self):
        raw = "---\r\ntitle: Test\r\n---\r\n# Body\r\n"
        frontmatter, body = split_frontmatter(raw)
        assert build_output(frontmatter, body, FrontmatterStrategy.ALWAYS) == raw
