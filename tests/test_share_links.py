"""Tests for share link generation."""

from site_distiller.share_links import encode, format_tags, generate_share_links


class TestGenerateShareLinks:
    """Tests for generate_share_links."""

    def test_text_and_url_are_encoded(self):
        """{TEXT} and {URL} are percent-encoded."""
        links = generate_share_links(
            [("X", "https://x.com/intent?text={TEXT}&url={URL}")],
            url="https://a.com",
            title="ignored",
            text="Hi",
            tags=[],
        )

        assert links[0].provider_name == "X"
        assert links[0].url == "https://x.com/intent?text=Hi&url=https%3A%2F%2Fa.com"

    def test_missing_url_becomes_empty(self):
        """An article without a link substitutes an empty string."""
        links = generate_share_links(
            [("X", "https://x.com/intent?url={URL}&t={TITLE}")],
            url=None,
            title="A B",
            text="",
            tags=[],
        )

        assert links[0].url == "https://x.com/intent?url=&t=A%20B"

    def test_tags_placeholder(self):
        """{TAGS} renders #tag words with spaces turned into underscores."""
        links = generate_share_links(
            [("M", "https://m.example/share?t={TAGS}")],
            url=None,
            title="",
            text="",
            tags=["rust", "my tag"],
        )

        assert links[0].url == "https://m.example/share?t=%23rust%20%23my_tag"

    def test_provider_order_preserved(self, share_providers):
        """Links are returned in provider order."""
        links = generate_share_links(share_providers, None, "T", "body", [])

        assert [link.provider_name for link in links] == ["X", "Mastodon"]

    def test_template_without_placeholders(self):
        """Templates without placeholders pass through unchanged."""
        links = generate_share_links(
            [("Static", "https://example.com/share")], "https://a.com", "T", "x", ["t"]
        )

        assert links[0].url == "https://example.com/share"

    def test_unicode_title(self):
        """Non-ASCII characters are UTF-8 percent-encoded."""
        links = generate_share_links(
            [("X", "{TITLE}")], None, "Café", "", []
        )

        assert links[0].url == "Caf%C3%A9"

    def test_no_providers(self):
        """No providers yield no links."""
        assert generate_share_links([], "https://a.com", "T", "x", []) == []


class TestHelpers:
    """Tests for encoding helpers."""

    def test_encode_keeps_unreserved(self):
        """Unreserved characters are left alone."""
        assert encode("aZ09-_.~") == "aZ09-_.~"

    def test_encode_reserved(self):
        """Reserved characters are encoded, including slashes."""
        assert encode("a/b?c=d&e") == "a%2Fb%3Fc%3Dd%26e"

    def test_format_tags(self):
        """Tags are rendered as space-separated hashtags."""
        assert format_tags(["a", "b c"]) == "#a #b_c"
        assert format_tags([]) == ""
