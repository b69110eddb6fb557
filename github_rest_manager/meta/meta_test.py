"""Unit tests for the meta, emojis, rate limit and markdown managers."""

import pytest

from ..models import ReturnFormat
from ..records import ResponseParseError
from .emojis import EmojisManager
from .markdown import MarkdownManager
from .meta import MetaManager
from .rate_limit import RateLimitManager
from .records import Emoji, Rate

CORE = {"limit": 5000, "used": 1, "remaining": 4999, "reset": 1691591363}
SEARCH = {"limit": 30, "used": 12, "remaining": 18, "reset": 1691591091}


def describe_MetaManager():

    @pytest.fixture
    def manager(make_manager):
        return make_manager(MetaManager)

    def it_gets_the_api_root(github, manager):
        github.add(
            "GET",
            "/",
            json_body={
                "current_user_url": "https://api.github.com/user",
                "rate_limit_url": "https://api.github.com/rate_limit",
            },
        )

        root = manager.get_api_root()

        assert root.current_user_url == "https://api.github.com/user"
        assert root.emojis_url is None

    def it_gets_meta_information(github, manager):
        github.add(
            "GET",
            "/meta",
            json_body={
                "verifiable_password_authentication": True,
                "ssh_key_fingerprints": {"SHA256_RSA": "uNiVztksCsDhcc0u9e8BujQXVUpKZIDTMczCvj3tD2s"},
                "hooks": ["192.30.252.0/22"],
                "api": ["192.30.252.0/22", "185.199.108.0/22"],
            },
        )

        meta = manager.get_meta_information()

        assert meta.ssh_key_fingerprints[0].algorithm == "SHA256_RSA"
        assert meta.ssh_key_fingerprints[0].fingerprint.startswith("uNiV")
        assert meta.api == ("192.30.252.0/22", "185.199.108.0/22")
        assert meta.actions == ()

    def it_gets_the_octocat(github, manager):
        github.add("GET", "/octocat", text="MMM.           .MMM\n  Hello there  ")

        art = manager.get_octocat("Hello there")

        assert "Hello there" in art
        assert github.last_request.url.params["s"] == "Hello there"

    def it_gets_the_api_versions(github, manager):
        github.add("GET", "/versions", json_body=["2022-11-28", "2022-08-09"])

        assert manager.get_api_versions() == ["2022-11-28", "2022-08-09"]

    def it_rejects_malformed_versions(github, manager):
        github.add("GET", "/versions", json_body=[20221128])

        with pytest.raises(ResponseParseError):
            manager.get_api_versions()

    def it_gets_the_zen(github, manager):
        github.add("GET", "/zen", text="Responsive is better than fast.")

        assert manager.get_zen() == "Responsive is better than fast."


def describe_EmojisManager():

    def it_lists_emojis(github, make_manager):
        github.add(
            "GET",
            "/emojis",
            json_body={"+1": "https://github.githubassets.com/images/icons/emoji/unicode/1f44d.png"},
        )
        manager = make_manager(EmojisManager)

        emojis = manager.list_emojis()

        assert emojis == [
            Emoji(name="+1", url="https://github.githubassets.com/images/icons/emoji/unicode/1f44d.png")
        ]


def describe_RateLimitManager():

    def it_gets_the_rate_limit(github, make_manager):
        github.add(
            "GET",
            "/rate_limit",
            json_body={"resources": {"core": CORE, "search": SEARCH}, "rate": CORE},
        )
        manager = make_manager(RateLimitManager)

        overview = manager.get_rate_limit()

        assert overview.rate == Rate(**CORE)
        assert overview.resources.search.remaining == 18
        assert overview.resources.graphql is None

    def it_returns_the_raw_json(github, make_manager):
        body = {"resources": {"core": CORE, "search": SEARCH}, "rate": CORE}
        github.add("GET", "/rate_limit", json_body=body)
        manager = make_manager(RateLimitManager)

        assert manager.get_rate_limit(format=ReturnFormat.JSON) == body


def describe_MarkdownManager():

    def it_renders_markdown(github, make_manager):
        github.add("POST", "/markdown", text="<p>Hello <strong>world</strong></p>\n")
        manager = make_manager(MarkdownManager)

        html = manager.render_markdown("Hello **world**", mode="gfm", context="octo-org/octo-repo")

        assert html == "<p>Hello <strong>world</strong></p>\n"
        assert github.last_json() == {
            "text": "Hello **world**",
            "mode": "gfm",
            "context": "octo-org/octo-repo",
        }

    def it_renders_raw_markdown(github, make_manager):
        github.add("POST", "/markdown/raw", text="<h1>Title</h1>\n")
        manager = make_manager(MarkdownManager)

        html = manager.render_raw_markdown("# Title")

        assert html == "<h1>Title</h1>\n"
        assert github.last_request.content == b"# Title"
        assert github.last_request.headers["Content-Type"] == "text/plain"
