"""Render Markdown to HTML."""

from ..manager import GitHubManager

MARKDOWN_PATH = "markdown"


class MarkdownManager(GitHubManager):
    def render_markdown(self, text: str, mode: str | None = None, context: str | None = None) -> str:
        """Render ``text`` and return the HTML.

        Args:
            text: the Markdown source
            mode: "markdown" (plain) or "gfm" (GitHub Flavored, links issues and users)
            context: "owner/repo" used to resolve references in gfm mode
        """
        payload = {"text": text}
        if mode is not None:
            payload["mode"] = mode
        if context is not None:
            payload["context"] = context
        return self.send_post_request(MARKDOWN_PATH, payload).text

    def render_raw_markdown(self, text: str) -> str:
        """Render plain Markdown sent as the raw request body."""
        response = self._request(
            "POST",
            f"{MARKDOWN_PATH}/raw",
            content=text,
            headers={"Content-Type": "text/plain"},
        )
        return response.text
