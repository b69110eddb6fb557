"""Unit tests for the base manager."""

import json

import httpx
import pytest

from .config import ManagerConfig
from .manager import GitHubManager, GitHubRequestError
from .models import Directions, ReturnFormat
from .records import SimpleUser


def describe_GitHubManager():

    def describe_construction():

        def it_sends_the_token_and_media_type(github, make_manager):
            github.add("GET", "/zen", text="Keep it logically awesome.")
            manager = make_manager(GitHubManager)

            manager.send_get_request("zen")

            request = github.last_request
            assert request.headers["Authorization"] == "bearer test-token"
            assert request.headers["Accept"] == "application/vnd.github+json"
            assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"
            assert request.url == "https://api.github.com/zen"

        def it_uses_the_settings_timeout_by_default(make_manager):
            manager = make_manager(GitHubManager)

            assert manager.timeout == httpx.Timeout(30.0)

        def it_differs_only_by_timeout_when_one_is_given(github, make_manager):
            github.add("GET", "/user", json_body={"login": "octocat", "id": 1})
            plain = make_manager(GitHubManager)
            timed = make_manager(GitHubManager, request_timeout=2.5)

            plain_resp = plain.send_get_request("user")
            plain_request = github.last_request
            timed_resp = timed.send_get_request("user")
            timed_request = github.last_request

            assert plain_resp == timed_resp
            assert plain_request.url == timed_request.url
            assert plain_request.headers == timed_request.headers
            assert plain.timeout == httpx.Timeout(30.0)
            assert timed.timeout == httpx.Timeout(2.5)

        def it_uses_the_api_url_of_an_explicit_config(github):
            config = ManagerConfig(access_token="tok", api_url="https://ghe.example.com/api/v3")
            github.add("GET", "/api/v3/zen", text="Speak like a human.")

            with GitHubManager(config=config, transport=github.transport) as manager:
                manager.send_get_request("zen")

            assert github.last_request.url == "https://ghe.example.com/api/v3/zen"

    def describe_requests():

        def it_drops_none_params_and_plains_enums(github, make_manager):
            github.add("GET", "/user/starred", json_body=[])
            manager = make_manager(GitHubManager)

            manager.send_get_request(
                "user/starred", {"sort": None, "direction": Directions.desc, "page": 2}
            )

            assert dict(github.last_request.url.params) == {"direction": "desc", "page": "2"}

        def it_sends_an_empty_object_for_bodyless_writes(github, make_manager):
            github.add("PUT", "/user/following/octocat", status=204)
            manager = make_manager(GitHubManager)

            resp = manager.send_put_request("user/following/octocat")

            assert resp.status == 204
            assert resp.body == {}
            assert github.last_json() == {}

        def it_sends_a_json_payload_on_delete(github, make_manager):
            github.add("DELETE", "/user/emails", status=204)
            manager = make_manager(GitHubManager)

            manager.send_delete_request("user/emails", {"emails": ["a@example.com"]})

            assert github.last_json() == {"emails": ["a@example.com"]}

        def it_keeps_etag_and_link_headers(github, make_manager):
            github.add(
                "GET",
                "/users",
                json_body=[],
                headers={"etag": '"abc"', "link": '<https://api.github.com/users?since=46>; rel="next"'},
            )
            manager = make_manager(GitHubManager)

            resp = manager.send_get_request("users")

            assert resp.etag == '"abc"'
            assert 'rel="next"' in resp.link

        def it_returns_text_bodies_as_strings(github, make_manager):
            github.add("GET", "/zen", text="Design for failure.")
            manager = make_manager(GitHubManager)

            resp = manager.send_get_request("zen")

            assert resp.body == "Design for failure."
            assert resp.text == "Design for failure."

        def it_answers_check_requests_with_booleans(github, make_manager):
            github.add("GET", "/user/blocks/spammer", status=204)
            manager = make_manager(GitHubManager)

            assert manager.send_check_request("user/blocks/spammer") is True
            assert manager.send_check_request("user/blocks/friend") is False

        def it_sends_any_method(github, make_manager):
            github.add("PATCH", "/user", json_body={"login": "octocat", "id": 1})
            manager = make_manager(GitHubManager)

            resp = manager.send_request("patch", "user", payload={"bio": "hi"})

            assert github.last_request.method == "PATCH"
            assert resp.body["login"] == "octocat"

    def describe_errors():

        def it_raises_with_the_github_message(github, make_manager):
            github.add("GET", "/user", status=401, json_body={"message": "Bad credentials"})
            manager = make_manager(GitHubManager)

            with pytest.raises(httpx.HTTPStatusError, match="GitHub API error 401: Bad credentials"):
                manager.send_get_request("user")

            assert manager.status_code == 401
            assert manager.json_error_response == {"message": "Bad credentials"}
            assert "Bad credentials" in manager.error_response

        def it_uses_the_default_message_when_github_sends_none(github, make_manager):
            github.add("GET", "/user", status=502, text="")
            manager = make_manager(GitHubManager, default_error_message="GitHub is down")

            with pytest.raises(httpx.HTTPStatusError, match="GitHub is down"):
                manager.send_get_request("user")

        def it_falls_back_to_the_status(github, make_manager):
            github.add("GET", "/user", status=500, text="oops")
            manager = make_manager(GitHubManager)

            with pytest.raises(httpx.HTTPStatusError, match="GitHub API error 500"):
                manager.send_get_request("user")

            assert manager.json_error_response == "oops"

        def it_propagates_transport_errors():
            def handler(request):
                raise httpx.ConnectError("connection refused", request=request)

            manager = GitHubManager("tok", transport=httpx.MockTransport(handler))

            with pytest.raises(httpx.ConnectError):
                manager.send_get_request("user")

        def it_rewrites_transport_errors_with_the_default_message():
            def handler(request):
                raise httpx.ReadTimeout("timed out", request=request)

            manager = GitHubManager(
                "tok", "GitHub did not answer", transport=httpx.MockTransport(handler)
            )

            with pytest.raises(GitHubRequestError, match="GitHub did not answer") as exc_info:
                manager.send_get_request("user")

            assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)

        def it_has_no_error_before_any_request(make_manager):
            manager = make_manager(GitHubManager)

            assert manager.status_code is None
            assert manager.error_response is None
            assert manager.json_error_response is None

    def describe_returner():

        @pytest.fixture
        def response(github, make_manager):
            github.add("GET", "/user", json_body={"login": "octocat", "id": 1})
            return make_manager(GitHubManager).send_get_request("user")

        def it_returns_the_raw_text(response):
            result = GitHubManager._returner(response, ReturnFormat.STRING, SimpleUser.from_json)
            assert json.loads(result) == {"login": "octocat", "id": 1}

        def it_returns_the_json(response):
            result = GitHubManager._returner(response, ReturnFormat.JSON, SimpleUser.from_json)
            assert result == {"login": "octocat", "id": 1}

        def it_returns_the_record(response):
            result = GitHubManager._returner(
                response, ReturnFormat.LIBRARY_OBJECT, SimpleUser.from_json
            )
            assert result == SimpleUser(login="octocat", id=1)
