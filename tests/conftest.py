"""
Shared fixtures: an in-memory stand-in for the posts/comments REST
server, served through httpx.MockTransport.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from posts_client.api.client import APIClient
from posts_client.files.manager import FileManager
from posts_client.main import PostsClient


BASE_URL = "http://testserver"


class FakeAPI:
    """Behaves like json-server for the /posts and /comments collections."""

    def __init__(self):
        self.collections = {"posts": [], "comments": []}
        self.next_id = {"posts": 1, "comments": 1}
        self.requests = []
        self.fail_status = None
        self.fail_method = None
        self.down = False

    def add_post(self, title, author, post_id=None):
        return self._insert("posts", {"title": title, "author": author}, post_id)

    def add_comment(self, text, post_id, comment_id=None):
        return self._insert("comments", {"text": text, "postId": post_id}, comment_id)

    def _insert(self, name, body, item_id=None):
        if item_id is None:
            item_id = self.next_id[name]
        self.next_id[name] = max(self.next_id[name], int(item_id)) + 1
        item = dict(body, id=item_id)
        self.collections[name].append(item)
        return item

    def _find(self, name, item_id):
        for item in self.collections[name]:
            if str(item["id"]) == item_id:
                return item
        return None

    def handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, request.url.path, body))

        if self.down:
            raise httpx.ConnectError("Connection refused", request=request)
        if self.fail_status and self.fail_method in (None, request.method):
            return httpx.Response(self.fail_status, json={"error": "failure"})

        parts = [p for p in request.url.path.split("/") if p]
        if not parts or parts[0] not in self.collections:
            return httpx.Response(404, json={})
        name = parts[0]

        if len(parts) == 1:
            if request.method == "GET":
                return httpx.Response(200, json=self.collections[name])
            if request.method == "POST":
                return httpx.Response(201, json=self._insert(name, body))
            return httpx.Response(405, json={})

        item = self._find(name, parts[1])
        if item is None:
            return httpx.Response(404, json={})

        if request.method == "GET":
            return httpx.Response(200, json=item)
        if request.method == "PUT":
            item.clear()
            item.update(body, id=int(parts[1]))
            return httpx.Response(200, json=item)
        if request.method == "DELETE":
            self.collections[name].remove(item)
            return httpx.Response(200, json={})
        return httpx.Response(405, json={})


@pytest.fixture
def fake_api():
    """A fresh in-memory server."""
    return FakeAPI()


@pytest.fixture
def api_client(fake_api):
    """An APIClient talking to the fake server."""
    return APIClient(base_url=BASE_URL, transport=httpx.MockTransport(fake_api.handle))


@pytest.fixture
def file_manager(tmp_path):
    """A FileManager writing into a temporary directory."""
    return FileManager(output_dir=tmp_path / "output")


@pytest.fixture
def posts_client(api_client, file_manager):
    """A PostsClient wired to the fake server and a temporary output directory."""
    return PostsClient(api=api_client, files=file_manager)
