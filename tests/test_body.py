# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Stacklet, Inc.
#

import json

import httpx
import pytest

from gqlclient.body import build_body, build_headers, compose
from gqlclient.models import File

from .testing.http import URL


def encode_multipart(envelope) -> tuple[str, bytes]:
    """Encode a multipart envelope the way httpx sends it."""
    request = httpx.Request(
        envelope.method,
        envelope.url,
        headers=envelope.headers,
        data=dict(envelope.body.fields),
        files=list(envelope.body.files),
    )
    return request.headers["Content-Type"], request.read()


class TestBuildBody:
    @pytest.mark.parametrize("variables", [None, {}])
    def test_empty_variables_are_an_object(self, variables):
        body = build_body("{ping}", variables)

        assert not body.is_multipart
        assert body.content == b'{"query":"{ping}","variables":{}}'

    def test_variables(self):
        body = build_body("query($id: ID!) { node(id: $id) { id } }", {"id": "123"})

        assert json.loads(body.content) == {
            "query": "query($id: ID!) { node(id: $id) { id } }",
            "variables": {"id": "123"},
        }

    def test_empty_files_is_json(self):
        body = build_body("{ping}", {}, {})
        assert not body.is_multipart
        assert body.fields == ()
        assert body.files == ()

    def test_single_file(self, text_file):
        body = build_body("mutation($f:Upload!){upload(file:$f)}", {"f": None}, {"f": text_file})

        assert body.is_multipart
        assert body.content is None
        assert body.fields == (
            (
                "operations",
                '{"query":"mutation($f:Upload!){upload(file:$f)}","variables":{"f":null}}',
            ),
            ("map", '{"f":["variables.f"]}'),
        )
        assert body.files == (("f", ("a.txt", b"abc")),)

    def test_map_follows_file_order(self, text_file, binary_file):
        files = {"second": binary_file, "first": text_file, "third": text_file}
        body = build_body("mutation { x }", {}, files)

        upload_map = json.loads(dict(body.fields)["map"])
        assert list(upload_map.items()) == [
            ("second", ["variables.second"]),
            ("first", ["variables.first"]),
            ("third", ["variables.third"]),
        ]
        assert [name for name, _ in body.files] == ["second", "first", "third"]

    def test_empty_variables_with_files(self, text_file):
        body = build_body("mutation { x }", None, {"f": text_file})
        operations = json.loads(dict(body.fields)["operations"])
        assert operations["variables"] == {}

    def test_file_variable_collision_not_special_cased(self, text_file):
        body = build_body("mutation { x }", {"f": "already set"}, {"f": text_file})

        fields = dict(body.fields)
        assert json.loads(fields["operations"])["variables"] == {"f": "already set"}
        assert json.loads(fields["map"]) == {"f": ["variables.f"]}


class TestBuildHeaders:
    def test_json_content_type(self):
        assert build_headers() == {"Content-Type": "application/json"}

    def test_layers_later_wins(self):
        headers = build_headers(
            {"Authorization": "Bearer a", "X-Trace": "1"},
            {"authorization": "Bearer b"},
        )
        assert headers == {
            "X-Trace": "1",
            "authorization": "Bearer b",
            "Content-Type": "application/json",
        }

    def test_content_type_not_overridden(self):
        headers = build_headers({"content-type": "text/plain"})
        assert headers == {"Content-Type": "application/json"}

    def test_multipart_strips_content_type(self):
        headers = build_headers(
            {"Authorization": "Bearer a", "Content-Type": "application/json"},
            {"CONTENT-TYPE": "application/json"},
            multipart=True,
        )
        assert headers == {"Authorization": "Bearer a"}

    def test_inputs_untouched(self):
        defaults = {"Content-Type": "application/json", "Authorization": "Bearer a"}
        build_headers(defaults, None, multipart=True)
        assert defaults == {"Content-Type": "application/json", "Authorization": "Bearer a"}


class TestCompose:
    def test_json_envelope(self):
        envelope = compose(URL, "{ping}", {}, None, {"Authorization": "Bearer a"})

        assert envelope.method == "POST"
        assert envelope.url == URL
        assert envelope.headers == {
            "Authorization": "Bearer a",
            "Content-Type": "application/json",
        }
        assert envelope.body.content == b'{"query":"{ping}","variables":{}}'

    def test_multipart_envelope(self, text_file):
        envelope = compose(
            URL,
            "mutation($f:Upload!){upload(file:$f)}",
            {"f": None},
            {"f": text_file},
            {"Content-Type": "application/json", "Authorization": "Bearer a"},
        )

        assert envelope.headers == {"Authorization": "Bearer a"}
        content_type, content = encode_multipart(envelope)
        assert content_type.startswith("multipart/form-data; boundary=")

        operations = content.index(b'name="operations"')
        upload_map = content.index(b'name="map"')
        upload = content.index(b'name="f"; filename="a.txt"')
        assert operations < upload_map < upload

        assert b'\r\n\r\n{"f":["variables.f"]}\r\n' in content
        assert b"\r\n\r\nabc\r\n" in content
        # the GraphQL type is not sent
        assert b"Upload!" not in content.replace(b"$f:Upload!", b"")

    def test_multipart_binary_is_byte_exact(self, binary_file):
        envelope = compose(URL, "mutation { x }", {"b": None}, {"b": binary_file})

        _, content = encode_multipart(envelope)
        assert b"\r\n\r\n" + bytes(range(256)) + b"\r\n" in content

    def test_multipart_files_in_order(self):
        files = {
            key: File(gql_type="Upload", contents=key.encode(), filename=f"{key}.txt")
            for key in ["z", "a", "m"]
        }
        envelope = compose(URL, "mutation { x }", {}, files)

        _, content = encode_multipart(envelope)
        positions = [content.index(f'name="{key}"'.encode()) for key in ["z", "a", "m"]]
        assert positions == sorted(positions)
