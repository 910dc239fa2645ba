import dataclasses

import pytest

import config
from config import Settings
from errors import UnresolvedPlaceholder
from request_builder import ContentType, Request, RequestBuilder, placeholders

BASE = "https://petstore.swagger.io/v2"


def test_unbound_placeholder_fails_build():
    with pytest.raises(UnresolvedPlaceholder) as exc:
        RequestBuilder(BASE, "/pet/{id}").build()
    assert exc.value.names == ["id"]


def test_bound_placeholder_resolves():
    request = RequestBuilder(BASE, "/pet/{id}").with_path_param("id", 42).build()
    assert request.resolved_path == "/pet/42"
    assert request.url == "https://petstore.swagger.io/v2/pet/42"


def test_several_placeholders_report_every_missing_name():
    builder = RequestBuilder(BASE, "/store/{storeId}/pet/{petId}").with_path_param("storeId", 1)
    with pytest.raises(UnresolvedPlaceholder) as exc:
        builder.build()
    assert exc.value.names == ["petId"]
    assert builder.with_path_params(petId=9).build().resolved_path == "/store/1/pet/9"


def test_path_param_values_are_percent_encoded():
    request = RequestBuilder(BASE, "/pet/findByStatus/{status}").with_path_param("status", "a b/c").build()
    assert request.resolved_path == "/pet/findByStatus/a%20b%2Fc"


def test_builder_is_copy_on_write():
    base = RequestBuilder(BASE, "/pet").with_header("Accept", "application/json")
    json_body = base.with_content_type(ContentType.JSON).with_body({"name": "doggie"})

    plain = base.build()
    rich = json_body.build()
    assert plain.content_type is None
    assert plain.body is None
    assert rich.content_type is ContentType.JSON
    assert rich.body == {"name": "doggie"}
    assert dict(rich.headers) == {"Accept": "application/json"}


def test_content_type_accepts_enum_value_strings():
    request = RequestBuilder(BASE, "/pet").with_content_type("application/json").build()
    assert request.content_type is ContentType.JSON
    with pytest.raises(ValueError):
        RequestBuilder(BASE, "/pet").with_content_type("application/yaml")


def test_built_request_is_immutable():
    request = RequestBuilder(BASE, "/pet/{id}").with_path_param("id", 1).with_header("X-A", "1").build()
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.path = "/other"
    with pytest.raises(TypeError):
        request.headers["X-B"] = "2"
    with pytest.raises(TypeError):
        request.path_params["id"] = 2


def test_request_constructor_enforces_placeholders():
    with pytest.raises(UnresolvedPlaceholder):
        Request(base_url=BASE, path="/pet/{id}")


def test_url_joins_without_doubling_slashes():
    assert RequestBuilder(BASE + "/", "/pet").build().url == BASE + "/pet"
    assert RequestBuilder(BASE, "pet").build().url == BASE + "/pet"


def test_log_all_flag():
    assert RequestBuilder(BASE, "/pet").log_all().build().log is True
    assert RequestBuilder(BASE, "/pet").build().log is False


def test_for_path_uses_process_wide_base_url():
    config.configure(Settings(base_url="http://localhost:5001/v2"))
    builder = RequestBuilder.for_path("/pet")
    assert builder.base_url == "http://localhost:5001/v2"
    assert builder.build().url == "http://localhost:5001/v2/pet"


def test_placeholders_helper():
    assert placeholders("/pet/{id}/uploadImage/{name}") == ["id", "name"]
    assert placeholders("/pet") == []


def test_built_request_is_detached_from_the_callers_body():
    payload = {"id": 1001, "name": "doggie", "tags": [{"name": "friendly"}]}
    builder = RequestBuilder(BASE, "/pet").with_body(payload)
    request = builder.build()

    payload["name"] = "cat"
    payload["tags"][0]["name"] = "grumpy"

    assert request.body == {"id": 1001, "name": "doggie", "tags": [{"name": "friendly"}]}
    assert builder.build().body["name"] == "doggie"


def test_each_build_owns_its_body():
    builder = RequestBuilder(BASE, "/pet").with_body({"tags": []})
    first, second = builder.build(), builder.build()
    first.body["tags"].append("x")
    assert second.body == {"tags": []}


def test_bytearray_body_is_frozen_to_bytes():
    raw = bytearray(b'{"id": 1}')
    request = RequestBuilder(BASE, "/pet").with_body(raw).build()
    raw[0:1] = b"["
    assert request.body == b'{"id": 1}'
