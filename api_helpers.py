import random

from config import get_settings
from http_executor import HttpExecutor
from request_builder import ContentType, RequestBuilder
from templates import PET_CREATE_JSON_PATH, render_template

# Integer.MAX_VALUE / 1000 keeps ids well inside the petstore's int64 range
PET_ID_MIN = 1_000_000
PET_ID_MAX = 2_147_483_647 // 1000
NONEXISTENT_PET_ID_MAX = 2_000_000_000


def random_pet_id(rng=None):
    rng = rng or random
    return rng.randrange(PET_ID_MIN, PET_ID_MAX)


def nonexistent_pet_id(rng=None):
    rng = rng or random
    return rng.randrange(PET_ID_MIN, NONEXISTENT_PET_ID_MAX)


def given(settings=None):
    """Start a request rooted at the configured base URL: given().path("/pet/{id}")..."""
    settings = settings or get_settings()
    return RequestBuilder(settings.base_url)


def create_pet_body(pet_id, name, status, template_path=PET_CREATE_JSON_PATH):
    return render_template(template_path, {"id": pet_id, "name": name, "status": status})


def make_request(method, path, path_params=None, headers=None, json=None, executor=None, settings=None, log=False):
    """
    Build and send one request. Non-2xx statuses are returned, not raised,
    so tests assert on them; TransportError propagates.
    """
    settings = settings or get_settings()
    builder = given(settings).path(path).with_path_params(**(path_params or {})).log_all(log)
    for name, value in (headers or {}).items():
        builder = builder.with_header(name, value)
    if json is not None:
        builder = builder.with_content_type(ContentType.JSON).with_body(json)

    request = builder.build()
    if executor is not None:
        return executor.execute(request, method)
    with HttpExecutor(settings) as owned:
        return owned.execute(request, method)
