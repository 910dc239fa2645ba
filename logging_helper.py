import json
import logging
import os

RED = "\033[91m"
YELLOW = "\033[93m"
GREEN = "\033[92m"
RESET = "\033[0m"
WHITE = "\033[97m"

logger = logging.getLogger("petstore_kit")

DEFAULT_LOG_LEVEL = os.getenv("PETSTORE_LOG_LEVEL", "INFO").upper()


def setup_logging(level=None):
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.INFO),
        format='%(asctime)s.%(msecs)03d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def log_status(status, message, extra=""):
    status = status.lower()
    color = WHITE  # default

    if status == "error":
        color = RED
    elif status == "warning":
        color = YELLOW
    elif status == "good":
        color = GREEN

    if status == "error":
        logger.error(f"{color}{message}{extra}{RESET}")
    elif status == "warning":
        logger.warning(f"{color}{message}{extra}{RESET}")
    else:
        logger.info(f"{color}{message}{extra}{RESET}")


def _format_body(body):
    if body is None:
        return "<none>"
    if isinstance(body, (bytes, bytearray)):
        body = bytes(body).decode("utf-8", errors="replace")
    if isinstance(body, str):
        try:
            return json.dumps(json.loads(body), indent=2)
        except ValueError:
            return body or "<empty>"
    return json.dumps(body, indent=2, default=str)


def _format_headers(headers):
    if not headers:
        return "<none>"
    return "\n".join(f"    {name}: {value}" for name, value in headers.items())


def log_request(method, request):
    # same details REST-assured prints for given().log().all()
    log_status(
        "info",
        f"Request method:\t{method}\n"
        f"Request URI:\t{request.url}\n"
        f"Path params:\t{dict(request.path_params) or '<none>'}\n"
        f"Content type:\t{request.content_type.value if request.content_type else '<none>'}\n"
        f"Headers:\n{_format_headers(request.headers)}\n"
        f"Body:\n{_format_body(request.body)}"
    )


def log_response(response, elapsed_ms=None):
    status = "good" if 200 <= response.status_code < 400 else "warning"
    timing = f" ({elapsed_ms:.0f} ms)" if elapsed_ms is not None else ""
    log_status(
        status,
        f"HTTP {response.status_code}{timing}\n"
        f"Headers:\n{_format_headers(response.headers)}\n"
        f"Body:\n{_format_body(response.body)}"
    )
