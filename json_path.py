"""
Body path lookup for parsed JSON documents.

Paths are JSONPath expressions restricted to single field names and
non-negative indices, e.g. `category.name`, `tags[0].name`, or `[0].id`
for a root array. Parsing is done by jsonpath_ng; the parsed nodes are then
walked left to right so a missing key and a short array fail differently.
"""

from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import Any, List, Tuple, Union

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.jsonpath import Child, Fields, Index, Root

from errors import IndexOutOfRange, InvalidPath, PathNotFound

Segment = Union[str, int]


def _flatten(node, path: str) -> List[Segment]:
    if isinstance(node, Child):
        return _flatten(node.left, path) + _flatten(node.right, path)
    if isinstance(node, Root):
        return []
    if isinstance(node, Fields):
        if len(node.fields) != 1 or node.fields[0] == "*":
            raise InvalidPath(f"Body path {path!r} must name one field per segment", path=path)
        return [node.fields[0]]
    if isinstance(node, Index):
        # jsonpath_ng >= 1.6 keeps a list of indices, older releases a single one
        indices = getattr(node, "indices", None) or [node.index]
        if len(indices) != 1 or indices[0] < 0:
            raise InvalidPath(f"Body path {path!r} must use one non-negative index per bracket", path=path)
        return [indices[0]]
    raise InvalidPath(f"Unsupported expression {type(node).__name__} in body path {path!r}", path=path)


@lru_cache(maxsize=256)
def _parse(path: str) -> Tuple[Segment, ...]:
    try:
        expr = parse_jsonpath(path)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise InvalidPath(f"Invalid body path {path!r}: {e}", path=path) from e
    segments = _flatten(expr, path)
    if not segments:
        raise InvalidPath(f"Body path {path!r} selects nothing", path=path)
    return tuple(segments)


def parse_path(path: str) -> List[Segment]:
    """Split a path expression into field names (str) and indices (int)."""
    if not isinstance(path, str) or not path.strip():
        raise InvalidPath("Body path must be a non-empty string", path=path)
    return list(_parse(path))


def _describe(walked: List[Segment]) -> str:
    out = ""
    for seg in walked:
        if isinstance(seg, int):
            out += f"[{seg}]"
        else:
            out += f".{seg}" if out else seg
    return out or "<root>"


def extract(document: Any, path: str) -> Any:
    """
    Resolve `path` against `document`, left to right.

    Raises InvalidPath, PathNotFound or IndexOutOfRange.
    """
    current = document
    walked: List[Segment] = []

    for seg in parse_path(path):
        if isinstance(seg, int):
            if isinstance(current, (str, bytes)) or not isinstance(current, Sequence):
                raise PathNotFound(
                    f"Cannot index [{seg}] at {_describe(walked)}: value is not an array", path=path
                )
            if seg >= len(current):
                raise IndexOutOfRange(
                    f"Index [{seg}] at {_describe(walked)} is out of range (length {len(current)})",
                    path=path,
                )
            current = current[seg]
        else:
            if not isinstance(current, Mapping):
                raise PathNotFound(
                    f"Cannot read field {seg!r} at {_describe(walked)}: value is not an object", path=path
                )
            if seg not in current:
                raise PathNotFound(f"Field {seg!r} not found at {_describe(walked)}", path=path)
            current = current[seg]
        walked.append(seg)

    return current


class JsonPathExtractor:
    """Object wrapper around extract(), for callers that want an injectable collaborator."""

    def extract(self, document: Any, path: str) -> Any:
        return extract(document, path)

    def parse(self, path: str) -> Tuple[Segment, ...]:
        return tuple(parse_path(path))
