"""Per-request headers and parameters."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

ParamValue = str | list[str]


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _stringify(values: Mapping[str, Any] | None) -> dict[str, str]:
    """Normalise a mapping to str -> str, dropping None values."""
    return {str(key): _scalar(value) for key, value in (values or {}).items() if value is not None}


def _stringify_params(values: Mapping[str, Any] | None) -> dict[str, ParamValue]:
    """Like _stringify, but list and tuple values become GitLab array params.

    ``{"ids": [1, 2]}`` turns into ``{"ids[]": ["1", "2"]}``, which encodes
    as ``ids[]=1&ids[]=2``.
    """
    result: dict[str, ParamValue] = {}
    for key, value in (values or {}).items():
        if value is None:
            continue
        key = str(key)
        if isinstance(value, list | tuple):
            if not key.endswith("[]"):
                key += "[]"
            result[key] = [_scalar(element) for element in value if element is not None]
        else:
            result[key] = _scalar(value)
    return result


class Options:
    """Headers and params for one HTTP call.

    ``params`` become the query string for GET/PUT/DELETE and the form body
    for POST.

    Example:
        ```python
        Options({"headers": {"User-Agent": "gitlab-rest"}, "params": {"source": "app"}})
        ```
    """

    __slots__ = ("headers", "params")

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        options = options or {}
        self.headers = _stringify(options.get("headers"))
        self.params = _stringify_params(options.get("params"))

    def merge(self, overrides: "Mapping[str, Any] | Options | None") -> "Options":
        """Return a new Options with ``overrides`` layered over this one.

        Keys present in both take the override's value.
        """
        if overrides is None:
            overrides = Options()
        elif not isinstance(overrides, Options):
            overrides = Options(overrides)

        merged = Options()
        merged.headers = {**self.headers, **overrides.headers}
        merged.params = {**self.params, **overrides.params}
        return merged

    def query_string(self) -> str:
        return urlencode(self.params, doseq=True)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {"headers": dict(self.headers), "params": dict(self.params)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return self.headers == other.headers and self.params == other.params

    def __repr__(self) -> str:
        # Header values may carry the token
        return f"Options(headers={sorted(self.headers)}, params={self.params!r})"
