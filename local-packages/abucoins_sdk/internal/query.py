from typing import Any, Mapping, Optional
from urllib.parse import quote, urlencode

# Characters Node's querystring.escape leaves unencoded
QUERY_SAFE = "!'()*~"


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_query_value(v) for v in value]
    return value


def url_with_parameters(path: str, parameters: Optional[Mapping[str, Any]] = None) -> str:
    """
    Append query parameters to a path.

    Parameters keep their insertion order and are escaped like Node's
    ``querystring.stringify`` (space as %20). None values are dropped and the
    ``?`` is left out when nothing remains.
    """
    if not parameters:
        return path

    pairs = [(k, _query_value(v)) for k, v in parameters.items() if v is not None]
    query_string = urlencode(pairs, doseq=True, safe=QUERY_SAFE, quote_via=quote)
    if query_string:
        return f"{path}?{query_string}"
    return path
