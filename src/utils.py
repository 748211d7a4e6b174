"""
Small utility helpers used by tests and the suite.
"""

from typing import Any, Dict, List, Optional
import json
import yaml
from jsonpath_ng import parse as jsonpath_parse
import requests
from requests.structures import CaseInsensitiveDict


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load YAML file and return parsed dict (raises on error)."""
    with open(path, "rt", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    return data or {}


def jsonpath_values(body: Any, path: str) -> List[Any]:
    """Return every value matched by JSONPath `path` in body (raises on invalid path)."""
    expr = jsonpath_parse(path)
    return [m.value for m in expr.find(body)]


def same_at(a: Any, b: Any, path: str) -> bool:
    """
    True when both documents have at least one match for `path` and the
    matched values are equal.
    """
    left = jsonpath_values(a, path)
    right = jsonpath_values(b, path)
    return bool(left) and left == right


def make_response_json(obj: Any, status: int = 200, headers: Optional[Dict[str, str]] = None,
                       reason: str = "OK") -> requests.Response:
    """
    Convenience for building a requests.Response with JSON body for tests.
    """
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    body = json.dumps(obj)
    resp._content = body.encode("utf-8")
    hdrs = dict(headers or {})
    hdrs.setdefault("Content-Type", "application/json")
    resp.headers = CaseInsensitiveDict(hdrs)
    resp.encoding = "utf-8"
    return resp
