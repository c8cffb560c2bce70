"""Jinja2 template for generated enum modules.

Context keys: ``package``, ``type_name``, ``plural`` and ``values`` (a list
of EnumValue). Filters: ``pystr`` renders a Python string literal and
``snake`` converts an identifier to snake_case.
"""

ENUM_TEMPLATE = '''\
# Code generated by enumgen; DO NOT EDIT.
"""{{ type_name }} enum for the {{ package }} package."""

import json
from enum import Enum
from typing import Any, List, Union

__all__ = [
    "{{ type_name }}Enum",
{% for value in values %}
    "{{ type_name }}{{ value.constant_name }}",
{% endfor %}
    "ALL_{{ plural | snake | upper }}",
    "is_valid_{{ type_name | snake }}",
    "parse_{{ type_name | snake }}",
    "{{ type_name | snake }}_to_json",
    "{{ type_name | snake }}_from_json",
]


class {{ type_name }}Enum(str, Enum):
    """Known {{ type_name }} values."""

{% for value in values %}
    {{ value.constant_name }} = {{ value.string_value | pystr }}
{% endfor %}

    def __str__(self) -> str:
        return self.value


{% for value in values %}
{{ type_name }}{{ value.constant_name }} = {{ type_name }}Enum.{{ value.constant_name }}
{% endfor %}

ALL_{{ plural | snake | upper }}: List[{{ type_name }}Enum] = [
{% for value in values %}
    {{ type_name }}{{ value.constant_name }},
{% endfor %}
]


def is_valid_{{ type_name | snake }}(value: Any) -> bool:
    """Return True if value is one of the known {{ type_name }} values."""
    return isinstance(value, str) and value in ALL_{{ plural | snake | upper }}


def parse_{{ type_name | snake }}(raw: str) -> {{ type_name }}Enum:
    """Parse a raw string into a {{ type_name }}Enum.

    Raises:
        ValueError: If raw is not a known {{ type_name }} value.
    """
    if not is_valid_{{ type_name | snake }}(raw):
        raise ValueError(f"invalid {{ type_name }}: {raw!r}")
    return {{ type_name }}Enum(raw)


def {{ type_name | snake }}_to_json(value: Any) -> str:
    """Serialize a {{ type_name }} value to JSON, or "null" if it is invalid."""
    if not is_valid_{{ type_name | snake }}(value):
        return "null"
    return json.dumps({{ type_name }}Enum(value).value)


def {{ type_name | snake }}_from_json(data: Union[str, bytes]) -> {{ type_name }}Enum:
    """Deserialize a JSON string payload into a {{ type_name }}Enum.

    Raises:
        ValueError: If data is not a JSON string or not a known {{ type_name }} value.
    """
    raw = json.loads(data)
    if not isinstance(raw, str):
        raise ValueError(f"{{ type_name }} must be a JSON string, got {type(raw).__name__}")
    return parse_{{ type_name | snake }}(raw)
'''
