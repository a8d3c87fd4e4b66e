"""
Key casing normalization for backend payloads

The backend serializes keys in camelCase while callers read PascalCase
("nome" -> "Nome"). Only the first character of keys starting with an ASCII
lowercase letter changes; values are never rewritten.
"""

from typing import Any, Dict, List, Union

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]


def to_pascal_case_key(key: str) -> str:
    if key and "a" <= key[0] <= "z":
        return key[0].upper() + key[1:]
    return key


def normalize_keys(value: JSONValue) -> JSONValue:
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]

    if isinstance(value, dict):
        normalized: Dict[str, Any] = {}
        for key, child in value.items():
            # Later keys win on collision (e.g. "nome" after "Nome")
            normalized[to_pascal_case_key(key)] = normalize_keys(child)
        return normalized

    return value
