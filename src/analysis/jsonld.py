"""JSON-LD decoding and schema.org tree visitors."""

import json
from dataclasses import dataclass
from typing import Any

# JSON-LD is not expected to nest deeply; the bound keeps hostile input cheap
MAX_DEPTH = 32


@dataclass(frozen=True)
class JsonLdBlock:
    """Outcome of decoding one JSON-LD script block."""

    raw: str
    data: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def decode_block(raw: str) -> JsonLdBlock:
    """
    Decode a raw JSON-LD block.

    Malformed blocks are reported through `JsonLdBlock.error` instead of
    raising, so callers can skip them and still tell "absent" from
    "malformed".
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError) as e:
        return JsonLdBlock(raw=raw, error=f"Invalid JSON: {str(e)[:100]}")
    except RecursionError:
        return JsonLdBlock(raw=raw, error="Invalid JSON: nesting too deep to decode")

    if not isinstance(data, (dict, list)):
        return JsonLdBlock(raw=raw, error="JSON-LD root must be an object or array")

    return JsonLdBlock(raw=raw, data=data)


def decode_blocks(raw_blocks: list[str]) -> list[JsonLdBlock]:
    return [decode_block(raw) for raw in raw_blocks]


def node_types(node: dict) -> list[str]:
    """The `@type` values of a single node, as strings."""
    value = node.get("@type")
    if value is None:
        return []
    if isinstance(value, list):
        return [str(item) for item in value if item is not None]
    return [str(value)]


def _has_type(node: Any, type_name: str) -> bool:
    if not isinstance(node, dict):
        return False
    wanted = type_name.lower()
    return any(t.lower() == wanted for t in node_types(node))


def iter_nodes(payload: Any, max_depth: int = MAX_DEPTH):
    """Yield every dict node of a decoded JSON-LD tree, depth first."""
    stack = [(payload, 0)]
    while stack:
        node, depth = stack.pop()
        if depth > max_depth:
            continue

        if isinstance(node, dict):
            yield node
            children = list(node.values())
        elif isinstance(node, list):
            children = list(node)
        else:
            continue

        # Reverse so children come out in source order
        for child in reversed(children):
            stack.append((child, depth + 1))


def collect_types(payload: Any, max_depth: int = MAX_DEPTH) -> list[str]:
    """All `@type` values found anywhere in the tree, in visiting order."""
    types = []
    for node in iter_nodes(payload, max_depth):
        types.extend(node_types(node))
    return types


def collect_entities(
    payload: Any,
    container_type: str,
    property_name: str,
    entity_type: str,
    max_depth: int = MAX_DEPTH,
) -> list[dict]:
    """
    Entities of `entity_type` listed under `property_name` of every
    `container_type` node, e.g. the Questions of a FAQPage's mainEntity.

    Type comparisons are case-insensitive.
    """
    entities = []
    for node in iter_nodes(payload, max_depth):
        if not _has_type(node, container_type):
            continue

        children = node.get(property_name)
        if isinstance(children, dict):
            children = [children]
        if not isinstance(children, list):
            continue

        entities.extend(child for child in children if _has_type(child, entity_type))

    return entities
