from typing import Any, Optional
from urllib.parse import quote


def encode(value: str) -> str:
    """Raw percent-encoding: everything but A-Z a-z 0-9 -_.~ is escaped, space becomes %20."""
    return quote(value, safe="")


def quote_literal(value: Any) -> str:
    return f'"{value}"'


def labels_path() -> str:
    return "/labels"


def label_nodes_path(label_name: str, property_name: Optional[str] = None, property_value: Any = None) -> str:
    path = f"/label/{encode(label_name)}/nodes"
    if property_name is None:
        return path
    return f"{path}?{encode(property_name)}={encode(quote_literal(property_value))}"


def node_labels_path(node_id: int) -> str:
    return f"/node/{int(node_id)}/labels"


def node_label_path(node_id: int, label_name: str) -> str:
    return f"{node_labels_path(node_id)}/{encode(label_name)}"
