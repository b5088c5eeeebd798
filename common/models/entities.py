from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Dict, Optional

from common.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from common.models.row import Row
    from core.graph.rest_client import GraphRestClient


def _weak(client: Optional["GraphRestClient"]):
    return weakref.ref(client) if client is not None else None


class Label:
    """
    A named tag attached to graph nodes.

    Labels hold only a weak reference to their client; obtain them through
    `GraphRestClient.make_label` so that one name maps to one object.
    """

    __slots__ = ("_name", "_client_ref", "__weakref__")

    def __init__(self, client: Optional["GraphRestClient"], name: str) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Label name must be a non-empty string")
        self._name = name
        self._client_ref = _weak(client)

    @property
    def name(self) -> str:
        return self._name

    @property
    def client(self) -> Optional["GraphRestClient"]:
        return self._client_ref() if self._client_ref is not None else None

    def get_nodes(self, property_name: Optional[str] = None, property_value: Any = None) -> "Row":
        return _require_client(self.client).get_nodes_for_label(self, property_name, property_value)

    def __repr__(self) -> str:
        return f"Label({self._name!r})"


class Node:
    """Minimal node reference: server id plus the property map it was loaded with."""

    def __init__(
        self,
        client: Optional["GraphRestClient"] = None,
        id: Optional[int] = None,
        properties: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._client_ref = _weak(client)
        self.id = id
        self.properties: Dict[str, Any] = dict(properties or {})

    @property
    def client(self) -> Optional["GraphRestClient"]:
        return self._client_ref() if self._client_ref is not None else None

    @property
    def has_id(self) -> bool:
        return self.id is not None

    def get_labels(self):
        return _require_client(self.client).get_labels(self)

    def __repr__(self) -> str:
        return f"Node(id={self.id!r})"


def _require_client(client: Optional["GraphRestClient"]) -> "GraphRestClient":
    if client is None:
        raise InvalidArgumentError("Entity is not bound to a live client")
    return client
