from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Optional

from common.exceptions import InvalidArgumentError, TransportFailure
from common.models.entities import Label, Node
from common.models.responses import parse_label_names, parse_node_entries
from common.models.row import Row
from common.utils import path_builder
from core.transport.base import Transport, TransportResponse
from .label_registry import LabelRegistry

if TYPE_CHECKING:
    from .rest_client import GraphRestClient


logger = logging.getLogger(__name__)


class LabelQueryExecutor:

    """
    Label-scoped reads and label mutations over the REST endpoint.

    Every operation validates its arguments before touching the transport and
    then issues exactly one request:

    - get_nodes_for_label: GET /label/<name>/nodes[?<prop>=<"value">]
    - get_labels: GET /labels or GET /node/<id>/labels
    - add_labels: POST /node/<id>/labels
    - remove_label: DELETE /node/<id>/labels/<name>

    Label names coming back from the server go through the registry, so a
    name already known to the session yields the object callers already hold.
    """

    def __init__(self, transport: Transport, registry: LabelRegistry, client: Optional["GraphRestClient"] = None) -> None:
        """
        Args:
            transport: transport used for every request.
            registry: session label registry.
            client: owning client, bound into the Nodes this executor builds.
        """
        self._transport = transport
        self._registry = registry
        self._client = client

    @staticmethod
    def _check_label(label: Any) -> Label:
        if not isinstance(label, Label) or not label.name:
            raise InvalidArgumentError("A label with a non-empty name is required")
        return label

    @staticmethod
    def _check_node_id(node: Any) -> int:
        if not isinstance(node, Node) or not node.has_id:
            raise InvalidArgumentError("Node must have an id")
        return node.id

    @staticmethod
    def _check_response(response: TransportResponse, method: str, path: str) -> TransportResponse:
        if not response.ok:
            logger.warning("%s %s returned status %d", method, path, response.code)
            raise TransportFailure(
                f"{method} {path} returned status {response.code}",
                code=response.code,
                path=path,
                data=response.data,
            )
        return response

    def get_nodes_for_label(self, label: Label, property_name: Optional[str] = None, property_value: Any = None) -> Row:
        """
        List nodes carrying a label, optionally filtered by one property.

        Args:
            label: label to look up.
            property_name: property to filter on; requires property_value.
            property_value: value the property must equal; sent as a quoted string literal.

        Returns:
            Row of Node in server order; empty when nothing matches.
        """
        self._check_label(label)
        if (property_name is None) != (property_value is None):
            raise InvalidArgumentError("property_name and property_value must be given together")
        if property_name is not None and (not isinstance(property_name, str) or not property_name):
            raise InvalidArgumentError("property_name must be a non-empty string")

        path = path_builder.label_nodes_path(label.name, property_name, property_value)
        response = self._check_response(self._transport.get(path), "GET", path)
        entries = parse_node_entries(response.data)
        logger.debug("GET %s returned %d nodes", path, len(entries))
        return Row(Node(self._client, id=entry.id, properties=entry.data) for entry in entries)

    def get_labels(self, node: Optional[Node] = None) -> List[Label]:
        """
        List label names on the server, or on one node, as registry Labels.

        Args:
            node: when given, only labels attached to this node; it must have an id.

        Returns:
            Labels in server order.
        """
        if node is None:
            path = path_builder.labels_path()
        else:
            path = path_builder.node_labels_path(self._check_node_id(node))

        response = self._check_response(self._transport.get(path), "GET", path)
        names = parse_label_names(response.data)
        return [self._registry.resolve(name) for name in names]

    def add_labels(self, node: Node, labels: Iterable[Label]) -> List[Label]:
        """
        Attach labels to a node in one request.

        Returns:
            The labels that were sent.
        """
        node_id = self._check_node_id(node)
        labels = list(labels or ())
        if not labels:
            raise InvalidArgumentError("At least one label is required")
        for label in labels:
            self._check_label(label)

        path = path_builder.node_labels_path(node_id)
        self._check_response(self._transport.post(path, [label.name for label in labels]), "POST", path)
        logger.debug("Added %d labels to node %d", len(labels), node_id)
        return labels

    def remove_label(self, node: Node, label: Label) -> Label:
        node_id = self._check_node_id(node)
        self._check_label(label)

        path = path_builder.node_label_path(node_id, label.name)
        self._check_response(self._transport.delete(path), "DELETE", path)
        logger.debug("Removed label %r from node %d", label.name, node_id)
        return label


__all__ = [
    "LabelQueryExecutor",
]
