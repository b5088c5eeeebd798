from __future__ import annotations

from typing import Any, Iterable, List, Optional

from common.models.entities import Label, Node
from common.models.row import Row
from config.config import Settings, get_settings
from core.transport.base import Transport
from core.transport.http_transport import HttpTransport, HttpTransportConfig
from .label_query_executor import LabelQueryExecutor
from .label_registry import LabelRegistry
from utils.logging_config import get_logger

logger = get_logger(__name__)


class GraphRestClient:

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self._registry = LabelRegistry(self)
        self._executor = LabelQueryExecutor(transport, self._registry, self)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GraphRestClient":
        settings = settings or get_settings()
        transport = HttpTransport(HttpTransportConfig.from_settings(settings))
        logger.info("Graph REST client using %s", transport.endpoint)
        return cls(transport)

    @property
    def transport(self) -> Transport:
        return self._transport

    def close(self) -> None:
        try:
            self._transport.close()
        except Exception:
            logger.exception("Error closing transport")

    def make_label(self, name: str) -> Label:
        return self._registry.resolve(name)

    def get_nodes_for_label(self, label: Label, property_name: Optional[str] = None, property_value: Any = None) -> Row:
        return self._executor.get_nodes_for_label(label, property_name, property_value)

    def get_labels(self, node: Optional[Node] = None) -> List[Label]:
        return self._executor.get_labels(node)

    def add_labels(self, node: Node, labels: Iterable[Label]) -> List[Label]:
        return self._executor.add_labels(node, labels)

    def remove_label(self, node: Node, label: Label) -> Label:
        return self._executor.remove_label(node, label)

    def __enter__(self) -> "GraphRestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "GraphRestClient",
]
