from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Dict, Optional

from common.exceptions import InvalidArgumentError
from common.models.entities import Label

if TYPE_CHECKING:
    from .rest_client import GraphRestClient


logger = logging.getLogger(__name__)


class LabelRegistry:
    """
    One Label object per label name for the lifetime of a client session.

    Lookups of names already present are lock-free; creating a new entry is
    serialized so two threads resolving the same unseen name get one object.
    Entries are never evicted.
    """

    def __init__(self, client: Optional["GraphRestClient"] = None) -> None:
        self._client = client
        self._labels: Dict[str, Label] = {}
        self._lock = threading.Lock()

    def resolve(self, name: str) -> Label:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Label name must be a non-empty string")
        label = self._labels.get(name)
        if label is not None:
            return label
        with self._lock:
            label = self._labels.get(name)
            if label is None:
                label = Label(self._client, name)
                self._labels[name] = label
                logger.debug("Registered label %r", name)
        return label

    def __contains__(self, name: object) -> bool:
        return name in self._labels

    def __len__(self) -> int:
        return len(self._labels)
