from __future__ import annotations

import re
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter, ValidationError, field_validator

from common.exceptions import MalformedResponseError

_TRAILING_ID = re.compile(r"/(\d+)$")


class NodeEntry(BaseModel):
    """One entry of a node listing: `{"self": ".../node/<id>", "data": {...}}`."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
    self_url: StrictStr = Field(alias="self")
    data: Dict[str, Any]

    @field_validator("self_url")
    @classmethod
    def _check_self_url(cls, v: str) -> str:
        if not _TRAILING_ID.search(v):
            raise ValueError(f"'self' does not end in a numeric id: {v!r}")
        return v

    @property
    def id(self) -> int:
        return int(_TRAILING_ID.search(self.self_url).group(1))


LabelName = Annotated[StrictStr, Field(min_length=1)]

_NODE_ENTRIES = TypeAdapter(List[NodeEntry])
_LABEL_NAMES = TypeAdapter(List[LabelName])


def parse_node_entries(body: Any) -> List[NodeEntry]:
    if body is None:
        return []
    try:
        return _NODE_ENTRIES.validate_python(body)
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected node listing: {e}") from e


def parse_label_names(body: Any) -> List[str]:
    if body is None:
        return []
    try:
        return _LABEL_NAMES.validate_python(body)
    except ValidationError as e:
        raise MalformedResponseError(f"Unexpected label listing: {e}") from e
