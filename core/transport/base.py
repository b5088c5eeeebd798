"""
Transport contract
Everything the label core needs from the network: rooted, already-encoded
paths in, a status code and a decoded JSON body out.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class TransportResponse(BaseModel):
    """Status code plus decoded body"""
    code: int
    data: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.code < 300


class Transport(ABC):
    """Base class for REST transports"""

    @abstractmethod
    def get(self, path: str) -> TransportResponse:
        """GET a rooted, encoded path relative to the endpoint"""
        pass

    @abstractmethod
    def post(self, path: str, data: Any = None) -> TransportResponse:
        """POST a JSON body to a rooted, encoded path"""
        pass

    @abstractmethod
    def delete(self, path: str) -> TransportResponse:
        """DELETE a rooted, encoded path"""
        pass

    def close(self) -> None:
        """Release network resources"""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
