import os
import sys
from unittest.mock import MagicMock

# Ensure project root is on sys.path so imports like `from core...` work
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest
from core.graph.rest_client import GraphRestClient
from core.transport.base import Transport


@pytest.fixture(scope="function")
def transport():
    """
    Transport mock; tests set `transport.get.return_value` and assert on calls.
    """
    return MagicMock(spec=Transport)


@pytest.fixture(scope="function")
def client(transport) -> GraphRestClient:
    return GraphRestClient(transport)
