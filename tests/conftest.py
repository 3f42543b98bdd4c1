"""Shared pytest fixtures"""

import sys
from pathlib import Path

import pytest

# Add project root to path for search_server imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from search_server import DocumentStatus, SearchServer


@pytest.fixture
def empty_server():
    """Server with stop words "and in on" and no documents"""
    return SearchServer("and in on")


@pytest.fixture
def demo_server(empty_server):
    """
    Server with the four demo documents:
    
    0: "white cat and modern ring"  ACTUAL     rating 2
    1: "puffy cat puffy tail cat"   ACTUAL     rating 5
    2: "nice dog cool eyes"         ACTUAL     rating -1
    3: "nice bird jenny"            BANNED     rating 9
    """
    empty_server.add_document(0, "white cat and modern ring", DocumentStatus.ACTUAL, [8, -3])
    empty_server.add_document(1, "puffy cat puffy tail cat", DocumentStatus.ACTUAL, [7, 2, 7])
    empty_server.add_document(2, "nice dog cool eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    empty_server.add_document(3, "nice bird jenny", DocumentStatus.BANNED, [9])
    return empty_server
