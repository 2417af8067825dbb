"""Shared fixtures for the Keycloak OpenAPI transformer tests."""

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from docs_loader import parse_document
from helpers import DEFINITIONS_HTML, REFERENCE_JSON


@pytest.fixture(scope="session")
def definitions_html() -> str:
    return DEFINITIONS_HTML.read_text(encoding="utf-8")


@pytest.fixture
def definitions_document(definitions_html):
    return parse_document(definitions_html)


@pytest.fixture(scope="session")
def reference_schemas() -> dict:
    """Hand-verified components/schemas for the definitions fixture."""
    with open(REFERENCE_JSON, "r", encoding="utf-8") as f:
        return json.load(f)["components"]["schemas"]
