#!/usr/bin/env python3
"""
Section Extractor for Keycloak REST API documentation

Walks the Asciidoctor-rendered "Definitions" chapter of the Keycloak
Admin REST API page and extracts one schema per definition section:

    <h2 id="_definitions">Definitions</h2>
    <div class="sectionbody">
      <div class="sect2">
        <h3>PolicyRepresentation</h3>
        <table><tbody>
          <tr><td><strong>logic</strong></td><td>enum (POSITIVE, NEGATIVE)</td></tr>

Only this exact layout is supported. A missing heading or cell means the page
comes from an unsupported generator version and extraction stops with
MalformedDocumentError; no partial schema map is produced.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List

from bs4 import BeautifulSoup, Tag

from .schema_types import SchemaMap
from .type_resolver import build_schema

logger = logging.getLogger(__name__)

SECTIONS_SELECTOR = "#_definitions + .sectionbody > .sect2"
TITLE_SELECTOR = "h3"
ROW_SELECTOR = "table > tbody > tr"
PROPERTY_NAME_SELECTOR = "td:first-child strong"
TYPE_SELECTOR = "td:first-child + td"


class MalformedDocumentError(ValueError):
    """The document does not follow the known definitions layout."""


@dataclass(frozen=True)
class PropertyRow:
    """One row of a definition table"""
    property_name: str
    raw_type: str


@dataclass(frozen=True)
class SchemaSection:
    """One definition section with its property rows in document order"""
    name: str
    rows: List[PropertyRow]


class SchemaSectionExtractor:
    """Extracts definition sections from a parsed documentation page"""

    def iter_sections(self, document: BeautifulSoup) -> Iterator[SchemaSection]:
        """Yield every definition section in document order."""
        for index, section in enumerate(document.select(SECTIONS_SELECTOR)):
            name = self._parse_title(section, index)
            rows = [
                self._parse_row(row, name, row_index)
                for row_index, row in enumerate(section.select(ROW_SELECTOR))
            ]
            yield SchemaSection(name=name, rows=rows)

    def _parse_title(self, section: Tag, index: int) -> str:
        title = section.select_one(TITLE_SELECTOR)
        if title is None:
            raise MalformedDocumentError(
                f"Definition section #{index} has no <{TITLE_SELECTOR}> title"
            )
        return title.get_text()

    def _parse_row(self, row: Tag, schema_name: str, row_index: int) -> PropertyRow:
        name_cell = row.select_one(PROPERTY_NAME_SELECTOR)
        if name_cell is None:
            raise MalformedDocumentError(
                f"{schema_name}: row {row_index} has no property name "
                f"({PROPERTY_NAME_SELECTOR!r})"
            )

        type_cell = row.select_one(TYPE_SELECTOR)
        if type_cell is None:
            raise MalformedDocumentError(
                f"{schema_name}: row {row_index} has no type cell ({TYPE_SELECTOR!r})"
            )

        return PropertyRow(property_name=name_cell.get_text(), raw_type=type_cell.get_text())


def parse_schemas(document: BeautifulSoup) -> SchemaMap:
    """
    Build the schema map for a whole documentation page.

    Args:
        document: Parsed Keycloak REST API page

    Returns:
        Dict mapping schema name to object schema, in document order.
        A repeated schema name keeps the last section.

    Raises:
        MalformedDocumentError: A section or row lacks an expected element
    """
    extractor = SchemaSectionExtractor()
    schemas: SchemaMap = {}

    for section in extractor.iter_sections(document):
        schemas[section.name] = build_schema(section)

    logger.info(f"Parsed {len(schemas)} schemas from definitions")
    return schemas
