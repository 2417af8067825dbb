#!/usr/bin/env python3
"""
Keycloak OpenAPI Transformer

Converts the Keycloak Admin REST API HTML reference into an OpenAPI 3.0
document. Only component schemas are produced; `paths` is left empty.

Usage:
  python openapi_transformer.py keycloak/6.0.html -o keycloak-6.0.json --api-version 6.0
  curl -s https://www.keycloak.org/docs-api/6.0/rest-api/index.html | python openapi_transformer.py
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from docs_loader import KeycloakDocsLoader, parse_document
from keycloak_openapi.schema_types import SchemaMap
from keycloak_openapi.section_extractor import parse_schemas

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.2"
DEFAULT_TITLE = "Keycloak Admin REST API"
DEFAULT_API_VERSION = "1"


# =========================
#  OpenAPI assembly
# =========================
def schemas_to_json(schemas: SchemaMap) -> Dict[str, Any]:
    """Dump a schema map to OpenAPI JSON, keeping schema order."""
    return {name: schema.to_openapi() for name, schema in schemas.items()}


def build_openapi_document(schemas: SchemaMap,
                           title: str = DEFAULT_TITLE,
                           version: str = DEFAULT_API_VERSION) -> Dict[str, Any]:
    """Embed schemas under components/schemas of an OpenAPI document."""
    return {
        "openapi": OPENAPI_VERSION,
        "info": {"title": title, "version": version},
        "paths": {},
        "components": {"schemas": schemas_to_json(schemas)},
    }


def transform(html_content: str,
              title: str = DEFAULT_TITLE,
              version: str = DEFAULT_API_VERSION) -> Dict[str, Any]:
    """Parse a documentation page and return the OpenAPI document."""
    return build_openapi_document(parse_schemas(parse_document(html_content)), title, version)


def write_json(data: Dict[str, Any], output: str, indent: Optional[int]) -> None:
    if output == "-":
        json.dump(data, sys.stdout, indent=indent)
        sys.stdout.write("\n")
        return

    with open(output, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=indent)
        f.write("\n")


# =========================
#  CLI
# =========================
def main(argv=None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description='Convert the Keycloak REST API HTML reference into OpenAPI')
    parser.add_argument('source', nargs='?', help='HTML file, URL or "-" for stdin (default: $KEYCLOAK_DOCS_SOURCE or stdin)')
    parser.add_argument('--output', '-o', default='-', help='Output file (default: stdout)')
    parser.add_argument('--title', default=os.getenv('KEYCLOAK_API_TITLE', DEFAULT_TITLE), help='info.title of the generated document')
    parser.add_argument('--api-version', default=os.getenv('KEYCLOAK_API_VERSION', DEFAULT_API_VERSION), help='info.version of the generated document')
    parser.add_argument('--schemas-only', action='store_true', help='Only write the {name: schema} map')
    parser.add_argument('--indent', type=int, default=2, help='JSON indentation (default: 2)')
    parser.add_argument('--log-level', default=os.getenv('LOG_LEVEL', 'INFO'),
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        document = KeycloakDocsLoader(args.source).load_document()
        schemas = parse_schemas(document)

        if args.schemas_only:
            result = schemas_to_json(schemas)
        else:
            result = build_openapi_document(schemas, args.title, args.api_version)

        write_json(result, args.output, args.indent)
    except Exception:
        logger.exception("Transformation failed")
        return 1

    property_count = sum(len(s.properties or {}) for s in schemas.values())
    logger.info(f"Wrote {len(schemas)} schemas ({property_count} properties) to "
                f"{'stdout' if args.output == '-' else args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
