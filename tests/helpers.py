"""Fixture paths and HTML builders for hand-written definitions pages."""

from pathlib import Path

FIXTURES = Path(__file__).resolve().parent / "fixtures"
DEFINITIONS_HTML = FIXTURES / "keycloak-definitions.html"
REFERENCE_JSON = FIXTURES / "keycloak-schemas.json"


def definitions_page(*sections: str) -> str:
    """Wrap raw <div class="sect2"> blocks in a minimal definitions chapter."""
    return (
        '<html><body><div class="sect1">'
        '<h2 id="_definitions">Definitions</h2>'
        '<div class="sectionbody">' + "".join(sections) + '</div>'
        '</div></body></html>'
    )


def definition_section(title: str, rows) -> str:
    """Render one definition section with (property, raw type) rows."""
    body = "".join(
        f'<tr><td><p class="tableblock"><strong>{name}</strong><br><em>optional</em></p></td>'
        f'<td><p class="tableblock">{raw_type}</p></td></tr>'
        for name, raw_type in rows
    )
    return (
        f'<div class="sect2"><h3>{title}</h3>'
        f'<table><thead><tr><th>Name</th><th>Schema</th></tr></thead>'
        f'<tbody>{body}</tbody></table></div>'
    )
