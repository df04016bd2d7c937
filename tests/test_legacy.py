"""Tests for elpparser.legacy."""

from __future__ import annotations

from elpparser.legacy import extract_legacy_metadata
from elpparser.markup import parse_markup
from tests._fixtures.documents import DICTIONARY_PACKAGE, ODE_PACKAGE


def _root(document: str):
    return parse_markup(document.lstrip().encode("utf-8"))


def test_ode_properties_are_mapped() -> None:
    fields = extract_legacy_metadata(_root(ODE_PACKAGE))
    assert fields == {
        "title": "Título del proyecto",
        "description": "Una descripción",
        "author": "Autoría",
        "license": "public domain",
        "language": "ca",
        "learning_resource_type": "exercise",
    }


def test_dictionary_keys_are_mapped() -> None:
    fields = extract_legacy_metadata(_root(DICTIONARY_PACKAGE))
    assert fields["title"] == "Riesgos de la ruta"
    assert fields["author"] == "INTEF"
    assert fields["language"] == "es"
    assert fields["description"] == "Itinerario para la empleabilidad"
    assert fields["license"] == "creative commons: attribution - share alike 4.0"
    assert fields["learning_resource_type"] == "lección"


def test_dictionary_ignores_non_string_values() -> None:
    root = _root(
        """
        <dictionary>
          <string role="key" value="_title"/><list><unicode value="nested"/></list>
          <string role="key" value="_author"/><string value="Someone"/>
        </dictionary>
        """
    )
    fields = extract_legacy_metadata(root)
    assert fields["title"] == ""
    assert fields["author"] == "Someone"


def test_unrecognised_document_leaves_defaults() -> None:
    fields = extract_legacy_metadata(_root("<html><body>nothing here</body></html>"))
    assert set(fields.values()) == {""}
    assert len(fields) == 6
