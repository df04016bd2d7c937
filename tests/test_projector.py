"""Tests for elpparser.projector."""

from __future__ import annotations

import pytest

from elpparser.errors import ElpFormatError
from elpparser.markup import parse_markup
from elpparser.models import IdeviceSummary, PageNode
from elpparser.projector import SchemaProjector, strip_tags
from tests._fixtures.documents import DICTIONARY_PACKAGE, MINIMAL_DICTIONARY_PACKAGE, ODE_PACKAGE


def _project(document: str, **kwargs):
    root = parse_markup(document.lstrip().encode("utf-8"))
    return SchemaProjector(**kwargs).project(root)


def test_minimal_package_projection() -> None:
    report = _project(MINIMAL_DICTIONARY_PACKAGE)

    assert [entry.schema for entry in report.schemas] == ["Package"]
    assert report.schemas[0].content == {
        "title": "T",
        "author": "A",
        "language": "",
        "description": "",
        "license": "L",
        "classification": "",
    }
    assert report.pages == [
        PageNode(filename="index.html", pagename="Page One", level=0, idevices=[])
    ]


def test_schema_entries_follow_fixed_order() -> None:
    report = _project(DICTIONARY_PACKAGE)
    assert [entry.schema for entry in report.schemas] == [
        "Package",
        "Dublin core",
        "LOM v1.0",
        "LOM-ES v1.0",
    ]


def test_dublin_core_projection() -> None:
    entry = _project(DICTIONARY_PACKAGE).schema("Dublin core")
    assert entry is not None
    assert entry.content == {
        "title": "Riesgos (DC)",
        "author": "Equipo CEDEC",
        "language": "es",
        "description": "Descripción DC",
        "rights": {"rights": "CC BY-SA"},
        "classification": {"source": "INTEF", "taxon_path": []},
    }


def test_lom_projection_defaults_missing_paths() -> None:
    entry = _project(DICTIONARY_PACKAGE).schema("LOM v1.0")
    assert entry is not None
    assert entry.content == {
        "title": [{"language": "es", "valueOf_": "Título LOM"}],
        "author": ["BEGIN:VCARD FN:Autora END:VCARD"],
        "language": ["es"],
        "description": [],
        "rights": {},
        "classification": {},
    }


def test_lom_es_prefers_entity_name() -> None:
    entry = _project(DICTIONARY_PACKAGE).schema("LOM-ES v1.0")
    assert entry is not None
    assert entry.content["author"] == "Autora ES"
    assert entry.content["rights"] == {"access": "universal"}
    assert entry.content["title"] == []


def test_lom_es_falls_back_to_entity() -> None:
    document = """
    <dictionary>
      <string role="key" value="lomEs"/>
      <dictionary>
        <string role="key" value="lifeCycle"/>
        <dictionary>
          <string role="key" value="contribute"/>
          <dictionary><string role="key" value="entity"/><unicode value="vcard"/></dictionary>
        </dictionary>
      </dictionary>
    </dictionary>
    """
    entry = _project(document).schema("LOM-ES v1.0")
    assert entry is not None
    assert entry.content["author"] == "vcard"


def test_page_tree_is_preorder_with_references_resolved() -> None:
    pages = _project(DICTIONARY_PACKAGE).pages

    assert [(page.filename, page.pagename, page.level) for page in pages] == [
        ("index.html", "Inicio", 0),
        ("cafe_deja_vu.html", "Café Déjà Vu!", 1),
        ("seccion_1_1.html", "Sección 1.1", 2),
        ("evaluacion.html", "Evaluación", 1),
    ]


def test_idevice_summaries_use_first_html_field() -> None:
    idevices = _project(DICTIONARY_PACKAGE).pages[0].idevices
    assert idevices == [
        IdeviceSummary(
            id="7",
            type="freetext",
            title="Texto libre",
            text="Hola mundo",
            html="<p>Hola <b>mundo</b></p>",
        ),
        IdeviceSummary(id="8", type="", title="Sin campos", text="", html=""),
    ]


def test_page_filenames_honour_locale() -> None:
    document = MINIMAL_DICTIONARY_PACKAGE.replace(
        '<string role="key" value="_title"/><unicode value="Page One"/>',
        '<string role="key" value="_title"/><unicode value="Raíz"/>'
        '<string role="key" value="children"/><list>'
        '<dictionary><string role="key" value="_title"/><unicode value="Über"/></dictionary>'
        "</list>",
    )
    pages = _project(document, locale="de").pages
    assert [page.filename for page in pages] == ["index.html", "ueber.html"]


def test_document_without_dictionary_reports_empty_package() -> None:
    report = _project(ODE_PACKAGE)
    assert [entry.schema for entry in report.schemas] == ["Package"]
    assert set(report.schemas[0].content.values()) == {""}
    assert report.pages == []


def test_page_depth_is_bounded() -> None:
    nested = '<dictionary><string role="key" value="_title"/><unicode value="leaf"/></dictionary>'
    for _ in range(6):
        nested = (
            '<dictionary><string role="key" value="_title"/><unicode value="n"/>'
            f'<string role="key" value="children"/><list>{nested}</list></dictionary>'
        )
    document = (
        '<dictionary><string role="key" value="_nodeIdDict"/><dictionary>'
        f'<unicode role="key" value="0"/>{nested}</dictionary></dictionary>'
    )
    with pytest.raises(ElpFormatError):
        _project(document, max_depth=3)


def test_report_serialises_references() -> None:
    document = """
    <dictionary>
      <string role="key" value="lom"/>
      <dictionary><string role="key" value="rights"/><reference key="42"/></dictionary>
    </dictionary>
    """
    data = _project(document).to_dict()
    assert data["metadata"][1]["content"]["rights"] == {"reference": "42"}


def test_strip_tags() -> None:
    assert strip_tags("<p>a &amp; <em>b</em></p>") == "a & b"
    assert strip_tags("") == ""


def test_idevice_fields_given_as_references_are_resolved() -> None:
    document = """
<instance class="exe.engine.package.Package" reference="1">
<dictionary>
<string role="key" value="content"/>
<instance class="exe.engine.field.TextAreaField" reference="20">
<dictionary>
<string role="key" value="content_w_resourcePaths"/><unicode value="&lt;p&gt;Hi&lt;/p&gt;"/>
</dictionary>
</instance>
<string role="key" value="_nodeIdDict"/>
<dictionary>
<unicode role="key" value="0"/>
<instance class="exe.engine.node.Node" reference="2">
<dictionary>
<string role="key" value="_title"/><unicode value="Home"/>
<string role="key" value="idevices"/>
<list>
<instance class="exe.engine.idevice.Idevice" reference="3">
<dictionary>
<string role="key" value="id"/><unicode value="9"/>
<string role="key" value="fields"/><list><reference key="20"/></list>
</dictionary>
</instance>
</list>
</dictionary>
</instance>
</dictionary>
</dictionary>
</instance>
"""
    idevice = _project(document).pages[0].idevices[0]
    assert idevice.html == "<p>Hi</p>"
    assert idevice.text == "Hi"


def test_schema_values_given_as_references_are_resolved() -> None:
    document = """
<instance class="exe.engine.package.Package" reference="1">
<dictionary>
<string role="key" value="_dc"/>
<instance class="exe.engine.package.DublinCore" reference="30">
<dictionary>
<string role="key" value="title"/><unicode value="Shared DC"/>
</dictionary>
</instance>
<string role="key" value="_lom"/>
<instance class="exe.engine.lom.lomsubs.lomSub" reference="31">
<dictionary>
<string role="key" value="rights"/><dictionary/>
</dictionary>
</instance>
<string role="key" value="dublinCore"/><reference key="30"/>
<string role="key" value="lom"/><reference key="31"/>
<string role="key" value="lomEs"/><reference key="99"/>
</dictionary>
</instance>
"""
    report = _project(document)
    assert [entry.schema for entry in report.schemas] == ["Package", "Dublin core", "LOM v1.0"]
    assert report.schema("Dublin core").content["title"] == "Shared DC"
