import pytest

from tracker_app.core.errors import FormatError
from tracker_app.core.parsers import parse_csv, parse_tabular, parse_xml

HEADER = "Nome do projeto,Status,Prioridade,Criado,Resolvido"


def test_csv_rows_preserve_order():
    content = "\n".join(
        [
            HEADER,
            "Proj A,Resolvido,Alta,01/01/2024,05/01/2024",
            "Proj B,Aberto,Baixa,02/01/2024,",
            "Proj C,Aberto,Media,03/01/2024,",
        ]
    )
    rows = parse_tabular("export.csv", content)
    assert [r["Nome do projeto"] for r in rows] == ["Proj A", "Proj B", "Proj C"]
    assert rows[1]["Resolvido"] == ""


def test_csv_mismatched_rows_are_dropped():
    content = "\n".join(
        [
            HEADER,
            "Proj A,Resolvido,Alta,01/01/2024,05/01/2024",
            "Proj B,Aberto",
            "Proj C,Aberto,Media,03/01/2024,,extra",
            "Proj D,Aberto,Media,03/01/2024,",
        ]
    )
    rows = parse_csv(content)
    assert [r["Nome do projeto"] for r in rows] == ["Proj A", "Proj D"]


def test_csv_semicolons_quotes_and_blank_lines():
    content = '"projeto";"status"\r\n\r\n  "Alpha" ; "done"  \r\n\n'
    rows = parse_csv(content)
    assert rows == [{"projeto": "Alpha", "status": "done"}]


@pytest.mark.parametrize("content", ["", "   \n\n", "Nome do projeto,Status\n"])
def test_csv_requires_header_and_data(content):
    with pytest.raises(FormatError):
        parse_tabular("empty.csv", content)


def test_xml_items():
    content = """<?xml version="1.0"?>
    <export>
      <item><projeto>Alpha</projeto><status>Resolvido</status></item>
      <item><projeto>Beta</projeto><status/></item>
    </export>"""
    rows = parse_tabular("export.xml", content)
    assert rows == [
        {"projeto": "Alpha", "status": "Resolvido"},
        {"projeto": "Beta", "status": ""},
    ]


def test_xml_rows_used_only_without_items():
    content = "<data><row><project>Gamma</project></row><row><project>Delta</project></row></data>"
    assert [r["project"] for r in parse_xml(content)] == ["Gamma", "Delta"]

    mixed = "<data><item><project>Item</project></item><row><project>Row</project></row></data>"
    assert [r["project"] for r in parse_xml(mixed)] == ["Item"]


def test_malformed_xml_raises_format_error():
    with pytest.raises(FormatError) as excinfo:
        parse_tabular("broken.xml", "<data><item></data>")
    assert excinfo.value.file_name == "broken.xml"


def test_unsupported_extension():
    with pytest.raises(FormatError):
        parse_tabular("export.json", "{}")


def test_leading_byte_order_mark_is_ignored():
    (row,) = parse_tabular("a.csv", "\ufeffNome do projeto;Status\nProj A;aberto\n")
    assert row == {"Nome do projeto": "Proj A", "Status": "aberto"}
    (item,) = parse_tabular("b.xml", "\ufeff<export><item><projeto>X</projeto></item></export>")
    assert item == {"projeto": "X"}
