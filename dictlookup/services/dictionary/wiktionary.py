"""Extraction of verb forms from Wiktionary inflection tables."""

from dictlookup.services.dictionary.base import VerbForm
from dictlookup.services.dictionary.document import Node, parse_html

TABLE_CELL = ".inflection-table tr td"


def parse_conjugations(html: str) -> list[VerbForm]:
    """
    Parse the inflection table of a Wiktionary page.

    Each cell holds a label and a form, either as two text lines or
    separated by a ``<br>``. Cells that do not yield both parts are skipped.
    """
    doc = parse_html(html)
    verbs: list[VerbForm] = []

    for cell in doc.select(TABLE_CELL):
        if not cell.text():
            continue

        pair = _split_cell(cell)
        if pair is None:
            continue

        form_type, text = pair
        verbs.append(VerbForm(id=len(verbs), form_type=form_type, text=text))

    return verbs


def _split_cell(cell: Node) -> tuple[str, str] | None:
    block = cell.select_one("p")
    if block is None:
        return None

    lines = [line.strip() for line in block.text().split("\n") if line.strip()]
    if len(lines) >= 2:
        form_type, text = lines[0], lines[1]
    else:
        parts = block.split_on_breaks()
        if len(parts) < 2:
            return None
        form_type, text = parts[0], parts[1]

    if not form_type or not text:
        return None
    return form_type, text
