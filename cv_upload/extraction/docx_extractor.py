import io
from collections.abc import Iterator

import docx
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from cv_upload.extraction.base import BaseTextExtractor
from cv_upload.extraction.exceptions import ExtractionError


class DocxExtractor(BaseTextExtractor):
    """Returns the raw text of a DOCX body, one paragraph per line.

    Paragraphs inside tables are emitted in document order, cell by cell.
    Table layout, images and formatting are dropped.
    """

    def extract(self, content: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(content))
            lines = list(_block_texts(document.element.body, document))
        except Exception as exc:
            raise ExtractionError(f"Could not read the DOCX file: {exc}") from exc
        return "\n".join(lines)


def _block_texts(container, parent) -> Iterator[str]:  # type: ignore[no-untyped-def]
    for child in container.iterchildren():
        if child.tag == qn("w:p"):
            yield Paragraph(child, parent).text
        elif child.tag == qn("w:tbl"):
            yield from _table_texts(Table(child, parent))


def _table_texts(table: Table) -> Iterator[str]:
    # Merged cells are reported once per grid column they span.
    seen: list[object] = []
    for row in table.rows:
        for cell in row.cells:
            if any(cell._tc is tc for tc in seen):
                continue
            seen.append(cell._tc)
            yield from _block_texts(cell._tc, cell)
