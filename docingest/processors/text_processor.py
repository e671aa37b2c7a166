import io

import docx

from docingest.ingestion.models import UploadedItem
from docingest.logging.logger import Log
from docingest.pdf.base import BasePdfExtractor
from docingest.processors.base import BaseProcessor
from docingest.processors.exceptions import TextProcessingError
from docingest.processors.models import TextContent


class TextProcessor(BaseProcessor):
    """Turns pdf, docx and txt uploads into plain text."""

    def __init__(self, pdf_extractor: BasePdfExtractor, encoding: str = "utf-8") -> None:
        self._pdf_extractor = pdf_extractor
        self._encoding = encoding

    def process(self, item: UploadedItem) -> TextContent:
        extension = item.extension
        if extension == "pdf":
            result = self._pdf_extractor.extract(item.content)
            content = TextContent(
                text=result.text,
                format="pdf",
                char_count=len(result.text),
                page_count=result.page_count,
            )
        elif extension == "docx":
            text = self._read_docx(item)
            content = TextContent(text=text, format="docx", char_count=len(text))
        elif extension == "txt":
            text = self._decode(item)
            content = TextContent(text=text, format="txt", char_count=len(text))
        elif extension == "doc":
            raise TextProcessingError(
                f"{item.name}: legacy .doc files are not supported, convert to .docx"
            )
        else:
            raise TextProcessingError(f"{item.name}: not a text document")

        Log.debug(f"Extracted {content.char_count} chars from {item.name}")
        return content

    def _decode(self, item: UploadedItem) -> str:
        try:
            return item.content.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise TextProcessingError(
                f"{item.name}: not valid {self._encoding} text ({exc.reason})"
            ) from exc

    @staticmethod
    def _read_docx(item: UploadedItem) -> str:
        try:
            document = docx.Document(io.BytesIO(item.content))
        except Exception as exc:
            raise TextProcessingError(f"{item.name}: cannot open docx: {exc}") from exc
        return "\n".join(paragraph.text for paragraph in document.paragraphs).strip()
