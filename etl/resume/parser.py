"""
Document Parser - Load resume and job description text from files.

Supports:
- Plain Text (.txt, .md): UTF-8 text as-is
- Word Documents (.docx): paragraphs and table cells
- PDF (.pdf): text of every page

Returned text feeds the chronology analysis and the scoring service, which
both work on raw text.
"""
import logging
from dataclasses import dataclass
from pathlib import Path

from docx import Document
from pypdf import PdfReader

logger = logging.getLogger(__name__)


@dataclass
class ParsedResume:
    """Result of parsing a document.

    Attributes:
        text: Extracted text
        format: Detected file format ('txt', 'docx' or 'pdf')
        source_path: Original file path
    """
    text: str
    format: str
    source_path: str


class ResumeParser:
    """Parse resumes and job descriptions from multiple formats.

    Line structure matters to the entry extractor ("Title | Company | Dates"
    lines), so extracted paragraphs and pages are joined with newlines.
    """

    SUPPORTED_FORMATS = {
        '.txt', '.md', '.docx', '.pdf'
    }

    def __init__(self):
        """Initialize the resume parser."""
        self.logger = logging.getLogger(__name__)

    def parse(self, file_path: str) -> ParsedResume:
        """Parse a document and extract its text.

        Args:
            file_path: Path to the document

        Returns:
            ParsedResume with extracted text

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If format is unsupported, parsing fails or no text is found
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"Document not found: {file_path}")

        ext = path.suffix.lower()

        if ext not in self.SUPPORTED_FORMATS:
            supported = ', '.join(sorted(self.SUPPORTED_FORMATS))
            raise ValueError(
                f"Unsupported document format: {ext}. "
                f"Supported formats: {supported}"
            )

        self.logger.info(f"Parsing document {file_path} (format: {ext})")

        if ext in ('.txt', '.md'):
            parsed = self._parse_txt(path)
        elif ext == '.docx':
            parsed = self._parse_docx(path)
        else:
            parsed = self._parse_pdf(path)

        if not parsed.text.strip():
            raise ValueError(f"No text could be extracted from {file_path}")

        return parsed

    def _parse_txt(self, path: Path) -> ParsedResume:
        """Parse plain text file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()

            return ParsedResume(
                text=text,
                format='txt',
                source_path=str(path)
            )

        except UnicodeDecodeError as e:
            raise ValueError(
                f"File encoding issue in {path}: {e}. "
                f"Ensure file is UTF-8 encoded."
            )

    def _parse_docx(self, path: Path) -> ParsedResume:
        """Parse Word document (.docx).

        Extracts text from all paragraphs, then table rows (common in resumes),
        one row per line with cells joined by ' | '.
        """
        try:
            doc = Document(str(path))

            lines = [para.text.strip() for para in doc.paragraphs if para.text.strip()]

            for table in doc.tables:
                for row in table.rows:
                    row_texts = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if row_texts:
                        lines.append(' | '.join(row_texts))

            text = '\n'.join(lines)

            self.logger.debug(f"Parsed DOCX document from {path}")

            return ParsedResume(
                text=text,
                format='docx',
                source_path=str(path)
            )

        except Exception as e:
            raise ValueError(f"Failed to parse DOCX file {path}: {e}")

    def _parse_pdf(self, path: Path) -> ParsedResume:
        """Parse PDF file, keeping page text line breaks."""
        try:
            reader = PdfReader(path)

            if len(reader.pages) == 0:
                raise ValueError("PDF file has no pages")

            pages_text = []
            for i, page in enumerate(reader.pages):
                try:
                    page_text = page.extract_text()
                    if page_text and page_text.strip():
                        pages_text.append(page_text.strip())
                except Exception as e:
                    self.logger.warning(f"Failed to extract text from page {i + 1}: {e}")

            text = '\n'.join(pages_text)

            if not text.strip():
                self.logger.warning(
                    f"No text extracted from PDF {path}. "
                    f"The PDF may be scanned images or have text extraction disabled."
                )

            self.logger.debug(
                f"Parsed PDF document from {path} ({len(reader.pages)} pages, "
                f"{len(text)} chars extracted)"
            )

            return ParsedResume(
                text=text,
                format='pdf',
                source_path=str(path)
            )

        except Exception as e:
            raise ValueError(f"Failed to parse PDF file {path}: {e}")

    def is_supported(self, file_path: str) -> bool:
        """Check if a file format is supported."""
        return Path(file_path).suffix.lower() in self.SUPPORTED_FORMATS
