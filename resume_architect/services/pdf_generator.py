"""Service for exporting a resume as a single-page PDF."""

import asyncio
import base64
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol
from weasyprint import HTML as WeasyHTML, CSS
from resume_architect.errors import ExportError
from resume_architect.models.resume_models import GeneratedDocument, ResumeRecord
from resume_architect.services.resume_html_generator import RESUME_ELEMENT_ID, ResumeHTMLGenerator
from resume_architect.services.snapshot_renderer import PlaywrightRenderer, Renderer, Snapshot
from resume_architect.utils.text_helpers import filename_stem

logger = logging.getLogger(__name__)

EXPORT_SCALE = 2
FALLBACK_FILENAME = "resume.pdf"


@dataclass(frozen=True)
class ExportedFile:
    """A rendered PDF ready for download."""

    filename: str
    content: bytes
    width: int
    height: int


class FileAssembler(Protocol):
    """Builds a portable document from a snapshot."""

    def assemble(self, snapshot: Snapshot) -> bytes:
        ...


class WeasyPrintAssembler:
    """Embed a snapshot full-bleed into a one-page PDF using WeasyPrint."""

    def assemble(self, snapshot: Snapshot) -> bytes:
        """
        Build a PDF whose single page is exactly the snapshot's size.

        Args:
            snapshot: Opaque PNG snapshot

        Returns:
            bytes: PDF file as bytes
        """
        data_uri = "data:image/png;base64," + base64.b64encode(snapshot.png).decode("ascii")
        html = WeasyHTML(string=f'<img src="{data_uri}" alt="">')

        # Page size in CSS px matches the snapshot's pixel size; the image is
        # positioned absolutely so it can never spill onto a second page
        page_css = CSS(string=f"""
            @page {{
                size: {snapshot.width}px {snapshot.height}px;
                margin: 0;
            }}
            html, body {{
                margin: 0;
                padding: 0;
                background: #ffffff;
            }}
            img {{
                position: absolute;
                top: 0;
                left: 0;
                width: {snapshot.width}px;
                height: {snapshot.height}px;
            }}
        """)

        return html.write_pdf(stylesheets=[page_css])


def export_filename(resume: ResumeRecord) -> str:
    """
    Build the download name for a resume, e.g. "Alex_Doe_Resume.pdf".

    Falls back to "resume.pdf" when the owner's name is blank.
    """
    stem = filename_stem(resume.personal_info.name)
    if not stem:
        return FALLBACK_FILENAME
    return f"{stem}_Resume.pdf"


class ResumeExporter:
    """Render a document's resume view into a downloadable PDF."""

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        assembler: Optional[FileAssembler] = None,
        html_generator: Optional[ResumeHTMLGenerator] = None,
        scale: int = EXPORT_SCALE
    ):
        """
        Initialize the exporter.

        Args:
            renderer: Snapshot renderer. If None, uses headless Chromium.
            assembler: PDF assembler. If None, uses WeasyPrint.
            html_generator: Resume HTML generator. If None, creates a new one.
            scale: Device pixels per CSS pixel of the snapshot
        """
        self.renderer = renderer or PlaywrightRenderer()
        self.assembler = assembler or WeasyPrintAssembler()
        self.html_generator = html_generator or ResumeHTMLGenerator()
        self.scale = scale

    async def export(
        self,
        document: GeneratedDocument,
        output_dir: Optional[Path] = None
    ) -> ExportedFile:
        """
        Export the document's resume as a single-page PDF.

        Args:
            document: Document to export (not modified)
            output_dir: If given, the PDF is also written there

        Returns:
            ExportedFile: File name, PDF bytes and page size in pixels

        Raises:
            ExportError: If rendering, assembly or writing fails
        """
        try:
            html_content = self.html_generator.generate_html(document.resume)
            snapshot = await self.renderer.capture(html_content, f"#{RESUME_ELEMENT_ID}", self.scale)
            pdf_bytes = await asyncio.to_thread(self.assembler.assemble, snapshot)
        except ExportError:
            raise
        except Exception as e:
            raise ExportError(f"Failed to export resume: {str(e)}") from e

        exported = ExportedFile(
            filename=export_filename(document.resume),
            content=pdf_bytes,
            width=snapshot.width,
            height=snapshot.height,
        )

        if output_dir is not None:
            target = Path(output_dir) / exported.filename
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(exported.content)
            except OSError as e:
                raise ExportError(f"Failed to write {target}: {e}") from e

        logger.info(
            "Exported %s (%dx%d px) for document %s",
            exported.filename, exported.width, exported.height, document.document_id,
        )
        return exported
