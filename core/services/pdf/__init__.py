"""PDF rendering for published lists."""

from core.services.pdf.renderer import PdfRenderer, pdf_renderer

__all__ = ["PdfRenderer", "pdf_renderer"]
