"""Document writing exports."""

from .openapi_writer import DocumentWriteError, output_format_for, render_document, write_document

__all__ = ["DocumentWriteError", "output_format_for", "render_document", "write_document"]
