"""Document writers for converted exports."""

from .writers import OutputFormat, build_default_writers, document_to_dict, render_document

__all__ = ["OutputFormat", "build_default_writers", "document_to_dict", "render_document"]
