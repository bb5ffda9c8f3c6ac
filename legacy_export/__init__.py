"""Export a legacy blog database into a flat-file content repository."""

from .exporter import ContentExporter, ExportError, ExportSummary

__all__ = ["ContentExporter", "ExportError", "ExportSummary"]
