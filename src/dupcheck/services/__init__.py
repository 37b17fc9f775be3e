from .file_service import FileService
from .report_service import ReportService

__all__ = ["FileService", "ReportService"]
