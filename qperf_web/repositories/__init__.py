from .report_repository import ReportWriter

__all__ = ["ReportWriter"]
