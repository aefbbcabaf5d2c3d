from infrastructure.repositories.file_report_repository import FileReportRepository
from infrastructure.repositories.json_settings_repository import JsonSettingsRepository

__all__ = [
    "FileReportRepository",
    "JsonSettingsRepository",
]
