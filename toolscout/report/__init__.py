"""toolscout.report: сохранение результатов скрапинга в файлы."""

from toolscout.report.json_report import render_json

__all__ = ["render_json"]
