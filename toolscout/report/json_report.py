# toolscout/report/json_report.py

"""
Генерация JSON-отчёта для проекта ToolScout.

Сериализация ScrapedMetadata или ProductCandidate в файл.
"""
import json
from pathlib import Path
from typing import Union

from toolscout.models import ScrapedMetadata
from toolscout.product import ProductCandidate


def to_payload(item: Union[ScrapedMetadata, ProductCandidate]) -> dict:
    """Приводит результат к словарю с ключами в формате хранилища."""
    if isinstance(item, ProductCandidate):
        return item.as_dict()
    return item.model_dump(mode="json", by_alias=True, exclude_none=True)


def render_json(
    item: Union[ScrapedMetadata, ProductCandidate],
    output_path: Union[Path, str],
    *,
    pretty: bool = True,
) -> Path:
    """
    Сохраняет item в формате JSON по указанному пути.

    :param item: метаданные страницы или кандидат продукта
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла

    Пример:
    ```python
    from toolscout.report.json_report import render_json
    report_path = render_json(metadata, 'reports/example.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    # Запись в файл с Unicode (æ, ø, å остаются читаемыми)
    with output.open('w', encoding='utf-8') as f:
        json.dump(to_payload(item), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
