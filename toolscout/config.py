# === FILE: toolscout/config.py ===
"""
Модуль для загрузки и валидации конфигурации скрапера ToolScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.6778.85 Safari/537.36"
)
DEFAULT_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,image/apng,*/*;q=0.8"
)


class ScraperConfig(BaseModel):
    """Конфигурация для извлечения метаданных одной или нескольких страниц."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(15.0, gt=0, description="Таймаут на загрузку страницы (секунд).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    accept: str = Field(DEFAULT_ACCEPT, description="Заголовок Accept.")
    accept_language: str = Field(
        "en-US,en;q=0.9,da;q=0.8", description="Заголовок Accept-Language."
    )
    source_language: str = Field("en", min_length=2, description="Язык исходного текста.")
    target_language: str = Field("da", min_length=2, description="Язык перевода.")
    min_content_length: int = Field(
        100, ge=0, description="Минимальная длина текста контейнера основного контента."
    )
    max_content_length: int = Field(
        5000, ge=1, description="Максимальная длина основного контента."
    )
    coalesce_requests: bool = Field(
        False, description="Объединять одновременные запросы к одному URL."
    )

    @model_validator(mode="after")
    def _check_lengths(self) -> ScraperConfig:
        if self.min_content_length >= self.max_content_length:
            raise ValueError("min_content_length must be lower than max_content_length")
        return self

    def request_headers(self) -> dict[str, str]:
        """Заголовки HTTP-запроса, имитирующие браузер."""
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> ScraperConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScraperConfig.
    Без пути использует configs/default.yaml, а если его нет, то значения по умолчанию.
    При отсутствии явно указанного файла бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return ScraperConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    try:
        return ScraperConfig(**data)
    except ValidationError:
        raise


__all__ = ["ScraperConfig", "load_config", "DEFAULT_USER_AGENT"]
