# === FILE: toolscout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска ToolScout через командную строку.

Команды:
  scrape URL  Извлечь метаданные страницы и вывести/сохранить их
  config      Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда scrape опции:
  --json PATH         Сохранить JSON в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --no-cache          Не использовать кэш результатов
  --product           Вывести кандидата продукта вместо полных метаданных

Дополнительно:
  --version, -v       Показать версию ToolScout

Пример:
  toolscout scrape https://example.com --pretty --product
"""
import asyncio
import json
import sys
from pathlib import Path

import click

from toolscout import __version__
from toolscout.config import load_config
from toolscout.engine import scrape_url
from toolscout.exceptions import ScrapeError
from toolscout.logger import init_logging
from toolscout.product import to_product_candidate
from toolscout.report.json_report import render_json, to_payload

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='ToolScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд ToolScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('scrape', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON в файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.option(
    '--no-cache', 'no_cache', is_flag=True,
    help='Не использовать кэш результатов'
)
@click.option(
    '--product', is_flag=True,
    help='Вывести кандидата продукта вместо полных метаданных'
)
@click.pass_context
def scrape(ctx, url, json_output, pretty, no_cache, product):
    """Извлечь метаданные страницы URL."""
    cfg = ctx.obj['config']
    try:
        metadata = asyncio.run(scrape_url(url, cfg, use_cache=not no_cache))
    except ScrapeError as e:
        print_error(f'Ошибка при скрапинге: {e}')
    except Exception as e:
        print_error(f'Непредвиденная ошибка: {e}')

    result = to_product_candidate(metadata) if product else metadata

    if json_output:
        try:
            saved = render_json(result, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        return

    indent = 2 if pretty else None
    click.echo(json.dumps(to_payload(result), ensure_ascii=False, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
