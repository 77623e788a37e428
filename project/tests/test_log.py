# tests/test_log.py

import datetime

from shopapi.utils.log import Log


def test_daily_log_path(tmp_path):
    log = Log(log_dir=str(tmp_path), log_print="0")
    path = log.build_log_path(datetime.datetime(2025, 3, 7, 12, 0))
    assert path == str(tmp_path / "2025" / "03" / "07.log")


def test_format_line_serializes_data():
    log = Log(log_print="0")
    now = datetime.datetime(2025, 3, 7, 9, 5, 1)
    line = log.format_line(now, "order", "Заказ создан", {"at": now, "ids": ("1", "2")})
    assert line == "07.03.2025 09:05:01 order: Заказ создан: {'at': '2025-03-07T09:05:01', 'ids': ['1', '2']}"
    assert log.format_line(now, "order", "пусто", None) == "07.03.2025 09:05:01 order: пусто"


def test_sync_log_writes_file(tmp_path):
    log = Log(log_dir=str(tmp_path), log_print="0")
    log.log_warning_sync("startup", "База недоступна", {"error": "boom"})

    path = log.build_log_path(datetime.datetime.now())
    with open(path, encoding="utf-8") as f:
        content = f.read()
    assert "startup: WARNING: База недоступна: {'error': 'boom'}" in content
