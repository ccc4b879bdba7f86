from __future__ import annotations

from pathlib import Path

from src.device_bridge.device_bridge.database.bootstrap import iter_sql_statements, strip_create_db_and_use

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");"
    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'INSERT INTO t VALUES ("c;d")']


def test_splitter_drops_line_comments():
    sql = "-- header; with semicolon\nSELECT 1; -- trailing\nSELECT '--not a comment';"
    assert list(iter_sql_statements(sql)) == ["SELECT 1", "SELECT '--not a comment'"]


def test_splitter_keeps_double_dash_without_following_space():
    sql = "SELECT 5--3; -- note\nSELECT 1;--\n"
    assert list(iter_sql_statements(sql)) == ["SELECT 5--3", "SELECT 1"]


def test_schema_file_without_database_statements_has_both_tables():
    statements = list(iter_sql_statements(strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8"))))

    assert len(statements) == 2
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    assert "uq_punch_natural_key (employee_code, device_sn, log_datetime)" in statements[1]
