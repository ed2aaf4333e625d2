import sqlite3

from employee_app import main as main_module


def test_main_bootstraps_dev_database(tmp_path, monkeypatch, feed_input, capsys):
    path = str(tmp_path / "app.db")
    monkeypatch.setattr(main_module, "ENV", "dev")
    monkeypatch.setattr(main_module, "EMPLOYEE_DB_PATH", path)
    monkeypatch.setattr(main_module, "EMPLOYEE_CSV_PATH", None)
    feed_input("1", "Alice", "Eng", "1000", "5")

    main_module.main()

    assert "Employee added successfully!" in capsys.readouterr().out
    conn = sqlite3.connect(path)
    try:
        assert conn.execute("SELECT name FROM employees").fetchall() == [("Alice",)]
    finally:
        conn.close()


def test_main_leaves_schema_alone_outside_dev(tmp_path, monkeypatch, feed_input, capsys):
    path = str(tmp_path / "prod.db")
    monkeypatch.setattr(main_module, "ENV", "prod")
    monkeypatch.setattr(main_module, "EMPLOYEE_DB_PATH", path)
    feed_input("2", "5")

    main_module.main()

    assert "Operation failed: no such table: employees" in capsys.readouterr().out
