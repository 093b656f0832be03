from datetime import date

import pytest

from saas_tools.drift_codegen.main import VALID_TYPES, generate, main
from saas_tools.shared.errors import CLIError, ExitCode, IdentifierError


class TestGenerate:
    def test_table(self):
        output = generate("table", "Items", columns="id:int:pk:autoincrement,title:text")
        assert output == (
            "class Items extends Table {\n"
            "  integerColumn get id => integer().autoIncrement()();\n"
            "  textColumn get title => text()();\n"
            "}"
        )

    def test_table_requires_columns(self):
        with pytest.raises(CLIError) as exc_info:
            generate("table", "Items")
        assert "Columns specification required" in exc_info.value.message
        assert "--columns" in exc_info.value.hint

    def test_invalid_type(self):
        with pytest.raises(CLIError) as exc_info:
            generate("view", "Items")
        assert exc_info.value.message == 'Invalid type: "view"'
        assert exc_info.value.hint == f"Valid types: {', '.join(VALID_TYPES)}"
        assert exc_info.value.exit_code == ExitCode.USAGE_ERROR

    def test_dao(self):
        output = generate("dao", "todo_items")
        assert "@DriftAccessor(tables: [TodoItems])" in output
        assert "class TodoItemsDao extends DatabaseAccessor<AppDatabase>" in output
        assert "with _$TodoItemsDaoMixin" in output
        assert "part 'todo_items_dao.g.dart';" in output
        assert "Future<List<TodoItem>> getAll() => select(todoItems).get();" in output

    def test_dao_rejects_bad_name(self):
        with pytest.raises(IdentifierError):
            generate("dao", "items'); drop")

    def test_migration(self):
        output = generate("migration", "add_due_date", today=date(2024, 3, 9))
        assert output.startswith("// Migration 20240309: add_due_date\n")
        assert "Future<void> migrateAddDueDate20240309(Migrator m) async {" in output

    def test_migration_rejects_bad_name(self):
        with pytest.raises(IdentifierError):
            generate("migration", "add due date")


class TestMain:
    def test_prints_table(self, capsys):
        main(["table", "Items", "--columns", "description:text:nullable"])
        out = capsys.readouterr().out
        assert "textColumn get description => text().nullable()();" in out

    def test_writes_output(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main(["table", "Items", "-c", "id:int:pk", "-o", "lib/db/items.dart"])

        written = tmp_path / "lib" / "db" / "items.dart"
        assert written.read_text(encoding="utf-8").startswith("class Items extends Table {")
        assert f"Generated {written.resolve()}" in capsys.readouterr().out

    def test_output_traversal_is_refused(self, tmp_path, monkeypatch, capsys):
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.chdir(project)

        with pytest.raises(SystemExit) as exc_info:
            main(["table", "Items", "-c", "id:int", "-o", "../items.dart"])

        assert exc_info.value.code == ExitCode.GENERAL_ERROR
        assert not (tmp_path / "items.dart").exists()
        assert "escapes project directory" in capsys.readouterr().err

    def test_invalid_spec_exits_with_hint(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["table", "Items", "--columns", "id:int:wat"])

        assert exc_info.value.code == ExitCode.GENERAL_ERROR
        err = capsys.readouterr().err
        assert 'Error: Unknown modifier: "wat"' in err
        assert "Hint: Valid modifiers" in err

    def test_invalid_type_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["view", "Items"])
        assert exc_info.value.code == ExitCode.USAGE_ERROR
