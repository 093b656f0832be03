import pytest
import yaml

from saas_tools.powersync_codegen.main import VALID_TYPES, generate, main
from saas_tools.shared.errors import CLIError, ExitCode, IdentifierError


class TestGenerate:
    def test_rules(self):
        rules = yaml.safe_load(generate("rules", "todos"))
        bucket = rules["bucket_definitions"]["user_todos"]
        assert bucket["parameters"] == "SELECT request.user_id() AS user_id"
        assert bucket["data"] == ["SELECT * FROM todos WHERE user_id = bucket.user_id"]

    def test_rules_custom_user_column(self):
        output = generate("rules", "recipes", user_column="owner_id")
        assert "SELECT * FROM recipes WHERE owner_id = bucket.user_id" in output

    def test_schema(self):
        output = generate("schema", "todo_items")
        assert "import 'package:powersync/powersync.dart';" in output
        assert "const todoItemsTable = Table('todo_items', [" in output
        assert "  Column.text('user_id')," in output

    def test_invalid_type(self):
        with pytest.raises(CLIError) as exc_info:
            generate("triggers", "todos")
        assert exc_info.value.message == 'Invalid type: "triggers"'
        assert exc_info.value.hint == f"Valid types: {', '.join(VALID_TYPES)}"
        assert exc_info.value.exit_code == ExitCode.USAGE_ERROR

    @pytest.mark.parametrize("table", ["todos; DROP TABLE x", "to'dos", "1todos"])
    def test_rejects_bad_table(self, table):
        with pytest.raises(IdentifierError) as exc_info:
            generate("rules", table)
        assert exc_info.value.role == "table name"

    def test_rejects_bad_user_column(self):
        with pytest.raises(IdentifierError) as exc_info:
            generate("rules", "todos", user_column="user_id OR 1=1")
        assert exc_info.value.role == "user column"


class TestMain:
    def test_prints_rules(self, capsys):
        main(["rules", "todos", "--user-column", "owner_id"])
        assert "WHERE owner_id = bucket.user_id" in capsys.readouterr().out

    def test_writes_output(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        main(["schema", "todos", "-o", "lib/powersync/todos.dart"])

        written = tmp_path / "lib" / "powersync" / "todos.dart"
        assert "const todosTable = Table('todos', [" in written.read_text(encoding="utf-8")
        assert f"Generated {written.resolve()}" in capsys.readouterr().out

    def test_output_traversal_is_refused(self, tmp_path, monkeypatch, capsys):
        project = tmp_path / "project"
        project.mkdir()
        monkeypatch.chdir(project)

        with pytest.raises(SystemExit) as exc_info:
            main(["rules", "todos", "-o", "../sync-rules.yaml"])

        assert exc_info.value.code == ExitCode.GENERAL_ERROR
        assert not (tmp_path / "sync-rules.yaml").exists()
        assert "escapes project directory" in capsys.readouterr().err

    def test_invalid_type_exit_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["triggers", "todos"])
        assert exc_info.value.code == ExitCode.USAGE_ERROR
        assert 'Error: Invalid type: "triggers"' in capsys.readouterr().err
