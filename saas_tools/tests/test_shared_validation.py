import pytest

from saas_tools.shared.errors import CLIError, IdentifierError
from saas_tools.shared.validation import (
    assert_valid_dart_type,
    assert_valid_identifier,
    assert_valid_project_name,
    assert_valid_worker_name,
    validate_dart_type,
    validate_identifier,
    validate_project_name,
    validate_worker_name,
)

SQL_METACHARACTERS = [";", "'", '"', "--", " "]


class TestValidateIdentifier:
    @pytest.mark.parametrize(
        "name",
        ["users", "_private", "user_id", "Table1", "a", "_", "createdAt", "A_1_b"],
    )
    def test_valid(self, name):
        assert validate_identifier(name)

    @pytest.mark.parametrize(
        "name",
        [
            "",
            "1users",
            "user-id",
            "auth.users",
            "user id",
            "users;",
            "users'",
            'users"',
            "users--",
            "users\n",
            "naïve",
            "users(id)",
        ],
    )
    def test_invalid(self, name):
        assert not validate_identifier(name)

    @pytest.mark.parametrize("meta", SQL_METACHARACTERS)
    @pytest.mark.parametrize("template", ["{}users", "users{}", "us{}ers"])
    def test_rejects_sql_metacharacters_anywhere(self, meta, template):
        assert not validate_identifier(template.format(meta))


class TestAssertValidIdentifier:
    def test_valid_passes(self):
        assert_valid_identifier("users", "table name")

    def test_invalid_raises_with_role(self):
        with pytest.raises(IdentifierError) as exc_info:
            assert_valid_identifier("users; DROP TABLE users;--", "table name")
        error = exc_info.value
        assert error.message == 'Invalid table name: "users; DROP TABLE users;--"'
        assert error.role == "table name"
        assert error.value == "users; DROP TABLE users;--"
        assert error.hint.startswith("Table name must start with a letter or underscore")


class TestValidateProjectName:
    @pytest.mark.parametrize("name", ["my-app", "my_app", "App2", "a"])
    def test_valid(self, name):
        assert validate_project_name(name)

    @pytest.mark.parametrize("name", ["", "_app", "1app", "-app", "my app", "my.app"])
    def test_invalid(self, name):
        assert not validate_project_name(name)

    def test_assert_raises(self):
        with pytest.raises(CLIError, match="Invalid project name"):
            assert_valid_project_name("my app")

    def test_assert_passes(self):
        assert_valid_project_name("my-app")


class TestValidateWorkerName:
    @pytest.mark.parametrize("name", ["my-worker", "Worker2", "w"])
    def test_valid(self, name):
        assert validate_worker_name(name)

    @pytest.mark.parametrize("name", ["my_worker", "", "2worker", "-worker", "my worker"])
    def test_invalid(self, name):
        assert not validate_worker_name(name)

    def test_assert_raises_mentions_underscores(self):
        with pytest.raises(CLIError) as exc_info:
            assert_valid_worker_name("my_worker")
        assert "no underscores" in exc_info.value.hint

    def test_grammars_are_independent(self):
        # Valid project name, invalid worker name.
        assert validate_project_name("my_app")
        assert not validate_worker_name("my_app")
        # Valid identifier, invalid project name.
        assert validate_identifier("_app")
        assert not validate_project_name("_app")


class TestValidateDartType:
    @pytest.mark.parametrize(
        "value",
        ["String", "int?", "List<User>", "Map<String, dynamic>", "Map<String, List<int?>>?"],
    )
    def test_valid(self, value):
        assert validate_dart_type(value)

    @pytest.mark.parametrize(
        "value",
        ["", "?", "1Type", "List<User", "List<User>>", "String;", "Foo()", "Map<'a', int>"],
    )
    def test_invalid(self, value):
        assert not validate_dart_type(value)

    def test_assert_raises_with_role(self):
        with pytest.raises(IdentifierError) as exc_info:
            assert_valid_dart_type("int; exit()", "state type")
        assert exc_info.value.message == 'Invalid state type: "int; exit()"'
        assert exc_info.value.hint.startswith("State type must be a Dart type")
