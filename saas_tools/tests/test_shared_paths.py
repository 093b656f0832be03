import pytest

from saas_tools.shared.errors import CLIError
from saas_tools.shared.paths import validate_output_path, write_output


class TestValidateOutputPath:
    @pytest.mark.parametrize(
        "user_path",
        ["output.sql", "./output.sql", "lib/output.dart", "lib/features/auth/out.dart"],
    )
    def test_accepts_paths_within_base(self, tmp_path, user_path):
        result = validate_output_path(user_path, tmp_path)
        assert result == (tmp_path / user_path).resolve()

    def test_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert validate_output_path("lib/out.dart") == tmp_path.resolve() / "lib" / "out.dart"

    @pytest.mark.parametrize(
        "user_path",
        [
            "../output.sql",
            "../../output.sql",
            "lib/../../output.sql",
            "./lib/../../../etc/passwd",
            "lib/subdir/../../..",
            "/etc/passwd",
        ],
    )
    def test_rejects_traversal(self, tmp_path, user_path):
        with pytest.raises(CLIError) as exc_info:
            validate_output_path(user_path, tmp_path / "project")
        assert "escapes project directory" in exc_info.value.message
        assert "must be within the current project directory" in exc_info.value.hint

    def test_accepts_absolute_path_inside_base(self, tmp_path):
        target = tmp_path / "lib" / "out.dart"
        assert validate_output_path(str(target), tmp_path) == target.resolve()


class TestWriteOutput:
    def test_writes_and_creates_parents(self, tmp_path):
        written = write_output("lib/db/items.dart", "class Items {}", tmp_path)
        assert written == (tmp_path / "lib" / "db" / "items.dart").resolve()
        assert written.read_text(encoding="utf-8") == "class Items {}"

    def test_refuses_to_write_outside_base(self, tmp_path):
        base = tmp_path / "project"
        base.mkdir()
        with pytest.raises(CLIError):
            write_output("../escaped.sql", "DROP", base)
        assert not (tmp_path / "escaped.sql").exists()
