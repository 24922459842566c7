"""Tests for the inquisitor command-line interface."""

import json

from click.testing import CliRunner

from inquisitor import __version__
from inquisitor.cli.ask import load_questions
from inquisitor.cli.main import cli


def _write_questions(tmp_path, data, name="questions.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


class TestVersion:
    def test_version_option(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLoadQuestions:
    def test_plain_list(self, tmp_path):
        path = _write_questions(tmp_path, [{"name": "a"}, {"name": "b", "type": "confirm"}])
        assert [q.name for q in load_questions(path)] == ["a", "b"]

    def test_wrapped_list(self, tmp_path):
        path = _write_questions(tmp_path, {"questions": [{"name": "a", "when": "ok=true"}]})
        questions = load_questions(path)
        assert questions[0].when.expression == "ok=true"


class TestValidateCommand:
    def test_valid_file(self, tmp_path):
        path = _write_questions(tmp_path, [{"name": "a"}, {"name": "b", "type": "list", "choices": ["x"]}])
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "OK: questions.json is valid (2 question(s))" in result.output

    def test_errors_exit_nonzero(self, tmp_path):
        path = _write_questions(tmp_path, [{"name": "a", "type": "slider"}])
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Unknown prompt type 'slider'" in result.output
        assert "Summary: 1 error(s), 0 warning(s), 0 info" in result.output

    def test_warnings_exit_zero(self, tmp_path):
        path = _write_questions(tmp_path, [{"name": "a"}, {"name": "a"}])
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "WARNING [question=a]" in result.output

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_missing_file(self):
        result = CliRunner().invoke(cli, ["validate", "does-not-exist.json"])
        assert result.exit_code != 0


class TestAskCommand:
    def test_configuration_error(self, tmp_path):
        path = _write_questions(tmp_path, [{"name": "a", "type": "slider"}])
        result = CliRunner().invoke(cli, ["ask", str(path), "--no-color"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_non_object_entry(self, tmp_path):
        path = _write_questions(tmp_path, ["a"])
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 2
        assert "question #1 must be an object" in result.output
        assert not isinstance(result.exception, AttributeError)

    def test_not_a_question_list(self, tmp_path):
        path = _write_questions(tmp_path, {"questions": "nope"})
        result = CliRunner().invoke(cli, ["ask", str(path)])
        assert result.exit_code != 0


class TestLogCommand:
    def test_lines_stream_above_status(self):
        result = CliRunner().invoke(cli, ["log", "--status", "Tailing", "--no-color"], input="a\nb\n")
        assert result.exit_code == 0
        assert "a\n" in result.output
        assert "b\n" in result.output
        assert "Tailing (2 lines)" in result.output
        assert result.output.endswith("Tailing (2 lines)\n")

    def test_empty_input(self):
        result = CliRunner().invoke(cli, ["log", "--no-color"], input="")
        assert result.exit_code == 0
        assert "Streaming (0 lines)" in result.output
