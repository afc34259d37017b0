import unittest
from pathlib import Path
from unittest.mock import patch

import click
from click.testing import CliRunner

import vc_autocommit.cli as cli
from vc_autocommit.config.loader import ConfigError
from vc_autocommit.vcs.git_client import GitError, GitErrorKind


class DummyGitClient:
    def __init__(self, root=None):
        self.root = root
        self.calls = []
        self.commits = []
        self.status_error = None
        self.stage_error = None
        self.push_error = None

    def status(self):
        self.calls.append("status")
        if self.status_error is not None:
            raise self.status_error

    def stage_all(self, pattern):
        self.calls.append("stage_all")
        if self.stage_error is not None:
            raise self.stage_error

    def commit(self, message):
        self.calls.append("commit")
        self.commits.append(message)

    def push(self):
        self.calls.append("push")
        if self.push_error is not None:
            raise self.push_error


def _write_lines(path: Path, lines: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join("x" for _ in range(lines)))


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self.dummy = DummyGitClient()
        for target, kwargs in (
            ("GitClient", {"return_value": self.dummy}),
            ("load_config", {"return_value": {"max_retries": 3, "min_delay_ms": 5000, "max_delay_ms": 30000}}),
        ):
            patcher = patch.object(cli, target, **kwargs)
            patcher.start()
            self.addCleanup(patcher.stop)
        sleep_patcher = patch("vc_autocommit.commit.orchestrator.time.sleep")
        self.mock_sleep = sleep_patcher.start()
        self.addCleanup(sleep_patcher.stop)

    def _invoke(self, args=None, input=None, files=True):
        with self.runner.isolated_filesystem():
            if files:
                _write_lines(Path("Test") / "a.txt", 10)
                _write_lines(Path("Test") / "b.txt", 20)
            else:
                Path("Test").mkdir()
            return self.runner.invoke(cli.main, args or [], input=input)

    def test_prompted_run_commits_plan_and_pushes(self) -> None:
        result = self._invoke(input="3\n")
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertIn(cli.COMMIT_COUNT_PROMPT, result.output)
        self.assertEqual(
            self.dummy.commits,
            [
                "Refactor b.txt - 20 lines analyzed",
                "Refactor a.txt - 10 lines analyzed",
                "Refactor b.txt - 20 lines analyzed",
            ],
        )
        self.assertEqual(self.dummy.calls[0], "status")
        self.assertEqual(self.dummy.calls.count("push"), 1)
        self.assertEqual(self.mock_sleep.call_count, 3)
        self.assertIn("All commits pushed successfully.", result.output)
        self.assertIn("Committed: 3/3", result.output)
        self.assertNotIn("Abandoned", result.output)

    def test_count_option_skips_prompt(self) -> None:
        result = self._invoke(["--count", "2"])
        self.assertEqual(result.exit_code, cli.EXIT_SUCCESS, result.output)
        self.assertNotIn(cli.COMMIT_COUNT_PROMPT, result.output)
        self.assertEqual(len(self.dummy.commits), 2)

    def test_count_option_rejects_zero(self) -> None:
        result = self._invoke(["--count", "0"])
        self.assertEqual(result.exit_code, 2)
        self.assertNotIn("commit", self.dummy.calls)

    def test_invalid_answers_terminate_before_any_commit(self) -> None:
        for answer in ("0", "-5", "abc", "2.5", ""):
            with self.subTest(answer=answer):
                self.dummy.calls.clear()
                result = self._invoke(input=f"{answer}\n")
                self.assertEqual(result.exit_code, cli.EXIT_INVALID_INPUT)
                self.assertIn("Invalid number.", result.output)
                for call in ("stage_all", "commit", "push"):
                    self.assertNotIn(call, self.dummy.calls)

    def test_blank_answer_is_not_asked_again(self) -> None:
        result = self._invoke(input="\n\n\n")
        self.assertEqual(result.exit_code, cli.EXIT_INVALID_INPUT)
        self.assertEqual(result.output.count(cli.COMMIT_COUNT_PROMPT), 1)
        self.assertEqual(self.dummy.calls, ["status"])

    def test_empty_target_folder(self) -> None:
        result = self._invoke(files=False)
        self.assertEqual(result.exit_code, cli.EXIT_NO_FILES)
        self.assertIn("No files found in the Test folder.", result.output)
        self.assertNotIn(cli.COMMIT_COUNT_PROMPT, result.output)
        self.assertEqual(self.dummy.calls, ["status"])

    def test_missing_target_folder(self) -> None:
        with self.runner.isolated_filesystem():
            result = self.runner.invoke(cli.main, [])
        self.assertEqual(result.exit_code, cli.EXIT_NO_FILES)
        self.assertEqual(self.dummy.calls, ["status"])

    def test_status_not_a_repository(self) -> None:
        self.dummy.status_error = GitError("fatal: not a git repository", GitErrorKind.NOT_A_REPOSITORY)
        result = self._invoke(input="1\n")
        self.assertEqual(result.exit_code, cli.EXIT_NO_REPO)
        self.assertIn("Please initialize using 'git init'.", result.output)
        self.assertEqual(self.dummy.calls, ["status"])

    def test_status_permission_error(self) -> None:
        self.dummy.status_error = GitError("Permission denied", GitErrorKind.PERMISSION_DENIED)
        result = self._invoke(input="1\n")
        self.assertEqual(result.exit_code, cli.EXIT_VCS_FAILURE)
        self.assertIn("Permission error. Check SSH keys or Git credentials.", result.output)

    def test_status_unexpected_error(self) -> None:
        self.dummy.status_error = GitError("fatal: bad object HEAD")
        result = self._invoke(input="1\n")
        self.assertEqual(result.exit_code, cli.EXIT_VCS_FAILURE)
        self.assertIn("Unexpected error occurred", result.output)
        self.assertIn("fatal: bad object HEAD", result.output)

    def test_push_failure_uses_top_level_handler(self) -> None:
        self.dummy.push_error = GitError("fatal: no upstream configured")
        result = self._invoke(["--count", "1"])
        self.assertEqual(result.exit_code, cli.EXIT_VCS_FAILURE)
        self.assertIn("Unexpected error occurred", result.output)
        self.assertEqual(len(self.dummy.commits), 1)

    def test_retry_exhaustion_still_pushes(self) -> None:
        self.dummy.stage_error = GitError("fatal: pathspec 'Test/*' did not match any files")
        result = self._invoke(["--count", "5"])
        self.assertEqual(result.exit_code, cli.EXIT_INCOMPLETE)
        self.assertEqual(self.dummy.calls.count("stage_all"), 4)
        self.assertEqual(self.dummy.calls.count("push"), 1)
        self.assertIn("Maximum retries reached.", result.output)
        self.assertIn("Retrying commit...", result.output)
        self.assertIn("Committed: 0/5", result.output)
        self.assertIn("Abandoned: 5", result.output)

    def test_config_error(self) -> None:
        with patch.object(cli, "load_config", side_effect=ConfigError("bad")):
            result = self._invoke(["--count", "1"])
        self.assertEqual(result.exit_code, cli.EXIT_CONFIG_ERROR)
        self.assertEqual(self.dummy.calls, [])

    def test_unexpected_exception(self) -> None:
        with patch.object(cli, "generate_commit_messages", side_effect=RuntimeError("kaboom")):
            result = self._invoke(["--count", "1"])
        self.assertEqual(result.exit_code, cli.EXIT_GENERIC_ERROR)
        self.assertIn("Unexpected error: kaboom", result.output)


class TestPromptHelpers(unittest.TestCase):
    def test_parse_commit_count(self) -> None:
        self.assertEqual(cli.parse_commit_count("4"), 4)
        self.assertEqual(cli.parse_commit_count(" 12 "), 12)
        for text in ("0", "-5", "abc", "", "1e3"):
            with self.subTest(text=text):
                self.assertIsNone(cli.parse_commit_count(text))

    def test_ask_commit_count_exits_on_invalid_input(self) -> None:
        with patch.object(cli.click, "prompt", return_value="abc"):
            with self.assertRaises(click.exceptions.Exit) as ctx:
                cli.ask_commit_count()
        self.assertEqual(ctx.exception.exit_code, cli.EXIT_INVALID_INPUT)

    def test_ask_commit_count_returns_number(self) -> None:
        with patch.object(cli.click, "prompt", return_value="7"):
            self.assertEqual(cli.ask_commit_count(), 7)

    def test_report_git_error_kinds(self) -> None:
        runner = CliRunner()
        expected = {
            GitErrorKind.NOT_A_REPOSITORY: cli.EXIT_NO_REPO,
            GitErrorKind.PERMISSION_DENIED: cli.EXIT_VCS_FAILURE,
            GitErrorKind.UNEXPECTED: cli.EXIT_VCS_FAILURE,
        }
        for kind, code in expected.items():
            with self.subTest(kind=kind):
                with runner.isolation():
                    self.assertEqual(cli.report_git_error(GitError("x", kind)), code)


def test_version_option():
    result = CliRunner().invoke(cli.main, ["--version"])
    assert result.exit_code == 0
    assert "autocommit" in result.output


def test_verbose_enables_package_logging():
    import logging

    cli.configure_logging(verbose=True)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("vc_autocommit.commit.orchestrator").propagate is True
    cli.configure_logging(verbose=False)
    assert logging.getLogger().level == logging.INFO


if __name__ == "__main__":
    unittest.main()
