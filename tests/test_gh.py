import subprocess
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

from ghrepo.gh import GhCommandError, GitHubCli, api_reachable, working_directory
from ghrepo.models import RepoRequest, Visibility


def _completed(returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess([], returncode, stdout, stderr)


class GitHubCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.cli = GitHubCli(gh_bin="gh", git_bin="git")

    def test_create_repo_builds_argv_without_shell(self) -> None:
        request = RepoRequest(
            name="demo",
            description='Minha "desc"; rm -rf /',
            visibility=Visibility.PRIVATE,
            create_readme=True,
        )
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed()) as run:
            self.cli.create_repo(request)
        argv = run.call_args[0][0]
        self.assertEqual(
            argv,
            ["gh", "repo", "create", "demo", "--private", "--description", 'Minha "desc"; rm -rf /', "--add-readme"],
        )
        self.assertNotIn("shell", run.call_args[1])

    def test_create_repo_minimal_public(self) -> None:
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed()) as run:
            self.cli.create_repo(RepoRequest(name="demo"))
        self.assertEqual(run.call_args[0][0], ["gh", "repo", "create", "demo", "--public"])

    def test_create_repo_failure_raises(self) -> None:
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed(1, stderr="name already exists\n")):
            with self.assertRaises(GhCommandError) as ctx:
                self.cli.create_repo(RepoRequest(name="demo"))
        self.assertEqual(ctx.exception.returncode, 1)
        self.assertEqual(ctx.exception.stderr, "name already exists")
        self.assertIn("gh repo create demo", str(ctx.exception))

    def test_current_user(self) -> None:
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed(stdout="octocat\n")) as run:
            self.assertEqual(self.cli.current_user(), "octocat")
        self.assertEqual(run.call_args[0][0], ["gh", "api", "user", "--jq", ".login"])
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed(stdout="\n")):
            self.assertIsNone(self.cli.current_user())
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed(1)):
            self.assertIsNone(self.cli.current_user())

    def test_repo_exists_and_url(self) -> None:
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed(0)) as run:
            self.assertTrue(self.cli.repo_exists("octocat/demo"))
        self.assertEqual(run.call_args[0][0], ["gh", "repo", "view", "octocat/demo"])
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed(stdout="https://github.com/octocat/demo\n")) as run:
            self.assertEqual(self.cli.repo_url("octocat/demo"), "https://github.com/octocat/demo")
        self.assertEqual(
            run.call_args[0][0],
            ["gh", "repo", "view", "octocat/demo", "--json", "url", "-q", ".url"],
        )

    def test_missing_executable_is_reported_as_failure(self) -> None:
        with mock.patch("ghrepo.gh.subprocess.run", side_effect=FileNotFoundError("gh")):
            self.assertFalse(self.cli.is_authenticated())
            self.assertIsNone(self.cli.git_config_get("user.name"))

    def test_login_methods(self) -> None:
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed()) as run:
            self.assertTrue(self.cli.login("web"))
            self.assertEqual(run.call_args[0][0], ["gh", "auth", "login", "--web"])
            self.assertTrue(self.cli.login("token"))
            self.assertEqual(run.call_args[0][0], ["gh", "auth", "login", "--with-token"])
        self.assertFalse(run.call_args[1]["capture_output"])

    def test_git_config(self) -> None:
        with mock.patch("ghrepo.gh.subprocess.run", return_value=_completed(stdout="Fulano\n")) as run:
            self.assertEqual(self.cli.git_config_get("user.name"), "Fulano")
            self.assertTrue(self.cli.git_config_set("user.email", "f@example.com"))
        self.assertEqual(run.call_args[0][0], ["git", "config", "--global", "user.email", "f@example.com"])

    def test_set_main_branch_runs_in_repo_and_restores_cwd(self) -> None:
        seen = []

        def _fake_run(argv, **kwargs):
            seen.append((argv, Path.cwd().resolve()))
            return _completed()

        before = Path.cwd()
        with tempfile.TemporaryDirectory() as tmp, mock.patch("ghrepo.gh.subprocess.run", side_effect=_fake_run):
            repo_dir = Path(tmp)
            self.assertTrue(self.cli.set_main_branch(repo_dir, "develop"))
            self.assertEqual(Path.cwd(), before)
            self.assertEqual(
                [argv for argv, _ in seen],
                [["git", "branch", "-M", "develop"], ["git", "push", "-u", "origin", "develop"]],
            )
            self.assertTrue(all(cwd == repo_dir.resolve() for _, cwd in seen))

    def test_set_main_branch_stops_on_failure(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, mock.patch(
            "ghrepo.gh.subprocess.run", return_value=_completed(1)
        ) as run:
            self.assertFalse(self.cli.set_main_branch(Path(tmp), "develop"))
        self.assertEqual(run.call_count, 1)

    def test_publish_initial_commit_raises_on_failed_step(self) -> None:
        results = [_completed(), _completed(1, stderr="nothing to commit")]
        with tempfile.TemporaryDirectory() as tmp, mock.patch("ghrepo.gh.subprocess.run", side_effect=results):
            with self.assertRaises(GhCommandError) as ctx:
                self.cli.publish_initial_commit(Path(tmp), "main", ["README.md"])
        self.assertEqual(ctx.exception.argv, ["git", "commit", "-m", "Initial commit"])


class WorkingDirectoryTests(unittest.TestCase):
    def test_restores_cwd_after_error(self) -> None:
        before = Path.cwd()
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(RuntimeError):
                with working_directory(Path(tmp)):
                    raise RuntimeError("boom")
        self.assertEqual(Path.cwd(), before)


class ApiReachableTests(unittest.TestCase):
    def test_connection_error_means_unreachable(self) -> None:
        with mock.patch("ghrepo.gh.requests.get", side_effect=requests.ConnectionError("offline")):
            self.assertFalse(api_reachable())

    def test_ok_response(self) -> None:
        with mock.patch("ghrepo.gh.requests.get", return_value=mock.Mock(status_code=200)) as get:
            self.assertTrue(api_reachable(timeout=1))
        get.assert_called_once_with("https://api.github.com", timeout=1)

    def test_server_error(self) -> None:
        with mock.patch("ghrepo.gh.requests.get", return_value=mock.Mock(status_code=503)):
            self.assertFalse(api_reachable())


if __name__ == "__main__":
    unittest.main()
