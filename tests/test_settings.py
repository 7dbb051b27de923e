import unittest
from pathlib import Path

from composer_update.domain.errors import ConfigurationError
from composer_update.infrastructure.composer.runner import ComposerRunner
from composer_update.infrastructure.config.settings import (
    build_update_flow_config_from_env,
    env_flag,
    parse_packages,
)
from composer_update.infrastructure.git.repository import GitRepository
from composer_update.infrastructure.github.github_client import GitHubClient
from composer_update.infrastructure.workflow_factory import build_update_flow_dependencies


BASE_ENV = {
    "GITHUB_REPOSITORY": "acme/shop",
    "GITHUB_TOKEN": "ghs_test",
    "GITHUB_WORKSPACE": "/workspace",
}


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = build_update_flow_config_from_env(dict(BASE_ENV))

        self.assertEqual(config.repository_owner, "acme")
        self.assertEqual(config.repository_name, "shop")
        self.assertEqual(config.composer_directory, Path("/workspace"))
        self.assertFalse(config.single_branch)
        self.assertEqual(config.single_branch_postfix, "-updated")
        self.assertEqual(config.commit_prefix, "")
        self.assertEqual(config.git_author_name, "cu")
        self.assertEqual(config.git_author_email, "cu@composer-update")
        self.assertEqual(config.packages, ())
        self.assertFalse(config.with_dependencies)
        self.assertIsNone(config.source_ref)

    def test_full_environment(self) -> None:
        environ = dict(
            BASE_ENV,
            COMPOSER_PATH="/app",
            COMPOSER_PACKAGES="foo/bar  baz/qux",
            APP_SINGLE_BRANCH="true",
            APP_SINGLE_BRANCH_POSTFIX="-deps",
            GIT_COMMIT_PREFIX="[deps] ",
            GIT_NAME="bot",
            GIT_EMAIL="bot@example.com",
            GITHUB_REF="refs/heads/main",
        )

        config = build_update_flow_config_from_env(environ)

        self.assertEqual(config.composer_directory, Path("/workspace/app"))
        self.assertEqual(config.packages, ("foo/bar", "baz/qux"))
        self.assertTrue(config.with_dependencies)
        self.assertTrue(config.single_branch)
        self.assertEqual(config.single_branch_postfix, "-deps")
        self.assertEqual(config.commit_prefix, "[deps] ")
        self.assertEqual(config.source_ref, "refs/heads/main")

    def test_empty_postfix_is_kept(self) -> None:
        config = build_update_flow_config_from_env(dict(BASE_ENV, APP_SINGLE_BRANCH_POSTFIX=""))

        self.assertEqual(config.single_branch_postfix, "")

    def test_missing_repository_is_fatal(self) -> None:
        environ = dict(BASE_ENV)
        del environ["GITHUB_REPOSITORY"]

        with self.assertRaises(ConfigurationError):
            build_update_flow_config_from_env(environ)

    def test_malformed_repository_is_fatal(self) -> None:
        with self.assertRaises(ConfigurationError):
            build_update_flow_config_from_env(dict(BASE_ENV, GITHUB_REPOSITORY="shop"))

    def test_missing_token_is_fatal(self) -> None:
        environ = dict(BASE_ENV)
        del environ["GITHUB_TOKEN"]

        with self.assertRaises(ConfigurationError):
            build_update_flow_config_from_env(environ)

    def test_env_flag(self) -> None:
        for value in ("1", "true", "yes", "on", "TRUE"):
            self.assertTrue(env_flag({"FLAG": value}, "FLAG"), value)
        for value in ("", "0", "false", "no", "off", "False", "(false)", "null", "NULL"):
            self.assertFalse(env_flag({"FLAG": value}, "FLAG"), value)
        self.assertFalse(env_flag({}, "FLAG"))

    def test_parse_packages(self) -> None:
        self.assertEqual(parse_packages(None), ())
        self.assertEqual(parse_packages(" a/b  c/d "), ("a/b", "c/d"))

    def test_dependencies_are_bound_to_config(self) -> None:
        config = build_update_flow_config_from_env(dict(BASE_ENV, COMPOSER_PATH="app"))

        dependencies = build_update_flow_dependencies(config)

        self.assertIsInstance(dependencies.git, GitRepository)
        self.assertEqual(dependencies.git.repo_dir, Path("/workspace"))
        self.assertIsInstance(dependencies.composer, ComposerRunner)
        self.assertEqual(dependencies.composer.composer_dir, Path("/workspace/app"))
        self.assertIsInstance(dependencies.hosting, GitHubClient)
        self.assertEqual(dependencies.hosting.base, "https://api.github.com/repos/acme/shop")


if __name__ == "__main__":
    unittest.main()
