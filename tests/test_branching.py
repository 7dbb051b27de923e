import re
import unittest

from composer_update.application.update_flow.steps import reconcile_working_branch
from composer_update.domain.branching import plan_working_branch, random_suffix
from composer_update.domain.models import BRANCH_MODE_FRESH, BRANCH_MODE_MERGED, BRANCH_MODE_REUSED

from fakes import FakeGit, make_config, make_dependencies


MULTI_BRANCH_PATTERN = re.compile(r"^cu/[A-Za-z0-9]{8}$")


class PlanWorkingBranchTests(unittest.TestCase):
    def test_multi_branch_names_are_random_and_well_formed(self) -> None:
        names = {plan_working_branch("main", single_branch=False).name for _ in range(50)}

        self.assertEqual(len(names), 50)
        for name in names:
            self.assertRegex(name, MULTI_BRANCH_PATTERN)

    def test_multi_branch_ignores_remote_branches(self) -> None:
        working_branch = plan_working_branch(
            "main",
            single_branch=False,
            remote_branches=["main-updated"],
        )

        self.assertEqual(working_branch.mode, BRANCH_MODE_FRESH)
        self.assertEqual(working_branch.base, "main")

    def test_single_branch_name_is_deterministic(self) -> None:
        for _ in range(3):
            working_branch = plan_working_branch("main", single_branch=True, postfix="-updated")
            self.assertEqual(working_branch.name, "main-updated")

    def test_single_branch_absent_from_remote_is_created(self) -> None:
        working_branch = plan_working_branch(
            "main",
            single_branch=True,
            remote_branches=["main", "feature/x"],
        )

        self.assertEqual(working_branch.mode, BRANCH_MODE_FRESH)
        self.assertFalse(working_branch.exists_on_remote)

    def test_single_branch_present_on_remote_is_merged(self) -> None:
        working_branch = plan_working_branch(
            "main",
            single_branch=True,
            remote_branches=["main", "main-updated"],
        )

        self.assertEqual(working_branch.mode, BRANCH_MODE_MERGED)
        self.assertTrue(working_branch.exists_on_remote)

    def test_failed_branch_lookup_counts_as_absent(self) -> None:
        working_branch = plan_working_branch("main", single_branch=True, remote_branches=None)

        self.assertEqual(working_branch.mode, BRANCH_MODE_FRESH)

    def test_empty_postfix_reuses_parent_branch(self) -> None:
        working_branch = plan_working_branch(
            "main",
            single_branch=True,
            postfix="",
            remote_branches=["main"],
        )

        self.assertEqual(working_branch.name, "main")
        self.assertEqual(working_branch.mode, BRANCH_MODE_REUSED)

    def test_random_suffix_length(self) -> None:
        self.assertEqual(len(random_suffix(12)), 12)


class ReconcileWorkingBranchTests(unittest.TestCase):
    def test_multi_branch_creates_without_listing_or_merging(self) -> None:
        git = FakeGit()
        dependencies = make_dependencies(git=git)

        working_branch = reconcile_working_branch(make_config(), dependencies)

        self.assertEqual(working_branch.name, "cu/Ab3dEf7h")
        self.assertIn(("create_branch", "cu/Ab3dEf7h", True), git.calls)
        self.assertNotIn("list_remote_branches", git.names())
        self.assertNotIn("merge", git.names())

    def test_single_branch_missing_on_remote_creates_fresh_branch(self) -> None:
        git = FakeGit(remote_branches=["main"])
        dependencies = make_dependencies(git=git)

        working_branch = reconcile_working_branch(make_config(single_branch=True), dependencies)

        self.assertEqual(working_branch.name, "main-updated")
        self.assertIn(("create_branch", "main-updated", True), git.calls)
        self.assertNotIn("merge", git.names())

    def test_single_branch_on_remote_merges_parent_with_theirs(self) -> None:
        git = FakeGit(remote_branches=["main", "main-updated"])
        dependencies = make_dependencies(git=git)

        working_branch = reconcile_working_branch(make_config(single_branch=True), dependencies)

        merges = [call for call in git.calls if call[0] == "merge"]
        self.assertEqual(working_branch.name, "main-updated")
        self.assertEqual(merges, [("merge", "main", "theirs", True)])
        self.assertNotIn("create_branch", git.names())
        self.assertLess(git.names().index("checkout"), git.names().index("merge"))

    def test_single_branch_lookup_failure_creates_branch(self) -> None:
        git = FakeGit(remote_branches=None)
        dependencies = make_dependencies(git=git)

        reconcile_working_branch(make_config(single_branch=True), dependencies)

        self.assertIn(("create_branch", "main-updated", True), git.calls)
        self.assertNotIn("merge", git.names())

    def test_custom_postfix(self) -> None:
        git = FakeGit(current_branch="develop", remote_branches=[])
        dependencies = make_dependencies(git=git)

        working_branch = reconcile_working_branch(
            make_config(single_branch=True, single_branch_postfix="-deps"),
            dependencies,
        )

        self.assertEqual(working_branch.name, "develop-deps")
        self.assertEqual(working_branch.base, "develop")


if __name__ == "__main__":
    unittest.main()
