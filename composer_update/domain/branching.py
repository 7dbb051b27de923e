"""Working branch selection.

Two naming policies are supported:

* ``multi`` (default): every run gets its own ``cu/<random>`` branch created from
  the current position, so each run produces an independent pull request.
* ``single``: the branch name is derived from the parent branch
  (``<parent><postfix>``) and is reused across runs. The first run creates it;
  later runs check it out and merge the parent in, parent winning conflicts, so
  the long-lived branch keeps up with upstream before the new update lands.

``plan_working_branch`` is pure; applying the plan against git lives in the
update flow steps.
"""

import secrets
import string
from typing import Callable, Iterable

from composer_update.domain.models import (
    BRANCH_MODE_FRESH,
    BRANCH_MODE_MERGED,
    BRANCH_MODE_REUSED,
    WorkingBranch,
)


MULTI_BRANCH_PREFIX = "cu/"
RANDOM_SUFFIX_LENGTH = 8
DEFAULT_SINGLE_BRANCH_POSTFIX = "-updated"

_SUFFIX_ALPHABET = string.ascii_letters + string.digits


def random_suffix(length: int = RANDOM_SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(length))


def multi_branch_name(suffix_factory: Callable[[int], str] = random_suffix) -> str:
    return f"{MULTI_BRANCH_PREFIX}{suffix_factory(RANDOM_SUFFIX_LENGTH)}"


def single_branch_name(parent_branch: str, postfix: str = DEFAULT_SINGLE_BRANCH_POSTFIX) -> str:
    return f"{parent_branch}{postfix}"


def plan_working_branch(
    parent_branch: str,
    *,
    single_branch: bool,
    postfix: str = DEFAULT_SINGLE_BRANCH_POSTFIX,
    remote_branches: Iterable[str] | None = None,
    suffix_factory: Callable[[int], str] = random_suffix,
) -> WorkingBranch:
    if not single_branch:
        return WorkingBranch(
            name=multi_branch_name(suffix_factory),
            base=parent_branch,
            exists_on_remote=False,
            mode=BRANCH_MODE_FRESH,
        )

    name = single_branch_name(parent_branch, postfix)
    # A failed lookup counts as "absent": creating a branch is safer than skipping.
    exists_on_remote = name in set(remote_branches or ())

    # An empty postfix makes the parent its own update branch.
    if name == parent_branch:
        return WorkingBranch(
            name=name,
            base=parent_branch,
            exists_on_remote=exists_on_remote,
            mode=BRANCH_MODE_REUSED,
        )

    return WorkingBranch(
        name=name,
        base=parent_branch,
        exists_on_remote=exists_on_remote,
        mode=BRANCH_MODE_MERGED if exists_on_remote else BRANCH_MODE_FRESH,
    )
