"""Turns raw ``composer update`` output into the summary used in commits and PRs.

Each step takes and returns a list of lines so they can be composed and tested
on their own. ``filter_output`` applies ``DEFAULT_STEPS`` in order; the joined
text with its trailing newline is ``UpdateResult.summary``.
"""

from typing import Callable, Sequence

from composer_update.domain.models import UpdateResult


LineStep = Callable[[list[str]], list[str]]

CHANGE_LINE_MARKER = " - "
DOWNLOAD_MARKER = "Downloading "
FOOTER_MARKER = ":"


def keep_change_lines(lines: list[str]) -> list[str]:
    return [line for line in lines if CHANGE_LINE_MARKER in line]


def drop_download_lines(lines: list[str]) -> list[str]:
    return [line for line in lines if DOWNLOAD_MARKER not in line]


def take_until_footer(lines: list[str]) -> list[str]:
    kept: list[str] = []
    for line in lines:
        if FOOTER_MARKER in line:
            break
        kept.append(line)
    return kept


DEFAULT_STEPS: tuple[LineStep, ...] = (
    keep_change_lines,
    drop_download_lines,
    take_until_footer,
)


def split_lines(output: str) -> list[str]:
    return output.split("\n")


def apply_steps(lines: list[str], steps: Sequence[LineStep] = DEFAULT_STEPS) -> list[str]:
    for step in steps:
        lines = step(lines)
    return lines


def filter_output(output: str, steps: Sequence[LineStep] = DEFAULT_STEPS) -> UpdateResult:
    summary_lines = apply_steps(split_lines(output), steps)
    return UpdateResult(raw_output=output, summary_lines=tuple(summary_lines))
