"""Prompt classification for the workflow reminder hook.

The four rule categories are evaluated in a fixed order and the first match
wins:

    command prefix > opt-out phrase > question starter > complexity keyword

Only a complexity match produces an advisory. Everything else, including no
match at all, is silent.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from metasaver_hooks.core.rules import (
    COMMAND_PREFIXES,
    COMPLEXITY_KEYWORDS,
    OPT_OUT_PHRASES,
    QUESTION_STARTERS,
)

logger = logging.getLogger(__name__)

ADVISORY_PREVIEW_LENGTH = 50
ADVISORY_PREFIX = '💡 Complex task detected: "'
ADVISORY_SUFFIX = '" Consider /ms for the structured workflow (say "skip workflow" to bypass).'

MatchMode = Literal["prefix", "substring"]


class Outcome(Enum):
    """Result category of a classified prompt."""

    SKIP_COMMAND = "skip_command"
    SKIP_OPT_OUT = "skip_opt_out"
    SKIP_QUESTION = "skip_question"
    ADVISE = "advise"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class PromptRule:
    """A named predicate over the normalized prompt."""

    name: str
    outcome: Outcome
    literals: tuple[str, ...]
    mode: MatchMode

    def match(self, normalized_prompt: str) -> str | None:
        """Return the first literal that matches, or None."""
        for literal in self.literals:
            candidate = literal.lower()
            if self.mode == "prefix":
                if normalized_prompt.startswith(candidate):
                    return literal
            elif candidate in normalized_prompt:
                return literal
        return None


@dataclass(frozen=True)
class Verdict:
    """Classification of a single prompt."""

    outcome: Outcome
    rule_name: str | None
    matched: str | None

    @property
    def should_advise(self) -> bool:
        return self.outcome is Outcome.ADVISE


PROMPT_RULES: tuple[PromptRule, ...] = (
    PromptRule("command-prefix", Outcome.SKIP_COMMAND, COMMAND_PREFIXES, "prefix"),
    PromptRule("opt-out", Outcome.SKIP_OPT_OUT, OPT_OUT_PHRASES, "substring"),
    PromptRule("question", Outcome.SKIP_QUESTION, QUESTION_STARTERS, "prefix"),
    PromptRule("complexity", Outcome.ADVISE, COMPLEXITY_KEYWORDS, "substring"),
)


def normalize_prompt(prompt: str) -> str:
    """Lower-case and trim a prompt for matching."""
    return prompt.lower().strip()


def classify_prompt(prompt: str) -> Verdict:
    """Classify a raw prompt against PROMPT_RULES.

    Args:
        prompt: Prompt text exactly as submitted

    Returns:
        Verdict for the first matching rule, or NO_MATCH
    """
    normalized = normalize_prompt(prompt)
    for rule in PROMPT_RULES:
        matched = rule.match(normalized)
        if matched is not None:
            logger.debug("Rule %s matched on %r", rule.name, matched)
            return Verdict(outcome=rule.outcome, rule_name=rule.name, matched=matched)

    logger.debug("No rule matched")
    return Verdict(outcome=Outcome.NO_MATCH, rule_name=None, matched=None)


def format_advisory(prompt: str) -> str:
    """Build the advisory line from the original, un-normalized prompt.

    Line breaks inside the preview become spaces so the advisory stays on one line.
    """
    preview = " ".join(prompt[:ADVISORY_PREVIEW_LENGTH].splitlines())
    return f"{ADVISORY_PREFIX}{preview}...{ADVISORY_SUFFIX}"
