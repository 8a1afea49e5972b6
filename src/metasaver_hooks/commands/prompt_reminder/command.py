#!/usr/bin/env python3
"""
Prompt Workflow Reminder Hook

Suggests the /ms structured workflow when a submitted prompt looks like a
complex engineering request. Invoked on UserPromptSubmit via
metasaver-hooks prompt-workflow-reminder-hook.

Input: JSON on stdin with structure {"prompt": "..."}
Output: at most one advisory line on stderr, nothing on stdout
Exit codes:
  0 = always, the reminder is advisory and never blocks the prompt
"""

import json
import logging
import sys
from typing import Any

import click

from metasaver_hooks.core.classifier import classify_prompt, format_advisory
from metasaver_hooks.error_boundary import hook_error_boundary

logger = logging.getLogger(__name__)


def read_hook_input() -> str | None:
    """Read stdin to EOF and decode it as UTF-8, or None if it is not UTF-8."""
    raw = sys.stdin.buffer.read()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Payload is not valid UTF-8")
        return None


def extract_prompt(raw_input: str) -> str | None:
    """Pull the prompt text out of a hook payload.

    Returns None when the payload is not a JSON object. A missing or
    non-string "prompt" field yields an empty string.
    """
    try:
        payload: Any = json.loads(raw_input)
    except json.JSONDecodeError:
        logger.debug("Payload is not valid JSON")
        return None

    if not isinstance(payload, dict):
        logger.debug("Payload is %s, expected an object", type(payload).__name__)
        return None

    prompt = payload.get("prompt", "")
    if not isinstance(prompt, str):
        return ""
    return prompt


@click.command(name="prompt-workflow-reminder-hook")
@hook_error_boundary
def prompt_workflow_reminder_hook() -> None:
    """Suggest /ms for complex prompts (UserPromptSubmit hook)."""
    raw_input = read_hook_input()
    if raw_input is None:
        return

    prompt = extract_prompt(raw_input)
    if prompt is None:
        return

    verdict = classify_prompt(prompt)
    if verdict.should_advise:
        click.echo(format_advisory(prompt), err=True)


if __name__ == "__main__":
    prompt_workflow_reminder_hook()
