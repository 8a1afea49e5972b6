"""Static rule lists for the prompt workflow reminder.

All literals are lowercase and are compared against the normalized prompt.
Order within a list does not affect the outcome; order between categories does
(see PROMPT_RULES in classifier.py).
"""

# Prompts already using a structured command.
COMMAND_PREFIXES: tuple[str, ...] = (
    "/ms",
    "/build",
    "/audit",
    "/architect",
    "/debug",
    "/ship",
    "/qq",
    "/skip",
    "/help",
    "/clear",
    "/compact",
)

# Explicit requests to bypass the reminder, matched anywhere in the prompt.
OPT_OUT_PHRASES: tuple[str, ...] = (
    "skip workflow",
    "no workflow",
    "without workflow",
    "just do it",
    "quick fix",
    "don't use /ms",
    "no /ms",
)

# Simple informational questions. Short words carry a trailing space so that
# "issue" or "dock" are not read as questions.
QUESTION_STARTERS: tuple[str, ...] = (
    "what",
    "how",
    "why",
    "where",
    "when",
    "which",
    "who",
    "is ",
    "are ",
    "can ",
    "could ",
    "does ",
    "do ",
    "should ",
    "explain",
    "show me",
    "tell me",
)

# Plain substring containment, multi-word entries included.
COMPLEXITY_KEYWORDS: tuple[str, ...] = (
    "implement",
    "build",
    "create",
    "refactor",
    "migrate",
    "add feature",
    "new feature",
    "integrate",
    "redesign",
    "architect",
    "fix",
    "debug",
    "optimize",
    "update all",
    "change everywhere",
    "multiple files",
    "across the codebase",
)
