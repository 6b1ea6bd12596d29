"""The add command: create a new rule interactively."""

from __future__ import annotations

from pathlib import Path

from rsp.common import load_rules, save_rules
from rsp.interaction import add_rule_form


def add_rule(rules_path: str | Path | None = None) -> None:
    """Prompt for a new rule and store it."""
    rules = load_rules(rules_path)
    name, rule = add_rule_form(rules_path)
    if name in rules:
        raise ValueError("Rule already exists, please choose a different name.")
    rules[name] = rule
    save_rules(rules, rules_path)