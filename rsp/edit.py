"""The edit command: change a stopped rule."""

from __future__ import annotations

from pathlib import Path

from rsp.common import load_rules, save_rules
from rsp.interaction import select_rule, update_rule_form


def edit_rule(name: str = "", rules_path: str | Path | None = None) -> None:
    """Edit the named rule, or one chosen by the user when no name is given."""
    if not name:
        name = select_rule(rules_path) or ""
        if not name:
            print("There is no rule to edit.")
            return
    rules = load_rules(rules_path)
    current = rules.get(name)
    if current is None:
        return
    if current.status:
        print("Rule is running, please stop it first.")
        return
    new_name, new_rule = update_rule_form(name, current, rules_path)
    if new_name != name and new_name in rules:
        print(
            f"A rule with the name '{new_name}' already exists. "
            "Please choose a different name."
        )
        return
    if new_rule == current and new_name == name:
        print(f"No changes were made to the rule '{name}'.")
        return
    del rules[name]
    rules[new_name] = new_rule
    save_rules(rules, rules_path)
    if new_name != name:
        print(f"Rule '{name}' has been updated to '{new_name}'.")
    else:
        print(f"Rule '{name}' has been updated.")