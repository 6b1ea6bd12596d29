"""The remove command: delete stopped rules after confirmation."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rsp.common import PortForwardRule, load_rules, save_rules
from rsp.interaction import confirm, select_rules


def removal_prompt(names: Sequence[str]) -> str:
    """Return the confirmation question for removing the given rules."""
    one = len(names) == 1
    return (
        f"Are you sure you want to remove {'this' if one else 'these'} "
        f"rule{'' if one else 's'}: {', '.join(names)}? This action cannot be undone"
    )


def _confirm_removal(
    to_remove: list[str], rules: dict[str, PortForwardRule], rules_path: str | Path | None
) -> None:
    if not to_remove:
        print("There is no rule to remove.")
        return
    if confirm(removal_prompt(to_remove)):
        for name in to_remove:
            rules.pop(name, None)
        save_rules(rules, rules_path)
        print("Rule(s) removed.")
    else:
        print("Rule(s) removal canceled.")


def _remove_all(rules: dict[str, PortForwardRule], rules_path: str | Path | None) -> None:
    if not rules:
        print("There is no rule to remove.")
        return
    to_remove = []
    for name, rule in rules.items():
        if rule.status:
            print(f"Rule {name} is running, please stop it first.")
        else:
            to_remove.append(name)
    _confirm_removal(to_remove, rules, rules_path)


def _remove_selected(rules: dict[str, PortForwardRule], rules_path: str | Path | None) -> None:
    names = select_rules(rules_path)
    if not names:
        print("There is no rule to remove.")
        return
    to_remove = []
    for name in names:
        rule = rules.get(name)
        if rule is None:
            continue
        if rule.status:
            print(f"Rule: {name} is running, please stop it first.")
        else:
            to_remove.append(name)
    _confirm_removal(to_remove, rules, rules_path)


def _remove_input(
    names: Sequence[str], rules: dict[str, PortForwardRule], rules_path: str | Path | None
) -> None:
    to_remove = []
    for name in names:
        rule = rules.get(name)
        if rule is None:
            print(f"Rule {name} not found.")
        elif rule.status:
            print("Rule is running, please stop it first.")
        else:
            to_remove.append(name)
    _confirm_removal(to_remove, rules, rules_path)


def remove_rules(names: Sequence[str], rules_path: str | Path | None = None) -> None:
    """Remove the named rules, all rules for ``["all"]``, or chosen ones when empty."""
    rules = load_rules(rules_path)
    names = list(names)
    if not names:
        _remove_selected(rules, rules_path)
    elif names == ["all"]:
        _remove_all(rules, rules_path)
    else:
        _remove_input(names, rules, rules_path)