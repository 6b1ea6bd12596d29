"""The start command: bring up SSH forwards for rules."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Sequence

from rsp.common import PortForwardRule, load_rules
from rsp.interaction import confirm, select_rules
from rsp.ssh import portforward

_Rules = Mapping[str, PortForwardRule]
_RulesPath = str | Path | None


def _wording(names: Sequence[str], singular: str, plural: str) -> str:
    """Pick the singular or plural word for a list of rule names."""
    return singular if len(names) == 1 else plural


def _route(
    names: Sequence[str],
    rules_path: _RulesPath,
    on_selected: Callable[[_Rules, _RulesPath], None],
    on_all: Callable[[_Rules, _RulesPath], None],
    on_named: Callable[[list[str], _Rules, _RulesPath], None],
) -> None:
    """Dispatch a command on its arguments: none, ``["all"]`` or explicit names."""
    rules = load_rules(rules_path)
    names = list(names)
    if not names:
        on_selected(rules, rules_path)
    elif names == ["all"]:
        on_all(rules, rules_path)
    else:
        on_named(names, rules, rules_path)


def start_forward_force(name: str, rules: _Rules, rules_path: _RulesPath = None) -> None:
    """Start the named rule without asking, if it exists."""
    rule = rules.get(name)
    if rule is not None:
        portforward(name, rule, rules_path)


def _start_all(rules: _Rules, rules_path: _RulesPath) -> None:
    if not confirm("Are you sure you want to start all rules? Running rules will not be affected."):
        print("The operation was cancelled.")
        return
    for name, rule in rules.items():
        portforward(name, rule, rules_path)
    print("All rules started.")


def _start_selected(rules: _Rules, rules_path: _RulesPath) -> None:
    names = select_rules(rules_path)
    prompt = (
        f"Are you sure you want to start {_wording(names, 'this', 'these')} "
        f"{_wording(names, 'rule', 'rules')}: {', '.join(names)}? "
        "Running rules will not be affected."
    )
    if not confirm(prompt):
        print("The operation was cancelled.")
        return
    for name in names:
        start_forward_force(name, rules, rules_path)


def _start_input(names: list[str], rules: _Rules, rules_path: _RulesPath) -> None:
    for name in names:
        if name in rules:
            portforward(name, rules[name], rules_path)
        else:
            print(f"Rule {name} not found.")


def start_forward(names: Sequence[str], rules_path: _RulesPath = None) -> None:
    """Start the named rules, all rules for ``["all"]``, or chosen ones when empty."""
    _route(names, rules_path, _start_selected, _start_all, _start_input)