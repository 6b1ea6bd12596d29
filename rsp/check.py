"""The check command: report which forwards are up and recover dead ones."""

from __future__ import annotations

from typing import Sequence

from rsp.interaction import confirm, select_rules
from rsp.ssh import SSHError, get_pid
from rsp.start import _route, _Rules, _RulesPath, start_forward_force
from rsp.stop import stop_forward_force

_TEMPLATES = {
    "not_started": (
        "{this} {rules} {are} not running: {listed}, "
        "you can start {them} by 'rsp start {spaced}'."
    ),
    "running": (
        "{this} {rules} {are} running: {listed}, "
        "you can stop {them} by 'rsp stop {spaced}'."
    ),
    "stopped": "{this} {rules} {have} terminated abnormally: {listed}. Do you want to restart?",
}


def status_message(names: Sequence[str], state: str) -> str:
    """Describe rules that are ``not_started``, ``running`` or ``stopped``."""
    try:
        template = _TEMPLATES[state]
    except KeyError:
        raise ValueError(f"unknown rule state: {state!r}") from None
    names = list(names)
    one = len(names) == 1
    return template.format(
        this="This" if one else "These",
        rules="rule" if one else "rules",
        are="is" if one else "are",
        have="has" if one else "have",
        them="it" if one else "them",
        listed=", ".join(names),
        spaced=" ".join(names),
    )


def _is_alive(port: int) -> bool:
    try:
        get_pid(port)
    except SSHError:
        return False
    return True


def check_running(names: Sequence[str], rules: _Rules, rules_path: _RulesPath = None) -> None:
    """Report the state of the named rules and offer to restart dead forwards."""
    groups: dict[str, list[str]] = {"not_started": [], "running": [], "stopped": []}
    for name in names:
        rule = rules.get(name)
        if rule is None:
            continue
        alive = _is_alive(rule.local_port)
        if rule.status:
            groups["running" if alive else "stopped"].append(name)
        elif not alive:
            groups["not_started"].append(name)

    for state in ("not_started", "running"):
        if groups[state]:
            print(status_message(groups[state], state))

    stopped = groups["stopped"]
    if not stopped:
        return
    if confirm(status_message(stopped, "stopped")):
        for name in stopped:
            rule = rules.get(name)
            if rule is not None and rule.status:
                start_forward_force(name, rules, rules_path)
    else:
        stop_forward_force(stopped, rules, rules_path)


def _check_selected(rules: _Rules, rules_path: _RulesPath) -> None:
    selected = select_rules(rules_path)
    if not selected:
        print("There is no rule to check.")
        return
    check_running(selected, rules, rules_path)


def _check_all(rules: _Rules, rules_path: _RulesPath) -> None:
    check_running(list(rules), rules, rules_path)


def _check_named(names: list[str], rules: _Rules, rules_path: _RulesPath) -> None:
    missing = [name for name in names if name not in rules]
    if missing:
        print(f"Rules: {','.join(missing)} is not found.")
    check_running([name for name in names if name in rules], rules, rules_path)


def check_rules(names: Sequence[str], rules_path: _RulesPath = None) -> None:
    """Check the named rules, all rules for ``["all"]``, or chosen ones when empty."""
    _route(names, rules_path, _check_selected, _check_all, _check_named)