"""The stop command: kill SSH forwards and mark rules stopped."""

from __future__ import annotations

import dataclasses
import subprocess
from typing import Sequence

from rsp.common import save_rules
from rsp.interaction import confirm, select_rules
from rsp.ssh import SSHError, get_pid
from rsp.start import _route, _Rules, _RulesPath, _wording


def _stopped_message(names: Sequence[str]) -> str:
    return f"{_wording(names, 'Rule', 'Rules')} {_wording(names, 'rule', 'rules')} stopped."


def _kill(pid: int) -> None:
    try:
        result = subprocess.run(["kill", "-9", str(pid)], capture_output=True)
    except OSError as exc:
        raise SSHError("Failed to execute kill -9 command") from exc
    if result.returncode != 0:
        error = result.stderr.decode(errors="replace")
        raise SSHError(f"Stoping SSH portforward process exited abnormally: {error}")


def stop_forward_force(
    names: Sequence[str], rules: _Rules, rules_path: _RulesPath = None
) -> None:
    """Kill the forwards of the named rules and save them as stopped."""
    updated = dict(rules)
    for name in names:
        rule = updated.get(name)
        if rule is None:
            continue
        try:
            pid = get_pid(rule.local_port)
        except SSHError:
            pid = None
        if pid is not None:
            _kill(pid)
        updated[name] = dataclasses.replace(rule, pid=None, status=False)
        save_rules(updated, rules_path)


def stop_all(rules: _Rules, rules_path: _RulesPath = None) -> None:
    """Stop every rule after confirmation."""
    if confirm("Are you sure you want to stop all rules?"):
        stop_forward_force(list(rules), rules, rules_path)
        print("All rules stopped.")
    else:
        print("The operation was cancelled.")


def stop_selected(rules: _Rules, rules_path: _RulesPath = None) -> None:
    """Stop rules the user picks, after confirmation."""
    names = select_rules(rules_path)
    prompt = (
        f"Are you sure you want to stop {_wording(names, 'this', 'these')} "
        f"{_wording(names, 'rule', 'rules')}: {', '.join(names)}?"
    )
    if confirm(prompt):
        stop_forward_force(names, rules, rules_path)
        print(_stopped_message(names))
    else:
        print("The operation was cancelled.")


def stop_input(names: Sequence[str], rules: _Rules, rules_path: _RulesPath = None) -> None:
    """Stop the named rules, reporting names that do not exist."""
    for name in names:
        if name not in rules:
            print(f"Rule '{name}' not found.")
    found = [name for name in names if name in rules]
    stop_forward_force(found, rules, rules_path)
    print(_stopped_message(found))


def stop_forward(names: Sequence[str], rules_path: _RulesPath = None) -> None:
    """Stop the named rules, all rules for ``["all"]``, or chosen ones when empty."""
    _route(names, rules_path, stop_selected, stop_all, stop_input)