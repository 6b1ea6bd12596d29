"""The list command: show all rules as a table."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from tabulate import tabulate

from rsp.common import PortForwardRule, load_rules

_HEADERS = ["RuleName", "LocalPort", "RemotePort", "RemoteHost", "Status", "PID"]


def format_rules_table(rules: Mapping[str, PortForwardRule]) -> str:
    """Render rules as a bordered text table."""
    rows = [
        [
            name,
            str(rule.local_port),
            str(rule.remote_port),
            rule.remote_host,
            "Running" if rule.status else "Stopped",
            "" if rule.pid is None else str(rule.pid),
        ]
        for name, rule in rules.items()
    ]
    return tabulate(rows, headers=_HEADERS, tablefmt="grid", disable_numparse=True)


def list_rules(rules_path: str | Path | None = None) -> None:
    """Print every stored rule."""
    rules = load_rules(rules_path)
    if not rules:
        print("No rules available.")
        return
    print(format_rules_table(rules))