"""Terminal prompts for choosing, creating and editing rules."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Sequence, TypeVar

from rsp.common import PortForwardRule, load_rules, load_ssh_config

T = TypeVar("T")


def choose(prompt: str, options: Sequence[str], default: int = 0) -> int:
    """Ask the user to pick one option; return its index."""
    options = list(options)
    if not options:
        raise ValueError("no options to choose from")
    if not 0 <= default < len(options):
        raise ValueError("default choice out of range")
    print(prompt)
    for index, option in enumerate(options):
        marker = ">" if index == default else " "
        print(f"{marker} {index + 1}) {option}")
    while True:
        answer = input(f"Choice [{default + 1}]: ").strip()
        if not answer:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return int(answer) - 1
        print(f"Please enter a number between 1 and {len(options)}.")


def confirm(prompt: str) -> bool:
    """Ask a Yes/No question that defaults to No."""
    return choose(prompt, ["Yes", "No"], 1) == 0


def validate_new_name(
    name: str, rules: Mapping[str, PortForwardRule], current: str | None = None
) -> str:
    """Check a rule name is free; ``current`` is the name being edited, if any."""
    if name in rules and name != current:
        raise ValueError(f"Name: '{name}' already exists")
    if current is None and name == "all":
        raise ValueError("'all' is keyword , please input another name.")
    return name


def parse_port(text: str) -> int:
    """Parse a TCP port number."""
    try:
        port = int(text.strip())
    except ValueError:
        raise ValueError(f"invalid port: {text!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"invalid port: {text!r}")
    return port


def _ask(prompt: str, convert: Callable[[str], T], initial: str | None = None) -> T:
    label = f"{prompt} [{initial}] " if initial is not None else f"{prompt} "
    while True:
        text = input(label).strip()
        if not text and initial is not None:
            text = initial
        if not text:
            continue
        try:
            return convert(text)
        except ValueError as exc:
            print(exc)


def add_rule_form(
    rules_path: str | Path | None = None, ssh_config_path: str | Path | None = None
) -> tuple[str, PortForwardRule]:
    """Prompt for a new rule's name, host and ports."""
    hosts = load_ssh_config(ssh_config_path)
    if not hosts:
        raise LookupError("No hosts found in ~/.ssh/config")
    rules = load_rules(rules_path)
    name = _ask("RuleName:", lambda text: validate_new_name(text, rules))
    remote_host = hosts[choose("RemoteHost", hosts, 0)]
    local_port = _ask("LocalPort:", parse_port)
    remote_port = _ask("RemotePort:", parse_port)
    return name, PortForwardRule(local_port, remote_port, remote_host)


def update_rule_form(
    name: str, rule: PortForwardRule, rules_path: str | Path | None = None
) -> tuple[str, PortForwardRule]:
    """Prompt for changes to a rule, offering its current values."""
    rules = load_rules(rules_path)
    new_name = _ask("RuleName:", lambda text: validate_new_name(text, rules, name), name)
    local_port = _ask("LocalPort:", parse_port, str(rule.local_port))
    remote_port = _ask("RemotePort:", parse_port, str(rule.remote_port))
    remote_host = _ask("RemoteHost:", str, rule.remote_host)
    return new_name, PortForwardRule(
        local_port, remote_port, remote_host, status=rule.status, pid=rule.pid
    )


def get_rules_names(rules_path: str | Path | None = None) -> list[str]:
    """Return all rule names, announcing when there are none."""
    names = list(load_rules(rules_path))
    if not names:
        print("No rules available.")
    return names


def select_rule(rules_path: str | Path | None = None) -> str | None:
    """Let the user pick one rule; None if there is nothing or the user gives up."""
    try:
        names = get_rules_names(rules_path)
    except (OSError, ValueError):
        return None
    if not names:
        return None
    try:
        return names[choose("Please select a rule", names, 0)]
    except (EOFError, KeyboardInterrupt):
        return None


def _multi_select(prompt: str, items: Sequence[str]) -> list[str]:
    print(prompt)
    for index, item in enumerate(items):
        print(f"  {index + 1}) {item}")
    while True:
        answer = input("Select (numbers separated by spaces or commas): ")
        tokens = answer.replace(",", " ").split()
        if all(t.isdigit() and 1 <= int(t) <= len(items) for t in tokens):
            return [items[i] for i in sorted({int(t) - 1 for t in tokens})]
        print(f"Please enter numbers between 1 and {len(items)}.")


def select_rules(rules_path: str | Path | None = None) -> list[str]:
    """Let the user pick any number of rules; empty if none were chosen."""
    while True:
        try:
            names = get_rules_names(rules_path)
        except (OSError, ValueError):
            return []
        if not names:
            return []
        try:
            selected = _multi_select("Please select one or more rules", names)
        except (EOFError, KeyboardInterrupt):
            return []
        if selected:
            return selected
        try:
            again = choose(
                "No rules selected. Would you like to select again?",
                ["Yes, select again", "No, exit"],
                0,
            )
        except (EOFError, KeyboardInterrupt):
            return []
        if again != 0:
            return []