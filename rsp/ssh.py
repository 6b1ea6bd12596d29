"""Starting SSH forwards and finding the process that serves a local port."""

from __future__ import annotations

import subprocess
from pathlib import Path

from rsp.common import PortForwardRule, load_rules, save_rules


class SSHError(RuntimeError):
    """An external command for port forwarding failed."""


def forward_spec(rule: PortForwardRule) -> str:
    """Return the ``-L`` argument for a rule."""
    return f"{rule.local_port}:localhost:{rule.remote_port}"


def parse_lsof_pid(output: str) -> int:
    """Take the PID from the first process line of ``lsof`` output."""
    lines = output.splitlines()
    if len(lines) > 1:
        fields = lines[1].split()
        if len(fields) > 1:
            text = fields[1]
            try:
                pid = int(text)
            except ValueError:
                raise SSHError(f"invalid PID in lsof output: {text!r}") from None
            if not 0 <= pid < 2**32:
                raise SSHError(f"invalid PID in lsof output: {text!r}")
            return pid
    raise SSHError("Failed to get portforward process PID")


def get_pid(port: int) -> int:
    """Return the PID of the process listening on a local port."""
    try:
        result = subprocess.run(["lsof", f"-i:{port}"], capture_output=True)
    except OSError as exc:
        raise SSHError("Failed to execute lsof command") from exc
    return parse_lsof_pid(result.stdout.decode(errors="replace"))


def portforward(name: str, rule: PortForwardRule, rules_path: str | Path | None = None) -> int:
    """Start a background SSH forward for a rule and record its PID."""
    print(
        f"Rule '{name}' starting, localhost:{rule.local_port} -> "
        f"{rule.remote_host}:{rule.remote_port}"
    )
    try:
        result = subprocess.run(
            ["ssh", "-f", "-N", "-C", "-g", "-L", forward_spec(rule), rule.remote_host],
            capture_output=True,
        )
    except OSError as exc:
        raise SSHError("Failed to execute SSH command") from exc
    if result.returncode != 0:
        error = result.stderr.decode(errors="replace")
        raise SSHError(f"SSH portforward process exited abnormally: {error}")

    pid = get_pid(rule.local_port)
    rules = load_rules(rules_path)
    stored = rules.get(name)
    if stored is not None:
        stored.pid = pid
        stored.status = True
        save_rules(rules, rules_path)
    print(f"SSH port forward is running in background, PID: {pid}")
    return pid