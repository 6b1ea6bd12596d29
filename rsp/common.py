"""Port-forward rules, their JSON store, and host discovery from the SSH config."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Mapping

RULES_FILE = "~/.rsp.json"
SSH_CONFIG_FILE = "~/.ssh/config"

_PORT_MAX = 65535
_PID_MAX = 2**32 - 1


def _check_int(value: Any, field: str, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= maximum:
        raise ValueError(f"invalid {field}: {value!r}")
    return value


@dataclass
class PortForwardRule:
    """A local port forwarded over SSH to a port on a remote host."""

    local_port: int
    remote_port: int
    remote_host: str
    status: bool = False
    pid: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the rule as a JSON-ready mapping."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PortForwardRule":
        """Build a rule from a mapping, validating every field."""
        if not isinstance(data, Mapping):
            raise ValueError(f"rule must be an object, not {type(data).__name__}")
        try:
            local_port = data["local_port"]
            remote_port = data["remote_port"]
            remote_host = data["remote_host"]
            status = data["status"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        pid = data.get("pid")
        if not isinstance(remote_host, str):
            raise ValueError(f"invalid remote_host: {remote_host!r}")
        if not isinstance(status, bool):
            raise ValueError(f"invalid status: {status!r}")
        return cls(
            local_port=_check_int(local_port, "local_port", _PORT_MAX),
            remote_port=_check_int(remote_port, "remote_port", _PORT_MAX),
            remote_host=remote_host,
            status=status,
            pid=None if pid is None else _check_int(pid, "pid", _PID_MAX),
        )


def rules_file(path: str | Path | None = None) -> Path:
    """Return the rules file location, with ``~`` expanded."""
    return Path(path if path is not None else RULES_FILE).expanduser()


def load_rules(path: str | Path | None = None) -> dict[str, PortForwardRule]:
    """Read all rules; a missing file is created empty."""
    file = rules_file(path)
    if not file.exists():
        file.write_text("{}")
        return {}
    data = file.read_text()
    if not data.strip():
        return {}
    raw = json.loads(data)
    if not isinstance(raw, dict):
        raise ValueError("rules file must hold a JSON object")
    return {name: PortForwardRule.from_dict(rule) for name, rule in raw.items()}


def save_rules(rules: Mapping[str, PortForwardRule], path: str | Path | None = None) -> None:
    """Write all rules as pretty-printed JSON."""
    data = json.dumps({name: rule.to_dict() for name, rule in rules.items()}, indent=2)
    rules_file(path).write_text(data)


def load_ssh_config(path: str | Path | None = None) -> list[str]:
    """Return the names of the ``Host`` entries in the SSH config."""
    file = Path(path if path is not None else SSH_CONFIG_FILE).expanduser()
    if not file.exists():
        return []
    hosts = []
    for line in file.read_text().splitlines():
        if line.startswith("Host "):
            while line.startswith("Host "):
                line = line[len("Host "):]
            hosts.append(line)
    return hosts