# rsp

`rsp` manages named SSH local port forwards. Each rule maps a local port to
a port on a host from your `~/.ssh/config`. Rules are kept in a JSON file,
`~/.rsp.json` by default. It is created empty on first use.

Starting a rule runs `ssh -f -N -C -g -L LOCAL:localhost:REMOTE HOST`, which
puts the forward in the background. `lsof -i:LOCAL` then finds the process
that serves the local port. Its PID is recorded and the rule is marked
running. Stopping a rule looks the process up the same way and runs
`kill -9` on it. The rule is then marked stopped.

## Requirements

- Python 3.10 or later
- `ssh`, `lsof` and `kill` on your `PATH`
- Hosts defined by `Host` lines in `~/.ssh/config`

## Installation

```
pip install .
```

## Usage

```
rsp add                  # create a rule interactively
rsp list                 # show all rules as a table (alias: ls)
rsp edit [NAME]          # edit a stopped rule; choose one if NAME is omitted
rsp remove [NAMES...]    # remove stopped rules (alias: rm)
rsp start [NAMES...]     # start forwards
rsp stop [NAMES...]      # stop forwards
rsp check [NAMES...]     # report which forwards are running, not started or dead
rsp --version
```

Global option:

- `--rules-file PATH` uses another rules file instead of `~/.rsp.json`. The
  `RSP_RULES_FILE` environment variable sets it as well.

`remove`, `start`, `stop` and `check` take their arguments in the same way:

- with no names, you pick rules from a numbered list by typing one or more
  numbers, separated by spaces or commas;
- with the single name `all`, the command applies to every rule;
- otherwise it applies to the rules you name, and unknown names are reported.

`all` is reserved and cannot be used as a new rule name. Questions that
change or delete something are answered by number and default to "No".

`add` offers the `Host` entries of `~/.ssh/config` as the remote host. It
fails if there are none. `edit` and `remove` refuse rules that are marked
as running.

`check` prints which rules are running and which are not started. A rule can
also be marked as running but have no process on its local port. For such
rules, `check` offers to restart them. If you decline, they are marked as
stopped.

If a command fails, for example because `ssh` exits with an error, the
message is printed to standard error.

## Example

```
$ rsp start db
Rule 'db' starting, localhost:15432 -> bastion:5432
SSH port forward is running in background, PID: 4242
$ rsp check all
This rule is running: db, you can stop it by 'rsp stop db'.
```

## Library use

The commands are plain functions that take an optional rules-file path:
`rsp.start.start_forward`, `rsp.stop.stop_forward`,
`rsp.check.check_rules`, `rsp.remove.remove_rules`, `rsp.edit.edit_rule`,
`rsp.add.add_rule` and `rsp.listing.list_rules`. Rules are
`rsp.common.PortForwardRule` dataclasses. `rsp.common.load_rules` and
`rsp.common.save_rules` read and write them. `rsp.listing.format_rules_table`
renders them as a text table.

## Limitations

- Only local forwards (`-L`) to `localhost` on the remote host are supported.
- A rule's process is found by its local port alone. `stop` kills whatever
  `lsof` reports first for that port.
- Nothing runs in the background to watch forwards. Dead forwards are found
  only when you run `check`.