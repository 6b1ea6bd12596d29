from rsp.common import PortForwardRule, save_rules
from rsp.listing import format_rules_table, list_rules


def _rules():
    return {
        "web": PortForwardRule(8080, 80, "alpha", status=True, pid=4242),
        "db": PortForwardRule(5433, 5432, "beta"),
    }


def test_table_has_headers_and_rows():
    table = format_rules_table(_rules())
    header = table.splitlines()[1]
    for title in ("RuleName", "LocalPort", "RemotePort", "RemoteHost", "Status", "PID"):
        assert title in header
    assert "Running" in table
    assert "Stopped" in table
    assert "4242" in table


def test_table_rows_follow_rule_order():
    table = format_rules_table(_rules())
    assert table.index("web") < table.index("db")


def test_table_lines_have_equal_width():
    lines = format_rules_table(_rules()).splitlines()
    assert len({len(line) for line in lines}) == 1


def test_stopped_rule_has_empty_pid_cell():
    table = format_rules_table({"db": PortForwardRule(5433, 5432, "beta")})
    row = [line for line in table.splitlines() if "db" in line][0]
    cells = [cell.strip() for cell in row.strip("|").split("|")]
    assert cells == ["db", "5433", "5432", "beta", "Stopped", ""]


def test_list_rules_empty(tmp_path, capsys):
    list_rules(tmp_path / "rules.json")
    assert capsys.readouterr().out.strip() == "No rules available."


def test_list_rules_prints_table(tmp_path, capsys):
    path = tmp_path / "rules.json"
    save_rules(_rules(), path)
    list_rules(path)
    assert capsys.readouterr().out.strip() == format_rules_table(_rules())