import pytest

from rsp.common import PortForwardRule, save_rules
from rsp.interaction import (
    add_rule_form,
    choose,
    confirm,
    get_rules_names,
    parse_port,
    select_rule,
    select_rules,
    update_rule_form,
    validate_new_name,
)


def feed(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def raise_eof(prompt=""):
    raise EOFError


@pytest.fixture
def rules_path(tmp_path):
    path = tmp_path / "rules.json"
    save_rules(
        {"web": PortForwardRule(8080, 80, "server"), "db": PortForwardRule(15432, 5432, "dbhost")},
        path,
    )
    return path


def test_choose_default_on_empty(monkeypatch):
    feed(monkeypatch, "")
    assert choose("Pick", ["a", "b", "c"], 2) == 2


def test_choose_reprompts_on_invalid(monkeypatch):
    feed(monkeypatch, "9", "x", "2")
    assert choose("Pick", ["a", "b", "c"], 0) == 1


def test_choose_without_options():
    with pytest.raises(ValueError):
        choose("Pick", [], 0)


def test_confirm_defaults_to_no(monkeypatch):
    feed(monkeypatch, "")
    assert confirm("Sure?") is False


def test_confirm_yes(monkeypatch):
    feed(monkeypatch, "1")
    assert confirm("Sure?") is True


def test_validate_new_name_rejects_existing():
    with pytest.raises(ValueError, match="already exists"):
        validate_new_name("web", {"web": PortForwardRule(1, 2, "h")})


def test_validate_new_name_rejects_keyword():
    with pytest.raises(ValueError, match="keyword"):
        validate_new_name("all", {})


def test_validate_new_name_allows_current():
    assert validate_new_name("web", {"web": PortForwardRule(1, 2, "h")}, "web") == "web"


def test_parse_port():
    assert parse_port(" 443 ") == 443
    with pytest.raises(ValueError):
        parse_port("65536")
    with pytest.raises(ValueError):
        parse_port("http")


def test_add_rule_form(monkeypatch, rules_path, tmp_path):
    config = tmp_path / "config"
    config.write_text("Host alpha\nHost beta\n")
    feed(monkeypatch, "all", "web", "api", "2", "70000", "9000", "90")
    name, rule = add_rule_form(rules_path, config)
    assert name == "api"
    assert rule == PortForwardRule(9000, 90, "beta")


def test_add_rule_form_without_hosts(rules_path, tmp_path):
    with pytest.raises(LookupError):
        add_rule_form(rules_path, tmp_path / "absent")


def test_update_rule_form_keeps_defaults(monkeypatch, rules_path):
    rule = PortForwardRule(8080, 80, "server", status=True, pid=11)
    feed(monkeypatch, "", "", "", "")
    assert update_rule_form("web", rule, rules_path) == ("web", rule)


def test_update_rule_form_changes(monkeypatch, rules_path):
    rule = PortForwardRule(8080, 80, "server")
    feed(monkeypatch, "db", "site", "8081", "", "other")
    name, new_rule = update_rule_form("web", rule, rules_path)
    assert name == "site"
    assert new_rule == PortForwardRule(8081, 80, "other")


def test_get_rules_names_empty(tmp_path, capsys):
    assert get_rules_names(tmp_path / "rules.json") == []
    assert "No rules available." in capsys.readouterr().out


def test_select_rule(monkeypatch, rules_path):
    feed(monkeypatch, "2")
    assert select_rule(rules_path) == "db"


def test_select_rule_eof(monkeypatch, rules_path):
    monkeypatch.setattr("builtins.input", raise_eof)
    assert select_rule(rules_path) is None


def test_select_rules(monkeypatch, rules_path):
    feed(monkeypatch, "2, 1")
    assert select_rules(rules_path) == ["web", "db"]


def test_select_rules_none_then_exit(monkeypatch, rules_path):
    feed(monkeypatch, "", "2")
    assert select_rules(rules_path) == []


def test_select_rules_none_then_again(monkeypatch, rules_path):
    feed(monkeypatch, "", "1", "1")
    assert select_rules(rules_path) == ["web"]