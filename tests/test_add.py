import pytest

from rsp.add import add_rule
from rsp.common import PortForwardRule, load_rules, save_rules


@pytest.fixture
def typed(monkeypatch):
    """Queue of answers handed to input(); running dry is a test failure."""
    queue = []

    def fake_input(prompt=""):
        if not queue:
            raise AssertionError(f"unexpected prompt: {prompt}")
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return queue


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    ssh_dir = tmp_path / ".ssh"
    ssh_dir.mkdir()
    (ssh_dir / "config").write_text("Host alpha\n  HostName a.example.com\nHost beta\n")
    return tmp_path / "added.json"


@pytest.mark.parametrize(
    "answers, name, expected",
    [
        (["web", "2", "8080", "80"], "web", PortForwardRule(8080, 80, "beta")),
        (["db", "", "5433", "5432"], "db", PortForwardRule(5433, 5432, "alpha")),
        (["web", "1", "99999", "8080", "80"], "web", PortForwardRule(8080, 80, "alpha")),
    ],
    ids=["chosen-host", "default-host", "reprompts-invalid-port"],
)
def test_add_rule_stores_new_rule(home, typed, answers, name, expected):
    typed.extend(answers)
    add_rule(home)
    assert typed == []
    assert load_rules(home) == {name: expected}


@pytest.mark.parametrize(
    "existing, answers, message, names",
    [
        ({"web": PortForwardRule(8080, 80, "alpha")}, ["web", "api", "1", "9000", "9000"],
         "Name: 'web' already exists", {"web", "api"}),
        ({}, ["all", "db", "1", "5433", "5432"], "'all' is keyword", {"db"}),
    ],
    ids=["existing-name", "keyword-all"],
)
def test_add_rule_rejects_name(home, typed, capsys, existing, answers, message, names):
    save_rules(existing, home)
    typed.extend(answers)
    add_rule(home)
    assert message in capsys.readouterr().out
    rules = load_rules(home)
    assert set(rules) == names
    for kept, rule in existing.items():
        assert rules[kept] == rule


def test_add_rule_without_hosts_fails(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    target = tmp_path / "added.json"
    with pytest.raises(LookupError):
        add_rule(target)
    assert load_rules(target) == {}