from drillrunner import ui


def test_no_emoji_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.warn("Ran example with errors")
    assert line == "! Ran example with errors"
    assert "! Ran example with errors" in capsys.readouterr().out


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    line = ui.success("Successfully ran example")
    assert line == "✓ Successfully ran example"
    assert "Successfully ran example" in capsys.readouterr().out


def test_emoji_variants(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert ui.success("done").startswith("✅")
    assert ui.warn("oops").startswith("⚠️")
    out = capsys.readouterr().out
    assert "done" in out and "oops" in out


def test_long_message_is_not_wrapped(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    message = "word " * 40
    ui.warn(message)
    out = capsys.readouterr().out
    assert out.count("\n") == 1