import pytest

from menu_assistant.chat import answer, answer_with_meta, respond
from menu_assistant.models import AgentResult
from menu_assistant.phrases import FALLBACK_TEXT


def test_respond_returns_agent_result(index):
    result = respond("Show me burgers", index)
    assert isinstance(result, AgentResult)
    assert result.text.startswith("Burgers:\n")


def test_answer_returns_text(index):
    assert answer("hello", index).startswith("Hello!")


@pytest.mark.parametrize("question", [None, 123, b"\xff\xfe", "", "asdkjhasd"])
def test_never_raises(index, question):
    out = answer_with_meta(question, index)
    assert out.result.text


def test_router_failure_becomes_fallback(monkeypatch, index, capsys):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("menu_assistant.chat.route", boom)
    out = answer_with_meta("Show me burgers", index)
    assert out.intent == "fallback"
    assert out.result.text == FALLBACK_TEXT
    assert len(out.result.actions) == 3
    assert "[trace] router.error" in capsys.readouterr().err


def test_debug_trace_env(monkeypatch, index, capsys):
    monkeypatch.setenv("DEBUG_TRACE", "1")
    respond("Show me burgers", index)
    assert "[trace] router.rule" in capsys.readouterr().err


def test_no_trace_by_default(monkeypatch, index, capsys):
    monkeypatch.delenv("DEBUG_TRACE", raising=False)
    respond("Show me burgers", index)
    assert capsys.readouterr().err == ""


def test_debug_does_not_change_output(index):
    assert respond("Big Mac calories", index) == respond("Big Mac calories", index, debug=True)


def test_payload_omits_missing_fields(index):
    payload = respond("hello", index).to_payload()
    assert set(payload) == {"text", "actions"}
    assert payload["actions"][0] == {"label": "Show popular items", "value": "What are popular items?"}


def test_requests_are_independent(index):
    first = respond("How many calories are in a Big Mac?", index)
    respond("Show me burgers", index)
    again = respond("How many calories are in a Big Mac?", index)
    assert first == again
