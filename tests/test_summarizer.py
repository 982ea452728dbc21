"""Tests for the assessment text boundary."""

import sys
import types

import pytest

from dgs_thermal.analysis.summarizer import (
    AnthropicSummarizer,
    ExternalServiceError,
    RuleBasedSummarizer,
    Summarizer,
    build_prompt,
    get_summarizer,
    summarize,
)
from dgs_thermal.core.heat_transfer import DEFAULT_INPUTS, compute


class _EchoSummarizer(Summarizer):
    name = "echo"

    def __init__(self):
        self.prompts = []
        self.calls = []

    def generate(self, prompt, inputs, results):
        self.prompts.append(prompt)
        self.calls.append((inputs, results))
        return "echo"


class _FailingSummarizer(Summarizer):
    name = "failing"

    def generate(self, prompt, inputs, results):
        raise ExternalServiceError("service down")


class TestPrompt:
    def test_prompt_holds_fields_values_units(self):
        prompt = build_prompt(DEFAULT_INPUTS, compute(DEFAULT_INPUTS))
        assert "Outer Diameter: 0.1500 m" in prompt
        assert "Speed: 10300.0000 rpm" in prompt
        assert "Rotating Ring HTC (H_r): 3592.5943 W/(m²·K)" in prompt
        assert "Couette" in prompt


class TestSummarize:
    def test_custom_summarizer_receives_prompt(self):
        fake = _EchoSummarizer()
        text = summarize(DEFAULT_INPUTS, compute(DEFAULT_INPUTS), fake)
        assert text == "echo"
        assert len(fake.prompts) == 1

    def test_custom_summarizer_receives_structured_data(self):
        fake = _EchoSummarizer()
        results = compute(DEFAULT_INPUTS)
        summarize(DEFAULT_INPUTS, results, fake)
        assert fake.calls == [(DEFAULT_INPUTS, results)]

    def test_failure_does_not_touch_results(self):
        results = compute(DEFAULT_INPUTS)
        with pytest.raises(ExternalServiceError):
            summarize(DEFAULT_INPUTS, results, _FailingSummarizer())
        assert results == compute(DEFAULT_INPUTS)

    def test_default_is_rule_based(self):
        text = summarize(DEFAULT_INPUTS, compute(DEFAULT_INPUTS))
        assert text.startswith("Flow regime:")

    def test_get_summarizer(self):
        assert isinstance(get_summarizer("rule"), RuleBasedSummarizer)
        assert isinstance(get_summarizer("Anthropic"), AnthropicSummarizer)
        with pytest.raises(KeyError):
            get_summarizer("oracle")


class TestRuleBasedSummarizer:
    def _text(self, inputs):
        results = compute(inputs)
        return RuleBasedSummarizer().generate("", inputs, results)

    def test_reference_case(self):
        text = self._text(DEFAULT_INPUTS)
        assert "rotation-dominated" in text
        assert "rotating ring rejects heat more effectively" in text
        assert "laminar" in text

    def test_axial_dominated(self):
        text = self._text(DEFAULT_INPUTS.replace(n_rpm=0.0))
        assert "Poiseuille" in text

    def test_no_axial_flow(self):
        text = self._text(DEFAULT_INPUTS.replace(u_axial=0.0))
        assert "static ring has no convective cooling" in text

    def test_no_flow(self):
        text = self._text(DEFAULT_INPUTS.replace(u_axial=0.0, n_rpm=0.0))
        assert "purely conductive" in text


class TestAnthropicSummarizer:
    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        summarizer = AnthropicSummarizer()
        with pytest.raises(ExternalServiceError, match="API key"):
            summarize(DEFAULT_INPUTS, compute(DEFAULT_INPUTS), summarizer)

    def _fake_module(self, reply=None, error=None):
        class APIError(Exception):
            pass

        class _Messages:
            def create(self, **kwargs):
                if error:
                    raise APIError(error)
                block = types.SimpleNamespace(type="text", text=reply)
                return types.SimpleNamespace(content=[block])

        class Anthropic:
            def __init__(self, api_key):
                self.api_key = api_key
                self.messages = _Messages()

        return types.SimpleNamespace(Anthropic=Anthropic, APIError=APIError)

    def test_reply_text(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "anthropic", self._fake_module(reply=" Looks fine. "))
        summarizer = AnthropicSummarizer(api_key="test-key", model="test-model")
        text = summarize(DEFAULT_INPUTS, compute(DEFAULT_INPUTS), summarizer)
        assert text == "Looks fine."

    def test_api_error(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "anthropic", self._fake_module(error="timeout"))
        summarizer = AnthropicSummarizer(api_key="test-key")
        with pytest.raises(ExternalServiceError, match="timeout"):
            summarize(DEFAULT_INPUTS, compute(DEFAULT_INPUTS), summarizer)

    def test_empty_reply(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "anthropic", self._fake_module(reply=""))
        summarizer = AnthropicSummarizer(api_key="test-key")
        with pytest.raises(ExternalServiceError, match="empty"):
            summarize(DEFAULT_INPUTS, compute(DEFAULT_INPUTS), summarizer)
