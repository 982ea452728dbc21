"""Engineering assessment text for a seal calculation.

``summarize`` turns a pair of inputs and results into a short free-text
assessment. The text comes from a ``Summarizer``: either the offline
``RuleBasedSummarizer`` or ``AnthropicSummarizer``, which sends a prompt
to the Anthropic Messages API. Calculation results never depend on this
module; a failing service only raises ExternalServiceError.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod

from dgs_thermal.core.heat_transfer import SealInputs, SealResults
from dgs_thermal.reports.summary import format_block, htc_ratio

logger = logging.getLogger(__name__)

API_KEY_ENV = "ANTHROPIC_API_KEY"
MODEL_ENV = "DGS_ANTHROPIC_MODEL"
DEFAULT_MODEL = "claude-3-5-haiku-latest"

# Reynolds thresholds for the risk notes: Dittus-Boelter is fitted above
# RE_TURBULENT, gap flow is laminar below RE_LAMINAR
RE_TURBULENT = 1.0e4
RE_LAMINAR = 2300.0

PROMPT_TEMPLATE = """\
You are a senior mechanical engineer specialising in turbomachinery and dry gas seals.
Analyse the following dry gas seal heat transfer calculation.

Data:
{data}

Give a concise engineering assessment (at most 150 words) covering:
1. Flow regime: judging by the Reynolds numbers, is the gap flow dominated by
   rotation (Couette) or by axial throughflow (Poiseuille)?
2. Heat transfer: compare H_s and H_r. Which ring (rotating or static)
   rejects heat more effectively?
3. Risks: are the values within typical ranges, and is there a risk of
   thermal distortion of the seal faces?
"""


class ExternalServiceError(RuntimeError):
    """Raised when the text-generation service cannot produce an assessment."""


class Summarizer(ABC):
    """Abstract base class for assessment text generators."""

    name: str = "unnamed"

    @abstractmethod
    def generate(self, prompt: str, inputs: SealInputs, results: SealResults) -> str:
        """Produce assessment text.

        Args:
            prompt: Full prompt including the serialized data block.
            inputs: Inputs of the calculation.
            results: Results of the calculation.

        Returns:
            Assessment text.
        """
        ...


def build_prompt(inputs: SealInputs, results: SealResults) -> str:
    """Prompt text for a language model, embedding the field/value/unit block."""
    return PROMPT_TEMPLATE.format(data=format_block(inputs, results))


# --- Offline rules ---


class RuleBasedSummarizer(Summarizer):
    """Deterministic assessment from the dimensionless groups alone."""

    name = "rule"

    def generate(self, prompt: str, inputs: SealInputs, results: SealResults) -> str:
        return "\n\n".join([
            self._flow_regime(results),
            self._ring_comparison(results),
            self._risks(results),
        ])

    @staticmethod
    def _flow_regime(results: SealResults) -> str:
        if results.Re_rot == 0 and results.Re_ax == 0:
            return "Flow regime: no rotation and no axial flow; heat transfer is purely conductive."
        # Rotational term enters the rotating-ring correlation with weight 0.5 on Re_rot²
        rot = 0.5 * results.Re_rot**2
        ax = results.Re_ax**2
        if rot >= ax:
            kind = "rotation-dominated shear flow (Couette)"
        else:
            kind = "axial throughflow-dominated (Poiseuille)"
        return (
            f"Flow regime: {kind}; Re_rot = {results.Re_rot:.4g}, Re_ax = {results.Re_ax:.4g}."
        )

    @staticmethod
    def _ring_comparison(results: SealResults) -> str:
        ratio = htc_ratio(results)
        if ratio is None:
            return (
                "Heat transfer: no axial flow, so the static ring has no convective "
                f"cooling; the rotating ring reaches H_r = {results.H_r:.4g} W/(m²·K)."
            )
        better = "rotating" if ratio > 1.0 else "static"
        return (
            f"Heat transfer: H_r = {results.H_r:.4g} W/(m²·K), H_s = {results.H_s:.4g} W/(m²·K) "
            f"(H_r/H_s = {ratio:.3g}); the {better} ring rejects heat more effectively."
        )

    @staticmethod
    def _risks(results: SealResults) -> str:
        notes = []
        if 0 < results.Re_ax < RE_LAMINAR:
            notes.append(
                f"axial flow is laminar (Re_ax < {RE_LAMINAR:.0f}) while the static-ring "
                f"correlation is fitted for turbulent flow (Re_ax > {RE_TURBULENT:.0e})"
            )
        elif RE_LAMINAR <= results.Re_ax < RE_TURBULENT:
            notes.append("axial flow is transitional; static-ring values are approximate")
        ratio = htc_ratio(results)
        if ratio is not None and (ratio > 10.0 or ratio < 0.1):
            notes.append(
                "the two rings are cooled very unequally, which favours a face temperature "
                "gradient and thermal coning"
            )
        if not notes:
            return "Risks: values lie within the fitted range of the correlations."
        return "Risks: " + "; ".join(notes) + "."


# --- Anthropic service ---


class AnthropicSummarizer(Summarizer):
    """Assessment text from the Anthropic Messages API.

    Args:
        api_key: API key; defaults to the ANTHROPIC_API_KEY environment variable.
        model: Model name; defaults to DGS_ANTHROPIC_MODEL or DEFAULT_MODEL.
        max_tokens: Upper bound on the length of the reply.
    """

    name = "anthropic"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int = 600,
    ):
        self.api_key = api_key or os.environ.get(API_KEY_ENV)
        self.model = model or os.environ.get(MODEL_ENV, DEFAULT_MODEL)
        self.max_tokens = max_tokens

    def _client(self):
        if not self.api_key:
            raise ExternalServiceError(f"API key missing: set {API_KEY_ENV}")
        try:
            import anthropic
        except ImportError as e:
            raise ExternalServiceError(
                f"anthropic package not installed: {e}\n"
                f"Install with: pip install -e '.[ai]'"
            ) from e
        return anthropic, anthropic.Anthropic(api_key=self.api_key)

    def generate(self, prompt: str, inputs: SealInputs, results: SealResults) -> str:
        anthropic, client = self._client()
        try:
            response = client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            logger.error("Anthropic API error: %s", e)
            raise ExternalServiceError(f"Assessment request failed: {e}") from e

        text = "".join(
            getattr(block, "text", "") for block in (response.content or [])
        ).strip()
        if not text:
            raise ExternalServiceError("Assessment service returned an empty response")
        return text


# --- Entry point ---


def get_summarizer(engine: str) -> Summarizer:
    """Summarizer by engine name ("rule" or "anthropic")."""
    engines = {
        RuleBasedSummarizer.name: RuleBasedSummarizer,
        AnthropicSummarizer.name: AnthropicSummarizer,
    }
    try:
        return engines[engine.lower()]()
    except KeyError:
        raise KeyError(f"Unknown summarizer '{engine}'. Available: {list(engines)}") from None


def summarize(
    inputs: SealInputs,
    results: SealResults,
    summarizer: Summarizer | None = None,
) -> str:
    """Free-text engineering assessment of a calculation.

    Args:
        inputs: Inputs of the calculation.
        results: Results computed from *inputs*.
        summarizer: Text generator; the offline RuleBasedSummarizer by default.

    Raises:
        ExternalServiceError: If the summarizer's backing service fails.
    """
    summarizer = summarizer or RuleBasedSummarizer()
    prompt = build_prompt(inputs, results)
    logger.info("Generating assessment with %s summarizer", summarizer.name)
    return summarizer.generate(prompt, inputs, results)
