"""
Prompt builder for Gemini text-to-speech.

Turns raw text plus style parameters (tone, intention, characteristics,
pitch, speed) into the effective text sent to the model. Plain text gets a
natural-language style instruction prepended; SSML is wrapped in a speak
tag when needed and otherwise left alone.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .speech import SynthesisRequest


@dataclass(frozen=True)
class StyleRule:
    """A single rung of a descriptor ladder."""

    matches: Callable[[float], bool]
    label: str


# Evaluated top to bottom, first match wins. Values between 0.95 and 1.05
# (inclusive) get no descriptor.
PITCH_LADDER: tuple[StyleRule, ...] = (
    StyleRule(lambda value: value < 0.85, "a very low pitch"),
    StyleRule(lambda value: value < 0.95, "a low pitch"),
    StyleRule(lambda value: value > 1.15, "a very high pitch"),
    StyleRule(lambda value: value > 1.05, "a high pitch"),
)

SPEED_LADDER: tuple[StyleRule, ...] = (
    StyleRule(lambda value: value < 0.85, "a very slow speaking rate"),
    StyleRule(lambda value: value < 0.95, "a slow speaking rate"),
    StyleRule(lambda value: value > 1.15, "a very fast speaking rate"),
    StyleRule(lambda value: value > 1.05, "a fast speaking rate"),
)

INSTRUCTION_TEMPLATE = "Speak with {clauses}. The text to say is: "
CLAUSE_SEPARATOR = " and "

_SPEAK_OPEN_TAG = re.compile(r"^<speak(?=[\s>/])")


def describe(value: float, ladder: tuple[StyleRule, ...]) -> Optional[str]:
    """
    Return the label of the first rule in the ladder that matches value.

    Args:
        value: Multiplier to classify (1.0 is neutral)
        ladder: Ordered rules to evaluate

    Returns:
        Matching label, or None when the value is close enough to neutral
    """
    for rule in ladder:
        if rule.matches(value):
            return rule.label
    return None


def build_style_clauses(
    tone: str = "",
    intention: str = "",
    characteristics: str = "",
    pitch: float = 1.0,
    speed: float = 1.0
) -> list[str]:
    """
    Build the ordered list of style clauses.

    Empty or whitespace-only fields contribute nothing. The order is fixed:
    tone, intention, characteristics, pitch, speed.

    Args:
        tone: Voice tone (e.g., "calm", "excited")
        intention: Speaking intention (e.g., "reassure the listener")
        characteristics: Voice characteristics (e.g., "warm and breathy")
        pitch: Pitch multiplier around 1.0
        speed: Speed multiplier around 1.0

    Returns:
        Clauses in prompt order
    """
    clauses = []

    tone = tone.strip()
    intention = intention.strip()
    characteristics = characteristics.strip()

    if tone:
        clauses.append(f"a tone that is {tone}")
    if intention:
        clauses.append(f"an intention to {intention}")
    if characteristics:
        clauses.append(f"voice characteristics that are {characteristics}")

    pitch_clause = describe(pitch, PITCH_LADDER)
    if pitch_clause:
        clauses.append(pitch_clause)

    speed_clause = describe(speed, SPEED_LADDER)
    if speed_clause:
        clauses.append(speed_clause)

    return clauses


def wrap_ssml(text: str) -> str:
    """Wrap text in a speak element unless it already opens with one."""
    if _SPEAK_OPEN_TAG.match(text.strip()):
        return text
    return f"<speak>{text}</speak>"


def build_effective_text(
    raw: str,
    is_ssml: bool = False,
    tone: str = "",
    intention: str = "",
    characteristics: str = "",
    pitch: float = 1.0,
    speed: float = 1.0
) -> str:
    """
    Build the exact text payload sent to the TTS model.

    Style parameters are ignored for SSML input. For plain text, a style
    instruction is prepended only when at least one clause applies;
    otherwise the raw text is returned unchanged.

    Args:
        raw: Text (or SSML markup) to synthesize
        is_ssml: Whether raw is SSML markup
        tone: Voice tone
        intention: Speaking intention
        characteristics: Voice characteristics
        pitch: Pitch multiplier around 1.0
        speed: Speed multiplier around 1.0

    Returns:
        Effective text for the synthesis request
    """
    if is_ssml:
        return wrap_ssml(raw)

    clauses = build_style_clauses(tone, intention, characteristics, pitch, speed)
    if not clauses:
        return raw

    prefix = INSTRUCTION_TEMPLATE.format(clauses=CLAUSE_SEPARATOR.join(clauses))
    return prefix + raw


class PromptBuilder:
    """
    Builder for the effective text of a synthesis request.

    Stateless; kept as a class so callers can hold one next to the client.
    """

    def build(self, request: "SynthesisRequest") -> str:
        """
        Build the effective text for a synthesis request.

        Args:
            request: The synthesis request

        Returns:
            Effective text for the request
        """
        return build_effective_text(
            raw=request.text,
            is_ssml=request.is_ssml,
            tone=request.voice_tone,
            intention=request.speaking_intention,
            characteristics=request.voice_characteristics,
            pitch=request.pitch,
            speed=request.speed
        )

    def describe_pitch(self, pitch: float) -> Optional[str]:
        """Get the pitch descriptor, if any."""
        return describe(pitch, PITCH_LADDER)

    def describe_speed(self, speed: float) -> Optional[str]:
        """Get the speed descriptor, if any."""
        return describe(speed, SPEED_LADDER)
