import pytest

from voicestudio.tts import PromptBuilder, SynthesisRequest, build_effective_text
from voicestudio.tts.prompt_builder import (
    PITCH_LADDER,
    SPEED_LADDER,
    build_style_clauses,
    describe,
    wrap_ssml,
)


def test_plain_text_without_style_is_unchanged():
    raw = "  Hello there, how are you?  "
    assert build_effective_text(raw) == raw


def test_tone_only_prefixes_instruction():
    result = build_effective_text("Hello", tone="calm")
    assert result == "Speak with a tone that is calm. The text to say is: Hello"


def test_whitespace_only_fields_are_skipped():
    result = build_effective_text("Hello", tone="   ", intention="\t", characteristics="\n")
    assert result == "Hello"


def test_fields_are_trimmed():
    result = build_effective_text("Hello", intention="  reassure the listener ")
    assert result == "Speak with an intention to reassure the listener. The text to say is: Hello"


def test_clause_order_is_fixed():
    result = build_effective_text(
        "Good news!",
        tone="cheerful",
        intention="celebrate",
        characteristics="bright and young",
        pitch=1.2,
        speed=0.9,
    )
    assert result == (
        "Speak with a tone that is cheerful and an intention to celebrate"
        " and voice characteristics that are bright and young"
        " and a very high pitch and a slow speaking rate."
        " The text to say is: Good news!"
    )


@pytest.mark.parametrize(
    "pitch,expected",
    [
        (0.5, "a very low pitch"),
        (0.8, "a very low pitch"),
        (0.85, "a low pitch"),
        (0.94, "a low pitch"),
        (0.95, None),
        (1.0, None),
        (1.05, None),
        (1.06, "a high pitch"),
        (1.15, "a high pitch"),
        (1.16, "a very high pitch"),
        (2.0, "a very high pitch"),
    ],
)
def test_pitch_ladder_boundaries(pitch, expected):
    assert describe(pitch, PITCH_LADDER) == expected


@pytest.mark.parametrize(
    "speed,expected",
    [
        (0.8, "a very slow speaking rate"),
        (0.85, "a slow speaking rate"),
        (0.95, None),
        (1.05, None),
        (1.06, "a fast speaking rate"),
        (1.15, "a fast speaking rate"),
        (1.2, "a very fast speaking rate"),
    ],
)
def test_speed_ladder_boundaries(speed, expected):
    assert describe(speed, SPEED_LADDER) == expected


def test_pitch_alone_builds_prompt():
    result = build_effective_text("Hi", pitch=0.8)
    assert result == "Speak with a very low pitch. The text to say is: Hi"


def test_speed_alone_builds_prompt():
    assert build_effective_text("Hi", speed=1.2) == (
        "Speak with a very fast speaking rate. The text to say is: Hi"
    )
    assert build_effective_text("Hi", speed=1.05) == "Hi"
    assert build_effective_text("Hi", speed=1.06) == (
        "Speak with a fast speaking rate. The text to say is: Hi"
    )


def test_style_clauses_empty_for_neutral_input():
    assert build_style_clauses() == []


def test_ssml_already_wrapped_passes_through():
    raw = "<speak>Hello</speak>"
    result = build_effective_text(raw, is_ssml=True, tone="angry", pitch=0.5, speed=2.0)
    assert result == raw


def test_ssml_gets_wrapped():
    result = build_effective_text("Hello", is_ssml=True, tone="angry", pitch=0.5, speed=2.0)
    assert result == "<speak>Hello</speak>"


def test_ssml_with_leading_whitespace_is_not_rewrapped():
    raw = "\n  <speak>Hello</speak>"
    assert wrap_ssml(raw) == raw


def test_ssml_with_attributes_is_not_rewrapped():
    raw = '<speak version="1.0">Hello <break time="500ms"/> world</speak>'
    assert wrap_ssml(raw) == raw


def test_similar_tag_name_still_wrapped():
    assert wrap_ssml("<speaker>Bob</speaker>") == "<speak><speaker>Bob</speaker></speak>"


def test_output_is_deterministic():
    kwargs = dict(tone="warm", intention="explain", pitch=0.9, speed=1.1)
    assert build_effective_text("Same", **kwargs) == build_effective_text("Same", **kwargs)


def test_prompt_builder_uses_request_fields():
    request = SynthesisRequest(
        text="Welcome back.",
        voice_name="Kore",
        voice_tone="friendly",
        speed=0.8,
    )
    builder = PromptBuilder()
    assert builder.build(request) == (
        "Speak with a tone that is friendly and a very slow speaking rate."
        " The text to say is: Welcome back."
    )
    assert builder.describe_pitch(request.pitch) is None
    assert builder.describe_speed(request.speed) == "a very slow speaking rate"
