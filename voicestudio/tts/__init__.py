"""
Text-to-Speech module for VoiceStudio.

Provides Gemini TTS integration with natural-language style
instructions and SSML passthrough.
"""

from .prompt_builder import (
    PromptBuilder,
    StyleRule,
    PITCH_LADDER,
    SPEED_LADDER,
    build_effective_text,
)
from .gemini_client import (
    GeminiTTSClient,
    GeminiTTSConfig,
    TTSError,
    ConfigurationError,
    SynthesisError,
    InvalidRequestError,
)
from .speech import SynthesisRequest, generate_speech

__all__ = [
    "PromptBuilder",
    "StyleRule",
    "PITCH_LADDER",
    "SPEED_LADDER",
    "build_effective_text",
    "GeminiTTSClient",
    "GeminiTTSConfig",
    "TTSError",
    "ConfigurationError",
    "SynthesisError",
    "InvalidRequestError",
    "SynthesisRequest",
    "generate_speech",
]
