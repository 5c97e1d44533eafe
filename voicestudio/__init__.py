"""
VoiceStudio - Styled speech synthesis with Gemini TTS.
"""

from .tts import (
    SynthesisRequest,
    generate_speech,
    build_effective_text,
    GeminiTTSClient,
    GeminiTTSConfig,
    TTSError,
    ConfigurationError,
    SynthesisError,
    InvalidRequestError,
)

__version__ = "0.1.0"

__all__ = [
    "SynthesisRequest",
    "generate_speech",
    "build_effective_text",
    "GeminiTTSClient",
    "GeminiTTSConfig",
    "TTSError",
    "ConfigurationError",
    "SynthesisError",
    "InvalidRequestError",
]
