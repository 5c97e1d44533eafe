"""
Gemini TTS client for VoiceStudio.

Sends one generate_content request with audio output for a prebuilt voice
and returns the audio payload as base64 text.
"""

import os
import base64
import logging
from dataclasses import dataclass
from typing import Optional, Any

from dotenv import load_dotenv
from google import genai
from google.genai import errors, types

logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash-preview-tts"


class TTSError(Exception):
    """Base exception for text-to-speech failures."""

    def __init__(self, message: str, reason: Optional[str] = None, details: Optional[str] = None):
        self.reason = reason
        self.details = details
        super().__init__(message)


class ConfigurationError(TTSError):
    """Raised when the client is missing required configuration."""
    pass


class SynthesisError(TTSError):
    """Raised when the API call fails or returns no audio."""
    pass


class InvalidRequestError(SynthesisError):
    """Raised when the API rejects the request as invalid."""
    pass


@dataclass
class GeminiTTSConfig:
    """Configuration for the Gemini TTS client."""
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL

    @classmethod
    def from_env(cls) -> "GeminiTTSConfig":
        """
        Build a config from environment variables.

        Reads GEMINI_API_KEY (falling back to API_KEY) and GEMINI_TTS_MODEL.
        """
        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
            model=os.getenv("GEMINI_TTS_MODEL") or DEFAULT_MODEL
        )


def _extract_audio(response: Any) -> Optional[str]:
    """
    Pull the audio payload out of a generate_content response.

    Args:
        response: Response from generate_content

    Returns:
        Base64 audio text, or None if the response carries no audio
    """
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return None

    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not parts:
        return None

    inline_data = getattr(parts[0], "inline_data", None)
    data = getattr(inline_data, "data", None)
    if not data:
        return None

    # The SDK decodes the wire payload; hand the caller base64 as sent.
    if isinstance(data, bytes):
        return base64.b64encode(data).decode("ascii")
    return data


class GeminiTTSClient:
    """
    Async Gemini text-to-speech client.

    One request per call, no retries and no caching.
    """

    def __init__(self, config: Optional[GeminiTTSConfig] = None):
        """
        Initialize the Gemini TTS client.

        Args:
            config: Optional GeminiTTSConfig. If not provided, uses environment variables.
        """
        self.config = config or GeminiTTSConfig.from_env()
        self._client = None

    def _get_client(self) -> genai.Client:
        """Lazy initialization of the SDK client."""
        if not self.config.api_key:
            raise ConfigurationError(
                "Gemini API key not provided. "
                "Set GEMINI_API_KEY environment variable or pass api_key in GeminiTTSConfig."
            )
        if self._client is None:
            self._client = genai.Client(api_key=self.config.api_key)
        return self._client

    def build_request_config(self, voice_name: str) -> types.GenerateContentConfig:
        """
        Build the generation config for single-modality audio output.

        Args:
            voice_name: Prebuilt voice name (e.g., "Kore", "Puck")

        Returns:
            Generation config for generate_content
        """
        return types.GenerateContentConfig(
            response_modalities=["AUDIO"],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice_name)
                )
            )
        )

    async def synthesize(self, text: str, voice_name: str) -> str:
        """
        Synthesize speech for the given effective text.

        Args:
            text: Effective text (plain prompt or SSML) to send
            voice_name: Prebuilt voice name

        Returns:
            Base64-encoded audio payload

        Raises:
            ConfigurationError: If no API key is configured
            InvalidRequestError: If the API rejects the request as invalid
            SynthesisError: If the call fails or returns no audio
        """
        client = self._get_client()

        logger.debug(
            f"Synthesizing {len(text)} chars with model={self.config.model} voice={voice_name}"
        )

        try:
            response = await client.aio.models.generate_content(
                model=self.config.model,
                contents=[types.Content(parts=[types.Part(text=text)])],
                config=self.build_request_config(voice_name)
            )
        except errors.ClientError as e:
            logger.error(f"Error generating speech: {e}")
            if e.code == 400:
                raise InvalidRequestError(
                    "Invalid request. Please check your input text (and SSML markup) and try again.",
                    reason=str(e.code),
                    details=e.message
                ) from e
            raise SynthesisError(
                "Failed to generate speech. Please check your input and API configuration.",
                reason=str(e.code),
                details=e.message
            ) from e
        except Exception as e:
            logger.error(f"Error generating speech: {e}")
            raise SynthesisError(
                "Failed to generate speech. Please check your input and API configuration.",
                details=str(e)
            ) from e

        audio = _extract_audio(response)
        if not audio:
            logger.warning("Gemini TTS response contained no audio data")
            raise SynthesisError(
                "No audio data received from API. The model may have deemed the input unsafe.",
                reason="empty_audio"
            )

        return audio
