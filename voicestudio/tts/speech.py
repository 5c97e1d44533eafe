"""
Speech generation entry point.

Combines the prompt builder and the Gemini client for a single request.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .prompt_builder import PromptBuilder
from .gemini_client import GeminiTTSClient

logger = logging.getLogger(__name__)


@dataclass
class SynthesisRequest:
    """Input parameters for one speech synthesis call."""
    text: str
    voice_name: str
    language: str = "en-US"
    is_ssml: bool = False
    voice_tone: str = ""
    speaking_intention: str = ""
    voice_characteristics: str = ""
    pitch: float = 1.0
    speed: float = 1.0

    def __post_init__(self):
        if self.pitch <= 0:
            raise ValueError(f"pitch must be a positive multiplier, got {self.pitch}")
        if self.speed <= 0:
            raise ValueError(f"speed must be a positive multiplier, got {self.speed}")


async def generate_speech(
    request: SynthesisRequest,
    client: Optional[GeminiTTSClient] = None,
    builder: Optional[PromptBuilder] = None
) -> str:
    """
    Generate speech audio for a request.

    Args:
        request: The synthesis request
        client: Gemini client to use (built from environment if not provided)
        builder: Prompt builder to use

    Returns:
        Base64-encoded audio payload

    Raises:
        ConfigurationError: If no API key is configured
        InvalidRequestError: If the API rejects the request as invalid
        SynthesisError: If the call fails or returns no audio
    """
    client = client or GeminiTTSClient()
    builder = builder or PromptBuilder()

    effective_text = builder.build(request)
    logger.debug(f"Generating speech (language={request.language}, ssml={request.is_ssml})")

    return await client.synthesize(effective_text, request.voice_name)
