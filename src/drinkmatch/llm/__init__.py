"""
drinkmatch - LLM Client.

Structured text calls via Instructor, image calls via the OpenAI SDK.
"""

from drinkmatch.llm.client import (
    ImageGenerationError,
    call_llm,
    generate_image,
    get_client,
    get_raw_async_client,
)
from drinkmatch.llm.model_router import get_step_config

__all__ = [
    "ImageGenerationError",
    "call_llm",
    "generate_image",
    "get_client",
    "get_raw_async_client",
    "get_step_config",
]
