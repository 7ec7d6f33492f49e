"""
drinkmatch - LLM Client.

Wraps OpenAI with Instructor for structured (JSON) outputs, plus a thin
helper for DALL-E image generation. All remote calls go through here so
prompts and failures are logged in one place.

One attempt per call: both the OpenAI client and Instructor get max_retries=0.
Errors are logged and re-raised; deciding what to do about them is the
caller's job.
"""

import logging
from collections.abc import Mapping
from typing import TypeVar

import instructor
from openai import AsyncOpenAI
from pydantic import BaseModel

from drinkmatch.llm.model_router import get_step_config
from drinkmatch.llm.prompt_logger import log_image_call, log_recommend_call

logger = logging.getLogger(__name__)

# Type variable for generic structured output
T = TypeVar("T", bound=BaseModel)

# One client per API key (keys come from settings, usually just one)
_raw_clients: dict[str, AsyncOpenAI] = {}
_clients: dict[str, instructor.AsyncInstructor] = {}


class ImageGenerationError(Exception):
    """The image endpoint answered but returned no usable image."""


def get_raw_async_client(api_key: str) -> AsyncOpenAI:
    """Get the plain async OpenAI client (used for image generation)."""
    if api_key not in _raw_clients:
        _raw_clients[api_key] = AsyncOpenAI(api_key=api_key, max_retries=0)
    return _raw_clients[api_key]


def get_client(api_key: str) -> instructor.AsyncInstructor:
    """
    Get the Instructor-wrapped async OpenAI client.

    JSON mode sends response_format={"type": "json_object"} and validates
    the reply against the requested Pydantic model.
    """
    if api_key not in _clients:
        _clients[api_key] = instructor.from_openai(
            get_raw_async_client(api_key),
            mode=instructor.Mode.JSON,
        )
    return _clients[api_key]


async def call_llm(
    *,
    response_model: type[T],
    system_prompt: str,
    user_prompt: str,
    api_key: str,
    step: str = "recommend",
    answers: Mapping[str, str] | None = None,
) -> T:
    """
    Make a structured LLM call.

    Args:
        response_model: Pydantic model class for the response
        system_prompt: System message setting context
        user_prompt: User message with the actual request
        api_key: OpenAI API key (bearer token)
        step: Pipeline step name, selects the model config
        answers: Quiz answers behind the prompt, for the prompt log only

    Returns:
        Instance of response_model with validated data

    Raises:
        Whatever OpenAI/Instructor raise: connection errors, non-2xx
        status errors, or validation failures on a malformed payload.
    """
    client = get_client(api_key)
    config = get_step_config(step)
    model = config.pop("model")

    messages = [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": user_prompt},
    ]

    try:
        # max_retries=0: one request, never re-asked on a validation error
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            response_model=response_model,
            max_retries=0,
            **config,
        )
    except Exception as e:
        log_recommend_call(
            model=model,
            system_prompt=system_prompt,
            user_prompt=user_prompt,
            answers=answers,
            error=str(e),
        )
        raise

    log_recommend_call(
        model=model,
        system_prompt=system_prompt,
        user_prompt=user_prompt,
        answers=answers,
        response=response,
    )
    return response


async def generate_image(
    *,
    prompt: str,
    api_key: str,
    step: str = "illustrate",
) -> str:
    """
    Generate a single image and return its URL.

    Raises:
        ImageGenerationError: the response carried no image URL
        Whatever OpenAI raises for connection or non-2xx failures
    """
    client = get_raw_async_client(api_key)
    config = get_step_config(step)
    model = config.pop("model")

    try:
        response = await client.images.generate(model=model, prompt=prompt, **config)
        if not response.data or not response.data[0].url:
            raise ImageGenerationError("Image response contained no URL")
    except Exception as e:
        log_image_call(model=model, prompt=prompt, size=config["size"], error=str(e))
        raise

    url = response.data[0].url
    log_image_call(model=model, prompt=prompt, size=config["size"], url=url)
    return url
