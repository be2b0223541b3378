from typing import Any

from fastapi import APIRouter, Depends, Request

from prompt_relay.api.dependencies import (
    get_app_settings,
    get_relay_use_case,
    get_text_generator,
)
from prompt_relay.api.schemas import (
    ErrorResponse,
    HealthResponse,
    RelayRequest,
    RelayResponse,
)
from prompt_relay.application.ports import TextGeneratorPort
from prompt_relay.application.use_cases.relay_prompt import RelayPromptUseCase
from prompt_relay.infra.config.settings import Settings

router = APIRouter()


async def _read_prompt(request: Request) -> Any:
    """Pull ``prompt`` out of the body; anything unreadable counts as missing."""
    try:
        payload = await request.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    return payload.get("prompt")


@router.post(
    "/ai",
    response_model=RelayResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": RelayRequest.model_json_schema()}
            }
        }
    },
)
async def relay_prompt(
    request: Request,
    use_case: RelayPromptUseCase = Depends(get_relay_use_case),
) -> RelayResponse:
    """Fill the template with the prompt and return the model's text."""
    prompt = await _read_prompt(request)
    text = await use_case.execute(prompt)
    return RelayResponse(text=text)


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    generator: TextGeneratorPort = Depends(get_text_generator),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        service=settings.app_name,
        model=getattr(generator, "model_name", settings.gemini_model),
    )
