"""
FastAPI dependency functions.

The settings and generator live on ``app.state``; they are built once by
``create_app`` and only read afterwards.
"""

from fastapi import Depends, Request

from prompt_relay.application.ports import TextGeneratorPort
from prompt_relay.application.use_cases.relay_prompt import RelayPromptUseCase
from prompt_relay.domain.template import PromptTemplate
from prompt_relay.infra.config.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_text_generator(request: Request) -> TextGeneratorPort:
    return request.app.state.generator


def get_prompt_template(settings: Settings = Depends(get_app_settings)) -> PromptTemplate:
    return PromptTemplate(
        template=settings.prompt_template, marker=settings.prompt_marker
    )


def get_relay_use_case(
    generator: TextGeneratorPort = Depends(get_text_generator),
    template: PromptTemplate = Depends(get_prompt_template),
) -> RelayPromptUseCase:
    return RelayPromptUseCase(generator=generator, template=template)
