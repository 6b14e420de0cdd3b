from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from genv_ex.config import Settings, get_settings
from genv_ex.models.template_model import ParsedVariable, RenderConfig, RenderResult
from genv_ex.services.transformer import parse_variables, render


class RenderRequest(BaseModel):
    source_text: str
    config: RenderConfig | None = None


class VariablesRequest(BaseModel):
    source_text: str


class VariablesResponse(BaseModel):
    variables: list[ParsedVariable] = Field(default_factory=list)


class TemplateController:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.logger = logging.getLogger(__name__)

    def default_config(self) -> RenderConfig:
        return RenderConfig(
            placeholder=self.settings.placeholder,
            preserve_values=list(self.settings.preserve_values),
            ignore_keys=list(self.settings.ignore_keys),
            include_comments=self.settings.include_comments,
            header=self.settings.header,
        )

    def render(self, payload: RenderRequest) -> RenderResult:
        config = self.default_config()
        if payload.config is not None:
            config = config.model_copy(update=payload.config.model_dump(exclude_unset=True))
        result = render(payload.source_text, config)
        self.logger.info("Rendered template with %d keys, %d skipped", len(result.keys), len(result.skipped_keys))
        return result

    def variables(self, payload: VariablesRequest) -> VariablesResponse:
        parsed = parse_variables(payload.source_text)
        ordered = sorted(parsed.values(), key=lambda item: item.line_number)
        return VariablesResponse(variables=ordered)
