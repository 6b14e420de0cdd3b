from genv_ex.models.template_model import GenerationResult, ParsedVariable, RenderConfig, RenderResult
from genv_ex.services.generator import generate_env_example
from genv_ex.services.transformer import parse_variables, render

__version__ = "1.0.8"

__all__ = [
    "GenerationResult",
    "ParsedVariable",
    "RenderConfig",
    "RenderResult",
    "generate_env_example",
    "parse_variables",
    "render",
]
