from pydantic import BaseModel, Field

DEFAULT_PLACEHOLDER = "<YOUR_VALUE_HERE>"


class ParsedVariable(BaseModel):
    key: str
    value: str
    line_number: int


class RenderConfig(BaseModel):
    placeholder: str = DEFAULT_PLACEHOLDER
    preserve_values: list[str] = Field(default_factory=list)
    ignore_keys: list[str] = Field(default_factory=list)
    include_comments: bool = True
    header: str | None = None


class RenderResult(BaseModel):
    output_text: str
    keys: list[str] = Field(default_factory=list)
    skipped_keys: list[str] = Field(default_factory=list)


class GenerationResult(BaseModel):
    content: str
    written: bool
    output_path: str
    keys: list[str] = Field(default_factory=list)
    skipped_keys: list[str] = Field(default_factory=list)
