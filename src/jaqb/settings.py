import pydantic


class RenderSettings(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)
    quote: str = pydantic.Field(default="'", min_length=1, max_length=1)
    warn_on_unescaped: bool = True


DEFAULT_SETTINGS = RenderSettings()
