from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "recipe-finder"
    env: str = "local"
    log_level: str = "INFO"

    # Chat-completion provider. SiliconFlow speaks the OpenAI wire format.
    llm_base_url: str = "https://api.siliconflow.cn/v1/chat/completions"
    llm_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("llm_api_key", "siliconflow_api_key"),
    )
    llm_model: str = "THUDM/glm-4-9b-chat"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000
    llm_timeout_s: int = 30

    cors_allow_origins: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
