from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allow_origins: list[str] = ["http://localhost:5173"]

    upload_dir: Path = Path("uploads")
    max_upload_bytes: int = 50 * 1024 * 1024
    recent_files_limit: int = 10

    extraction_engine: str = "placeholder"

    generation_provider: str = "gemini"
    generation_temperature: float = 0.7

    generation_openai_api_key: str = ""
    generation_openai_model_name: str = "gpt-4o-mini"
    generation_openai_timeout_seconds: int = 60

    generation_openai_compatible_api_key: str = ""
    generation_openai_compatible_base_url: str = ""
    generation_openai_compatible_model_name: str = ""
    generation_openai_compatible_timeout_seconds: int = 60

    generation_gemini_api_key: str = ""
    generation_gemini_model_name: str = "gemini-2.5-flash"
    generation_gemini_timeout_seconds: int = 60

    generation_openrouter_api_key: str = ""
    generation_openrouter_model_name: str = ""
    generation_openrouter_timeout_seconds: int = 60

    generation_groq_api_key: str = ""
    generation_groq_model_name: str = ""
    generation_groq_timeout_seconds: int = 60

    generation_together_api_key: str = ""
    generation_together_model_name: str = ""
    generation_together_timeout_seconds: int = 60

    generation_deepseek_api_key: str = ""
    generation_deepseek_model_name: str = ""
    generation_deepseek_timeout_seconds: int = 60

    generation_ollama_api_key: str = "ollama"
    generation_ollama_model_name: str = ""
    generation_ollama_timeout_seconds: int = 120
