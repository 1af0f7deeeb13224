from typing import ClassVar

from docgenius.config.settings import Settings
from docgenius.generation.base import BaseTextGenerator
from docgenius.generation.example_client_adapter import ExampleClientAdapter
from docgenius.generation.generator import TextGenerator
from docgenius.generation.openai_client_adapter import OpenAIClientAdapter


class GeneratorFactory:
    """Creates the configured text generator."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextGenerator:
        """Create a configured generator from application settings."""
        provider = settings.generation_provider.lower()
        if provider == "example":
            return TextGenerator(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._resolve(provider, settings, "api_key"),
            timeout_seconds=int(cls._resolve(provider, settings, "timeout_seconds") or 60),
            base_url=base_url,
        )
        return TextGenerator(
            client=client,
            model=cls._resolve(provider, settings, "model_name"),
            temperature=settings.generation_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.generation_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "generation_openai_compatible_base_url is required for "
                    "generation_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown generation provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _resolve(provider: str, settings: Settings, field: str) -> str:
        """Read `generation_<provider>_<field>` from settings, empty if absent."""
        value = getattr(settings, f"generation_{provider}_{field}", "")
        return str(value) if value is not None else ""
