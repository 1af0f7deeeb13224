from docgenius.config.settings import Settings
from docgenius.extraction.base import BaseTextExtractor
from docgenius.extraction.placeholder_extractor import PlaceholderExtractor


class ExtractorFactory:
    """Creates the correct text extractor based on settings."""

    ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "placeholder": PlaceholderExtractor,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.extraction_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown extraction engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
