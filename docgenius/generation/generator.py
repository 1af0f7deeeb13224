"""AI-powered document summarizer, question answerer and math solver."""

from pathlib import Path
from typing import ClassVar

from docgenius.generation.base import BaseTextGenerator
from docgenius.generation.client_base import BaseGenerationClient
from docgenius.generation.prompt_loader import load_prompt_template
from docgenius.logging.logger import Log
from docgenius.storage.models import OperationType


class TextGenerator(BaseTextGenerator):
    """Renders an operation's prompt template and sends it to an AI provider."""

    FALLBACK_TEXT: ClassVar[dict[OperationType, str]] = {
        OperationType.SUMMARY: "Unable to generate summary",
        OperationType.QA: "Unable to generate answer",
        OperationType.MATH: "Unable to solve mathematical problems",
    }

    def __init__(
        self,
        *,
        client: BaseGenerationClient,
        model: str,
        temperature: float = 0.7,
        prompt_dir: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._templates = {
            operation: load_prompt_template(operation, prompt_dir)
            for operation in OperationType
        }

    def summarize(self, content: str, filename: str) -> str:
        return self._run(OperationType.SUMMARY, content=content, filename=filename)

    def answer_question(self, content: str, question: str, filename: str) -> str:
        return self._run(
            OperationType.QA, content=content, filename=filename, question=question
        )

    def solve_math(self, content: str, filename: str) -> str:
        return self._run(OperationType.MATH, content=content, filename=filename)

    def _run(self, operation: OperationType, **fields: str) -> str:
        prompt = self._templates[operation].format(**fields)
        Log.debug(f"{operation.value} prompt:\n{prompt}")

        text = self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
        )
        Log.debug(f"AI raw response:\n{text}")

        if not text.strip():
            Log.warning(f"AI returned blank {operation.value} text, using fallback")
            return self.FALLBACK_TEXT[operation]
        Log.info(f"Generated {operation.value}: {len(text)} chars")
        return text
