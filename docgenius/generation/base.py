from abc import ABC, abstractmethod

from docgenius.storage.models import OperationType


class BaseTextGenerator(ABC):
    """Contract for all AI text generators."""

    @abstractmethod
    def summarize(self, content: str, filename: str) -> str:
        """Return an HTML summary of the document text.

        Raises:
            GenerationError: on any failure.
        """

    @abstractmethod
    def answer_question(self, content: str, question: str, filename: str) -> str:
        """Return an HTML answer to a question about the document text.

        Raises:
            GenerationError: on any failure.
        """

    @abstractmethod
    def solve_math(self, content: str, filename: str) -> str:
        """Return HTML step-by-step solutions for math found in the document.

        Raises:
            GenerationError: on any failure.
        """

    def generate(
        self,
        operation: OperationType,
        content: str,
        filename: str,
        question: str | None = None,
    ) -> str:
        """Dispatch to the method matching `operation`."""
        if operation is OperationType.SUMMARY:
            return self.summarize(content, filename)
        if operation is OperationType.MATH:
            return self.solve_math(content, filename)
        if operation is OperationType.QA:
            if not question:
                raise ValueError("A question is required for Q&A generation")
            return self.answer_question(content, question, filename)
        raise ValueError(f"Unknown operation '{operation}'")
