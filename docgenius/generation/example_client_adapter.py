"""Example generation client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerationClient and register the provider in GeneratorFactory.
"""

import hashlib

from docgenius.generation.client_base import BaseGenerationClient


class ExampleClientAdapter(BaseGenerationClient):
    """Example adapter that answers with a fixed HTML fragment.

    No network calls. The reply is derived from the prompt so identical
    prompts always produce identical text, which keeps local runs and tests
    deterministic.
    """

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, system_prompt
        digest = hashlib.sha256(user_prompt.encode("utf-8")).hexdigest()[:12]
        return (
            "<h2>Example Result</h2>"
            f"<p>Offline response {digest} for a prompt of "
            f"{len(user_prompt)} characters.</p>"
        )
