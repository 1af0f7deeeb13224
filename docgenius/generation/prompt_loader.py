from pathlib import Path

from docgenius.generation.exceptions import GenerationError
from docgenius.storage.models import OperationType

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(
    operation: OperationType,
    prompt_dir: Path | None = None,
) -> str:
    """Load the prompt template for one operation.

    Args:
        operation: Operation whose template to load.
        prompt_dir: Directory holding `<operation>_prompt.txt` files.
                    Defaults to the bundled prompts directory.

    Returns:
        The raw template string with placeholders.

    Raises:
        GenerationError: if the file cannot be read.
    """
    if prompt_dir is None:
        prompt_dir = _DEFAULT_PROMPT_DIR
    path = prompt_dir / f"{operation.value}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to load prompt template: {exc}") from exc
