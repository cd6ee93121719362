import logging
from importlib import resources
from pathlib import Path

import yaml

from .prompt import Prompt

logger = logging.getLogger(__name__)

# (name, version) of the bundled prompt used for AI chunking
CHUNKING_PROMPT = ("chunking", "1.0")

PromptKey = tuple[str, str]


def load_prompt(path: Path) -> Prompt:
    """Read one YAML prompt file.

    Raises:
        ValueError: If the file does not hold a YAML mapping.
        pydantic.ValidationError: If fields are missing or unknown.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a prompt mapping")
    return Prompt.model_validate(data)


class PromptsLibrary:
    """Versioned prompts loaded from the ``*.yaml`` files of one directory."""

    def __init__(self, directory: str | Path) -> None:
        self._prompts: dict[PromptKey, Prompt] = {}
        for path in sorted(Path(directory).glob("*.yaml")):
            self._add(load_prompt(path), path)
        logger.info("Loaded %d prompts from %s", len(self._prompts), directory)

    def get(self, name: str, version: str) -> Prompt:
        prompt = self._prompts.get((name, version))
        if prompt is None:
            raise KeyError(f"Prompt '{name}' version '{version}' not found")
        return prompt

    def list(self) -> list[PromptKey]:
        return sorted(self._prompts)

    def _add(self, prompt: Prompt, path: Path) -> None:
        key = (prompt.name, prompt.version)
        if key in self._prompts:
            raise ValueError(
                f"Prompt '{prompt.name}' version '{prompt.version}' defined twice "
                f"(again in {path.name})"
            )
        self._prompts[key] = prompt
        logger.debug("Loaded prompt %s v%s from %s", prompt.name, prompt.version, path)


def default_prompts() -> PromptsLibrary:
    """Prompts bundled with the package."""
    return PromptsLibrary(str(resources.files(__package__).joinpath("library")))
