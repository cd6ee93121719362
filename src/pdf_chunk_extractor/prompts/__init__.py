from .prompt import Prompt
from .prompts_library import CHUNKING_PROMPT, PromptsLibrary, default_prompts, load_prompt

__all__ = [
    "CHUNKING_PROMPT",
    "Prompt",
    "PromptsLibrary",
    "default_prompts",
    "load_prompt",
]
