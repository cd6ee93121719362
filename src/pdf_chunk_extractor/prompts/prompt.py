import re

from pydantic import BaseModel, ConfigDict

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Prompt(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str
    system: str | None = None

    def render(self, **values: str) -> str:
        """Substitute ``{{ name }}`` placeholders in the template.

        Raises:
            KeyError: If the template references a value that was not given.
        """

        def substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in values:
                raise KeyError(f"Prompt '{self.name}' needs input '{key}'")
            return values[key]

        return _PLACEHOLDER_RE.sub(substitute, self.template)
