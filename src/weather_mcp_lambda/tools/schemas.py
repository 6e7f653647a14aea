"""
Tool descriptors and registry entries.
"""
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, Field


class ToolSchema(BaseModel):
    """Public descriptor returned by tools/list and GET /tools."""
    name: str = Field(..., description="Name clients pass as params.name")
    description: str = Field(..., description="Human readable summary")
    inputSchema: dict[str, Any] = Field(..., description="JSON Schema of the arguments object")


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool: its descriptor fields plus the Python callable behind it."""
    name: str
    description: str
    input_schema: dict[str, Any]
    function: Callable[..., Any]

    @property
    def argument_names(self) -> set[str]:
        return set(self.input_schema.get("properties", {}))

    def to_schema(self) -> ToolSchema:
        return ToolSchema(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema
        )

    def __call__(self, arguments: dict[str, Any]) -> Any:
        """Run the tool. Keys the input schema does not declare are dropped."""
        accepted = self.argument_names
        return self.function(**{key: value for key, value in arguments.items() if key in accepted})
