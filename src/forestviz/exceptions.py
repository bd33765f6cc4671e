"""Exceptions for forestviz parsing and configuration."""

from __future__ import annotations


class ParseError(Exception):
    """A form field could not be converted into graph data.

    Parse errors are raised by ``forestviz.model.parser`` and caught at the
    input-handling boundary (``GraphSession``), where they become user
    notifications and the previous valid state is kept.

    Attributes:
        field: Name of the form field ("nodes", "edges", "starting_node")
        text: The raw text that failed to parse
        message: Human-readable error message
    """

    field: str = ""

    def __init__(self, text: str, message: str | None = None) -> None:
        self.text = text
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        return f"Could not parse {self.field or 'field'}: {self.text!r}"


class InvalidNodeListError(ParseError):
    """At least one node token is not a number.

    The whole node list is rejected; no partial update happens.

    Attributes:
        invalid_tokens: The tokens that failed numeric conversion
    """

    field = "nodes"

    def __init__(
        self,
        text: str,
        invalid_tokens: list[str] | None = None,
        message: str | None = None,
    ) -> None:
        self.invalid_tokens = invalid_tokens or []
        super().__init__(text, message)

    def _default_message(self) -> str:
        tokens = ", ".join(repr(t) for t in self.invalid_tokens)
        return f"Node list contains non-numeric tokens: {tokens}"


class InvalidStartingNodeError(ParseError):
    """The starting-node field is not a single number."""

    field = "starting_node"

    def _default_message(self) -> str:
        return f"Starting node is not a number: {self.text!r}"


class ConfigError(Exception):
    """Invalid [tool.forestviz] configuration value.

    Attributes:
        key: The offending configuration key
        message: Human-readable error message
    """

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        self.message = message
        super().__init__(f"[tool.forestviz] {key}: {message}")
