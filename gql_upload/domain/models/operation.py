"""
GraphQL Operation Model.

The unit of work a link sends to a server: document text, variables and a
per-request context that can override link-level HTTP settings.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class GraphQLOperation:
    """
    A GraphQL request to execute.

    Attributes:
        query: Printed GraphQL document
        variables: Operation variables; may contain files
        operation_name: Name of the operation to run, if the document has several
        extensions: Protocol extensions (sent only when the link includes them)
        context: Per-request overrides. Recognized keys:
            - uri: str or callable(operation) -> str
            - headers: Dict[str, str]
            - http: {"include_extensions": bool, "preserve_header_case": bool}
            - timeout: float seconds
    """
    query: str
    variables: Dict[str, Any] = field(default_factory=dict)
    operation_name: Optional[str] = None
    extensions: Dict[str, Any] = field(default_factory=dict)
    context: Dict[str, Any] = field(default_factory=dict)

    def get_context(self) -> Dict[str, Any]:
        return self.context

    def set_context(self, **values: Any) -> None:
        """Merge values into the operation context."""
        self.context.update(values)


__all__ = ["GraphQLOperation"]
