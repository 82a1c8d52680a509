"""Domain Interfaces - Abstract contracts (Ports) for the domain layer."""

from .link import (
    ExtractableFileMatcher,
    FormDataFileAppender,
    IGraphQLLink,
)

__all__ = [
    "ExtractableFileMatcher",
    "FormDataFileAppender",
    "IGraphQLLink",
]
