"""
GraphQL Upload Configuration.

Centralized configuration for upload links.

Usage:
    from gql_upload.config import UploadLinkConfig

    # For testing
    config = UploadLinkConfig.for_testing()

    # Explicit endpoint
    config = UploadLinkConfig(uri="https://api.example.com/graphql", timeout=60.0)

    # From environment
    config = UploadLinkConfig.from_env()
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class UploadLinkConfig:
    """
    Upload link configuration.

    Attributes:
        uri: GraphQL endpoint used when the operation context has no "uri"
        headers: Headers sent with every request
        timeout: Request timeout in seconds (None disables it)
        include_extensions: Send operation extensions in the payload
        preserve_header_case: Keep header name casing instead of lower-casing
        log_level: Level applied to the "gql_upload" logger by the link;
            None leaves logging configuration to the caller
    """
    uri: str = "/graphql"
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = 30.0
    include_extensions: bool = False
    preserve_header_case: bool = False
    log_level: Optional[str] = None

    @classmethod
    def for_testing(cls) -> "UploadLinkConfig":
        """Config for unit tests against httpx.MockTransport."""
        return cls(
            uri="http://testserver/graphql",
            timeout=5.0,
        )

    @classmethod
    def from_env(cls) -> "UploadLinkConfig":
        """
        Create config from environment variables.

        Environment Variables:
            GQL_UPLOAD_URI: Endpoint (default: "/graphql")
            GQL_UPLOAD_TIMEOUT: Timeout seconds; "none" disables (default: "30")
            GQL_UPLOAD_INCLUDE_EXTENSIONS: Send extensions (default: "false")
            GQL_UPLOAD_PRESERVE_HEADER_CASE: Keep header casing (default: "false")
            GQL_UPLOAD_LOG_LEVEL: Logging level (default: unset)

        Returns:
            UploadLinkConfig instance
        """
        timeout = os.getenv("GQL_UPLOAD_TIMEOUT", "30")
        return cls(
            uri=os.getenv("GQL_UPLOAD_URI", "/graphql"),
            timeout=None if timeout.lower() == "none" else float(timeout),
            include_extensions=os.getenv("GQL_UPLOAD_INCLUDE_EXTENSIONS", "false").lower() == "true",
            preserve_header_case=os.getenv("GQL_UPLOAD_PRESERVE_HEADER_CASE", "false").lower() == "true",
            log_level=os.getenv("GQL_UPLOAD_LOG_LEVEL"),
        )

    def to_link_config(self) -> Dict[str, Any]:
        """Link-level section for select_http_options_and_body."""
        return {
            "http": {
                "include_extensions": self.include_extensions,
                "preserve_header_case": self.preserve_header_case,
            },
            "headers": dict(self.headers),
            "options": {"timeout": self.timeout},
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "uri": self.uri,
            "headers": dict(self.headers),
            "timeout": self.timeout,
            "include_extensions": self.include_extensions,
            "preserve_header_case": self.preserve_header_case,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UploadLinkConfig":
        """Deserialize from dictionary."""
        return cls(
            uri=data.get("uri", "/graphql"),
            headers=dict(data.get("headers") or {}),
            timeout=data.get("timeout", 30.0),
            include_extensions=data.get("include_extensions", False),
            preserve_header_case=data.get("preserve_header_case", False),
            log_level=data.get("log_level"),
        )
