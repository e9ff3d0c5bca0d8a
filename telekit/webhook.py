"""Webhook configuration and status."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class WebhookTLS:
    """Paths to the key and certificate for a TLS listener."""

    key: str = ""
    cert: str = ""


@dataclass
class WebhookEndpoint:
    """The public URL the API sends requests to, with an optional self-signed certificate."""

    public_url: str = ""
    cert: str = ""


@dataclass
class Webhook:
    """Webhook settings, and the webhook status as reported by the API."""

    listen: str = ""
    max_connections: int = 0
    allowed_updates: list[str] = field(default_factory=list)
    ip: str = ""
    drop_updates: bool = False
    secret_token: str = ""

    has_custom_cert: bool = False
    pending_updates: int = 0
    error_unixtime: int = 0
    error_message: str = ""
    sync_error_unixtime: int = 0

    tls: WebhookTLS | None = None
    endpoint: WebhookEndpoint | None = None

    def params(self) -> dict[str, str]:
        """Request parameters for registering this webhook."""
        params: dict[str, str] = {}
        if self.max_connections:
            params["max_connections"] = str(self.max_connections)
        if self.allowed_updates:
            params["allowed_updates"] = json.dumps(
                self.allowed_updates, separators=(",", ":")
            )
        if self.ip:
            params["ip_address"] = self.ip
        if self.drop_updates:
            params["drop_pending_updates"] = "true"
        if self.secret_token:
            params["secret_token"] = self.secret_token

        scheme = "https://" if self.tls is not None else "http://"
        params["url"] = scheme + self.listen
        if self.endpoint is not None:
            params["url"] = self.endpoint.public_url
        return params

    def certificate(self) -> str | None:
        """Path of the certificate to upload, or None when none is needed."""
        cert = self.tls.cert if self.tls is not None else None
        if self.endpoint is not None:
            # A public endpoint without its own certificate needs no upload,
            # even if the local listener uses a private one.
            cert = self.endpoint.cert or None
        return cert

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Webhook:
        """Build the webhook status from its API representation."""
        return cls(
            listen=data.get("url", ""),
            max_connections=data.get("max_connections", 0),
            allowed_updates=list(data.get("allowed_updates") or []),
            ip=data.get("ip_address", ""),
            drop_updates=data.get("drop_pending_updates", False),
            secret_token=data.get("secret_token", ""),
            has_custom_cert=data.get("has_custom_certificate", False),
            pending_updates=data.get("pending_update_count", 0),
            error_unixtime=data.get("last_error_date", 0),
            error_message=data.get("last_error_message", ""),
            sync_error_unixtime=data.get("last_synchronization_error_date", 0),
        )