"""Startup requirement checks.

Validates what Python packaging cannot: the interpreter version and the
endpoint configuration read from the environment.

The UI uses these checks to block startup until errors are fixed; warnings
are only logged.
"""

from __future__ import annotations

from dataclasses import dataclass
import sys
from urllib.parse import urlsplit

from multitranslate.translation.config import (
    DEFAULT_ENDPOINT,
    ENV_API_KEY,
    ENV_API_URL,
    EndpointConfig,
)


DOCS_URL = "https://libretranslate.com/docs/"


@dataclass(frozen=True)
class RequirementIssue:
    id: str
    title: str
    details: str
    severity: str = "error"  # "error" | "warning"


def check_startup_requirements(config: EndpointConfig) -> list[RequirementIssue]:
    issues: list[RequirementIssue] = []

    if sys.version_info < (3, 10):
        issues.append(
            RequirementIssue(
                id="python_version",
                title="Python >= 3.10",
                details=f"Current version: {sys.version.split()[0]}",
                severity="error",
            )
        )

    if config.is_custom and not _is_http_url(config.resolved_url):
        issues.append(
            RequirementIssue(
                id="endpoint_url",
                title=f"Invalid {ENV_API_URL}",
                details=(
                    f"'{config.resolved_url}' is not an absolute http(s) URL. "
                    f"Fix or unset {ENV_API_URL} to use {DEFAULT_ENDPOINT}."
                ),
                severity="error",
            )
        )

    if config.api_key and not config.is_custom:
        issues.append(
            RequirementIssue(
                id="credential_default_endpoint",
                title=f"{ENV_API_KEY} is set without {ENV_API_URL}",
                details=(
                    "The credential will be sent as a Bearer token to the "
                    f"default public endpoint ({DEFAULT_ENDPOINT})."
                ),
                severity="warning",
            )
        )

    return issues


def blocking_issues(issues: list[RequirementIssue]) -> list[RequirementIssue]:
    return [issue for issue in issues if issue.severity == "error"]


def _is_http_url(url: str) -> bool:
    parts = urlsplit(url)
    return parts.scheme in ("http", "https") and bool(parts.netloc)
