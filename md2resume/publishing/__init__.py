"""PinMe CLI integration: command runner, output parser and backends."""

from md2resume.publishing.backends import (
    MockBackend,
    PinMeBackend,
    PublishingBackend,
    generate_mock_cid,
    get_publishing_backend,
)
from md2resume.publishing.gateways import ens_url, mirror_urls
from md2resume.publishing.parser import ParsedOutput, parse
from md2resume.publishing.runner import CommandOutput, CommandRunner

__all__ = [
    "CommandOutput",
    "CommandRunner",
    "MockBackend",
    "ParsedOutput",
    "PinMeBackend",
    "PublishingBackend",
    "ens_url",
    "generate_mock_cid",
    "get_publishing_backend",
    "mirror_urls",
    "parse",
]
