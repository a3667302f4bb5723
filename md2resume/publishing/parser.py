"""PinMe CLI output parser.

PinMe prints human-oriented text whose layout has changed between releases.
Each field is recovered by an ordered list of matchers: labelled fields
first, then bare occurrences of the expected shape. The first matcher that
finds something wins.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Protocol

# IPFS CIDv1 in base32: "baf" prefix followed by lowercase base32 characters
CID_PREFIX = "baf"
CID_ALPHABET = "a-z2-7"
CID_PATTERN = rf"{CID_PREFIX}[{CID_ALPHABET}]+"
# Unlabelled matches must be at least this long to rule out ordinary words
BARE_CID_PATTERN = rf"{CID_PREFIX}[{CID_ALPHABET}]{{8,}}"

# PinMe publishes every upload under an ENS subdomain
ENS_DOMAIN_SUFFIX = "pinit.eth.limo"
ENS_URL_PATTERN = rf"https://[a-z0-9-]+\.{re.escape(ENS_DOMAIN_SUFFIX)}"

ENS_URL_LABEL = "ENS URL:"
CID_LABEL = "IPFS CID:"


class Matcher(Protocol):
    """A named strategy that extracts one value from text."""

    name: str

    def match(self, text: str) -> str | None: ...


@dataclass(frozen=True)
class LabeledMatcher:
    """Matches ``<label> <value>``, e.g. ``ENS URL: https://...``."""

    name: str
    label: str
    value_pattern: str

    def match(self, text: str) -> str | None:
        pattern = rf"{re.escape(self.label)}\s*({self.value_pattern})"
        found = re.search(pattern, text, re.IGNORECASE)
        return found.group(1) if found else None


@dataclass(frozen=True)
class PatternMatcher:
    """Matches the first bare occurrence of a pattern anywhere in the text."""

    name: str
    pattern: str

    def match(self, text: str) -> str | None:
        found = re.search(self.pattern, text, re.IGNORECASE)
        return found.group(0) if found else None


URL_MATCHERS: tuple[Matcher, ...] = (
    LabeledMatcher("ens_url_label", ENS_URL_LABEL, ENS_URL_PATTERN),
    PatternMatcher("ens_url", ENS_URL_PATTERN),
)

CID_MATCHERS: tuple[Matcher, ...] = (
    LabeledMatcher("ipfs_cid_label", CID_LABEL, CID_PATTERN),
    LabeledMatcher("cid_label", "CID:", CID_PATTERN),
    PatternMatcher("ipfs_path_cid", rf"(?<=/ipfs/){CID_PATTERN}"),
    PatternMatcher("bare_cid", rf"\b{BARE_CID_PATTERN}\b"),
)


@dataclass(frozen=True)
class ParsedOutput:
    """Values recovered from PinMe output; either may be absent."""

    content_id: str | None = None
    url: str | None = None
    content_id_matcher: str | None = None
    url_matcher: str | None = None


def first_match(
    matchers: Iterable[Matcher], texts: Iterable[str]
) -> tuple[str, str] | tuple[None, None]:
    """Run every matcher over each text in order; first hit wins.

    Returns ``(value, matcher_name)`` or ``(None, None)``.
    """
    for text in texts:
        if not text:
            continue
        for matcher in matchers:
            value = matcher.match(text)
            if value:
                return value, matcher.name
    return None, None


def parse(text: str, fallback_text: str | None = None) -> ParsedOutput:
    """Extract the content identifier and access URL from PinMe output.

    ``text`` is normally the ``pinme list`` output. ``fallback_text`` is the
    ``pinme upload`` output, which some releases use to print the URL
    directly; it is only consulted when ``text`` yields nothing.
    """
    texts = [text, fallback_text or ""]
    content_id, cid_matcher = first_match(CID_MATCHERS, texts)
    url, url_matcher = first_match(URL_MATCHERS, texts)
    return ParsedOutput(
        content_id=content_id,
        url=url,
        content_id_matcher=cid_matcher,
        url_matcher=url_matcher,
    )
