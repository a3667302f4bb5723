"""Access URL templates for published content."""

from typing import Iterable

from md2resume.publishing.parser import ENS_DOMAIN_SUFFIX

ENS_URL_TEMPLATE = "https://{name}." + ENS_DOMAIN_SUFFIX


def ens_url(name: str) -> str:
    """Build the ENS access URL for a PinMe subdomain."""
    return ENS_URL_TEMPLATE.format(name=name.lower())


def mirror_urls(content_id: str | None, templates: Iterable[str]) -> list[str]:
    """Substitute ``content_id`` into each gateway template, in order.

    Returns an empty list when the identifier is unknown.
    """
    if not content_id:
        return []

    urls: list[str] = []
    for template in templates:
        url = template.format(cid=content_id)
        if url not in urls:
            urls.append(url)
    return urls
