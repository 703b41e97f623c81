"""
Candidate matchers for provider references in lock file text.

Each matcher takes the raw text plus the known registry hosts and returns the
raw candidate strings it recognizes, in document order. Matchers do not
decompose or de-duplicate; that happens once in the extractor.

Matchers (applied in this priority order by default):
    match_provider_declarations   provider "registry.terraform.io/hashicorp/aws"
    match_quoted_registry_paths   "registry.terraform.io/providers/hashicorp/aws"
    match_bare_registry_paths     registry.terraform.io/providers/hashicorp/aws
    match_quoted_pairs            "hashicorp/aws"
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from terragrade.lockfile.models import TOKEN_PATTERN

Matcher = Callable[[str, Sequence[str]], list[str]]

DEFAULT_REGISTRY_HOSTS: tuple[str, ...] = ("registry.terraform.io", "registry.opentofu.org")

HOST_PATTERN = r"[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+"

PAIR_RE = re.compile(rf"{TOKEN_PATTERN}/{TOKEN_PATTERN}")
URL_RE = re.compile(r"https?://[^\s\"'\]]+")
URL_TRAILING_RE = re.compile(r"[,\]}]+$")

PROVIDER_DECLARATION_RE = re.compile(r"""provider\s+(?:"([^"\n]+)"|'([^'\n]+)')""")
ANY_REGISTRY_PATH_RE = re.compile(rf"(?:^|/){HOST_PATTERN}/providers?/")
QUOTED_PAIR_RE = re.compile(rf'"({TOKEN_PATTERN}/{TOKEN_PATTERN})"')


def _hosts_alternation(hosts: Sequence[str]) -> str:
    return "|".join(re.escape(host) for host in hosts)


def mentions_registry(value: str, hosts: Sequence[str]) -> bool:
    """Return True if value names a known registry host or any registry provider path."""
    for host in hosts:
        if value == host or f"{host}/" in value:
            return True
    return ANY_REGISTRY_PATH_RE.search(value) is not None


def match_provider_declarations(text: str, hosts: Sequence[str]) -> list[str]:
    """Values of ``provider "<value>"`` declarations that look like provider sources."""
    candidates = []
    for match in PROVIDER_DECLARATION_RE.finditer(text):
        value = match.group(1) or match.group(2)
        if mentions_registry(value, hosts) or PAIR_RE.fullmatch(value):
            candidates.append(value)
    return candidates


def match_quoted_registry_paths(text: str, hosts: Sequence[str]) -> list[str]:
    """Quoted strings containing ``<host>/providers/`` for a known host."""
    if not hosts:
        return []
    prefix = rf"(?:{_hosts_alternation(hosts)})/providers?/"
    pattern = re.compile(rf"""(?:"([^"\n]*{prefix}[^"\n]+)"|'([^'\n]*{prefix}[^'\n]+)')""")
    return [match.group(1) or match.group(2) for match in pattern.finditer(text)]


def match_bare_registry_paths(text: str, hosts: Sequence[str]) -> list[str]:
    """Registry provider paths anywhere in the text, quoted or not."""
    if not hosts:
        return []
    pattern = re.compile(
        rf"(?:{_hosts_alternation(hosts)})/providers?/{TOKEN_PATTERN}/{TOKEN_PATTERN}"
    )
    return [match.group(0) for match in pattern.finditer(text)]


def match_quoted_pairs(text: str, hosts: Sequence[str]) -> list[str]:
    """Any double-quoted ``<token>/<token>`` string.

    This over-matches: unrelated values such as ``"team/platform"`` are
    picked up as providers too.
    """
    return QUOTED_PAIR_RE.findall(text)


DEFAULT_MATCHERS: tuple[Matcher, ...] = (
    match_provider_declarations,
    match_quoted_registry_paths,
    match_bare_registry_paths,
    match_quoted_pairs,
)


def collect_urls(text: str) -> list[str]:
    """Absolute http(s) URLs in the text, trailing punctuation removed."""
    return [URL_TRAILING_RE.sub("", url) for url in URL_RE.findall(text)]
