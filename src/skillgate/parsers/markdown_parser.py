# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Extract skill references from a markdown approved-list document.

Each line is scanned for the first ``[label](https://host/owner/repo)``
link.  Lines without such a link are skipped.  No de-duplication is
performed and document order is preserved.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from skillgate.models.skill import SkillEntry

# [label](https://host/owner/repo-segment) -- repo segment runs up to ")"
_LINK_RE = re.compile(r"\[([^\]]+)\]\(https://([^/\s)]+)/([^/)]+)/([^)]+)\)")

_VCS_SUFFIX = ".git"


def _strip_vcs_suffix(repo: str) -> str:
    if repo.endswith(_VCS_SUFFIX):
        return repo[: -len(_VCS_SUFFIX)]
    return repo


def _match_line(line: str, host: str | None) -> SkillEntry | None:
    for match in _LINK_RE.finditer(line):
        label, link_host, owner, repo_segment = match.groups()
        if host is not None and link_host.lower() != host.lower():
            continue
        repo = _strip_vcs_suffix(repo_segment)
        return SkillEntry(
            name=label.lower().strip(),
            owner=owner,
            repo=repo,
            url=f"https://{link_host}/{owner}/{repo}",
            parsed_from=line.strip(),
        )
    return None


def iter_skill_entries(text: str, host: str | None = None) -> Iterator[SkillEntry]:
    """Yield one :class:`SkillEntry` per matching line, in document order.

    Args:
        text: Raw markdown document.
        host: Only accept links on this host; ``None`` (the default)
            accepts any host.
    """
    for line in text.splitlines():
        entry = _match_line(line, host)
        if entry is not None:
            yield entry


def parse_skill_entries(text: str, host: str | None = None) -> list[SkillEntry]:
    """Return all skill entries in *text* as a list."""
    return list(iter_skill_entries(text, host=host))
