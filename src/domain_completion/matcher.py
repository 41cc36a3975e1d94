from __future__ import annotations

import re


def completion_for_domain(domain: str, text: str) -> str | None:
    """Complete ``text`` against ``domain``, or None if it doesn't fit.

    Prefixing the domain with ``.www.`` lets one search cover text typed from
    the start of the bare domain, from after ``www.``, or from any inner label.
    The result always keeps at least one ``.`` so a bare TLD never matches,
    and ends in ``/`` unless the domain already carries a path.
    """
    probe = f".www.{domain}"
    match = re.search(re.escape(f".{text}"), probe, re.IGNORECASE)
    if match is None:
        return None

    matched = probe[match.start() + 1 :]
    if "." not in matched:
        return None
    if "/" in matched:
        return matched
    return matched + "/"
