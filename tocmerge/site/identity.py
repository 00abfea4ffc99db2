from __future__ import annotations

import base64


PAGE_ID_TERMINATOR = "."


def page_id(canonical_url: str) -> str:
    """Derive the anchor namespace of a page from its canonical site URL.

    The URL bytes are encoded with unpadded base64url and terminated with a
    ``.``, which the base64url alphabet never produces. Identifiers are
    therefore prefix-free: ``<page id><local id>`` splits back into exactly one
    page and one local id.
    """

    encoded = base64.urlsafe_b64encode(canonical_url.encode("utf-8")).decode("ascii")
    return encoded.rstrip("=") + PAGE_ID_TERMINATOR


__all__ = ["PAGE_ID_TERMINATOR", "page_id"]
