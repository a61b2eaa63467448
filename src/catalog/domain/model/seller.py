"""Seller: the authenticated actor allowed to manage the catalog.

Application handlers receive ``Seller | None``; ``None`` means nobody
is logged in.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Seller:
    id: str
    name: str
    email: str
