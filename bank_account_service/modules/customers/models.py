"""Domain models for customers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Customer:
    name: str
    id: Optional[int] = None
