from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no DB access code). Never mutated after creation.
    """

    id: str
    name: str
    department: str
    qr_code_url: Optional[str] = None

    @property
    def qr_payload(self) -> str:
        return self.qr_code_url or self.id
