# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, BinaryIO

ALLOWED_IMAGE_TYPES: frozenset[str] = frozenset({"image/jpeg", "image/png"})


@dataclass(slots=True, frozen=True)
class Employee:

    id: int
    name: str
    email: str
    mobile: str
    designation: str
    gender: str
    course: tuple[str, ...]
    image: str | None
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class EmployeeFields:

    name: str
    email: str
    mobile: str
    designation: str
    gender: str
    course: tuple[str, ...]
    image: str | None = None


@dataclass(slots=True, frozen=True)
class EmployeeUpdate:
    """Partial update; ``None`` means "leave unchanged"."""

    name: str | None = None
    email: str | None = None
    mobile: str | None = None
    designation: str | None = None
    gender: str | None = None
    course: tuple[str, ...] | None = None
    image: str | None = None

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(slots=True, frozen=True)
class ImageUpload:

    filename: str
    content_type: str
    stream: BinaryIO

    @property
    def is_allowed_type(self) -> bool:
        return self.content_type in ALLOWED_IMAGE_TYPES
