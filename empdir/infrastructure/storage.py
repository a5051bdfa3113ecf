# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""File storage adapter."""

from __future__ import annotations

import shutil
import time
from pathlib import Path

from werkzeug.utils import secure_filename

from empdir.domain.employees.entities import ImageUpload
from empdir.domain.employees.repositories import ImageStorage
from empdir.shared.logging import logger


class LocalImageStorage(ImageStorage):
    """Stores uploaded images as ``<epoch-millis>-<sanitised name>`` in one directory."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        return self._directory

    def save(self, upload: ImageUpload) -> str:
        self._directory.mkdir(parents=True, exist_ok=True)
        safe_name = secure_filename(upload.filename.replace(" ", "_")) or "image"
        stored_name = f"{int(time.time() * 1000)}-{safe_name}"
        target = self._directory / stored_name
        with target.open("wb") as fh:
            shutil.copyfileobj(upload.stream, fh)
        logger.info(f"storage: saved image {stored_name} ({upload.content_type})")
        return stored_name

    def delete(self, stored_name: str) -> None:
        (self._directory / stored_name).unlink(missing_ok=True)
        logger.info(f"storage: removed image {stored_name}")


__all__ = ["LocalImageStorage"]
