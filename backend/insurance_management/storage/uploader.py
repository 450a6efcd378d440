"""
S3-compatible object storage uploader (AWS S3 or MinIO).

The request awaits the upload: the blocking boto3 call runs in a worker
thread and is retried with exponential backoff.  When every attempt fails
a StorageError is raised and the caller must not persist anything that
depends on the URL.

Usage::

    uploader = S3Uploader()
    url = await uploader.upload(FilePayload("cover.jpg", data, "image/jpeg"))
"""

from __future__ import annotations

import asyncio
import mimetypes
import posixpath
import uuid
from dataclasses import dataclass
from typing import Any, Protocol

import boto3
import botocore.config
from botocore.exceptions import BotoCoreError, ClientError

from insurance_management.core.config import settings
from insurance_management.core.errors import StorageError
from insurance_management.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FilePayload:
    """An uploaded file, fully read into memory."""

    filename: str
    content: bytes
    content_type: str | None = None


class ObjectStorageUploader(Protocol):
    async def upload(self, file: FilePayload) -> str: ...


def build_object_key(filename: str, prefix: str | None = None) -> str:
    """Unique key that keeps the original extension, e.g. `insurances/3f2a….jpg`."""
    _, ext = posixpath.splitext(filename or "")
    key = f"{uuid.uuid4().hex}{ext.lower()}"
    prefix = settings.STORAGE_KEY_PREFIX if prefix is None else prefix
    return f"{prefix.strip('/')}/{key}" if prefix else key


class S3Uploader:
    """Uploads to the configured bucket and returns the object's public URL."""

    def __init__(
        self,
        client: Any | None = None,
        *,
        bucket: str | None = None,
        public_url: str | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
    ) -> None:
        self._client = client
        self.bucket = bucket or settings.STORAGE_BUCKET_NAME
        self.public_url = (public_url or settings.STORAGE_PUBLIC_URL or settings.STORAGE_ENDPOINT).rstrip("/")
        self.max_retries = max_retries or settings.STORAGE_MAX_RETRIES
        self.backoff_seconds = (
            settings.STORAGE_RETRY_BACKOFF_SECONDS if backoff_seconds is None else backoff_seconds
        )

    @property
    def client(self) -> Any:
        """Lazily create the boto3 client with Signature V4 and bounded timeouts."""
        if self._client is None:
            self._client = boto3.client(
                "s3",
                endpoint_url=settings.STORAGE_ENDPOINT,
                aws_access_key_id=settings.STORAGE_ACCESS_KEY,
                aws_secret_access_key=settings.STORAGE_SECRET_KEY,
                region_name=settings.STORAGE_REGION,
                config=botocore.config.Config(
                    signature_version="s3v4",
                    connect_timeout=settings.STORAGE_TIMEOUT_SECONDS,
                    read_timeout=settings.STORAGE_TIMEOUT_SECONDS,
                    retries={"max_attempts": 1},
                ),
            )
        return self._client

    def object_url(self, key: str) -> str:
        return f"{self.public_url}/{self.bucket}/{key}"

    def _put(self, key: str, file: FilePayload) -> None:
        content_type = (
            file.content_type
            or mimetypes.guess_type(file.filename)[0]
            or "application/octet-stream"
        )
        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=file.content,
            ContentType=content_type,
        )

    async def upload(self, file: FilePayload) -> str:
        """Upload ``file`` and return its URL. Raises StorageError when retries run out."""
        key = build_object_key(file.filename)
        log = logger.bind(bucket=self.bucket, key=key, size=len(file.content))

        for attempt in range(1, self.max_retries + 1):
            try:
                await asyncio.to_thread(self._put, key, file)
            except (BotoCoreError, ClientError) as exc:
                if attempt < self.max_retries:
                    wait_seconds = self.backoff_seconds * (2 ** (attempt - 1))
                    log.warning(
                        f"Upload failed (attempt {attempt}/{self.max_retries}), retrying in {wait_seconds}s",
                        error=str(exc),
                    )
                    await asyncio.sleep(wait_seconds)
                    continue
                log.error("Upload failed, retries exhausted", attempts=attempt, error=str(exc))
                raise StorageError(
                    f"Upload of '{file.filename}' failed after {attempt} attempts",
                    attempts=attempt,
                    details={"bucket": self.bucket, "key": key},
                ) from exc

            log.info("File uploaded", attempts=attempt)
            return self.object_url(key)

        # max_retries < 1
        raise StorageError("Uploader configured with no attempts", attempts=0)
