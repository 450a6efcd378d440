"""Object storage package — uploads binary payloads and returns durable URLs."""

from insurance_management.storage.uploader import FilePayload, ObjectStorageUploader, S3Uploader

__all__ = ["FilePayload", "ObjectStorageUploader", "S3Uploader"]
