"""
Storage service - uploads objects to an R2 bucket through the S3 API
"""
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import StorageUploadError
from core.utils import get_logger
from models import StorageConfig

logger = get_logger("storage_service")


class R2StorageService:
    """Service for uploading files to a Cloudflare R2 bucket"""

    def __init__(self, config: StorageConfig, client=None):
        self.config = config
        self.bucket_name = config.bucket_name
        if not config.endpoint_url:
            logger.warning("R2 endpoint is not configured (set CF_ACCOUNT_ID or R2_ENDPOINT_URL)")
        if not config.bucket_name:
            logger.warning("R2 bucket name not found in environment variables")
        self._client = client

    @property
    def client(self):
        """S3 client, created on first use"""
        if self._client is None:
            timeout = self.config.upload_timeout_seconds
            self._client = boto3.client(
                "s3",
                endpoint_url=self.config.endpoint_url,
                region_name="auto",
                config=Config(
                    connect_timeout=timeout,
                    read_timeout=timeout,
                    retries={"total_max_attempts": 1, "mode": "standard"},
                ),
            )
        return self._client

    def upload_file(self, key: str, body: bytes, content_type: Optional[str] = None) -> None:
        """
        Upload bytes to the bucket under key.

        The configured timeout bounds each connection attempt and each socket
        read, not the whole call: a slow but steady transfer can take longer.
        There is a single attempt; no retries.
        """
        params = {
            "Bucket": self.bucket_name,
            "Key": key,
            "Body": body,
        }
        if content_type:
            params["ContentType"] = content_type

        logger.info(f"Uploading {len(body)} bytes to {self.bucket_name}/{key}")
        try:
            self.client.put_object(**params)
        except (BotoCoreError, ClientError) as e:
            raise StorageUploadError(f"failed to upload image: {e}") from e
