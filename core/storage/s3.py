from __future__ import annotations

from typing import Optional

import boto3
from botocore.exceptions import ClientError
from loguru import logger

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


class S3Storage:
    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        client=None,
    ) -> None:
        self.bucket = bucket
        self.prefix = prefix.strip("/")
        if client is None:
            session = boto3.session.Session(region_name=region) if region else boto3.session.Session()
            client = session.client("s3", endpoint_url=endpoint_url) if endpoint_url else session.client("s3")
        self.client = client

    def _key(self, key: str) -> str:
        return f"{self.prefix}/{key}" if self.prefix else key

    def _name(self, s3_key: str) -> str:
        if self.prefix and s3_key.startswith(f"{self.prefix}/"):
            return s3_key[len(self.prefix) + 1:]
        return s3_key

    def list_objects(self) -> list[str]:
        params = {"Bucket": self.bucket}
        if self.prefix:
            params["Prefix"] = f"{self.prefix}/"
        names: list[str] = []
        paginator = self.client.get_paginator("list_objects_v2")
        for page in paginator.paginate(**params):
            for item in page.get("Contents", []):
                names.append(self._name(item["Key"]))
        logger.debug("Listed {count} objects in s3://{bucket}", count=len(names), bucket=self.bucket)
        return names

    def get_bytes(self, key: str) -> bytes | None:
        s3_key = self._key(key)
        try:
            response = self.client.get_object(Bucket=self.bucket, Key=s3_key)
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                logger.debug("Object s3://{bucket}/{key} does not exist", bucket=self.bucket, key=s3_key)
                return None
            raise
        return response["Body"].read()


__all__ = ["S3Storage"]
