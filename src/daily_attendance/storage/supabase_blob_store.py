from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path

from supabase import Client, create_client

from ..core.exceptions import ConfigurationError, ConnectivityError
from .blob_store import BlobStore

logger = logging.getLogger(__name__)


def create_supabase_client(url: str, service_key: str) -> Client:
    """Create a Supabase client with the service role key.

    Raises:
        ConfigurationError: If the URL or key is missing or rejected.
    """

    if not url or not service_key:
        raise ConfigurationError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")
    try:
        return create_client(url, service_key)
    except Exception as e:
        raise ConfigurationError(f"Failed to create Supabase client: {e}") from e


class SupabaseBlobStore(BlobStore):
    def __init__(self, client: Client, bucket: str):
        self._client = client
        self._bucket = bucket

    def _files(self):
        return self._client.storage.from_(self._bucket)

    def upload(self, *, local_path: Path, destination: str, content_type: str) -> None:
        data = Path(local_path).read_bytes()
        try:
            self._files().upload(
                path=destination,
                file=data,
                file_options={"content-type": content_type, "upsert": "true"},
            )
        except Exception as e:
            raise ConnectivityError(f"Upload to {self._bucket}/{destination} failed: {e}") from e
        logger.info("Uploaded to %s/%s", self._bucket, destination)

    def signed_url(self, path: str, *, expires_in: timedelta) -> str:
        try:
            response = self._files().create_signed_url(path, int(expires_in.total_seconds()))
        except Exception as e:
            raise ConnectivityError(f"Signing {self._bucket}/{path} failed: {e}") from e

        url = response.get("signedURL") or response.get("signedUrl")
        if not url:
            raise ConnectivityError(f"Storage returned no signed URL for {self._bucket}/{path}")
        return url
