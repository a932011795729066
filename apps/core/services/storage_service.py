"""
Google Cloud Storage service for gallery media.
"""
import logging
import uuid
import os
from typing import Dict, Optional
from django.conf import settings

logger = logging.getLogger(__name__)


class GCSStorageService:
    """
    Remote media store for gallery images.

    Every call to the bucket carries a bounded timeout
    (``settings.GCS_TIMEOUT`` seconds).
    """

    ALLOWED_TYPES = ['image/jpeg', 'image/png', 'image/jpg', 'image/webp', 'image/gif']

    def __init__(self, bucket_name: str = None, project_id: str = None, timeout: int = None):
        self.bucket_name = bucket_name or getattr(settings, 'GCS_BUCKET_NAME', '')
        self.project_id = project_id or getattr(settings, 'GCS_PROJECT_ID', '')
        self.timeout = timeout or getattr(settings, 'GCS_TIMEOUT', 30)
        self._client = None
        self._bucket = None

    @property
    def client(self):
        """Lazy-load GCS client."""
        if not self._client:
            from google.cloud import storage

            credentials_path = getattr(settings, 'GCS_CREDENTIALS_PATH', '')
            if credentials_path and os.path.exists(credentials_path):
                self._client = storage.Client.from_service_account_json(credentials_path)
            else:
                # Use application default credentials
                self._client = storage.Client(project=self.project_id)

        return self._client

    @property
    def bucket(self):
        """Lazy-load GCS bucket."""
        if not self._bucket:
            self._bucket = self.client.bucket(self.bucket_name)
        return self._bucket

    def upload_image(
        self,
        file,
        folder: str = 'gallery',
        max_size_mb: int = None
    ) -> Optional[Dict[str, str]]:
        """
        Upload an image file to the bucket and make it publicly readable.

        Args:
            file: File object from request.FILES
            folder: Folder path within bucket
            max_size_mb: Maximum file size in MB

        Returns:
            Dict with ``url`` and ``public_id`` (the blob name), or None if failed
        """
        max_size_mb = max_size_mb or getattr(settings, 'GALLERY_MAX_UPLOAD_MB', 5)
        try:
            # Validate file size
            if file.size > max_size_mb * 1024 * 1024:
                logger.error(f"File too large: {file.size} bytes (max {max_size_mb}MB)")
                return None

            # Validate file type
            if file.content_type not in self.ALLOWED_TYPES:
                logger.error(f"Invalid file type: {file.content_type}")
                return None

            # Generate unique filename
            ext = os.path.splitext(file.name)[1] or self._get_extension_from_content_type(file.content_type)
            blob_name = f"{folder}/{uuid.uuid4()}{ext}"

            blob = self.bucket.blob(blob_name)
            blob.upload_from_file(file, content_type=file.content_type, timeout=self.timeout)
            blob.make_public(timeout=self.timeout)

            logger.info(f"Uploaded image to {blob_name}")
            return {'url': blob.public_url, 'public_id': blob_name}

        except Exception as e:
            logger.error(f"Failed to upload image: {str(e)}", exc_info=True)
            return None

    def delete_image(self, public_id: str) -> bool:
        """
        Delete an image from the bucket by blob name.

        A blob that is already gone counts as deleted.

        Returns:
            True if deleted successfully, False otherwise
        """
        from google.api_core.exceptions import NotFound

        try:
            self.bucket.blob(public_id).delete(timeout=self.timeout)
            logger.info(f"Deleted image: {public_id}")
            return True
        except NotFound:
            logger.warning(f"Image already missing from bucket: {public_id}")
            return True
        except Exception as e:
            logger.error(f"Failed to delete image {public_id}: {str(e)}", exc_info=True)
            return False

    @staticmethod
    def _get_extension_from_content_type(content_type: str) -> str:
        """Get file extension from content type."""
        extensions = {
            'image/jpeg': '.jpg',
            'image/jpg': '.jpg',
            'image/png': '.png',
            'image/webp': '.webp',
            'image/gif': '.gif'
        }
        return extensions.get(content_type.lower(), '.jpg')


# Singleton instance
gcs_storage = GCSStorageService()
