"""
File download endpoint
"""

from typing import TYPE_CHECKING

from ..models import File

if TYPE_CHECKING:
    from ..http_client import Client


class FileService:
    base_path = "download"

    def __init__(self, client: "Client"):
        self.client = client

    def get(self, file_name: str) -> File:
        """
        Download a file

        Args:
            file_name: Name of the file under the download endpoint

        Returns:
            File with its decoded content
        """
        resource, headers = self.client.create_and_do_get_headers(
            "GET", f"{self.base_path}/{file_name}", None, None, File
        )
        size = len(resource.content or b"")
        self.client.log.info(f"File download succeeded: file={file_name}, size={size}, headers={dict(headers)}")
        return resource
