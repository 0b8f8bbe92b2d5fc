"""
Downloadable file schema
"""

from typing import Optional

from pydantic import Base64Bytes, Field

from .base import WooModel


class File(WooModel):
    """File returned by the download endpoint, content is base64 on the wire"""
    name: Optional[str] = Field(default=None, alias="filename")
    content: Optional[Base64Bytes] = None
