"""
Media hosting schemas.

Dependencies: pydantic
System role: Signed upload credential contract
"""

from micourses.models.common import CamelModel


class UploadSignatureResponse(CamelModel):
    """Timestamped signature for a direct upload to the media host."""

    timestamp: int
    signature: str
    api_key: str
    cloud_name: str
    preset: str
