"""
ColorWheel Request ID Utilities
Generate unique request IDs for tracing.
"""
import uuid
from datetime import datetime


def generate_request_id(prefix: str = "hue") -> str:
    """
    Generate a unique request ID for tracking.

    Args:
        prefix: Leading tag identifying the request kind

    Returns:
        Request ID in the form <prefix>-YYYYmmddHHMMSS-<8 hex chars>
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"{prefix}-{timestamp}-{short_uuid}"


def extract_timestamp_from_request_id(request_id: str) -> str:
    """
    Extract timestamp from request ID.

    Args:
        request_id: Request ID string

    Returns:
        Timestamp string or empty if not found
    """
    parts = request_id.split("-")
    if len(parts) == 3 and len(parts[1]) == 14 and parts[1].isdigit():
        return parts[1]
    return ""
