"""Data preparation for export."""

import datetime
import json
from typing import Dict, Any, Optional


def prepare_export(video_id: str, body: Dict[str, Any], page_token: Optional[str] = None) -> Dict[str, Any]:
    """Wrap an analysis response body with request metadata."""
    return {
        "videoId": video_id,
        "pageToken": page_token,
        **body,
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": "1.0.0",
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    # Add timestamp
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
