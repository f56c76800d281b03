"""
File Loader
Utilities for reading and writing project JSON files
"""

import json
from typing import Any, Dict, Optional


def load_json_project(json_path: str) -> Optional[Dict]:
    """
    Load project data from a JSON file

    Args:
        json_path: Path to the JSON file

    Returns:
        Dictionary containing project data, or None if failed
    """
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error loading project file: {e}")
        return None
    if not isinstance(data, dict):
        print(f"Error loading project file: {json_path} does not contain a JSON object")
        return None
    return data


def save_json_project(json_path: str, data: Dict[str, Any]) -> bool:
    """
    Write project data to a JSON file

    Args:
        json_path: Destination path
        data: Project document

    Returns:
        True if successful, False otherwise
    """
    try:
        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving project file: {e}")
        return False
