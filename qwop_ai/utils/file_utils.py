"""
File Utilities
Directory creation and JSON assets
"""
import json
import os
from pathlib import Path
from typing import Any
import logging

logger = logging.getLogger(__name__)

def ensure_dir(path: str) -> None:
    """
    Ensure directory exists, create if it doesn't
    
    Args:
        path: Directory path to ensure exists
    """
    Path(path).mkdir(parents=True, exist_ok=True)

def save_json(data: Any, filepath: str, indent: int = 2) -> bool:
    """
    Save data to JSON file, creating the parent directory if needed
    
    Returns:
        True if successful, False otherwise
    """
    try:
        directory = os.path.dirname(filepath)
        if directory:
            ensure_dir(directory)
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=indent, default=str)
        return True
    except OSError as e:
        logger.error(f"Failed to save JSON to {filepath}: {e}")
        return False

def load_json(filepath: str, default: Any = None) -> Any:
    """
    Load data from JSON file
    
    Args:
        filepath: Path to JSON file
        default: Value to return if the file doesn't exist or can't be parsed
    
    Returns:
        Loaded data, or default value if failed
    """
    if not os.path.exists(filepath):
        logger.warning(f"JSON file not found: {filepath}")
        return default
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load JSON from {filepath}: {e}")
        return default
