"""
Configuration & Path Management
===============================
Central registry for data file locations and global constants.

Why is this file needed?
------------------------
1. Abstraction: the digitized ACI 216.1M-14 tables live in a data directory
   that is resolved once here instead of being hardcoded in the loaders.
2. Deployment: it handles the logic required by PyInstaller (sys._MEIPASS) to
   find the data files when the library is frozen into an executable.

Exports:
    DATA_PATH (str): Absolute path to the directory with the digitized CSV tables.
    TEMPERATURE_FILENAMES (dict): Aggregate type -> slab temperature CSV name.
    STRENGTH_FILENAMES (dict): Aggregate type -> concrete strength CSV name.
    STEEL_STRENGTH_FILENAME (str): Steel strength CSV name.
"""
import sys
import os
from pathlib import Path
from typing import Dict


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/fireresistance/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
DATA_PATH: str = get_resource_path("assets")

TEMPERATURE_FILENAMES: Dict[str, str] = {
    "carbonate": "carbonate_concrete.csv",
    "siliceous": "siliceous_concrete.csv",
    "semi_lightweight": "semi_lightweight_concrete.csv",
}

STRENGTH_FILENAMES: Dict[str, str] = {
    "carbonate": "carbonate_strength.csv",
    "siliceous": "siliceous_strength.csv",
    "semi_lightweight": "semi_lightweight_strength.csv",
}

STEEL_STRENGTH_FILENAME: str = "steel_strength.csv"

CODE_REFERENCE: str = "ACI 216.1M-14"
