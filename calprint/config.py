"""Settings for calendar printing."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from calprint.constants import CONFIG_FILENAME, LAYOUT_MONTH, LAYOUTS, OUTPUT_FILENAME


class PrintSettings(BaseModel):
    """Print settings with Pydantic validation."""

    # Files
    config_file: Path = Field(default=Path(CONFIG_FILENAME))
    output_file: Path = Field(default=Path(OUTPUT_FILENAME))

    # Rendering
    layout: str = Field(default=LAYOUT_MONTH)

    # Logging (no log file unless a directory is set)
    log_dir: Path | None = None
    log_filename: str = Field(default="calprint.log")

    @classmethod
    def from_env(cls) -> "PrintSettings":
        """Load settings from environment variables and .env file."""
        load_dotenv()

        settings_dict = {}

        # Files
        if "CALPRINT_CONFIG_FILE" in os.environ:
            settings_dict["config_file"] = Path(os.environ["CALPRINT_CONFIG_FILE"])
        if "CALPRINT_OUTPUT_FILE" in os.environ:
            settings_dict["output_file"] = Path(os.environ["CALPRINT_OUTPUT_FILE"])

        # Rendering
        if "CALPRINT_LAYOUT" in os.environ:
            layout = os.environ["CALPRINT_LAYOUT"].strip().lower()
            if layout in LAYOUTS:
                settings_dict["layout"] = layout

        # Logging
        if "CALPRINT_LOG_DIR" in os.environ:
            settings_dict["log_dir"] = Path(os.environ["CALPRINT_LOG_DIR"])
        if "CALPRINT_LOG_FILENAME" in os.environ:
            settings_dict["log_filename"] = os.environ["CALPRINT_LOG_FILENAME"]

        return cls(**settings_dict)
