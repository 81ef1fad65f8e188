"""
Configuration module for the trade forms engine.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, str(default).lower()).lower() == "true"


@dataclass
class FormConfig:
    """Configuration settings for trade forms."""

    # Button labels
    submit_label: str = "Submit"
    submitting_label: str = "Submitting..."
    draft_label: str = "Save Draft"

    # Reject a submit while another one is still in flight
    reject_concurrent_submit: bool = True

    # Logging
    log_level: str = "WARNING"

    # Output settings
    indent_json_output: int = 2

    @classmethod
    def from_env(cls) -> "FormConfig":
        """
        Create configuration from environment variables.

        Unset variables fall back to the class field defaults.
        """
        _defaults = cls()

        return cls(
            submit_label=os.getenv("TRADE_FORMS_SUBMIT_LABEL", _defaults.submit_label),
            submitting_label=os.getenv("TRADE_FORMS_SUBMITTING_LABEL", _defaults.submitting_label),
            draft_label=os.getenv("TRADE_FORMS_DRAFT_LABEL", _defaults.draft_label),
            reject_concurrent_submit=_env_flag(
                "TRADE_FORMS_REJECT_CONCURRENT_SUBMIT", _defaults.reject_concurrent_submit
            ),
            log_level=os.getenv("TRADE_FORMS_LOG_LEVEL", _defaults.log_level).upper(),
            indent_json_output=int(
                os.getenv("TRADE_FORMS_INDENT_JSON", str(_defaults.indent_json_output))
            ),
        )


config = FormConfig.from_env()


def get_config() -> FormConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> FormConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
