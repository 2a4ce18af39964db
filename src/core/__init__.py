"""Settings shared by the helpers, the document model and the CLI."""

from dotenv import load_dotenv

from .config import FieldSettings, Settings, get_settings

load_dotenv()

__all__ = ["FieldSettings", "Settings", "get_settings"]
