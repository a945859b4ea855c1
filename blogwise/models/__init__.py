"""SQLAlchemy database models."""
from dotenv import load_dotenv

from blogwise.models.base import Base
from blogwise.models.content import ContentPost, GenerationLog

load_dotenv()

__all__ = [
    "Base",
    "ContentPost",
    "GenerationLog",
]
