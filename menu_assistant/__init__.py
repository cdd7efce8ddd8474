"""Menu Assistant - deterministic menu Q&A with suggested follow-ups."""

from .bootstrap import load_index
from .chat import answer, respond

__all__ = ["load_index", "answer", "respond"]
