"""Rule-based resume ➜ portfolio record ➜ static site."""
from .pipeline import parse_resume

__all__ = ["parse_resume"]
