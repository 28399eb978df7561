from .copy_manager import CopyManager


__all__ = ["CopyManager"]
