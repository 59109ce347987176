"""Split files into parts, optionally encrypt them, and join them back."""

__version__ = "0.1.0"
__all__ = ["crypto", "options", "localfile", "listing"]