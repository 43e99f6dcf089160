"""HTTP integration."""
from structview.api.dependencies import get_parameters

__all__ = ["get_parameters"]
