"""Application bootstrap helpers for the Greek study tools."""

from .runtime import run_status
from .settings import AppSettings

__all__ = ["run_status", "AppSettings"]
