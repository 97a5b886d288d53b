"""Configuration helpers for kernel-wide settings."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass

PACKAGE_LOGGER = "geokernel"
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


@dataclass
class KernelConfig:
    """Settings shared by every kernel module."""

    trace_calls: bool = False
    log_level: str = "WARNING"


_KERNEL_CONFIG = KernelConfig()


def get_kernel_config() -> KernelConfig:
    return copy.deepcopy(_KERNEL_CONFIG)


def set_kernel_config(config: KernelConfig) -> None:
    global _KERNEL_CONFIG
    _KERNEL_CONFIG = copy.deepcopy(config)
    logging.getLogger(PACKAGE_LOGGER).setLevel(_resolve_level(config.log_level))


def tracing_enabled() -> bool:
    return _KERNEL_CONFIG.trace_calls


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler using the package log format."""

    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)


def _resolve_level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.WARNING)


__all__ = [
    "KernelConfig",
    "LOG_FORMAT",
    "PACKAGE_LOGGER",
    "configure_logging",
    "get_kernel_config",
    "set_kernel_config",
    "tracing_enabled",
]
