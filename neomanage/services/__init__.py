"""Management service proxies.

``SERVICE_TYPES`` is the fixed table of service kinds the manager
instantiates, keyed by the name the server uses in its service listing.
"""

from __future__ import annotations

from .backup import BackupService
from .base import Service
from .config import ConfigService
from .console import ConsoleService
from .exporting import ExportService
from .importing import ImportService
from .jmx import JmxService
from .lifecycle import LifecycleService
from .monitor import MonitorService

SERVICE_TYPES: dict[str, type[Service]] = {
    cls.name: cls
    for cls in (
        BackupService,
        ConfigService,
        ImportService,
        ExportService,
        ConsoleService,
        JmxService,
        LifecycleService,
        MonitorService,
    )
}

__all__ = [
    "BackupService",
    "ConfigService",
    "ConsoleService",
    "ExportService",
    "ImportService",
    "JmxService",
    "LifecycleService",
    "MonitorService",
    "SERVICE_TYPES",
    "Service",
]
