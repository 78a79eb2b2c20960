from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .attendance.repository import AttendanceRecordSource
from .common.logging_config import configure_logging
from .container import Container, build_container

logger = logging.getLogger(__name__)


def create_core(*, attendance_records: Optional[AttendanceRecordSource] = None) -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"), getattr(settings, "LOG_FORMAT", "plain"))

    container = build_container(settings, attendance_records=attendance_records)
    logger.info("attendance core ready (settings=%s, tz=%s)", settings_module, container.timezone.key)
    return container
