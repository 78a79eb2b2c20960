"""Example: drive the core without any web framework.

The calling application owns storage and rendering; here an in-memory list
stands in for the attendance table.
"""

from datetime import date

from src.attendance_core.attendance_core.attendance.model import AttendanceRecord, LessonMeta
from src.attendance_core.attendance_core.core.enums import AttendanceStatus
from src.attendance_core.attendance_core.main import create_core


class InMemoryRecords:
    def __init__(self, rows):
        self._rows = rows

    def get_records_for_student(self, student_id):
        return self._rows


def main():
    rows = [
        AttendanceRecord(AttendanceStatus.PRESENT, date(2026, 1, 3), LessonMeta("Al-Fatiha", 1, 7, True)),
        AttendanceRecord(AttendanceStatus.EXCUSED, date(2026, 1, 10)),
        AttendanceRecord(AttendanceStatus.LATE, date(2026, 1, 11)),
    ]
    core = create_core(attendance_records=InMemoryRecords(rows))

    token = core.checkin_tokens.issue("session-1")
    payload = core.checkin_tokens.verify(token)
    print("check-in ok:", payload is not None, "seconds left:", core.checkin_tokens.time_remaining(payload))

    cookie = core.admin_sessions.generate()
    print("admin session valid:", core.admin_sessions.verify(cookie))

    print(core.insights_service.build("student-1"))


if __name__ == "__main__":
    main()
