from __future__ import annotations

from datetime import datetime

import pytest

from src.device_bridge.device_bridge.attendance.normalizer import PunchNormalizer, pick_field


@pytest.fixture
def normalizer():
    return PunchNormalizer()


def test_canonical_payload_passes_through(normalizer, fixed_now):
    payload = {
        "employee_code": "E001",
        "log_datetime": "2025-10-31 18:02:11",
        "log_time": "18:02:11",
        "device_sn": "RS9W-001",
        "downloaded_at": "2025-10-31 18:03:00",
    }
    punch = normalizer.normalize(payload, now=fixed_now)

    assert punch.to_dict() == payload
    assert punch.raw_payload == payload


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2025-10-31T18:02:11", "2025-10-31 18:02:11"),
        ("2025-10-31T18:02:11.482Z", "2025-10-31 18:02:11"),
        ("2025-10-31T18:02:11+05:30", "2025-10-31 18:02:11"),
        ("2025-10-31 18:02", "2025-10-31 18:02:00"),
    ],
)
def test_iso_timestamps_are_canonicalized_without_tz_conversion(normalizer, fixed_now, raw, expected):
    punch = normalizer.normalize({"log_datetime": raw}, now=fixed_now)

    assert punch.log_datetime == expected
    assert punch.log_time == expected[11:]


def test_unparseable_datetime_is_kept_and_time_defaults_to_now(normalizer, fixed_now):
    punch = normalizer.normalize({"log_datetime": "31/10/2025 6pm"}, now=fixed_now)

    assert punch.log_datetime == "31/10/2025 6pm"
    assert punch.log_time == "09:00:00"


def test_explicit_log_time_is_not_overridden(normalizer, fixed_now):
    punch = normalizer.normalize({"log_datetime": "2025-10-31 18:02:11", "log_time": "18:02"}, now=fixed_now)
    assert punch.log_time == "18:02"


def test_missing_timestamps_default_to_now(normalizer, fixed_now):
    punch = normalizer.normalize({}, now=fixed_now.replace(microsecond=123456))

    assert punch.log_datetime == "2025-11-01 09:00:00"
    assert punch.log_time == "09:00:00"
    assert punch.employee_code is None
    assert punch.device_sn is None


def test_vendor_aliases_map_to_canonical_fields(normalizer, fixed_now):
    punch = normalizer.normalize(
        {"EmployeeCode": 101, "LogDateTime": "2025-10-31T07:59:00", "DeviceNo": "RS9W-002", "DeviceName": "Gate"},
        now=fixed_now,
    )

    assert punch.employee_code == "101"
    assert punch.log_datetime == "2025-10-31 07:59:00"
    assert punch.device_sn == "RS9W-002"


def test_canonical_name_wins_over_alias():
    assert pick_field({"employee_code": "E001", "EmployeeCode": "X"}, "employee_code") == "E001"


def test_blank_values_count_as_missing(normalizer, fixed_now):
    punch = normalizer.normalize(
        {"employee_code": "  ", "device_sn": ""},
        now=fixed_now,
        default_employee_code="TEST001",
        default_device_sn="RS9W-TEST",
    )

    assert punch.employee_code == "TEST001"
    assert punch.device_sn == "RS9W-TEST"


def test_normalizer_does_not_mutate_payload(normalizer):
    payload = {"LogDateTime": "2025-10-31T07:59:00"}
    normalizer.normalize(payload, now=datetime(2025, 1, 1))
    assert payload == {"LogDateTime": "2025-10-31T07:59:00"}
