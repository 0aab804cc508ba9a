# tests/test_api.py

import pytest
from datetime import date, datetime

import birthcal
from birthcal.core.errors import ConverterUnavailableError


def test_converter_object_injection(table, make_person):
    p = make_person("2000-03-10", lunar=True)
    assert birthcal.next_birthday(p, date(2025, 6, 1), converter=table) == datetime(2026, 4, 10)
    assert birthcal.days_until_birthday(p, date(2025, 6, 1), converter=table) == 313

def test_register_and_select_by_name(table, make_person):
    birthcal.register_converter("table-test", table, overwrite=True)
    assert "table-test" in birthcal.list_converters()
    assert birthcal.converter_info("table-test") == {"name": "table"}
    p = make_person("2000-03-10", lunar=True)
    assert birthcal.resolve(p, converter="table-test").solar_date == date(2000, 4, 9)

def test_register_refuses_silent_overwrite(table):
    birthcal.register_converter("table-dup", table, overwrite=True)
    with pytest.raises(KeyError):
        birthcal.register_converter("table-dup", table)

def test_unknown_converter(make_person):
    with pytest.raises(ConverterUnavailableError):
        birthcal.resolve(make_person("2000-03-10"), converter="nope")

def test_is_birthday_today(table, make_person):
    p = make_person("1990-06-01", time="06:00:00")
    assert birthcal.is_birthday_today(p, datetime(2025, 6, 1, 23, 0), converter=table)
    assert not birthcal.is_birthday_today(p, datetime(2025, 6, 2, 0, 0), converter=table)

def test_calculate_age_policy(table, make_person):
    p = make_person("1990-06-01", gender="female")
    assert birthcal.calculate_age(p, date(2025, 5, 31), converter=table) == 34
    assert birthcal.calculate_age(p, date(2025, 6, 1), converter=table) == 35
    assert birthcal.calculate_age(p, date(2025, 6, 1), converter=table, policy=birthcal.DEFAULT_POLICY) is None

def test_total_days_lived(table, make_person):
    assert birthcal.total_days_lived(make_person("2024-01-01"), datetime(2025, 1, 1, 8), converter=table) == 366

def test_upcoming_redaction_vs_life_stats(table, make_person):
    p = make_person("1990-06-01", gender="female", name="Mei")
    ref = datetime(2025, 5, 1)
    [info] = birthcal.upcoming_birthdays([p], 90, ref, converter=table)
    assert info.age is None
    assert birthcal.life_stats(p, ref, converter=table).age_at_next_birthday == 35

def test_reference_defaults_to_now(table, make_person):
    p = make_person("1990-06-01")
    assert birthcal.next_birthday(p, converter=table).date() >= date.today()

def test_is_within_months():
    assert birthcal.is_within_months(date(2026, 2, 28), date(2025, 11, 30))
