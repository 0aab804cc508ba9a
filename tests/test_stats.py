# tests/test_stats.py

import pytest
from datetime import date, datetime

from birthcal.config import DEFAULT_POLICY, OPEN_POLICY
from birthcal.core.errors import BirthcalError, InvalidDateError
from birthcal.core.types import DetailedAge
from birthcal.stats import (
    birthday_info,
    format_detailed_age,
    is_within_months,
    life_stats,
    upcoming_birthdays,
)

REF = datetime(2025, 1, 1, 10, 0)


def test_upcoming_window_and_order(table, make_person):
    a = make_person("1990-01-01", name="A")   # 0 days
    b = make_person("1985-01-06", name="B")   # 5
    c = make_person("1970-02-10", name="C")   # 40
    d = make_person("2001-04-06", name="D")   # 95
    e = make_person("1999-07-20", name="E")   # 200
    out = upcoming_birthdays([d, c, a, e, b], 90, REF, converter=table)
    assert [i.person.name for i in out] == ["A", "B", "C"]
    assert [i.days_until for i in out] == [0, 5, 40]
    assert out[0].is_today and not out[1].is_today

def test_upcoming_window_is_inclusive(table, make_person):
    d = make_person("2001-04-06", name="D")
    assert [i.days_until for i in upcoming_birthdays([d], 95, REF, converter=table)] == [95]
    assert upcoming_birthdays([d], 94, REF, converter=table) == []

def test_upcoming_ties_keep_input_order(table, make_person):
    people = [make_person("1980-03-03", name=n) for n in ("x", "y", "z")]
    out = upcoming_birthdays(people, 365, REF, converter=table)
    assert [i.person.name for i in out] == ["x", "y", "z"]

def test_upcoming_default_window_from_policy(table, make_person):
    d = make_person("2001-04-06")
    assert upcoming_birthdays([d], None, REF, converter=table) == []
    assert len(upcoming_birthdays([d], None, REF, converter=table, policy=DEFAULT_POLICY.tweak(window_days=100))) == 1

def test_upcoming_rejects_negative_window(table, make_person):
    with pytest.raises(ValueError):
        upcoming_birthdays([make_person("2001-04-06")], -1, REF, converter=table)

def test_upcoming_fails_as_a_whole_on_bad_record(table, make_person):
    with pytest.raises(InvalidDateError):
        upcoming_birthdays([make_person("2001-04-06"), make_person("2001-02-30")], 90, REF, converter=table)

def test_birthday_info_age_is_age_at_next_birthday(table, make_person):
    info = birthday_info(make_person("2000-03-10"), datetime(2025, 6, 1), converter=table)
    assert info.next_birthday == datetime(2026, 3, 10)
    assert info.days_until == 282
    assert info.age == 26

@pytest.mark.parametrize("birth, gender, expected", [
    ("2000-03-10", "female", None),
    ("2008-03-10", "female", None),  # turns 18 on the next birthday
    ("2009-03-10", "female", 17),
    ("2000-03-10", "male", 26),
])
def test_adult_female_age_concealed(table, make_person, birth, gender, expected):
    info = birthday_info(make_person(birth, gender=gender), datetime(2025, 6, 1), converter=table)
    assert info.age == expected
    assert info.is_age_concealed == (expected is None)
    assert info.days_until == 282

def test_concealment_can_be_disabled(table, make_person):
    info = birthday_info(make_person("2000-03-10", gender="female"), datetime(2025, 6, 1),
                         converter=table, policy=OPEN_POLICY)
    assert info.age == 26

def test_life_stats_solar(table, make_person):
    p = make_person("2000-03-10", gender="female", time="06:30:00")
    st = life_stats(p, datetime(2025, 6, 1, 12, 0), converter=table)
    assert st.total_days_lived == 9214
    assert st.detailed_age == DetailedAge(25, 2, 22, 5, 30, 0)
    assert st.days_until_next_birthday == 282
    assert st.next_birthday == datetime(2026, 3, 10, 6, 30, 0)
    # Never concealed, unlike BirthdayInfo.age.
    assert st.age_at_next_birthday == 26

def test_life_stats_lunar(table, make_person):
    p = make_person("2000-03-10", lunar=True, gender="female")
    st = life_stats(p, datetime(2025, 6, 1), converter=table)
    assert st.next_birthday == datetime(2026, 4, 10)
    assert st.days_until_next_birthday == 313
    assert st.age_at_next_birthday == 26
    # Detailed age runs on the solar birth date 2000-04-09.
    assert st.detailed_age == DetailedAge(25, 1, 23)
    assert birthday_info(p, datetime(2025, 6, 1), converter=table).age is None

def test_format_detailed_age():
    assert format_detailed_age(DetailedAge(42, 2, 8, 17, 51, 0)) == "42岁 2个月 8天 17小时 51分钟"
    assert format_detailed_age(DetailedAge(0, 0, 0, 0, 0, 0)) == "0天"
    assert format_detailed_age(DetailedAge(0, 0, 0, 0, 0, 5)) == "5秒"

def test_is_within_months():
    ref = date(2025, 11, 30)
    assert is_within_months(date(2026, 2, 28), ref)
    assert not is_within_months(date(2026, 3, 1), ref)
    assert is_within_months(date(2026, 3, 1), ref, months=4)

def test_upcoming_lists_person_not_yet_born(table, make_person):
    p = make_person("2026-07-01", name="Baby")
    ref = datetime(2025, 6, 1)
    assert upcoming_birthdays([p], 90, ref, converter=table) == []
    [info] = upcoming_birthdays([p], 400, ref, converter=table)
    assert info.next_birthday == datetime(2026, 7, 1)
    assert info.days_until == 395
    assert info.age == 0
    assert not info.is_today

def test_life_stats_rejects_person_not_yet_born(table, make_person):
    with pytest.raises(BirthcalError):
        life_stats(make_person("2026-07-01"), datetime(2025, 6, 1), converter=table)
