from __future__ import annotations

import argparse
from datetime import datetime
import importlib
import inspect
import json
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{1,2}-\d{1,2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _person_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("date", help="birth date Y-M-D (lunar with --lunar)")
    p.add_argument("--lunar", action="store_true", help="the birth date is a Chinese lunar date")
    p.add_argument("--time", default=None, help="birth time HH:MM[:SS]")
    p.add_argument("--gender", choices=("male", "female"), default="male")
    p.add_argument("--at", default=None, help="reference date or date-time (ISO, default: now)")
    p.add_argument("--converter", default=None)


def _person(args: argparse.Namespace):
    import birthcal
    return birthcal.Person(
        name="",
        birth_date=args.date,
        is_lunar=args.lunar,
        gender=args.gender,
        birth_time=args.time,
    )


def _reference(at: str | None) -> datetime:
    from birthcal.core.time import parse_instant
    return datetime.now() if at is None else parse_instant(at)


def cmd_next(argv: list[str]) -> int:
    import birthcal

    p = argparse.ArgumentParser(prog="birthcal next", description="Next birthday and days until it")
    _person_args(p)
    args = p.parse_args(argv)

    person = _person(args)
    ref = _reference(args.at)
    nxt = birthcal.next_birthday(person, ref, converter=args.converter)
    days = birthcal.days_until_birthday(person, ref, converter=args.converter)
    print(f"Next birthday : {nxt.isoformat(sep=' ')}")
    print(f"Days until    : {days}{'  (today)' if days == 0 else ''}")
    return 0


def cmd_age(argv: list[str]) -> int:
    import birthcal

    p = argparse.ArgumentParser(prog="birthcal age", description="Whole-year age at the reference")
    _person_args(p)
    p.add_argument("--conceal", action="store_true", help="apply the adult age concealment rule")
    args = p.parse_args(argv)

    policy = birthcal.DEFAULT_POLICY if args.conceal else birthcal.OPEN_POLICY
    age = birthcal.calculate_age(_person(args), _reference(args.at), converter=args.converter, policy=policy)
    print("unknown" if age is None else age)
    return 0


def cmd_stats(argv: list[str]) -> int:
    import birthcal

    p = argparse.ArgumentParser(prog="birthcal stats", description="Life statistics")
    _person_args(p)
    args = p.parse_args(argv)

    person = _person(args)
    ref = _reference(args.at)
    st = birthcal.life_stats(person, ref, converter=args.converter)
    print(f"Reference            : {ref.isoformat(sep=' ', timespec='seconds')}")
    print(f"Total days lived     : {st.total_days_lived}")
    print(f"Detailed age         : {birthcal.format_detailed_age(st.detailed_age)}")
    print(f"Next birthday        : {st.next_birthday.isoformat(sep=' ')}")
    print(f"Days until           : {st.days_until_next_birthday}")
    print(f"Age at next birthday : {st.age_at_next_birthday}")
    return 0


def cmd_upcoming(argv: list[str]) -> int:
    import birthcal

    p = argparse.ArgumentParser(prog="birthcal upcoming", description="Upcoming birthdays from a people JSON file")
    p.add_argument("path", help='JSON list of person records, or {"people": [...]}')
    p.add_argument("--window", type=int, default=None, help="days ahead (default: 90)")
    p.add_argument("--at", default=None, help="reference date or date-time (ISO, default: now)")
    p.add_argument("--converter", default=None)
    p.add_argument("--show-ages", action="store_true", help="do not conceal any age")
    args = p.parse_args(argv)

    with open(args.path, encoding="utf-8") as fh:
        data = json.load(fh)
    records = data["people"] if isinstance(data, dict) else data
    people = [birthcal.Person.from_dict(r) for r in records]

    policy = birthcal.OPEN_POLICY if args.show_ages else birthcal.DEFAULT_POLICY
    infos = birthcal.upcoming_birthdays(
        people, args.window, _reference(args.at), converter=args.converter, policy=policy
    )
    if not infos:
        print("(none)")
        return 0

    for info in infos:
        age = "?" if info.age is None else str(info.age)
        cal = "lunar" if info.person.is_lunar else "solar"
        flag = "  today!" if info.is_today else ""
        print(f"{info.next_birthday.date().isoformat()}  {info.days_until:>4}d  age {age:>3}  {cal:<5}  {info.person.name}{flag}")
    return 0


def cmd_convert(argv: list[str]) -> int:
    import birthcal

    p = argparse.ArgumentParser(prog="birthcal convert", description="Convert a date between solar and lunar")
    p.add_argument("date", help="Y-M-D")
    p.add_argument("--lunar", action="store_true", help="input is lunar; print the solar date")
    p.add_argument("--converter", default=None)
    args = p.parse_args(argv)

    person = birthcal.Person(name="", birth_date=args.date, is_lunar=args.lunar, gender="male")
    birth = birthcal.resolve(person, converter=args.converter)
    print(f"solar {birth.solar_date.isoformat()}")
    print(f"lunar {birth.lunar}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `birthcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_next(argv)

    p = argparse.ArgumentParser(prog="birthcal", description="Solar/lunar birthday calculator CLI.")
    p.add_argument("--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("next", help="Next birthday and days until it")
    sub.add_parser("age", help="Whole-year age")
    sub.add_parser("stats", help="Life statistics (detailed age, days lived)")
    sub.add_parser("upcoming", help="Upcoming birthdays from a people JSON file")
    sub.add_parser("convert", help="Solar <-> lunar date conversion")

    # diagnostics
    sub.add_parser("table", help="Solar dates of a lunar birthday over a range of years")
    sub.add_parser("scatter", help="Scatter plot of lunar birthday drift (needs diagnostics extras)")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    from birthcal.core.errors import BirthcalError

    commands = {
        "next": cmd_next,
        "age": cmd_age,
        "stats": cmd_stats,
        "upcoming": cmd_upcoming,
        "convert": cmd_convert,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd == "table":
            return _run_module_main("birthcal.diagnostics.birthday_table", rest)
        if args.cmd == "scatter":
            return _run_module_main("birthcal.diagnostics.birthday_scatter", rest)
    except (BirthcalError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
