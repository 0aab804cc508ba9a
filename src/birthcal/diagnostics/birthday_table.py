from __future__ import annotations

from datetime import date
import argparse
from typing import List, Optional, Tuple

import birthcal
from birthcal.core.time import parse_ymd
from birthcal.occurrence import lunar_anniversary


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def drift_rows(birth_date: str, from_year: int, to_year: int, *, converter: str = "lunar-python") -> List[Tuple[int, Optional[date]]]:
    """
    Solar date of a lunar birthday for each lunar year in range.
    Years where the lunar day does not exist (short month) map to None.
    """
    person = birthcal.Person(name="", birth_date=birth_date, is_lunar=True, gender="male")
    birth = birthcal.resolve(person, converter=converter)
    conv = birthcal.get_converter(converter)
    out: List[Tuple[int, Optional[date]]] = []
    for Y in range(from_year, to_year + 1):
        if conv.is_valid_lunar(Y, birth.lunar.month, birth.lunar.day, is_leap=birth.lunar.is_leap):
            out.append((Y, lunar_anniversary(birth, Y, converter=conv)))
        else:
            out.append((Y, None))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian dates on which a lunar birthday falls over a range of years."
    )
    p.add_argument("date", help="lunar birth date Y-M-D (e.g. 1983-10-26)")
    p.add_argument("--from-year", type=int, default=None, help="default: lunar birth year")
    p.add_argument("--to-year", type=int, default=None, help="default: from-year + 30")
    p.add_argument("--converter", default="lunar-python")
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the solar column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0 = args.from_year if args.from_year is not None else parse_ymd(args.date)[0]
    Y1 = args.to_year if args.to_year is not None else Y0 + 30
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    print("Year   Solar date")
    print("-" * 18)
    missing = 0
    for Y, d in drift_rows(args.date, Y0, Y1, converter=args.converter):
        if d is None:
            missing += 1
            print(f"{Y:<5}  (none)")
        else:
            print(f"{Y:<5}  {fmt(d)}")

    if missing:
        print(f"\n{missing} year(s) without this lunar day.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
