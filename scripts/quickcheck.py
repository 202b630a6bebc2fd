"""Quick runtime checks for the wall area calculator.
Run: python scripts/quickcheck.py
Exits with code 0 on success, non-zero on failure.
"""
from core.calculator import calculate
from core.models import CalculationInput, OpeningRow, SegmentRow, WallInput


def approx(a, b, tol=1e-6):
    return abs(a - b) <= tol


def form(height, lengths, openings=()):
    return CalculationInput(
        wall=WallInput(height=height, segments=tuple(SegmentRow(length=x) for x in lengths)),
        openings=tuple(OpeningRow(width=w, height=h) for w, h in openings),
    )


def main():
    res = calculate(form("2.7", ["5"], [("1", "2")]))
    assert res.ok
    assert approx(res.result.net_area, 11.5)

    res = calculate(form("3", ["4", "2"]))
    assert res.ok
    assert approx(res.result.net_area, 18.0)

    res = calculate(form("2", ["4"], [("1", "3")]))
    assert not res.ok
    assert [e.path for e in res.errors] == ["openings.0.height"]

    print("Quickcheck OK")


if __name__ == '__main__':
    main()
