from __future__ import annotations

from datetime import date

from attendance_tracker.database.filters import WhereBuilder, escape_like


def test_no_predicates_builds_empty_clause():
    assert WhereBuilder().equals("date", None).contains("employeeID", "").build() == ("", ())


def test_predicates_join_with_and_in_order():
    where, params = (
        WhereBuilder()
        .equals("date", date(2024, 1, 5))
        .contains("employeeName", "Jane")
        .contains("employeeID", "E1")
        .build()
    )

    assert where == "WHERE date = %s AND employeeName LIKE %s AND employeeID LIKE %s"
    assert params == (date(2024, 1, 5), "%Jane%", "%E1%")


def test_only_supplied_predicates_are_kept():
    builder = WhereBuilder().equals("date", None).contains("employeeID", "E100")

    assert len(builder) == 1
    assert builder.build() == ("WHERE employeeID LIKE %s", ("%E100%",))


def test_like_wildcards_are_escaped():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"
    _, params = WhereBuilder().contains("employeeID", "E_1").build()
    assert params == ("%E\\_1%",)
