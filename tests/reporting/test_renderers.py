import json

from cartmerge.order.types import LineItem, Product
from cartmerge.reporting.renderers.json import JsonReportRenderer
from cartmerge.reporting.renderers.text import TextReportRenderer
from cartmerge.reporting.types import OrderReport, Rejection


def make_report(**overrides) -> OrderReport:
    items = overrides.pop(
        "items",
        (
            LineItem(Product(id=1, name="Keyboard"), 8, 10.0),
            LineItem(Product(id=2), 3, 2.5),
        ),
    )
    return OrderReport.build(
        items=items,
        lines_processed=overrides.pop("lines_processed", 3),
        rejections=overrides.pop("rejections", ()),
        stopped_early=overrides.pop("stopped_early", False),
        tool_version="0.0.1",
    )


# ----------------------------
# Report building
# ----------------------------


def test_build_summary_counts():
    report = make_report(lines_processed=5, rejections=(Rejection(4, "negative_price", "bad"),))
    s = report.summary

    assert s.lines == 2
    assert s.rejected == 1
    assert s.merged == 2
    assert s.total_quantity == 11


def test_line_views_follow_item_order():
    report = make_report()
    assert [v.product_id for v in report.lines] == [1, 2]
    assert report.lines[0].product_name == "Keyboard"


# ----------------------------
# Text renderer
# ----------------------------


def test_text_normal_lists_lines():
    out = TextReportRenderer().render(make_report())

    assert out.startswith("✓ 2 lines, 11 units (1 merged)")
    assert "8 x Keyboard (#1) @ 10" in out
    assert "3 x #2 @ 2.5" in out
    assert "Rejected:" not in out


def test_text_quiet_is_one_line():
    out = TextReportRenderer(verbosity="quiet").render(make_report())
    assert out == "✓ 2 lines, 11 units (1 merged)\n"


def test_text_shows_rejections_and_stop_hint():
    report = make_report(
        lines_processed=4,
        rejections=(Rejection(4, "non_positive_quantity", "Item quantity must be positive, got 0"),),
        stopped_early=True,
    )
    out = TextReportRenderer().render(report)

    assert out.startswith("✗ ")
    assert "1 rejected" in out
    assert "! line 4 [non_positive_quantity]" in out
    assert "--keep-going" in out


def test_text_verbose_has_counters():
    out = TextReportRenderer(verbosity="verbose").render(make_report())

    assert out.startswith("cartmerge 0.0.1\n")
    assert "  lines_processed: 3" in out
    assert "  total_quantity: 11" in out


def test_text_empty_order():
    out = TextReportRenderer().render(make_report(items=(), lines_processed=0))
    assert "Order is empty." in out


# ----------------------------
# JSON renderer
# ----------------------------


def test_json_roundtrips_report_dict():
    report = make_report(rejections=(Rejection(2, "negative_price", "bad"),), lines_processed=4)
    data = json.loads(JsonReportRenderer().render(report))

    assert data == report.to_dict()
    assert data["summary"]["rejected"] == 1
    assert data["lines"][0] == {"product": {"id": 1, "name": "Keyboard"}, "quantity": 8, "price": 10.0}


def test_json_is_deterministic():
    r = JsonReportRenderer(indent=None)
    assert r.render(make_report()) == r.render(make_report())
