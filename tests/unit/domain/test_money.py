"""Unit tests for derived money values on domain entities"""

from decimal import Decimal
from types import SimpleNamespace

from src.domain.invoice_line import invoice_total, line_amount
from src.domain.job_cost import with_cost_totals
from src.domain.material import with_material_total


class TestInvoiceTotal:
    def test_sum_of_quantity_times_rate(self):
        items = [
            SimpleNamespace(quantity=Decimal("2"), rate=Decimal("50.00")),
            SimpleNamespace(quantity=Decimal("1"), rate=Decimal("30.00")),
        ]

        assert invoice_total(items) == Decimal("130.00")

    def test_no_items_is_zero(self):
        assert invoice_total([]) == Decimal("0")

    def test_decimal_exactness(self):
        assert line_amount(Decimal("3"), Decimal("0.10")) == Decimal("0.30")


class TestWithCostTotals:
    def test_derives_estimate_actual_and_variance(self):
        result = with_cost_totals(
            {
                "estimated_labor": "100",
                "estimated_material": "50.50",
                "overhead": 10,
                "actual_labor": "80",
                "actual_material": None,
                "actual_overhead": "5",
            }
        )

        assert result["estimated_cost"] == Decimal("160.50")
        assert result["actual_cost"] == Decimal("85")
        assert result["variance"] == Decimal("75.50")

    def test_does_not_mutate_input(self):
        values = {"estimated_labor": "1"}

        with_cost_totals(values)

        assert "estimated_cost" not in values


class TestMaterialTotal:
    def test_total_is_qty_times_unit_cost(self):
        values = with_material_total({"qty": 12, "unit_cost": "7.50", "total_cost": "1"})

        assert values["total_cost"] == Decimal("90.00")

    def test_missing_inputs_are_zero(self):
        assert with_material_total({})["total_cost"] == Decimal("0")
