"""End-to-end tests for the click CLI against JSON files in a temp dir."""

import json
import re

import pytest
from click.testing import CliRunner

from sweetshop.infrastructure.cli.main import cli

PRODUCTS = [
    {
        "id": "1",
        "name": "Gulab Jamun",
        "featured": True,
        "sizes": [{"size": "250g", "price": 150}, {"size": "500g", "price": 280}],
    },
    {"id": "4", "name": "Kaju Katli", "sizes": [{"size": "250g", "price": 300}]},
]

OFFERS = [
    {
        "id": "1",
        "title": "Festival Special",
        "description": "15% off",
        "discount": 15,
        "code": "FESTIVAL15",
        "start_date": "2020-01-01T00:00:00+00:00",
        "end_date": "2099-12-31T23:59:59+00:00",
        "is_active": True,
        "applies_to": [],
    },
    {
        "id": "2",
        "title": "Katli Week",
        "description": "10% off Kaju Katli",
        "discount": 10,
        "code": "KATLI10",
        "start_date": "2020-01-01T00:00:00+00:00",
        "end_date": "2099-12-31T23:59:59+00:00",
        "is_active": True,
        "applies_to": ["4"],
    },
    {
        "id": "3",
        "title": "Expired",
        "description": "Gone",
        "discount": 50,
        "code": "OLD50",
        "start_date": "2020-01-01T00:00:00+00:00",
        "end_date": "2020-12-31T00:00:00+00:00",
        "is_active": True,
        "applies_to": [],
    },
]


@pytest.fixture
def runner(tmp_path, monkeypatch):
    (tmp_path / "products.json").write_text(json.dumps(PRODUCTS), encoding="utf-8")
    (tmp_path / "offers.json").write_text(json.dumps(OFFERS), encoding="utf-8")
    monkeypatch.setenv("SWEETSHOP_DATA_DIR", str(tmp_path))
    return CliRunner()


def _line(output: str, label: str) -> str:
    for line in output.splitlines():
        if line.strip().startswith(label):
            return re.sub(r"\s+", " ", line.strip())
    raise AssertionError(f"No '{label}' line in:\n{output}")


class TestProductAndOfferListing:

    def test_product_list(self, runner):
        result = runner.invoke(cli, ["product", "list"])
        assert result.exit_code == 0
        assert "Gulab Jamun *" in result.output
        assert "500g ₹280" in result.output

    def test_offer_list_active(self, runner):
        result = runner.invoke(cli, ["offer", "list", "--active"])
        assert result.exit_code == 0
        assert "FESTIVAL15" in result.output
        assert "KATLI10" in result.output
        assert "OLD50" not in result.output


class TestCartQuote:

    def test_quote_without_promo(self, runner):
        result = runner.invoke(cli, ["cart", "quote", "--items", "1:500g:2"])
        assert result.exit_code == 0
        assert _line(result.output, "Subtotal") == "Subtotal ₹560"
        assert _line(result.output, "Delivery") == "Delivery ₹50"
        assert _line(result.output, "Total") == "Total ₹610"

    def test_quote_merges_repeated_items(self, runner):
        result = runner.invoke(cli, ["cart", "quote", "--items", "4:250g:1,4:250g:1"])
        assert result.exit_code == 0
        assert _line(result.output, "Items") == "Items 2"

    def test_quote_with_promo(self, runner):
        result = runner.invoke(
            cli, ["cart", "quote", "--items", "1:500g:2", "--promo", "festival15"]
        )
        assert result.exit_code == 0
        assert _line(result.output, "Discount") == "Discount (FESTIVAL15, 15%) -₹84"
        assert _line(result.output, "Total") == "Total ₹526"

    def test_quote_with_inapplicable_promo_still_prices_cart(self, runner):
        result = runner.invoke(
            cli, ["cart", "quote", "--items", "1:500g:2", "--promo", "KATLI10"]
        )
        assert result.exit_code == 0
        assert "doesn't apply" in result.output
        assert _line(result.output, "Total") == "Total ₹610"

    def test_bad_item_format(self, runner):
        result = runner.invoke(cli, ["cart", "quote", "--items", "1:2"])
        assert result.exit_code != 0
        assert "ProductId:Size:Quantity" in result.output

    def test_unknown_product(self, runner):
        result = runner.invoke(cli, ["cart", "quote", "--items", "9:250g:1"])
        assert result.exit_code == 1
        assert "Product not found" in result.output


class TestOrderPlace:

    BASE = [
        "order", "place",
        "--items", "1:500g:2",
        "--name", "Asha",
        "--phone", "9876543210",
        "--address", "12 MG Road",
        "--pincode", "411001",
    ]

    def test_place_with_promo(self, runner):
        result = runner.invoke(cli, self.BASE + ["--promo", "FESTIVAL15", "--payment", "upi"])
        assert result.exit_code == 0
        assert re.search(r"Order ORD-[0-9A-F]{8} placed for Asha", result.output)
        assert _line(result.output, "Total") == "Total ₹526"

    def test_expired_promo_aborts_order(self, runner):
        result = runner.invoke(cli, self.BASE + ["--promo", "OLD50"])
        assert result.exit_code == 1
        assert "invalid or expired" in result.output
        assert "placed" not in result.output

    def test_invalid_pincode(self, runner):
        args = list(self.BASE)
        args[args.index("411001")] = "41"
        result = runner.invoke(cli, args)
        assert result.exit_code == 1
        assert "Pincode must be 6 digits" in result.output
