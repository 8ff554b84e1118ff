"""Smoke tests for the click CLI against a temporary store directory."""

import pytest
from click.testing import CliRunner

from vyapar.infrastructure.bootstrap import unit_of_work
from vyapar.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


@pytest.fixture
def listed(run, tmp_path):
    """A product with two competing offers; returns the offer ids by wholesaler."""
    assert run("product", "add", "--name", "Basmati Rice",
               "--category", "grains", "--unit", "1kg").exit_code == 0
    assert run("offer", "create", "--wholesaler", "W1", "--wholesaler-name", "Sharma",
               "--product", "basmati-rice",
               "--tier", "1-9:100", "--tier", "10+:90").exit_code == 0
    assert run("offer", "create", "--wholesaler", "W2", "--wholesaler-name", "Gupta",
               "--product", "basmati-rice", "--tier", "1:95").exit_code == 0
    offers = unit_of_work(tmp_path).offers.list_for_product("basmati-rice")
    return {o.wholesaler_id: o.id for o in offers}


class TestCatalogCommands:

    def test_product_add_and_list(self, run):
        result = run("product", "add", "--name", "Toor Dal", "--category", "pulses", "--unit", "kg")
        assert result.exit_code == 0
        assert "toor-dal" in result.output

        listing = run("product", "list")
        assert "Toor Dal" in listing.output
        assert "PULSES" in listing.output

    def test_product_search(self, run):
        for name, category in [("Basmati Rice", "grains"), ("Basil Seeds", "spices")]:
            run("product", "add", "--name", name, "--category", category, "--unit", "kg")

        result = run("product", "list", "--search", "bas", "--category", "grains")

        assert result.exit_code == 0
        assert "basmati-rice" in result.output
        assert "basil-seeds" not in result.output

    def test_invalid_product_name(self, run):
        result = run("product", "add", "--name", "Rice!", "--category", "x", "--unit", "kg")
        assert result.exit_code == 1
        assert "alphanumeric" in result.output

    def test_duplicate_offer(self, run, listed):
        result = run("offer", "create", "--wholesaler", "W1", "--product", "basmati-rice",
                     "--tier", "1+:80")
        assert result.exit_code == 1
        assert "already list Basmati Rice" in result.output

    def test_bad_tier_syntax(self, run, listed):
        result = run("offer", "create", "--wholesaler", "W3", "--product", "basmati-rice",
                     "--tier", "lots:80")
        assert result.exit_code == 2
        assert "Invalid quantities" in result.output

    def test_quote_marks_best(self, run, listed):
        small = run("offer", "quote", "--product", "basmati-rice", "--qty", "5")
        assert small.exit_code == 0
        best_line = next(line for line in small.output.splitlines() if "<- best" in line)
        assert "Gupta" in best_line

        bulk = run("offer", "quote", "--product", "basmati-rice", "--qty", "10")
        best_line = next(line for line in bulk.output.splitlines() if "<- best" in line)
        assert "Sharma" in best_line
        assert "₹900.00" in best_line

    def test_availability_requires_owner(self, run, listed):
        result = run("offer", "availability", "--id", listed["W1"], "--off", "--as", "wholesaler:W2")
        assert result.exit_code == 1
        assert "own listings" in result.output

    def test_bad_actor_syntax(self, run, listed):
        result = run("offer", "availability", "--id", listed["W1"], "--off", "--as", "W1")
        assert result.exit_code == 2


class TestOrderFlow:

    def test_cart_to_delivered(self, run, listed, tmp_path):
        added = run("cart", "add", "--retailer", "R1", "--offer", listed["W1"], "--qty", "12")
        assert added.exit_code == 0
        assert "at ₹90.00 each" in added.output

        shown = run("cart", "show", "--retailer", "R1")
        assert "₹1080.00" in shown.output

        confirmed = run("cart", "confirm", "--retailer", "R1")
        assert confirmed.exit_code == 0
        assert "1 order(s) requested" in confirmed.output
        [order] = unit_of_work(tmp_path).orders.list_for_retailer("R1")

        for target in ("confirmed", "shipped", "delivered"):
            moved = run("order", "status", "--id", order.id, "--to", target, "--as", "wholesaler:W1")
            assert moved.exit_code == 0, moved.output
            assert f"is now {target}" in moved.output

        again = run("order", "status", "--id", order.id, "--to", "cancelled", "--as", "admin:ops")
        assert again.exit_code == 1
        assert "Cannot move order from delivered to cancelled" in again.output

        notes = run("notification", "list", "--user", "R1", "--unread")
        assert notes.output.count("Your order for Basmati Rice") == 3

        shown = run("order", "show", "--id", order.id)
        assert "status=delivered" in shown.output

    def test_empty_cart_confirm(self, run):
        result = run("cart", "confirm", "--retailer", "R1")
        assert result.exit_code == 1
        assert "cart is empty" in result.output

    def test_order_list_empty(self, run):
        result = run("order", "list", "--status", "shipped")
        assert result.exit_code == 0
        assert "No orders found." in result.output


def test_unreadable_store_is_reported(tmp_path):
    (tmp_path / "vyapar.json").write_text("][")
    result = CliRunner().invoke(cli, ["--data-dir", str(tmp_path), "product", "list"])
    assert result.exit_code == 1
    assert "store is unavailable" in result.output
