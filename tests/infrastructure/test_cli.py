"""End-to-end tests for the command-line surface.

Each test points the storage at a temporary directory through the
environment, so commands share state across invocations like a real
session would.
"""

import json

import pytest
from click.testing import CliRunner

from storefront.domain.model.cart import STORAGE_KEY
from storefront.infrastructure.cli.main import cli


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("STOREFRONT_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("STOREFRONT_STORAGE", raising=False)
    monkeypatch.delenv("STOREFRONT_STORAGE_FILE", raising=False)
    monkeypatch.delenv("STOREFRONT_TAX_RATE", raising=False)
    monkeypatch.delenv("STOREFRONT_SHIPPING_COST", raising=False)
    return tmp_path


@pytest.fixture
def run(data_dir):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args))

    return _run


def _persisted(data_dir) -> list:
    raw = json.loads((data_dir / "storage.json").read_text(encoding="utf-8"))
    return json.loads(raw[STORAGE_KEY])


class TestProductCommands:

    def test_list_shows_catalog(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Mai Sakurajima" in result.output
        assert "$250.00" in result.output


class TestCartCommands:

    def test_add_persists_and_notifies(self, run, data_dir):
        result = run("cart", "add", "--id", "1", "--qty", "2")

        assert result.exit_code == 0, result.output
        assert "Cart updated (add #1)" in result.output
        assert "Added 'Mai Sakurajima'" in result.output
        assert _persisted(data_dir)[0]["quantity"] == 2

    def test_add_unknown_product_fails(self, run):
        result = run("cart", "add", "--id", "999")
        assert result.exit_code != 0
        assert "Product #999 not found" in result.output

    def test_state_carries_across_invocations(self, run, data_dir):
        run("cart", "add", "--id", "1")
        run("cart", "add", "--id", "1", "--qty", "4")
        run("cart", "increase", "--id", "1")
        run("cart", "decrease", "--id", "1")

        records = _persisted(data_dir)
        assert len(records) == 1
        assert records[0]["quantity"] == 5

    def test_update_and_remove(self, run, data_dir):
        run("cart", "add", "--id", "1")
        run("cart", "add", "--id", "2")

        assert run("cart", "update", "--id", "1", "--qty", "0").exit_code == 0
        assert [r["id"] for r in _persisted(data_dir)] == [2]

        assert run("cart", "remove", "--id", "2").exit_code == 0
        assert _persisted(data_dir) == []

    def test_remove_missing_reports_error(self, run):
        result = run("cart", "remove", "--id", "3")
        assert result.exit_code != 0
        assert "not in the cart" in result.output

    def test_show_with_pricing(self, run):
        run("cart", "add", "--id", "5")  # Alisa Mikhailovna, $300
        result = run("cart", "show", "--coupon", "20", "--tax-rate", "0.16", "--shipping", "50")

        assert result.exit_code == 0, result.output
        assert "$44.80" in result.output
        assert "$374.80" in result.output

    def test_show_uses_configured_defaults(self, run, monkeypatch):
        monkeypatch.setenv("STOREFRONT_SHIPPING_COST", "50")
        run("cart", "add", "--id", "5")
        result = run("cart", "show")
        assert "$350.00" in result.output

    def test_show_rejects_negative_pricing(self, run):
        result = run("cart", "show", "--coupon=-5")
        assert result.exit_code != 0
        assert "cannot be negative" in result.output

    def test_show_empty(self, run):
        result = run("cart", "show")
        assert "The cart is empty." in result.output

    def test_clear(self, run, data_dir):
        run("cart", "add", "--id", "1")
        result = run("cart", "clear")
        assert "Cart updated (clear)" in result.output
        assert _persisted(data_dir) == []

    def test_checkout_prints_receipt_and_clears(self, run, data_dir):
        run("cart", "add", "--id", "1", "--qty", "2")
        result = run("cart", "checkout")

        assert result.exit_code == 0, result.output
        assert "Order confirmed" in result.output
        assert "$500.00" in result.output
        assert _persisted(data_dir) == []

    def test_checkout_empty_cart_fails(self, run):
        result = run("cart", "checkout")
        assert result.exit_code != 0
        assert "cart is empty" in result.output


class TestConfigErrors:

    def test_malformed_tax_rate_reported_cleanly(self, run, monkeypatch):
        monkeypatch.setenv("STOREFRONT_TAX_RATE", "sixteen")
        result = run("cart", "show")

        assert result.exit_code != 0
        assert "STOREFRONT_TAX_RATE must be a number" in result.output
        assert "Traceback" not in result.output

    def test_malformed_setting_reported_with_explicit_log_level(self, run, monkeypatch):
        monkeypatch.setenv("STOREFRONT_SHIPPING_COST", "abc")
        result = run("--log-level", "INFO", "product", "list")

        assert result.exit_code != 0
        assert "STOREFRONT_SHIPPING_COST must be a number" in result.output
