"""Tests for the command-line interface."""

import json

import pytest

from shopfeed import cli
from shopfeed.config import EMPTY_RESULT_TEXT, PROMO_FALLBACK_TEXT
from shopfeed.store import CatalogStore


@pytest.fixture
def run_cli(capsys):
    """Run the CLI without writing log files and return captured stdout."""

    def _run(*args):
        exit_code = cli.main([*args, "--no-log-file"])
        return exit_code, capsys.readouterr().out

    return _run


class TestDiscountBanner:
    def test_best_offer(self, store):
        assert cli.discount_banner(store) == "Premium Cotton Formal Shirt - 10% off"

    def test_no_offer(self):
        assert cli.discount_banner(CatalogStore()) == PROMO_FALLBACK_TEXT


class TestFormatProductLine:
    def test_discounted_with_sizes(self, shirts):
        line = cli.format_product_line(shirts[1])
        assert "[2] Slim Fit Linen Shirt - BDT 2299 (5% off)" in line
        assert "M: 2" in line
        assert "XXL: out of stock" in line

    def test_plain_product(self, shirts):
        line = cli.format_product_line(shirts[4])
        assert line.strip() == "[5] LINEN Pocket Square - BDT 350"


class TestMain:
    """End-to-end runs against a local feed file."""

    def test_list_all(self, run_cli, feed_file):
        exit_code, out = run_cli("--source", str(feed_file))

        assert exit_code == 0
        assert "Showing 4 products" in out
        assert "Oxford Shirt, Blue" in out

    def test_search_and_price(self, run_cli, feed_file):
        _, out = run_cli("--source", str(feed_file), "--search", "SHIRT", "--max-price", "2000")

        assert "Showing 1 products" in out
        assert "Oxford Shirt, Blue" in out
        assert "Basic Tee" not in out

    def test_empty_result(self, run_cli, feed_file):
        _, out = run_cli("--source", str(feed_file), "--search", "sneakers")

        assert "Showing 0 products" in out
        assert EMPTY_RESULT_TEXT in out

    def test_json_output(self, run_cli, feed_file):
        _, out = run_cli("--source", str(feed_file), "--min-price", "2000", "--json")

        data = json.loads(out)
        assert [item["id"] for item in data] == [103, 104]
        assert data[0]["sizes"] == {"30": 4, "32": 2}

    def test_highest_discount(self, run_cli, feed_file):
        _, out = run_cli("--source", str(feed_file), "--highest-discount")
        assert out.strip() == "Linen Trousers - 20% off"

    def test_stats(self, run_cli, feed_file):
        _, out = run_cli("--source", str(feed_file), "--stats")

        assert "Catalog source: feed" in out
        assert "Total products: 4" in out
        assert "Price range: BDT 599 - BDT 4200" in out
        assert "Discounted products: 2" in out

    def test_missing_feed_uses_sample_data(self, run_cli, tmp_path):
        _, out = run_cli("--source", str(tmp_path / "missing.csv"))

        assert "Using sample data" in out
        assert "Showing 3 products" in out
        assert "Premium Cotton Formal Shirt" in out

    def test_export_csv(self, run_cli, feed_file, tmp_path):
        target = tmp_path / "export" / "shirts.csv"

        _, out = run_cli("--source", str(feed_file), "--search", "shirt", "--export-csv", str(target))

        assert "Exported 1 products" in out
        assert target.read_text(encoding="utf-8").splitlines()[0] == (
            "id,name,price,discount,image,description,sizes"
        )

    def test_writes_log_file(self, capsys, feed_file, tmp_path, monkeypatch):
        monkeypatch.setattr("shopfeed.config.LOG_DIR", tmp_path / "logs")

        cli.main(["--source", str(feed_file)])
        capsys.readouterr()

        assert list((tmp_path / "logs").glob("shopfeed_*.jsonl"))
