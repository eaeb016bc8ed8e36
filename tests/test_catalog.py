"""Catalog normalization tests."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from menu_order.catalog import load_catalog_file, normalize_catalog
from menu_order.constant import SAMPLE_CATALOG
from menu_order.errors import CatalogError
from menu_order.models import Catalog, NormalizedDish
from tests.factories import dish


class TestNormalizeCatalog:
    def test_flattens_in_category_then_dish_order(self, catalog: Catalog) -> None:
        assert catalog.categories == ("Main", "Drinks", "Desserts")
        assert [d.name for d in catalog.dishes] == ["Pizza", "Pasta", "Lemonade", "Espresso", "Tiramisu"]
        assert [d.category for d in catalog.dishes] == ["Main", "Main", "Drinks", "Drinks", "Desserts"]

    def test_dish_count_matches_input(self, raw_catalog) -> None:
        expected = sum(len(group["dishes"]) for group in raw_catalog["categories"])
        assert len(normalize_catalog(raw_catalog).dishes) == expected

    def test_sample_catalog_dish_count(self) -> None:
        expected = sum(len(group["dishes"]) for group in SAMPLE_CATALOG["categories"])
        assert len(normalize_catalog(SAMPLE_CATALOG).dishes) == expected

    def test_ids_are_canonical_strings(self, catalog: Catalog) -> None:
        assert all(isinstance(d.dish_id, str) for d in catalog.dishes)
        assert catalog.dish_by_id(1) is catalog.dish_by_id("1")

    def test_uses_first_size(self) -> None:
        raw = {
            "categories": [
                {
                    "name": "Main",
                    "dishes": [
                        {
                            "id": 7,
                            "name": "Soup",
                            "sizes": [{"price": 200, "imageUrl": "a.png"}, {"price": 900, "imageUrl": "b.png"}],
                        }
                    ],
                }
            ]
        }
        only = normalize_catalog(raw).dishes[0]
        assert only == NormalizedDish(dish_id="7", name="Soup", category="Main", price=200, image_url="a.png")

    @pytest.mark.parametrize("price", [0, None, ""])
    def test_falsy_price_is_zero(self, price) -> None:
        raw = {"categories": [{"name": "Main", "dishes": [dish(1, "Water", price)]}]}
        assert normalize_catalog(raw).dishes[0].price == 0

    def test_missing_sizes_gives_zero_price_and_no_image(self) -> None:
        raw = {"categories": [{"name": "Main", "dishes": [{"id": 1, "name": "Bread"}]}]}
        bread = normalize_catalog(raw).dishes[0]
        assert bread.price == 0
        assert bread.image_url is None

    def test_numeric_string_price(self) -> None:
        raw = {"categories": [{"name": "Main", "dishes": [dish(1, "Pie", "450")]}]}
        assert normalize_catalog(raw).dishes[0].price == 450

    @pytest.mark.parametrize("price", [-1, "cheap", "n/a", 9.99, "12.5", True])
    def test_invalid_price_skips_only_that_dish(self, price, caplog: pytest.LogCaptureFixture) -> None:
        raw = {
            "categories": [
                {"name": "Main", "dishes": [dish(1, "Pizza", 500), dish(2, "Pie", price)]},
                {"name": "Drinks", "dishes": [dish(3, "Tea", 90)]},
            ]
        }
        with caplog.at_level(logging.WARNING, logger="menu_order.catalog"):
            catalog = normalize_catalog(raw)
        assert [d.name for d in catalog.dishes] == ["Pizza", "Tea"]
        assert catalog.categories == ("Main", "Drinks")
        assert "'2'" in caplog.text

    @pytest.mark.parametrize(("price", "expected"), [("1e3", 1000), (12.0, 12), ("450", 450)])
    def test_whole_number_prices_accepted(self, price, expected) -> None:
        raw = {"categories": [{"name": "Main", "dishes": [dish(1, "Pie", price)]}]}
        assert normalize_catalog(raw).dishes[0].price == expected

    @pytest.mark.parametrize("raw", [None, {}, {"categories": None}, {"categories": "nope"}, {"categories": []}])
    def test_absent_or_malformed_input_is_empty(self, raw) -> None:
        catalog = normalize_catalog(raw)
        assert catalog.categories == ()
        assert catalog.dishes == ()
        assert catalog.is_empty

    def test_malformed_dish_skipped(self) -> None:
        raw = {"categories": [{"name": "Main", "dishes": [{"name": "No id"}, "junk", dish(2, "Pasta", 300)]}]}
        assert [d.dish_id for d in normalize_catalog(raw).dishes] == ["2"]

    def test_duplicate_category_names_are_merged(self) -> None:
        raw = {
            "categories": [
                {"name": "Main", "dishes": [dish(1, "Pizza", 500)]},
                {"name": "Drinks", "dishes": [dish(2, "Tea", 90)]},
                {"name": "Main", "dishes": [dish(3, "Pasta", 300)]},
            ]
        }
        catalog = normalize_catalog(raw)
        assert catalog.categories == ("Main", "Drinks")
        assert [d.name for d in catalog.dishes] == ["Pizza", "Tea", "Pasta"]

    def test_duplicate_dish_ids_rejected(self) -> None:
        raw = {"categories": [{"name": "Main", "dishes": [dish(1, "Pizza", 500), dish("1", "Pasta", 300)]}]}
        with pytest.raises(CatalogError):
            normalize_catalog(raw)


class TestLoadCatalogFile:
    def test_reads_plain_catalog(self, tmp_path: Path, raw_catalog) -> None:
        path = tmp_path / "menu.json"
        path.write_text(json.dumps(raw_catalog), encoding="utf-8")
        assert len(load_catalog_file(path).dishes) == 5

    def test_reads_wrapped_catalog(self, tmp_path: Path, raw_catalog) -> None:
        path = tmp_path / "menu.json"
        path.write_text(json.dumps({"dishesObj": raw_catalog}), encoding="utf-8")
        assert load_catalog_file(path).categories == ("Main", "Drinks", "Desserts")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "menu.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog_file(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError):
            load_catalog_file(tmp_path / "absent.json")
