from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional

from flask import Flask, current_app, jsonify, redirect, render_template_string, request, url_for

from calculator import Calculator
from pricing import format_cost
from storage import ProductStore
from template import HTML_TEMPLATE


# ---------------------------------------------------------------------------
# Configuration & preset loading
# ---------------------------------------------------------------------------

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
BASE_PRESETS_PATH = os.path.join(BASE_DIR, "presets.json")
LOCAL_PRESETS_PATH = os.environ.get(
    "PRESETS_OVERRIDE_PATH",
    os.path.join(BASE_DIR, "presets.local.json"),
)


def _load_json(path: str, *, required: bool = False) -> dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        if required:
            raise
        return {}
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Invalid JSON in {path}: {exc}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = base.copy()
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(base_value, value)
        else:
            merged[key] = value
    return merged


def load_defaults() -> dict[str, Any]:
    presets = _deep_merge(
        _load_json(BASE_PRESETS_PATH, required=True),
        _load_json(LOCAL_PRESETS_PATH),
    )
    return presets["defaults"]


def _storage_path(defaults: dict[str, Any]) -> str:
    path = os.environ.get("PRODUCTS_PATH") or defaults.get("storage_path", "products.json")
    return path if os.path.isabs(path) else os.path.join(BASE_DIR, path)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(calculator: Optional[Calculator] = None, defaults: Optional[dict[str, Any]] = None) -> Flask:
    if defaults is None:
        defaults = load_defaults()
    if calculator is None:
        store = ProductStore(_storage_path(defaults))
        calculator = Calculator.load(store)

    app = Flask(__name__)
    app.config["CALCULATOR_DEFAULTS"] = defaults
    app.extensions["calculator"] = calculator
    app.logger.info("Loaded %d saved product(s)", len(calculator.products))

    def _calculator() -> Calculator:
        return current_app.extensions["calculator"]

    @app.route("/", methods=["GET"])
    def index():
        calc = _calculator()
        defaults = current_app.config["CALCULATOR_DEFAULTS"]
        showing_products = request.args.get("view") == "products"

        digits = int(defaults.get("display_digits", 2))
        return render_template_string(
            HTML_TEMPLATE,
            title=defaults.get("title", "Unit cost Calculator"),
            currency=defaults.get("currency", ""),
            digits=digits,
            drafts=calc.drafts,
            materials=calc.materials,
            products=calc.products,
            total=format_cost(calc.total_cost(), digits),
            showing_products=showing_products,
        )

    @app.route("/materials", methods=["POST"])
    def add_material():
        material = _calculator().add_material(
            request.form.get("material", ""),
            request.form.get("unit_cost", ""),
            request.form.get("percentage", ""),
        )
        if material is None:
            app.logger.debug("Material entry skipped")
        return redirect(url_for("index"))

    @app.route("/materials/<material_id>/delete", methods=["POST"])
    def delete_material(material_id: str):
        _calculator().delete_material(material_id)
        return redirect(url_for("index"))

    @app.route("/products", methods=["POST"])
    def save_product():
        product = _calculator().save_product(request.form.get("product_name", ""))
        if product is None:
            app.logger.debug("Product save skipped")
        return redirect(url_for("index"))

    @app.route("/products/<product_id>/delete", methods=["POST"])
    def delete_product(product_id: str):
        _calculator().delete_product(product_id)
        view = request.form.get("view")
        return redirect(url_for("index", view=view) if view == "products" else url_for("index"))

    @app.route("/api/products", methods=["GET"])
    def list_products():
        return jsonify([p.to_dict() for p in _calculator().products])

    return app


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "5000"))
    debug = os.environ.get("DEBUG", "0") in ["1", "true", "True"]
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)
    # One request at a time: the calculator has a single writer.
    create_app().run(host=host, port=port, debug=debug, threaded=False)
