HTML_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<meta name="description" content="Calculate and save product manufacturing costs">
<meta name="viewport" content="width=device-width, initial-scale=1">
<style>
  :root{--bg:#faf4f0;--ink:#0b0f17;--muted:#6b7280;--panel:#f5ece7;--accent:#b39b8c;--accent-hover:#a08977;--bad:#ef4444}
  html,body{margin:0;padding:0;background:var(--bg);color:var(--ink);font:14px/1.4 system-ui,-apple-system,Segoe UI,Roboto,Arial,sans-serif}
  .container{max-width:1100px;margin:0 auto;padding:16px}
  .columns{display:grid;grid-template-columns:1fr 1fr;gap:24px}
  h1{font-size:28px;text-align:center;margin:0 0 24px}
  h2{font-size:22px;text-align:center;margin:0 0 24px}
  label{display:block;margin:12px 0 4px}
  input[type=text]{width:100%;box-sizing:border-box;border:1px solid #e5e7eb;border-radius:6px;padding:8px;font:inherit;background:#fff}
  .btn{border:0;background:var(--accent);color:#fff;border-radius:6px;padding:8px 12px;cursor:pointer;font:inherit}
  .btn:hover{background:var(--accent-hover)}
  .btn.wide{width:100%;margin-top:12px}
  .btn.outline{background:transparent;color:var(--ink);border:1px solid #d6cfc9}
  .btn.icon{background:transparent;color:var(--bad);padding:2px 8px}
  .list{background:var(--panel);border-radius:8px;padding:12px;margin:16px 0;min-height:20px}
  .list .row{display:flex;justify-content:space-between;align-items:center;padding:4px 0}
  .list form{margin:0}
  .total{text-align:center;margin:16px 0}
  .total .amount{font-size:24px;font-weight:700}
  .save{display:flex;gap:8px}
  .save input{background:var(--panel)}
  .narrow-only{display:none}
  @media (max-width:767px){
    .columns{display:block}
    .wide-only{display:none}
    .narrow-only{display:block}
  }
</style>
</head>
<body>
<div class="container">
{% macro product_rows(products, currency, digits, view="calculator") %}
  <div class="list">
    {% for product in products %}
    <div class="row">
      <span>{{ product.label(currency, digits) }}</span>
      <form method="post" action="{{ url_for('delete_product', product_id=product.id) }}">
        <input type="hidden" name="view" value="{{ view }}">
        <button class="btn icon" type="submit" title="Delete product">&#x2715;</button>
      </form>
    </div>
    {% endfor %}
  </div>
{% endmacro %}
{% if not showing_products %}
  <div class="columns">
    <div>
      <h1>Unit cost Calculator</h1>
      <form method="post" action="{{ url_for('add_material') }}">
        <label for="material">Material</label>
        <input type="text" id="material" name="material" value="{{ drafts.material_name }}" placeholder="Enter material name">
        <label for="unit_cost">Unit cost</label>
        <input type="text" inputmode="decimal" id="unit_cost" name="unit_cost" value="{{ drafts.unit_cost }}" placeholder="Enter unit cost">
        <label for="percentage">Percentage used</label>
        <input type="text" inputmode="decimal" id="percentage" name="percentage" value="{{ drafts.percentage }}" placeholder="Enter percentage">
        <button class="btn wide" type="submit">Add</button>
      </form>

      <div class="list">
        {% for material in materials %}
        <div class="row">
          <span>{{ material.label() }}</span>
          <form method="post" action="{{ url_for('delete_material', material_id=material.id) }}">
            <button class="btn icon" type="submit" title="Delete material">&#x2715;</button>
          </form>
        </div>
        {% endfor %}
      </div>

      <div class="total">
        <h2>Product Manufacturing Cost:</h2>
        <div class="amount" id="totalCost">{{ total }} {{ currency }}</div>
      </div>

      <form class="save" method="post" action="{{ url_for('save_product') }}">
        <input type="text" name="product_name" value="{{ drafts.product_name }}" placeholder="Product name">
        <button class="btn" type="submit">Save</button>
      </form>

      <div class="narrow-only">
        <a class="btn outline wide" href="{{ url_for('index', view='products') }}">Saved products</a>
      </div>
    </div>

    <div class="wide-only">
      <h2>Products List</h2>
      {{ product_rows(products, currency, digits) }}
    </div>
  </div>
{% else %}
  <div>
    <h2>Products List</h2>
    {{ product_rows(products, currency, digits, "products") }}
    <a class="btn outline wide" href="{{ url_for('index', view='calculator') }}">Back to calculator</a>
  </div>
{% endif %}
</div>
</body>
</html>
"""
