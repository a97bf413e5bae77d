"""Static markup of the web front end: the document head and the page body."""

from __future__ import annotations

CHART_JS_SRC = "https://cdn.jsdelivr.net/npm/chart.js"
PAGE_TITLE = "Advanced Options Trading Engine"

_STYLE_RULES = (
    "* { margin: 0; padding: 0; box-sizing: border-box; }",
    "body { font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); min-height: 100vh; padding: 20px; }",
    ".container { max-width: 1400px; margin: 0 auto; background: rgba(255, 255, 255, 0.95); border-radius: 20px; box-shadow: 0 20px 40px rgba(0, 0, 0, 0.1); overflow: hidden; }",
    ".header { background: linear-gradient(135deg, #1e3c72 0%, #2a5298 100%); color: white; padding: 30px; text-align: center; }",
    ".header h1 { font-size: 2.5em; margin-bottom: 10px; font-weight: 300; }",
    ".header p { opacity: 0.9; font-size: 1.1em; }",
    ".main-content { display: grid; grid-template-columns: 350px 1fr; gap: 30px; padding: 40px; }",
    ".form-section { background: rgba(255, 255, 255, 0.9); padding: 30px; border-radius: 15px; box-shadow: 0 10px 25px rgba(0, 0, 0, 0.1); }",
    ".chart-section { background: rgba(255, 255, 255, 0.9); padding: 30px; border-radius: 15px; box-shadow: 0 10px 25px rgba(0, 0, 0, 0.1); }",
    ".input-group { margin-bottom: 15px; }",
    ".input-group label { display: block; margin-bottom: 5px; font-weight: 600; color: #333; font-size: 13px; }",
    ".input-group input, .input-group select { width: 100%; padding: 10px; border: 2px solid #e1e8ed; border-radius: 6px; font-size: 13px; background: #f8f9fa; transition: all 0.3s ease; }",
    ".input-group input:focus, .input-group select:focus { outline: none; border-color: #667eea; background: white; box-shadow: 0 0 0 3px rgba(102, 126, 234, 0.1); }",
    ".btn-calculate { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; border: none; padding: 12px 25px; font-size: 14px; font-weight: 600; border-radius: 20px; cursor: pointer; width: 100%; margin-top: 15px; transition: all 0.3s ease; }",
    ".btn-calculate:hover { transform: translateY(-2px); box-shadow: 0 12px 20px rgba(102, 126, 234, 0.4); }",
    ".chart-container { position: relative; height: 500px; margin-bottom: 30px; }",
    ".chart-controls { display: flex; gap: 8px; margin-bottom: 20px; flex-wrap: wrap; }",
    ".chart-btn { background: #667eea; color: white; border: none; padding: 8px 16px; border-radius: 15px; cursor: pointer; font-size: 12px; transition: all 0.3s ease; }",
    ".chart-btn:hover { background: #5a6fd8; transform: translateY(-1px); }",
    ".chart-btn.active { background: #4c63d2; box-shadow: 0 4px 8px rgba(102, 126, 234, 0.3); }",
    ".strategy-section { background: rgba(255, 255, 255, 0.9); padding: 20px; border-radius: 15px; margin-top: 20px; }",
    ".strategy-controls { display: flex; gap: 10px; margin-bottom: 15px; flex-wrap: wrap; }",
    ".strategy-btn { background: #28a745; color: white; border: none; padding: 10px 16px; border-radius: 20px; cursor: pointer; font-size: 13px; font-weight: 600; transition: all 0.3s ease; }",
    ".strategy-btn:hover { background: #218838; transform: translateY(-1px); }",
    ".strategy-btn.active { background: #1e7e34; box-shadow: 0 4px 8px rgba(40, 167, 69, 0.3); }",
    ".analysis-section { background: linear-gradient(135deg, #f093fb 0%, #f5576c 100%); color: white; padding: 25px; border-radius: 15px; margin-top: 20px; }",
    ".analysis-grid { display: grid; grid-template-columns: 1fr 1fr 1fr; gap: 15px; margin-top: 15px; }",
    ".analysis-card { background: rgba(255, 255, 255, 0.2); padding: 15px; border-radius: 10px; backdrop-filter: blur(10px); }",
    ".analysis-item { display: flex; justify-content: space-between; margin-bottom: 8px; padding: 3px 0; border-bottom: 1px solid rgba(255, 255, 255, 0.2); font-size: 13px; }",
    ".analysis-item:last-child { border-bottom: none; }",
    ".analysis-value { font-family: 'Courier New', monospace; font-weight: bold; }",
    ".results-display { background: rgba(102, 126, 234, 0.1); padding: 15px; border-radius: 10px; margin-top: 15px; color: #333; }",
    ".price-item { display: flex; justify-content: space-between; margin: 5px 0; font-size: 13px; }",
    ".strategy-info { background: rgba(40, 167, 69, 0.1); padding: 15px; border-radius: 10px; margin-top: 15px; color: #333; }",
    ".strategy-details { font-size: 13px; line-height: 1.4; }",
    ".position-toggle { display: flex; gap: 10px; margin-bottom: 20px; }",
    ".toggle-btn { background: #6c757d; color: white; border: none; padding: 10px 20px; border-radius: 20px; cursor: pointer; font-size: 14px; font-weight: 600; transition: all 0.3s ease; }",
    ".toggle-btn.active { background: #007bff; box-shadow: 0 4px 8px rgba(0, 123, 255, 0.3); }",
    ".toggle-btn:hover { transform: translateY(-1px); }",
    ".strategy-position-toggle { display: flex; gap: 8px; margin-top: 10px; }",
    ".strategy-toggle-btn { background: #6c757d; color: white; border: none; padding: 6px 12px; border-radius: 15px; cursor: pointer; font-size: 11px; font-weight: 600; transition: all 0.3s ease; }",
    ".strategy-toggle-btn.active { background: #dc3545; }",
    ".strategy-toggle-btn.long.active { background: #28a745; }",
    ".hidden { display: none; }",
    "@media (max-width: 1200px) { .main-content { grid-template-columns: 1fr; } .analysis-grid { grid-template-columns: 1fr 1fr; } }",
    "@media (max-width: 768px) { .analysis-grid { grid-template-columns: 1fr; } }",
)

_BODY = """\
<body>
<div class="container">
<div class="header">
<h1>Advanced Options Trading Engine</h1>
<p>Professional options analysis with buying, selling, and strategy combinations</p>
</div>
<div class="main-content">
<div class="form-section">
<h2 style="margin-bottom: 20px; color: #333; text-align: center; font-size: 1.3em;">Option Parameters</h2>
<div class="position-toggle">
<button class="toggle-btn active" onclick="setPositionType('long')">Long (Buying)</button>
<button class="toggle-btn" onclick="setPositionType('short')">Short (Selling)</button>
</div>
<form id="pricingForm">
<div class="input-group">
<label for="spot">Current Stock Price ($)</label>
<input type="number" id="spot" name="spot" value="100" step="0.01" required>
</div>
<div class="input-group">
<label for="strike">Strike Price ($)</label>
<input type="number" id="strike" name="strike" value="105" step="0.01" required>
</div>
<!-- Second strike - hidden by default -->
<div class="input-group hidden" id="strike2Group">
<label for="strike2">Strike Price 2 ($)</label>
<input type="number" id="strike2" name="strike2" value="110" step="0.01">
</div>
<div class="input-group">
<label for="rate">Risk-free Rate (%)</label>
<input type="number" id="rate" name="rate" value="5" step="0.1" required>
</div>
<div class="input-group">
<label for="volatility">Implied Volatility (%)</label>
<input type="number" id="volatility" name="volatility" value="20" step="0.1" required>
</div>
<div class="input-group">
<label for="timeToMaturity">Days to Expiration</label>
<input type="number" id="timeToMaturity" name="timeToMaturity" value="90" step="1" required>
</div>
<div class="input-group">
<label for="optionType">Option Type</label>
<select id="optionType" name="optionType" required>
<option value="0">Call Option</option>
<option value="1">Put Option</option>
</select>
</div>
<div class="input-group">
<label for="exerciseType">Exercise Style</label>
<select id="exerciseType" name="exerciseType" required>
<option value="0">European</option>
<option value="1">American</option>
</select>
</div>
<button type="button" class="btn-calculate" onclick="calculateAndChart()">Calculate & Visualize</button>
</form>
<div class="strategy-section">
<h3 style="margin-bottom: 15px; color: #333;">Quick Strategies</h3>
<div class="strategy-controls">
<button class="strategy-btn" onclick="loadStrategy('straddle')">Straddle</button>
<button class="strategy-btn" onclick="loadStrategy('strangle')">Strangle</button>
<button class="strategy-btn" onclick="loadStrategy('coveredcall')">Covered Call</button>
<button class="strategy-btn" onclick="loadStrategy('protectiveput')">Protective Put</button>
<button class="strategy-btn" onclick="loadStrategy('bullspread')">Bull Call Spread</button>
<button class="strategy-btn" onclick="loadStrategy('bearspread')">Bear Put Spread</button>
<button class="strategy-btn" onclick="loadStrategy('ironcondor')">Iron Condor</button>
</div>
<div id="strategyInfo"></div>
</div>
<div id="pricingResults"></div>
</div>
<div class="chart-section">
<h2 style="margin-bottom: 20px; color: #333;">Interactive P&L Analysis</h2>
<div class="chart-controls">
<button class="chart-btn active" onclick="showChart('payoff')">Payoff</button>
<button class="chart-btn" onclick="showChart('pnl')">P&L</button>
<button class="chart-btn" onclick="showChart('breakeven')">Breakeven</button>
<button class="chart-btn" onclick="showChart('comparison')">Buy vs Sell</button>
<button class="chart-btn" onclick="showChart('greeks')">Greeks</button>
</div>
<div class="chart-container">
<canvas id="payoffChart"></canvas>
</div>
<div id="analysisResults"></div>
</div>
</div>
</div>
"""


def render_head() -> str:
    """Doctype, the opening html tag and the complete head with its style sheet."""
    style = "\n".join(_STYLE_RULES)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{PAGE_TITLE}</title>\n"
        f'<script src="{CHART_JS_SRC}"></script>\n'
        "<style>\n"
        f"{style}\n"
        "</style>\n"
        "</head>\n"
    )


def render_body() -> str:
    """The opening body tag and the page layout; the script and closing tags follow it."""
    return _BODY