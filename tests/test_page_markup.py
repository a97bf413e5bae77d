from html.parser import HTMLParser

from optionlab.page_markup import CHART_JS_SRC, PAGE_TITLE, render_body, render_head

_VOID = {"meta", "input", "br", "img", "link", "hr"}


class _Collector(HTMLParser):
    def __init__(self):
        super().__init__()
        self.stack = []
        self.elements = []
        self.mismatches = []
        self.style_text = ""
        self._in_style = False

    def handle_starttag(self, tag, attrs):
        self.elements.append((tag, dict(attrs)))
        if tag == "style":
            self._in_style = True
        if tag not in _VOID:
            self.stack.append(tag)

    def handle_endtag(self, tag):
        if tag == "style":
            self._in_style = False
        if not self.stack or self.stack[-1] != tag:
            self.mismatches.append(tag)
        else:
            self.stack.pop()

    def handle_data(self, data):
        if self._in_style:
            self.style_text += data


def _parse(text):
    collector = _Collector()
    collector.feed(text)
    collector.close()
    return collector


def test_head_starts_with_doctype_and_ends_with_head_close():
    head = render_head()
    assert head.startswith("<!DOCTYPE html>\n")
    assert head.endswith("</head>\n")
    assert f"<title>{PAGE_TITLE}</title>" in head


def test_head_tags_are_balanced_leaving_html_open():
    parsed = _parse(render_head())
    assert parsed.mismatches == []
    assert parsed.stack == ["html"]


def test_head_loads_chart_library_once():
    parsed = _parse(render_head())
    scripts = [attrs for tag, attrs in parsed.elements if tag == "script"]
    assert scripts == [{"src": CHART_JS_SRC}]


def test_style_sheet_braces_balance_and_key_rules_present():
    parsed = _parse(render_head())
    css = parsed.style_text
    assert css.count("{") == css.count("}")
    assert ".hidden { display: none; }" in css
    assert ".chart-container { position: relative; height: 500px; margin-bottom: 30px; }" in css


def test_body_tags_are_balanced_leaving_body_open():
    body = render_body()
    assert body.startswith("<body>\n")
    parsed = _parse(body)
    assert parsed.mismatches == []
    assert parsed.stack == ["body"]


def test_form_inputs_carry_source_defaults():
    parsed = _parse(render_body())
    values = {
        attrs["id"]: attrs["value"] for tag, attrs in parsed.elements if tag == "input"
    }
    assert values == {
        "spot": "100",
        "strike": "105",
        "strike2": "110",
        "rate": "5",
        "volatility": "20",
        "timeToMaturity": "90",
    }


def test_second_strike_group_is_hidden_and_optional():
    parsed = _parse(render_body())
    by_id = {attrs.get("id"): attrs for _, attrs in parsed.elements if "id" in attrs}
    assert "hidden" in by_id["strike2Group"]["class"].split()
    assert "required" not in by_id["strike2"]
    assert "required" in by_id["spot"]


def test_selects_offer_zero_and_one_codes():
    parsed = _parse(render_body())
    option_values = [attrs["value"] for tag, attrs in parsed.elements if tag == "option"]
    assert option_values == ["0", "1", "0", "1"]


def test_strategy_buttons_in_source_order():
    parsed = _parse(render_body())
    clicks = [
        attrs["onclick"]
        for tag, attrs in parsed.elements
        if tag == "button" and attrs.get("class") == "strategy-btn"
    ]
    assert clicks == [
        "loadStrategy('straddle')",
        "loadStrategy('strangle')",
        "loadStrategy('coveredcall')",
        "loadStrategy('protectiveput')",
        "loadStrategy('bullspread')",
        "loadStrategy('bearspread')",
        "loadStrategy('ironcondor')",
    ]


def test_chart_buttons_with_payoff_active():
    parsed = _parse(render_body())
    buttons = [
        attrs for tag, attrs in parsed.elements
        if tag == "button" and "chart-btn" in attrs.get("class", "").split()
    ]
    assert [b["onclick"] for b in buttons] == [
        "showChart('payoff')",
        "showChart('pnl')",
        "showChart('breakeven')",
        "showChart('comparison')",
        "showChart('greeks')",
    ]
    active = [b["onclick"] for b in buttons if "active" in b["class"].split()]
    assert active == ["showChart('payoff')"]


def test_script_targets_exist_in_body():
    parsed = _parse(render_body())
    ids = {attrs["id"] for _, attrs in parsed.elements if "id" in attrs}
    for required in (
        "pricingForm",
        "payoffChart",
        "strategyInfo",
        "pricingResults",
        "analysisResults",
        "strike2Group",
    ):
        assert required in ids


def test_body_has_no_script_of_its_own():
    parsed = _parse(render_body())
    assert [tag for tag, _ in parsed.elements if tag == "script"] == []