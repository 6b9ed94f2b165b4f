# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

from __future__ import annotations

import json

import pytest

from openmeasure import AggregateResult, CSVFormatter, FormatterSet, HTMLFormatter, JSONFormatter, TextFormatter
from openmeasure.formatters import Formatter, default_formatters


RESULT = AggregateResult(value=178.53981633974483, count=2, reduction="sum")


def test_json_formatter_is_machine_readable() -> None:
    payload = json.loads(JSONFormatter().render(RESULT))

    assert payload == {"count": 2, "reduction": "sum", "value": 178.53981633974483}


def test_json_formatter_custom_serializer() -> None:
    formatter = JSONFormatter(serializer=lambda payload: "|".join(f"{k}={v}" for k, v in payload.items()))

    assert formatter.render(RESULT).startswith("count=2|reduction=sum|")


def test_text_formatter() -> None:
    assert TextFormatter().render(RESULT) == "Total (sum) of 2 items: 178.54"
    assert TextFormatter(precision=0).render(AggregateResult(1.0, 1)) == "Total (sum) of 1 item: 1"


def test_text_formatter_rejects_negative_precision() -> None:
    with pytest.raises(ValueError):
        TextFormatter(precision=-1)


def test_html_formatter_rejects_negative_precision() -> None:
    with pytest.raises(ValueError):
        HTMLFormatter(precision=-1)


def test_html_formatter_escapes_attributes() -> None:
    rendered = HTMLFormatter(css_class='x"y').render(AggregateResult(2.5, 1, reduction="<max>"))

    assert rendered == '<p class="x&quot;y" data-count="1" data-reduction="&lt;max&gt;">2.50</p>'


def test_csv_formatter() -> None:
    lines = CSVFormatter().render(RESULT).splitlines()

    assert lines == ["reduction,count,value", f"sum,2,{RESULT.value!r}"]


@pytest.mark.parametrize("formatter", list(default_formatters()))
def test_formatters_are_pure(formatter: Formatter) -> None:
    assert isinstance(formatter, Formatter)
    assert formatter.render(RESULT) == formatter.render(RESULT)
    assert formatter.render(RESULT) != formatter.render(AggregateResult(1.0, 1))


def test_formatter_set_renders_each_format() -> None:
    formatters = FormatterSet([JSONFormatter(), TextFormatter()])

    rendered = formatters.render_all(RESULT)

    assert list(rendered) == ["json", "text"]
    assert rendered["text"] == TextFormatter().render(RESULT)
    assert formatters.names == ["json", "text"]
    assert len(formatters) == 2


def test_formatter_set_unknown_name() -> None:
    with pytest.raises(KeyError, match="yaml"):
        FormatterSet().get("yaml")


def test_formatter_set_accepts_new_formatter() -> None:
    class Upper:
        name = "upper"

        def render(self, result: AggregateResult) -> str:
            return f"TOTAL {result.value:.1f}"

    formatters = default_formatters()
    formatters.register(Upper())

    assert formatters.get("upper").render(RESULT) == "TOTAL 178.5"
    assert formatters.get("json").render(RESULT) == JSONFormatter().render(RESULT)
