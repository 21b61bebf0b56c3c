import pytest

from wealthchat.utils.input_parser import parse_amount


@pytest.mark.parametrize("text,expected", [
    ("35", 35.0),
    ("$20", 20.0),
    ("I almost save $20 per month", 20.0),
    ("around 50,000", 50000.0),
    ("1,234,567.89", 1234567.89),
    ("150K", 150000.0),
    ("1.5m", 1500000.0),
    ("2 million dollars", 2000000.0),
    ("thirty five", 35.0),
    ("two hundred and fifty", 250.0),
    ("I'm 42 years old", 42.0),
    ("25%", 25.0),
    ("-200", -200.0),
])
def test_parse_amount(text, expected):
    assert parse_amount(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", [None, "", "   ", "no idea", "lots"])
def test_parse_amount_without_number(text):
    assert parse_amount(text) is None


def test_months_is_not_a_million_suffix():
    assert parse_amount("6 months") == 6.0


@pytest.mark.parametrize("text", ["-$200", "-200 dollars", "$-200"])
def test_negative_currency_amount_keeps_sign(text):
    assert parse_amount(text) == -200.0


@pytest.mark.parametrize("text,expected", [
    ("I'm 35 and earn 50k", 35.0),
    ("50k now, 35 later", 50000.0),
    ("about 1,500k", 1500000.0),
])
def test_first_number_in_answer_wins(text, expected):
    assert parse_amount(text) == pytest.approx(expected)
