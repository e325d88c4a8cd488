from pim_app.models import PartPayload
from pim_app.validation import error_messages, parse_number, validate_part_fields


def test_valid_fields_are_normalized():
    result = validate_part_fields("  Spark Plug ", "12", "3.5")
    assert result.ok
    assert result.errors == {}
    assert result.payload == PartPayload(name="Spark Plug", quantity=12, price=3.5)
    assert isinstance(result.payload.quantity, int)
    assert isinstance(result.payload.price, float)


def test_all_failures_reported_together():
    result = validate_part_fields("   ", "", "")
    assert result.payload is None
    assert result.errors == {"name": "required", "quantity": "required", "price": "required"}


def test_quantity_rules():
    assert validate_part_fields("A", "-1", "1").errors == {"quantity": "non-negative"}
    assert validate_part_fields("A", "abc", "1").errors == {"quantity": "non-negative"}
    assert validate_part_fields("A", "2.5", "1").errors == {"quantity": "integer"}
    assert validate_part_fields("A", "0", "1").ok


def test_price_rules():
    assert validate_part_fields("A", "1", "-0.01").errors == {"price": "non-negative"}
    assert validate_part_fields("A", "1", "nan").errors == {"price": "non-negative"}
    assert validate_part_fields("A", "1", "0").ok


def test_comma_decimal_and_whole_float_quantity():
    result = validate_part_fields("A", "4.0", "12,99")
    assert result.payload == PartPayload(name="A", quantity=4, price=12.99)


def test_parse_number():
    assert parse_number(" 7 ") == 7.0
    assert parse_number("1,5") == 1.5
    assert parse_number("") is None
    assert parse_number("inf") is None
    assert parse_number(True) is None


def test_parse_number_rejects_grouped_input():
    assert parse_number("1,000") == 1.0
    assert parse_number("1,000.50") is None
    assert parse_number("1.000,50") is None
    assert parse_number("1,000,000") is None
    result = validate_part_fields("A", "1,000,000", "1.234,5")
    assert result.errors == {"quantity": "non-negative", "price": "non-negative"}


def test_error_messages_translate_codes():
    errors = validate_part_fields("", "1.5", "-3").errors
    messages = error_messages(errors)
    assert messages == {
        "name": "Part name is required",
        "quantity": "Quantity must be a whole number",
        "price": "Price must be a non-negative number",
    }
    assert error_messages({"name": "required"}, "nl") == {"name": "Onderdeelnaam is verplicht"}
