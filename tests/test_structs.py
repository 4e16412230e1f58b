import dataclasses

import pytest

from drillbook.lessons.structs import (
    ColorClassic,
    ColorTuple,
    Package,
    ReportCard,
    UnitStruct,
    Wrapper,
    append_bar,
    create_order_template,
    shopping_list,
)


def test_classic_structs():
    green = ColorClassic(name="green", hex="#00FF00")
    assert green.name == "green"
    assert green.hex == "#00FF00"


def test_tuple_structs():
    green = ColorTuple("green", "#00FF00")
    assert green[0] == "green"
    assert green[1] == "#00FF00"


def test_unit_structs():
    unit_struct = UnitStruct()
    message = f"{unit_struct!r}s are fun!"
    assert message == "UnitStructs are fun!"


def test_your_order():
    order_template = create_order_template()
    your_order = dataclasses.replace(order_template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == order_template.year
    assert your_order.made_by_phone == order_template.made_by_phone
    assert your_order.made_by_mobile == order_template.made_by_mobile
    assert your_order.made_by_email == order_template.made_by_email
    assert your_order.item_number == order_template.item_number
    assert your_order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert (template.name, template.year, template.item_number, template.count) == (
        "Bob",
        2019,
        123,
        0,
    )
    assert template.made_by_email is True


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", -2210)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500


def test_shopping_list():
    assert shopping_list() == ["milk"]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_generate_numeric_report_card():
    report_card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert report_card.render() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    report_card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert report_card.render() == "Gary Plotter (11) - achieved a grade of A+"


def test_is_foo_bar():
    assert append_bar("Foo") == "FooBar"


def test_is_bar_bar():
    assert append_bar(append_bar("")) == "BarBar"


def test_is_vec_pop_eq_bar():
    foo = append_bar(["Foo"])
    assert foo.pop() == "Bar"
    assert foo.pop() == "Foo"


def test_append_bar_unsupported():
    with pytest.raises(TypeError):
        append_bar(42)