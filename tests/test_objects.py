import pytest

from drillrunner.objects import (
    Cons,
    Licensed,
    Nil,
    OtherSoftware,
    Package,
    SomeSoftware,
    compare_license_types,
    create_empty_list,
    create_non_empty_list,
)


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_minimum_weight_is_accepted():
    assert Package("Spain", "Austria", 10).weight_in_grams == 10


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    cents_per_gram = 3
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_negative_fee_rate_rejected():
    with pytest.raises(ValueError):
        Package("Spain", "Spain", 1500).get_fees(-1)


def test_is_licensing_info_the_same():
    licensing_info = "Some information"
    some_software = SomeSoftware(version_number=1)
    other_software = OtherSoftware(version_number="v2.0.0")
    assert some_software.licensing_info() == licensing_info
    assert other_software.licensing_info() == licensing_info


def test_compare_license_information():
    assert compare_license_types(SomeSoftware(), OtherSoftware()) is True


def test_compare_license_information_backwards():
    assert compare_license_types(OtherSoftware(), SomeSoftware()) is True


def test_compare_license_detects_difference():
    class Custom(Licensed):
        def licensing_info(self):
            return "other terms"

    assert compare_license_types(SomeSoftware(), Custom()) is False


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty == Cons(0, Cons(1, Nil()))
    assert (create_empty_list() == non_empty) is False


def test_non_empty_list_walks_to_nil():
    values = []
    node = create_non_empty_list()
    while isinstance(node, Cons):
        values.append(node.value)
        node = node.rest
    assert values == [0, 1]
    assert node == Nil()