# test_api_model.py - APIModel tests

import pytest
from apifactory import APIModel, ModelAlreadyCreatedError


class Product(APIModel):
    model_type = "product"
    name = ""
    price = "0.00"


class Coupon(APIModel):
    code = ""


def test_new_model_is_uncreated():
    """A fresh model has the sentinel id"""
    product = Product()
    assert product.id == 0
    assert not product.is_created
    assert product.name == ""


def test_fields_are_merged_over_defaults():
    """Keyword fields overwrite the class defaults on the instance only"""
    product = Product(name="Widget")
    assert product.name == "Widget"
    assert product.price == "0.00"
    assert Product.name == ""
    assert product.fields() == {"name": "Widget"}


def test_id_cannot_be_passed_in():
    with pytest.raises(TypeError):
        Product(id=5)


def test_id_is_read_only():
    product = Product()
    with pytest.raises(AttributeError):
        product.id = 7


def test_on_created_assigns_id():
    product = Product(name="Widget")
    product.on_created({"id": 42, "name": "Widget"})
    assert product.id == 42
    assert product.is_created


def test_on_created_twice_fails_and_keeps_first_id():
    """Creation is a one-time transition"""
    product = Product()
    product.on_created({"id": 1})

    with pytest.raises(ModelAlreadyCreatedError):
        product.on_created({"id": 2})

    assert product.id == 1


def test_model_type_defaults_to_class_name():
    assert Coupon.model_type == "Coupon"
    assert Product.model_type == "product"
    assert APIModel.model_type is None


def test_repr_includes_id_and_fields():
    product = Product(name="Widget")
    product.on_created({"id": 3})
    assert repr(product) == "Product(id=3, name='Widget')"


@pytest.mark.parametrize("name", ["model_type", "on_created", "is_created", "fields"])
def test_members_cannot_be_passed_as_fields(name):
    """Only data fields can be set; the tag, methods and properties are rejected"""
    with pytest.raises(TypeError):
        Product(**{name: "order"})


def test_rejected_fields_leave_class_untouched():
    with pytest.raises(TypeError):
        Product(name="Widget", model_type="order")
    assert Product.model_type == "product"
