import pytest

from patterncraft.visitor import (
    Apple,
    Book,
    Cashier,
    Customer,
    Element,
    ShoppingCart,
    Visitor,
    main,
)


def test_new_elements_have_zero_quantity():
    apple = Apple("红富士苹果", 7)
    book = Book("红楼梦", 129)
    assert (apple.name, apple.price, apple.num) == ("红富士苹果", 7, 0)
    assert (book.name, book.price, book.num) == ("红楼梦", 129, 0)


def test_customer_sets_quantity():
    apple = Apple("花牛苹果", 5)
    Customer("Jungle").set_num(apple, 4)
    assert apple.num == 4


def test_customer_sees_unit_prices(capsys):
    apple = Apple("红富士苹果", 7)
    book = Book("红楼梦", 129)
    customer = Customer("Jungle")
    assert apple.accept(customer) == 7
    assert book.accept(customer) == 129
    out = capsys.readouterr().out
    assert "  红富士苹果 \t单价: \t7 元/kg\n" in out
    assert "  《红楼梦》\t单价: \t129 元/本\n" in out


def test_cashier_totals(capsys):
    apple = Apple("红富士苹果", 7)
    book = Book("终结者", 49)
    customer = Customer()
    customer.set_num(apple, 2)
    customer.set_num(book, 3)
    cart = ShoppingCart()
    cart.add_element(apple)
    cart.add_element(book)
    totals = cart.accept(Cashier())
    assert totals[0] == 14
    assert totals[1] == book.price * book.num
    assert "  红富士苹果 总价： 14 元" in capsys.readouterr().out


def test_cart_visits_in_order():
    cart = ShoppingCart()
    items = [Apple("a", 1), Book("b", 2), Apple("c", 3)]
    for item in items:
        cart.add_element(item)
    assert cart.accept(Customer()) == [1, 2, 3]
    assert cart.elements == items


def test_add_element_message(capsys):
    book = Book("红楼梦", 129)
    book.num = 1
    ShoppingCart().add_element(book)
    assert capsys.readouterr().out == "  商品名：红楼梦, \t数量：1, \t加入购物车成功！\n"


def test_empty_cart_visits_nothing():
    assert ShoppingCart().accept(Cashier()) == []


def test_abstract_classes():
    with pytest.raises(TypeError):
        Element()
    with pytest.raises(TypeError):
        Visitor()


def test_main_runs(capsys):
    assert main([]) == 0
    assert "加入购物车成功" in capsys.readouterr().out