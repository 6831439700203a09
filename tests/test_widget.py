from tilequest.widget import WidgetNode, WidgetNodeType


def _menu_with_options(count):
    menu = WidgetNode(WidgetNodeType.MENU)
    options = [WidgetNode(WidgetNodeType.MENU_OPTION) for _ in range(count)]
    for option in options:
        menu.add_child(option)
    return menu, options


def test_add_child_sets_parent_and_children():
    menu, options = _menu_with_options(2)
    assert all(option.parent is menu for option in options)
    assert menu.children == options


def test_index_follows_insertion_order():
    _, options = _menu_with_options(4)
    assert [option.index() for option in options] == list(range(len(options)))


def test_root_has_no_index():
    menu, _ = _menu_with_options(3)
    assert menu.index() is None


def test_node_missing_from_parent_children_has_no_index():
    menu = WidgetNode(WidgetNodeType.MENU)
    orphan = WidgetNode(WidgetNodeType.MENU_OPTION, parent=menu)
    assert orphan.index() is None


def test_identical_looking_nodes_are_distinct():
    _, options = _menu_with_options(2)
    first, second = options
    assert first != second
    assert first.index() != second.index()


def test_repr_does_not_recurse():
    menu, _ = _menu_with_options(1)
    assert "MENU" in repr(menu)