from imagegallery.view.elements import Element
from imagegallery.view.surface import GallerySurface


def _tree():
    outer = Element("outer")
    inner = Element("inner")
    leaf = Element("leaf")
    outer.replace_children([inner])
    inner.replace_children([leaf])
    return outer, inner, leaf


def test_click_bubbles_to_ancestors():
    outer, inner, leaf = _tree()
    seen = []
    for element in (outer, inner, leaf):
        element.clicked.connect(lambda event, el=element: seen.append((el.role, event.target.role)))

    leaf.click()

    assert seen == [("leaf", "leaf"), ("inner", "leaf"), ("outer", "leaf")]


def test_stop_propagation():
    outer, inner, leaf = _tree()
    seen = []
    inner.clicked.connect(lambda event: event.stop_propagation())
    outer.clicked.connect(lambda event: seen.append(event))

    event = leaf.click()

    assert event.propagation_stopped
    assert seen == []


def test_disabled_element_dispatches_nothing():
    button = Element("button")
    seen = []
    button.clicked.connect(seen.append)
    button.set_disabled(True)
    button.click()
    assert seen == []
    button.set_disabled(False)
    button.click()
    assert len(seen) == 1


def test_replace_children_detaches_old_ones():
    container = Element("container")
    old, new = Element("old"), Element("new")
    container.replace_children([old])
    assert old.is_attached
    container.replace_children([new])
    assert not old.is_attached
    assert new.container is container
    container.clear_children()
    assert container.child_elements == []
    assert not new.is_attached


def test_changes_emit_changed():
    element = Element("thing")
    count = []
    element.changed.connect(lambda: count.append(1))
    element.set_text("x")
    element.add_class("a")
    element.toggle_class("a", False)
    element.set_style(opacity="0")
    assert len(count) == 4
    assert element.style == {"opacity": "0"}
    assert not element.has_class("a")


def test_surface_tracks_focus():
    surface = GallerySurface.build(["all", "trees"])
    assert surface.focused is None
    surface.close_button.focus()
    assert surface.focused is surface.close_button


def test_surface_category_buttons():
    surface = GallerySurface.build(["all", "trees"])
    assert [b.attrs["data-category"] for b in surface.category_buttons] == ["all", "trees"]
    assert [b.text for b in surface.category_buttons] == ["All", "Trees"]
    assert surface.close_button.container is surface.modal_content
    assert surface.modal_content.container is surface.modal


def test_detached_child_stops_dispatching():
    container = Element("container")
    child, grandchild = Element("child"), Element("grandchild")
    child.replace_children([grandchild])
    container.replace_children([child])
    seen = []
    child.clicked.connect(seen.append)
    grandchild.changed.connect(lambda: seen.append("changed"))

    container.clear_children()
    grandchild.set_text("x")
    child.click()

    assert seen == []
    assert not grandchild.is_attached


def test_detach_without_handlers_is_quiet():
    Element("lonely").detach()


def test_kept_children_stay_connected():
    container = Element("container")
    kept = Element("kept")
    container.replace_children([kept])
    seen = []
    kept.clicked.connect(seen.append)

    container.replace_children([kept, Element("new")])
    kept.click()

    assert len(seen) == 1
    assert kept.container is container
