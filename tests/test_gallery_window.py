import pytest
from PySide6.QtCore import Qt, QCoreApplication, QEvent
from PySide6.QtTest import QTest

from imagegallery.application import VISIBLE_APP_NAME
from imagegallery.controller.gallery_controller import GalleryController
from imagegallery.view.widgets.cards import CardWidget
from imagegallery.view.widgets.gallery_window import GalleryWindow


@pytest.fixture
def window(surface):
    win = GalleryWindow(surface)
    win.show()
    yield win
    win.close()
    win.deleteLater()
    QCoreApplication.sendPostedEvents(None, int(QEvent.DeferredDelete))


@pytest.fixture
def controller(catalog, view, scheduler, window):
    controller = GalleryController(catalog, view, scheduler)
    scheduler.run_all()
    return controller


def test_window_mirrors_initial_render(window, controller):
    assert window.lbl_page.text() == "Page 1 of 3"
    assert not window.btn_prev.isEnabled()
    assert window.btn_next.isEnabled()
    assert [w.card.attrs["data-id"] for w in window.card_widgets()] == ["1", "2", "3"]
    assert [b.isChecked() for b in window.category_buttons] == [True, False, False, False]


def test_next_button_pages(window, controller, scheduler):
    window.btn_next.click()
    scheduler.run_all()
    assert window.lbl_page.text() == "Page 2 of 3"
    assert window.btn_prev.isEnabled()
    assert [w.card.attrs["data-id"] for w in window.card_widgets()] == ["4", "5", "6"]


def test_category_button(window, controller, scheduler, catalog):
    window.category_buttons[2].click()
    scheduler.run_all()
    assert catalog.current_category == "trees"
    assert [b.isChecked() for b in window.category_buttons] == [False, False, True, False]


def test_search_by_enter(window, controller, scheduler, catalog, surface):
    window.search_edit.setText("oak")
    window.search_edit.textEdited.emit("oak")
    window.search_edit.returnPressed.emit()
    scheduler.run_all()

    assert catalog.current_search == "oak"
    assert [w.card.attrs["data-id"] for w in window.card_widgets()] == ["2"]


def test_reset_updates_search_field(window, controller, scheduler):
    controller.on_search_change("fern")
    scheduler.run_all()
    assert window.search_edit.text() == "fern"
    controller.reset_filters()
    scheduler.run_all()
    assert window.search_edit.text() == ""


def test_card_click_shows_overlay(window, controller, view, scheduler):
    card_widget = window.card_widgets()[1]
    assert isinstance(card_widget, CardWidget)
    QTest.mouseClick(card_widget, Qt.LeftButton)

    assert view.modal_state.displayed_image.id == 2
    assert not window.overlay.isHidden()
    assert window.overlay.lbl_caption.text() == "Oak"
    assert [label.text() for label in window.overlay.keyword_labels] == ["acorn", "shade"]
    assert not window.scroll_area.verticalScrollBar().isEnabled()

    QTest.mouseClick(window.overlay.content, Qt.LeftButton)
    assert view.modal_state.is_open

    window.overlay.btn_close.click()
    assert not view.modal_state.is_open
    assert window.overlay.isHidden()
    assert window.scroll_area.verticalScrollBar().isEnabled()


def test_empty_result_placeholder(window, controller, scheduler):
    controller.on_category_change("succulents")
    scheduler.run_all()
    assert window.card_widgets() == []
    assert window.grid.count() == 1
    assert not window.btn_prev.isEnabled()
    assert not window.btn_next.isEnabled()


def test_window_title(window):
    assert window.windowTitle() == VISIBLE_APP_NAME
