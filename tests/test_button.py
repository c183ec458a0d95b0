from panelkit.button import ACTION_MAX_LEN, Button, ButtonField
from panelkit.core import Part, State, selector
from panelkit.theme import ColorRole, Theme


def test_button_has_empty_centred_caption():
    button = Button(None, 0, 0, 40, 20)
    assert button.label == ""
    assert button.caption.align == "center"
    assert len(button.children) == 1


def test_theme_styles_for_pressed_state():
    theme = Theme()
    button = Button(theme=theme)
    assert button.get_style("bg_color", Part.MAIN) == theme.color(ColorRole.DIM)
    pressed = selector(Part.MAIN, State.PRESSED)
    assert button.get_style("bg_color", pressed) == theme.color(ColorRole.FG)


def test_set_label_and_none():
    button = Button()
    button.set_label("OK")
    assert button.label == "OK"
    button.set_label(None)
    assert button.label == ""


def test_set_field_label():
    button = Button()
    button.set_field(ButtonField.LABEL, "Go")
    assert button.label == "Go"


def test_tap_action_dispatched():
    sent = []
    button = Button()
    button.set_tap_action("light/on", sent.append)
    button.tap()
    button.tap()
    assert sent == ["light/on", "light/on"]


def test_hold_action_dispatched_only_on_hold():
    sent = []
    button = Button()
    button.set_hold_action("reset", sent.append)
    button.tap()
    assert sent == []
    button.hold()
    assert sent == ["reset"]


def test_empty_action_ignored():
    sent = []
    button = Button()
    button.set_tap_action("", sent.append)
    button.set_tap_action(None, sent.append)
    button.tap()
    assert sent == []


def test_long_action_truncated():
    sent = []
    button = Button()
    button.set_tap_action("a" * 100, sent.append)
    button.tap()
    assert sent == ["a" * ACTION_MAX_LEN]


def test_on_tap_callback_receives_widget():
    seen = []
    button = Button()
    button.on_tap(seen.append)
    button.tap()
    assert seen == [button]


def test_deleted_button_does_not_dispatch():
    sent = []
    button = Button()
    button.set_tap_action("x", sent.append)
    button.delete()
    button.tap()
    assert sent == []