# panelkit

panelkit models the widgets of a small status panel: labels, icons, value
readouts, buttons, toggles, bars, gauges, graphs, sparklines, tickers,
spinners, images and containers. It builds whole screens from a JSON layout
and styles them from a JSON theme.

Every widget keeps its geometry, style properties, state and event handlers
as plain Python data. You can inspect them, drive them from tests, or pass
them to a renderer of your own.

## Installation

panelkit has no runtime dependencies. The `test` extra installs pytest.

## The widget model (`panelkit.core`)

- `Color` is an RGB colour. `Color.from_hex` accepts `0xRRGGBB` or a string
  such as `"#rrggbb"`. `Color.mix` blends two colours by a ratio from 0 to 255.
- `Part` and `State` name the part of a widget a style targets and the state
  it is limited to. `selector(part, state)` combines the two.
- `Widget` is a node in the tree. It has these members:
  - `set_style` and `get_style` handle local style properties. Local
    properties outrank shared ones.
  - `add_style` attaches a shared `Style`.
  - `remove_style_all` clears both local and shared styles.
  - `on` and `emit` register and fire event callbacks.
  - `delete` sends `"delete"` and then removes the widget and its children.
- `Series` is a fixed-length list of chart points. Each `push` drops the
  oldest point.

## Style overrides (`panelkit.style`)

`WidgetStyle` holds a sparse set of style overrides:

- `update(data, theme)` merges the keys of a JSON style object into it, such
  as `bg_color`, `radius`, `pad_all`, `text_align`, `justify` and `font`.
- `apply(widget, selector)` writes the fields that are set onto the widget as
  local styles.
- `fill_*` fields always target the indicator part.
- `pressed_*` fields always target the pressed state.

## Themes (`panelkit.theme`)

A `Theme` holds:

- a five-colour palette (`ColorRole`: `bg`, `fg`, `accent`, `dim`, `danger`);
- a font name and a rotation;
- the defaults for graphs (`GraphConfig`) and sparklines (`SparklineConfig`);
- shared styles per widget type;
- per-type `WidgetStyle` overrides.

`Theme.load_json` merges a JSON theme into the current theme. Missing keys
keep their previous values. A document that cannot be parsed, or that is not
a JSON object, raises `ThemeError`. Shared styles are not rebuilt
automatically, so call `build_styles()` afterwards.

```python
from panelkit.theme import Theme, ColorRole

theme = Theme()
theme.load_json("""
{
  "palette": {"bg": "#000000", "fg": "#ffffff"},
  "rotation": 90,
  "widgets": {
    "bar":   {"border_width": 2, "indicator": {"bg_color": "accent"}},
    "graph": {"style": "line", "y_max": 200}
  }
}
""")
theme.build_styles()
print(theme.color(ColorRole.FG))   # #ffffff
```

`Theme.color_from_str` resolves colours. It accepts `"#rrggbb"` or a palette
name and returns black for anything else.

`Theme.font_by_name` checks a font name. It accepts `unscii_8`, `unscii_16`,
`montserrat_12`, `montserrat_14` and `montserrat_20`. For an unknown name it
falls back to the theme font.

## Layouts (`panelkit.factory`)

`WidgetFactory.build` builds every screen of a layout document. It returns a
list of `(id, screen)` pairs.

The document has a `screens` array. Each screen has an `id` and a list of
`widgets`. A widget entry has a `type` and may also have:

- `x`, `y`, `w` and `h` (the defaults are 0, 0, 100 and 20);
- a `style` object, which may contain an `indicator` object;
- a `bg_image`;
- `bind` values;
- `on_tap` and `on_hold` actions.

Containers take `layout`, `cols` and `children`. Tickers take `frames` and
`interval_ms`.

The factory understands these types: `label`, `button`, `bar`, `graph`,
`sparkline`, `gauge`, `spinner`, `icon`, `image`, `container` and `ticker`.
It skips unknown types.

The factory raises `LayoutError` in these cases:

- the layout is missing;
- the layout is not valid JSON;
- the layout is not a JSON object;
- the layout has no `screens` array.

```python
from panelkit.factory import WidgetFactory

factory = WidgetFactory()
screens = factory.build("""
{
  "screens": [
    {"id": "main", "widgets": [
      {"type": "label", "x": 0, "y": 0, "w": 120, "h": 16,
       "bind": {"text": "$hostname"}},
      {"type": "bar", "x": 0, "y": 20, "w": 120, "h": 12,
       "bind": {"value": 40, "max": 100, "label": "CPU"}},
      {"type": "button", "x": 0, "y": 40, "w": 60, "h": 20,
       "bind": {"label": "Reboot"}, "on_tap": "reboot"},
      {"type": "ticker", "frames": ["|", "/", "-"], "interval_ms": 100}
    ]}
  ]
}
""")
binding = factory.bindings[0]      # name "hostname"; the label waits for values
binding.setter(binding.field, "panel-01")
```

A bind value that begins with `$` is a placeholder. The factory passes it to
the `bind` callback. Without that callback, the factory records a `Binding`
in `factory.bindings`. Any other bind value is set on the widget straight
away.

Tap and hold actions go to the `dispatch` callback. Without that callback,
they are appended to `factory.actions`.

The factory loads images through the `fetch` callback, which receives
`"<host_url>/images/<name>"` and returns bytes. It decodes them with
`decode_image`. The format is a big-endian width and height followed by
RGB565 pixels.

## Widgets

Each widget can also be created and driven on its own. Every widget that
accepts bindings has `set_field`, which takes the field enum of its own
module and a string value, as a layout binding would supply it.

- `Label`, `Icon` and `ValueLabel` show clipped text.
- `Button` has a caption and tap and hold actions. `set_tap_action` and
  `set_hold_action` register an action string with a dispatch function.
  `tap()` and `hold()` fire them.
- `Toggle` dispatches its on or off action when `toggle()` flips it.
  `set_state` changes the state quietly, without dispatching.
- `Bar` shows a value within 0 to a maximum, with an optional label.
  `label_regions` gives the clip areas and colours the label is drawn in:
  the foreground colour over the unfilled track and the background colour
  over the fill.
- `Gauge` is an arc with a value, a maximum and a centred label. `GaugeConfig`
  sets its start angle and sweep.
- `Graph` draws bars, a line, a filled area or a symmetric waveform.
  - `point_color` gives the colour a value is drawn in. The graph must have
    `color_by_value` set for the thresholds to apply.
  - The symmetric style paints into a pixel buffer that scrolls left.
  - `resolve_point_count` works out how many points the graph keeps.
- `Sparkline` is a minimal line chart.
- `Ticker` cycles through text frames. Each call to `tick()` advances it one
  frame. `stop()` halts it.
- `Image` holds an RGB565 buffer. `set_buffer` raises `ImageError` in these
  cases: the data is empty, the size is invalid, or the widget has been
  deleted.
- `Container` lays out its children in a row, a column, a grid, or at
  absolute positions.
- `Spinner` is an arc whose speed, arc length and colours come from the
  theme.

## What panelkit does not do

- It draws nothing. There is no display, rendering or input backend.
- It runs no timers. Tickers advance only when you call `tick()`.
- It opens no network connections. Images are loaded only through a `fetch`
  callable that you supply.
- It does not feed placeholder bindings with live data, and it does not
  switch between screens. Your code does both, through the `bind` and
  `add_screen` callbacks or the recorded `factory.bindings` and
  `factory.screens`.