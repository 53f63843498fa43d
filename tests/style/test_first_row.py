from wordstyle import TableStyle


def test_first_row_inherits_base_style():
    style = TableStyle({"width": 500, "unit": "pct"}, {"bgColor": "FF0000"})
    first_row = style.get_first_row()

    assert style.get_width() == 500
    assert style.get_unit() == "pct"
    assert style.get_bg_color() is None
    assert isinstance(first_row, TableStyle)
    assert first_row.get_width() == 500
    assert first_row.get_unit() == "pct"
    assert first_row.get_bg_color() == "FF0000"


def test_first_row_drops_margins_and_inside_borders(base_config, first_row_config):
    style = TableStyle(base_config, first_row_config)
    first_row = style.get_first_row()

    assert style.get_cell_margin() == [80, 80, 80, 80]
    assert style.get_border_size() == [6, 6, 6, 6, 6, 6]

    assert first_row.get_cell_margin() == [None, None, None, None]
    assert first_row.has_margin() is False
    assert first_row.get_border_size() == [6, 6, 6, 18, None, None]
    assert first_row.get_border_color() == ["006699"] * 4 + [None, None]
    assert first_row.get_align() == "center"
    assert first_row.get_first_row() is None


def test_first_row_config_cannot_reintroduce_excluded_values():
    style = TableStyle({}, {"cellMargin": 50, "borderSize": 3, "borderInsideVColor": "000000"})
    first_row = style.get_first_row()

    assert first_row.get_cell_margin() == [None] * 4
    assert first_row.get_border_size() == [3, 3, 3, 3, None, None]
    assert first_row.get_border_inside_v_color() is None


def test_first_row_is_independent_copy():
    style = TableStyle({"bgColor": "CCCCCC", "align": "end"}, {})
    first_row = style.get_first_row()

    first_row.set_bg_color("000000").set_align("start").set_width(10)

    assert style.get_bg_color() == "CCCCCC"
    assert style.get_align() == "end"
    assert style.get_width() == 0
    assert first_row.get_shading() is not style.get_shading()


def test_empty_first_row_config_still_creates_first_row():
    style = TableStyle(None, {})

    assert style.get_first_row() is not None
    assert style.get_first_row().get_unit() == "auto"


def test_first_row_in_as_dict(base_config, first_row_config):
    values = TableStyle(base_config, first_row_config).as_dict()

    assert values["first_row"]["bg_color"] == "FF0000"
    assert values["first_row"]["cell_margin_top"] is None
    assert values["first_row"]["first_row"] is None
