"""Tests for the generated-file banner and naming helpers."""

from __future__ import annotations

from svcdoc_tools.banner import render_banner
from svcdoc_tools.naming import pascal_case, snake_case, title_case


def test_render_banner_with_source() -> None:
    lines = render_banner("svcdoc-tools", "1.2.3", "schemas/widgets.yml")

    assert lines[0] == "<!--"
    assert lines[-1] == "--->"
    assert "This documentation was generated by svcdoc-tools@1.2.3" in lines
    assert "Source: schemas/widgets.yml" in lines


def test_render_banner_without_source() -> None:
    lines = render_banner("svcdoc-tools", "1.2.3")

    assert not any(line.startswith("Source:") for line in lines)
    assert lines[1:3] == ["This documentation was generated by svcdoc-tools@1.2.3", ""]


def test_case_helpers() -> None:
    assert snake_case("getWidget") == "get_widget"
    assert snake_case("HTTPServer") == "http_server"
    assert pascal_case("widget-service v2") == "WidgetServiceV2"
    assert title_case("gizmoAdmin") == "Gizmo Admin"
    assert title_case("widgets") == "Widgets"


def test_case_helpers_keep_non_ascii_letters() -> None:
    assert snake_case("Übersicht") == "übersicht"
    assert snake_case("größeWert") == "größe_wert"
    assert title_case("名前") == "名前"
    assert pascal_case("日本 service") == "日本Service"
    assert snake_case("v2Api") == "v_2_api"
