from bs4 import BeautifulSoup

from htmlel.config import RenderConfig
from htmlel.serialize import (
    LiteralHtml,
    Producer,
    close_tag,
    open_strict,
    open_tag,
    render,
    render_strict,
    resolve_inner_html,
)


def test_render_empty_div():
    assert render("div", "", {}, True) == "<div></div>"


def test_render_inner_html():
    assert render("div", "Hello...") == "<div>Hello...</div>"


def test_render_class_attribute():
    assert render("div", "", {"class": "class-1"}, True) == '<div class="class-1"></div>'


def test_key_only_attributes():
    assert open_tag("thing", {"required": True}) == "<thing required>"

    html = render("input", "", {"required": True}, True)
    assert "required" in html
    assert "required=" not in html


def test_bare_attributes_come_after_pairs():
    assert render("input", "", {"required": True, "type": "text"}) == '<input type="text" required />'


def test_strict_render_keeps_insertion_order():
    assert render_strict("input", "", {"required": True, "type": "text"}) == '<input required type="text" />'
    assert open_strict("p", {"data-raw": "<x>"}) == '<p data-raw="<x>">'


def test_selector_classes_and_id_are_merged():
    html = render("div.a#from-selector", "", {"class": "b", "id": "explicit"})
    assert html == '<div class="b a" id="explicit"></div>'

    assert render("div#sel", "", {"id": ""}) == '<div id="sel"></div>'
    assert render("div.a", "", {"class": ["b"]}) == '<div class="b a"></div>'


def test_render_does_not_modify_attributes():
    attributes = {"class": ["b"], "id": ""}
    render("div.a#x", "", attributes)
    assert attributes == {"class": ["b"], "id": ""}


def test_render_sanitizes_names_and_values():
    html = render("di<v", "", {"on<click": "x", "data-items": [1, 2], "title": None})
    assert html == '<div onclick="x" data-items="[1,2]" title=""></div>'


def test_open_without_close():
    assert render("section.main", "text", close=False) == '<section class="main">text'


def test_self_closing_tags():
    assert render("br") == "<br />"
    assert render("img", "", {"src": "a.png"}) == '<img src="a.png" />'
    assert close_tag("br") == ""
    assert close_tag("div.card#main") == "</div>"


def test_self_closing_slash_can_be_disabled():
    no_slash = RenderConfig(self_closing_slash=False)
    assert render("br", config=no_slash) == "<br>"
    assert close_tag("br", config=no_slash) == ""
    assert render("br") == "<br />"


def test_inner_html_producers():
    assert render("p", Producer(lambda: "returned")) == "<p>returned</p>"
    assert render("p", LiteralHtml("<b>x</b>")) == "<p><b>x</b></p>"

    def printing():
        print("printed", end="")
        return "returned-"

    assert render("p", printing) == "<p>returned-printed</p>"


def test_resolve_inner_html_ignores_unknown_values():
    assert resolve_inner_html(None) == ""
    assert resolve_inner_html(42) == ""


def test_rendered_markup_parses():
    html = render(
        "ul.menu#nav",
        render("li.item.active", "Home") + render("li.item", "About"),
        {"data-config": {"open": True}},
    )
    soup = BeautifulSoup(html, "html.parser")

    menu = soup.select_one("ul#nav.menu")
    assert menu is not None
    assert menu["data-config"] == '{"open":true}'
    assert [li.get_text() for li in soup.select("ul.menu > li.item")] == ["Home", "About"]
    assert soup.select_one("li.active").get_text() == "Home"


def test_producer_restores_stdout(capsys):
    def printing():
        print("inside", end="")

    assert Producer(printing)() == "inside"
    print("outside", end="")
    assert capsys.readouterr().out == "outside"


def test_render_backslash_escapes_quotes_only():
    html = render("a", "", {"title": 'say "hi" & <go>'})
    assert html == '<a title="say \\"hi\\" & <go>"></a>'
