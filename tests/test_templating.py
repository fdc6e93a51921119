import pytest
from bs4 import BeautifulSoup
from jinja2 import DictLoader, UndefinedError
from markupsafe import Markup

from htmlel.config import RenderConfig
from htmlel.element import Element
from htmlel.templating import render_template_string, template_env


def test_elements_are_not_escaped():
    item = Element("b", children=["x"])
    assert render_template_string("<div>{{ item }}</div>", item=item) == "<div><b>x</b></div>"


def test_plain_strings_are_escaped():
    assert render_template_string("{{ s }}", s="<i>") == "&lt;i&gt;"


def test_el_global():
    html = render_template_string('{{ el("a.button", "Go", {"href": url}) }}', url="/x")
    assert html == '<a href="/x" class="button">Go</a>'


def test_el_global_uses_config():
    html = render_template_string('{{ el("br") }}', config=RenderConfig(self_closing_slash=False))
    assert html == "<br>"


def test_element_markup():
    assert Markup(Element("i", children=["y"])) == Markup("<i>y</i>")


def test_strict_undefined():
    with pytest.raises(UndefinedError):
        render_template_string("{{ missing_value }}")


def test_template_with_loader():
    env = template_env(
        DictLoader(
            {
                "page.html": (
                    "<div class=\"outer-wrapper\">{{ wrapper }}</div>\n"
                    "{% for label in labels %}{{ el('span.tag', label) }}{% endfor %}"
                )
            }
        )
    )
    wrapper = Element("div", {"class": "my-wrapper"})
    container = Element("div", {"class": "container"})
    wrapper.append_child(container)
    container.add_class("extra-wide")

    html = env.get_template("page.html").render(wrapper=wrapper, labels=["a", "b"])
    soup = BeautifulSoup(html, "html.parser")

    assert soup.select_one(".outer-wrapper > .my-wrapper > .container.extra-wide") is not None
    assert [span.get_text() for span in soup.select("span.tag")] == ["a", "b"]


def test_el_escapes_plain_string_content():
    html = render_template_string('{{ el("span", name) }}', name="<script>x</script>")
    assert "<script>" not in html
    assert html == "<span>&lt;script&gt;x&lt;/script&gt;</span>"

    assert render_template_string('{{ el("span", "<i>") }}') == "<span>&lt;i&gt;</span>"
    assert render_template_string('{{ el("span", inner) }}', inner=Markup("<i>")) == "<span><i></span>"


def test_el_keeps_element_content():
    html = render_template_string(
        '{{ el("p", item) }}', config=RenderConfig(self_closing_slash=False), item=Element("br")
    )
    assert html == "<p><br></p>"


def test_render_filter_uses_environment_config():
    no_slash = RenderConfig(self_closing_slash=False)

    assert render_template_string("{{ item | render }}", config=no_slash, item=Element("br")) == "<br>"
    assert render_template_string("{{ item }}", config=no_slash, item=Element("br")) == "<br />"
    assert render_template_string("{{ text | render }}", text="<b>") == "&lt;b&gt;"
