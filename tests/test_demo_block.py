"""Tests for the demo container rule."""

from __future__ import annotations

import html
import json

import pytest
from markdown_it.token import Token

from demodocs.markdown.config import get_markdown_config
from demodocs.markdown.engine import build_description_engine
from demodocs.markdown.extensions.demo_block import (
    DemoClose,
    DemoOpen,
    build_payload,
    container_event,
    parse_description,
    remove_empty_attributes,
    render_demo_event,
    serialize_payload,
    validate_marker,
)


@pytest.fixture
def demo_config() -> dict:
    return get_markdown_config()["demo"]


def _tokens(info: str, body: str) -> list[Token]:
    return [
        Token("container_demo_open", "div", 1, info=info, markup=":::"),
        Token("fence", "code", 0, info="html", content=body),
        Token("container_demo_close", "div", -1, markup=":::"),
    ]


@pytest.mark.parametrize(
    ("info", "expected"),
    [
        ("demo a basic example", "a basic example"),
        (" demo   a basic example  ", "a basic example"),
        ("demo", ""),
        ("demo   ", ""),
        ("tip", ""),
    ],
)
def test_parse_description(info: str, expected: str) -> None:
    assert parse_description(info) == expected


def test_validate_marker() -> None:
    assert validate_marker(" demo", ":::")
    assert validate_marker(" demo with a description", ":::")
    assert not validate_marker(" demonstration", ":::")
    assert not validate_marker(" tip", ":::")


def test_container_event() -> None:
    tokens = _tokens(" demo Hello", "<b>x</b>\n")
    assert container_event(tokens, 0) == DemoOpen(description="Hello", body="<b>x</b>\n")
    assert container_event(tokens, 2) == DemoClose()


def test_container_event_without_body() -> None:
    tokens = [Token("container_demo_open", "div", 1, info=" demo")]
    assert container_event(tokens, 0) == DemoOpen(description="", body="")


def test_build_payload_splits_source() -> None:
    payload = build_payload("<div>hi</div><script>console.log(1)</script>")
    assert payload == {"html": "<div>hi</div>", "script": "console.log(1)", "style": ""}


def test_build_payload_empty_body() -> None:
    assert build_payload("") == {"html": "", "script": "", "style": ""}


def test_build_payload_normalizes_markup_only() -> None:
    payload = build_payload('<p>&#x4F60;</p><script>var s = "&#x4F60;"</script>')
    assert payload["html"] == "<p>你</p>"
    assert payload["script"] == 'var s = "&#x4F60;"'


def test_remove_empty_attributes() -> None:
    assert (
        remove_empty_attributes('<el-input disabled="" v-model="v" clearable=""></el-input>')
        == '<el-input disabled v-model="v" clearable></el-input>'
    )
    assert remove_empty_attributes('<span>title=""</span>') == '<span>title=""</span>'


def test_serialize_payload_round_trip() -> None:
    payload = {
        "html": '<el-button @click="say(\'hi\')">你好 & bye</el-button>\n',
        "script": "export default { data() { return { a: '<b>' } } }",
        "style": ".a > .b { content: \"x\"; }",
    }
    serialized = serialize_payload(payload)
    for char in '<>"\'':
        assert char not in serialized
    assert json.loads(html.unescape(serialized)) == payload


def test_serialize_empty_payload() -> None:
    serialized = serialize_payload({"html": "", "script": "", "style": ""})
    assert json.loads(html.unescape(serialized)) == {"html": "", "script": "", "style": ""}


def test_render_close(demo_config: dict) -> None:
    assert render_demo_event(DemoClose(), demo_config, build_description_engine()) == (
        "</div></demo-block>\n"
    )


def test_render_open_with_description(demo_config: dict) -> None:
    body = "<div>hi</div><script>console.log(1)</script>"
    env: dict = {}

    markup = render_demo_event(
        DemoOpen(description="a *basic* example", body=body),
        demo_config,
        build_description_engine(),
        env,
    )

    payload = {"html": "<div>hi</div>", "script": "console.log(1)", "style": ""}
    assert markup == (
        f'<demo-block class="demo-box" :jsfiddle="{serialize_payload(payload)}">\n'
        '<div class="source" slot="source"><div>hi</div></div>\n'
        "<p>a <em>basic</em> example</p>\n"
        '<div class="highlight" slot="highlight">'
    )
    assert env["demos"] == [payload]


def test_render_open_without_description(demo_config: dict) -> None:
    markup = render_demo_event(DemoOpen(description="", body="<i>x</i>"), demo_config, build_description_engine())
    assert markup.endswith(
        '<div class="source" slot="source"><i>x</i></div>\n<div class="highlight" slot="highlight">'
    )


def test_description_does_not_pass_raw_html(demo_config: dict) -> None:
    markup = render_demo_event(
        DemoOpen(description="<script>alert(1)</script>", body=""),
        demo_config,
        build_description_engine(),
    )
    assert "<script>" not in markup


def test_custom_element_names() -> None:
    config = {"element": "doc-demo", "class": "demo", "prop": "source"}
    engine = build_description_engine()
    assert render_demo_event(DemoOpen("", ""), config, engine).startswith('<doc-demo class="demo" :source="')
    assert render_demo_event(DemoClose(), config, engine) == "</div></doc-demo>\n"


@pytest.mark.parametrize(
    ("markup", "expected"),
    [
        (
            '<el-input @click="a > b" x=""></el-input>',
            '<el-input @click="a > b" x></el-input>',
        ),
        (
            "<el-tag v-if='n > 0' closable=\"\">tag</el-tag>",
            "<el-tag v-if='n > 0' closable>tag</el-tag>",
        ),
        ('<el-alert title="a < b" show-icon=""/>', '<el-alert title="a < b" show-icon/>'),
    ],
)
def test_remove_empty_attributes_skips_quoted_values(markup: str, expected: str) -> None:
    assert remove_empty_attributes(markup) == expected
