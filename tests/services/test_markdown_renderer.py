import pytest

from folio.services.markdown_renderer import MarkdownRenderer


@pytest.fixture
def renderer():
    return MarkdownRenderer({"proto": "protobuf", "sh": "bash"})


@pytest.mark.parametrize(
    ("source", "entity"),
    [
        ("Wait for it...", "&hellip;"),
        ('She said "hi"', "&ldquo;"),
        ('She said "hi"', "&rdquo;"),
        ("pages 1 -- 2", "&ndash;"),
        ("and then --- silence", "&mdash;"),
        ("``quoted''", "<p>&ldquo;quoted&rdquo;</p>"),
        ("He wrote ``yes'' twice", "&ldquo;yes&rdquo; twice"),
    ],
)
def test_render_applies_smart_punctuation(renderer, source, entity):
    assert entity in renderer.render(source)


def test_render_adds_heading_ids(renderer):
    html = renderer.render("# Hello World\n\nBody")
    assert '<h1 id="hello-world">Hello World</h1>' in html
    assert "<p>Body</p>" in html


def test_render_highlights_fenced_code(renderer):
    html = renderer.render("```python\nprint('hi')\n```\n")
    assert "codehilite" in html
    assert "<p>```" not in html


def test_render_supports_tables(renderer):
    html = renderer.render("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html


def test_apply_code_aliases_rewrites_known_languages(renderer):
    source = "```proto\nmessage Ping {}\n```\n\n~~~sh\nls\n~~~\n"
    assert renderer.apply_code_aliases(source) == (
        "```protobuf\nmessage Ping {}\n```\n\n~~~bash\nls\n~~~\n"
    )


def test_apply_code_aliases_leaves_other_fences_alone(renderer):
    source = "```python\nx = 1\n```\n\nNot a fence: proto\n"
    assert renderer.apply_code_aliases(source) == source


def test_apply_code_aliases_without_aliases_is_identity():
    source = "```proto\nmessage Ping {}\n```\n"
    assert MarkdownRenderer().apply_code_aliases(source) == source


def test_render_does_not_leak_state_between_calls(renderer):
    renderer.render("# Same\n")
    html = renderer.render("# Same\n")
    # toc would suffix a reused id as same_1 if state leaked
    assert 'id="same"' in html


def test_backtick_quotes_leave_code_spans_alone(renderer):
    html = renderer.render("Use `` `tick` `` then ``done''")
    assert "<code>`tick`</code>" in html
    assert "&ldquo;done&rdquo;" in html


def test_apply_code_aliases_skips_fences_nested_in_longer_fence(renderer):
    source = (
        "~~~~markdown\n"
        "```sh\n"
        "ls\n"
        "```\n"
        "~~~~\n"
        "\n"
        "```sh\n"
        "pwd\n"
        "```\n"
    )

    assert renderer.apply_code_aliases(source) == (
        "~~~~markdown\n"
        "```sh\n"
        "ls\n"
        "```\n"
        "~~~~\n"
        "\n"
        "```bash\n"
        "pwd\n"
        "```\n"
    )


def test_apply_code_aliases_ignores_languages_inside_a_block(renderer):
    source = "```python\n```proto\n```\n"
    assert renderer.apply_code_aliases(source) == source


def test_apply_code_aliases_keeps_fence_attributes(renderer):
    assert renderer.apply_code_aliases("``` proto hl_lines=\"2\"\nx\n```\n") == (
        "```protobuf hl_lines=\"2\"\nx\n```\n"
    )
