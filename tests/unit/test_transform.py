import asyncio
import pytest
from monoweb.core.config import settings
from monoweb.llm.client import MockGenerator, render_minimal_html
from monoweb.rewrite.links import INVALID_BASE_WARNING
from monoweb.services.transform import (
    transform_html,
    build_prompt,
    shrink_text,
    estimate_tokens,
    strip_code_fences,
    EMPTY_COMPLETION_WARNING
)

class StubGenerator:
    def __init__(self, completion: str):
        self.completion = completion
        self.prompts = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.completion

class TestPromptHelpers:
    """Unit tests for prompt building and completion cleanup"""

    def test_prompt_contains_html(self):
        prompt = build_prompt("<h1>Title</h1>")
        assert "minimalist black and white" in prompt
        assert "<h1>Title</h1>" in prompt
        assert prompt.rstrip().endswith("Minimalist HTML:")

    def test_shrink_text(self):
        assert shrink_text("abcdef", 3) == "abc"
        assert shrink_text("abc", 10) == "abc"
        assert shrink_text("abc", 0) == "abc"

    def test_estimate_tokens(self):
        assert estimate_tokens("") == 0
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens("abcde") == 2

    def test_strip_code_fences(self):
        assert strip_code_fences("```html\n<p>x</p>\n```") == "<p>x</p>"
        assert strip_code_fences("```\n<p>x</p>```") == "<p>x</p>"
        assert strip_code_fences("  <p>x</p>  ") == "<p>x</p>"
        assert strip_code_fences("```html") == ""

class TestTransformHtml:
    """Unit tests for the generate -> rewrite pipeline"""

    def test_links_rewritten(self):
        generator = StubGenerator('```html\n<a href="/b">x</a>\n```')
        result = asyncio.run(transform_html("<a href='/b'>x</a>", "https://site.com/dir/", generator, settings))
        assert result.html == '<a href="/?_url=https%3A%2F%2Fsite.com%2Fb">x</a>'
        assert result.warning is None
        assert len(generator.prompts) == 1

    def test_empty_completion_falls_back_to_original(self):
        """Test an empty completion is a warning, not an error"""
        original = "<html><body><a href='/x'>x</a></body></html>"
        result = asyncio.run(transform_html(original, "https://site.com/", StubGenerator("   "), settings))
        assert result.html == original
        assert result.warning == EMPTY_COMPLETION_WARNING

    def test_invalid_original_url_warning(self):
        generator = StubGenerator('<a href="/b">x</a>')
        result = asyncio.run(transform_html("<p>src</p>", "", generator, settings))
        assert result.html == '<a href="/b">x</a>'
        assert result.warning == INVALID_BASE_WARNING

    def test_input_trimmed_to_limit(self, monkeypatch):
        monkeypatch.setattr(settings, "LLM_MAX_INPUT_CHARS", 10)
        generator = StubGenerator("<p>ok</p>")
        asyncio.run(transform_html("0123456789ABCDEF", "https://site.com/", generator, settings))
        assert "0123456789" in generator.prompts[0]
        assert "ABCDEF" not in generator.prompts[0]

class TestMockGenerator:
    """Unit tests for the local mock rendering"""

    def test_render_minimal_html(self):
        html = (
            '<html><head><title>T &amp; Co</title><style>p{color:red}</style></head>'
            '<body style="background:blue"><img src="a.png"><p class="x">Hello</p>'
            '<a href="/next">next</a><script>alert(1)</script></body></html>'
        )
        rendered = render_minimal_html(html)
        assert "<img" not in rendered
        assert "<script" not in rendered
        assert "color:red" not in rendered
        assert 'class="x"' not in rendered
        assert "<p>Hello</p>" in rendered
        assert '<a href="/next">next</a>' in rendered
        assert "<title>T &amp; Co</title>" in rendered
        assert "background:#fff;color:#000" in rendered

    def test_mock_generator_ignores_prompt(self):
        generator = MockGenerator("<p>Hi</p>")
        assert "<p>Hi</p>" in asyncio.run(generator("anything"))
