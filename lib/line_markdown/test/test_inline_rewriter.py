"""
Tests for the inline span rewriter: emphasis delimiters, greedy matching,
force-closing and grapheme handling.
"""

import unittest

from lib.line_markdown.inline_rewriter import InlineRewrite, InlineRewriter


class TestBasicEmphasis(unittest.TestCase):
    """Well-formed bold and italic spans."""

    def setUp(self):
        self.rewriter = InlineRewriter()

    def test_plain_text_untouched(self):
        self.assertEqual(self.rewriter.rewriteToHtml("Hello, world!"), "Hello, world!")

    def test_empty_content(self):
        self.assertEqual(self.rewriter.rewrite(""), InlineRewrite("", 0))

    def test_bold(self):
        self.assertEqual(self.rewriter.rewriteToHtml("__bold__"), "<strong>bold</strong>")

    def test_italic(self):
        self.assertEqual(self.rewriter.rewriteToHtml("_italic_"), "<em>italic</em>")

    def test_bold_after_text(self):
        self.assertEqual(self.rewriter.rewriteToHtml("some __bold__"), "some <strong>bold</strong>")

    def test_italic_inside_text(self):
        self.assertEqual(self.rewriter.rewriteToHtml("_one_ two"), "<em>one</em> two")

    def test_single_char_italic_closed_by_trailing_delimiter(self):
        result = self.rewriter.rewrite("_a_")
        self.assertEqual(result.html, "<em>a</em>")
        self.assertEqual(result.forcedCloses, 0)

    def test_multi_word_spans(self):
        self.assertEqual(self.rewriter.rewriteToHtml("__Bold Item__"), "<strong>Bold Item</strong>")
        self.assertEqual(self.rewriter.rewriteToHtml("_Italic Item_"), "<em>Italic Item</em>")


class TestGreedyMatching(unittest.TestCase):
    """Unbalanced and adjacent delimiters resolve deterministically."""

    def setUp(self):
        self.rewriter = InlineRewriter()

    def test_unclosed_italic_is_force_closed(self):
        result = self.rewriter.rewrite("_open")
        self.assertEqual(result.html, "<em>open</em>")
        self.assertEqual(result.forcedCloses, 1)

    def test_unclosed_bold_is_force_closed(self):
        result = self.rewriter.rewrite("__open")
        self.assertEqual(result.html, "<strong>open</strong>")
        self.assertEqual(result.forcedCloses, 1)

    def test_lone_trailing_delimiter_closes_italic(self):
        self.assertEqual(self.rewriter.rewriteToHtml("a_"), "a</em>")
        self.assertEqual(self.rewriter.rewriteToHtml("_"), "</em>")

    def test_trailing_double_delimiter_closes_bold(self):
        self.assertEqual(self.rewriter.rewriteToHtml("__"), "</strong>")

    def test_triple_delimiter_passes_third_through(self):
        result = self.rewriter.rewrite("___")
        self.assertEqual(result.html, "<strong>_</strong>")
        self.assertEqual(result.forcedCloses, 1)

    def test_bold_closes_only_at_end_of_line(self):
        # `__` followed by anything opens a new bold span
        result = self.rewriter.rewrite("__a__ b")
        self.assertEqual(result.html, "<strong>a<strong> b</strong></strong>")
        self.assertEqual(result.forcedCloses, 2)

    def test_italic_closer_right_after_opener_is_literal(self):
        # The grapheme after `_` is always copied, so the closer needs one more character
        result = self.rewriter.rewrite("_a_ b")
        self.assertEqual(result.html, "<em>a_ b</em>")
        self.assertEqual(result.forcedCloses, 1)

    def test_no_bold_while_italic_open(self):
        self.assertEqual(self.rewriter.rewriteToHtml("_a __b__"), "<em>a </em><em>b_</em>")

    def test_bold_then_italic(self):
        self.assertEqual(
            self.rewriter.rewriteToHtml("_it_ and __bold__"),
            "<em>it</em> and <strong>bold</strong>",
        )

    def test_italic_state_resets_between_calls(self):
        self.rewriter.rewrite("_open")
        self.assertEqual(self.rewriter.rewriteToHtml("plain"), "plain")

    def test_never_raises_on_delimiter_soup(self):
        for content in ["_", "__", "___", "____", "_ _ _", "a__b_c___d", "__ _ __ _"]:
            with self.subTest(content=content):
                self.assertIsInstance(self.rewriter.rewriteToHtml(content), str)


class TestGraphemes(unittest.TestCase):
    """Scanning works on user-perceived characters."""

    def setUp(self):
        self.rewriter = InlineRewriter()

    def test_combining_mark_stays_attached(self):
        self.assertEqual(self.rewriter.rewriteToHtml("_e\u0301t\u0301_"), "<em>e\u0301t\u0301</em>")

    def test_delimiter_with_combining_mark_is_not_a_delimiter(self):
        self.assertEqual(self.rewriter.rewriteToHtml("_\u0301x"), "_\u0301x")

    def test_emoji_with_modifier(self):
        self.assertEqual(
            self.rewriter.rewriteToHtml("__\U0001F44D\U0001F3FD__"),
            "<strong>\U0001F44D\U0001F3FD</strong>",
        )

    def test_non_latin_text(self):
        self.assertEqual(self.rewriter.rewriteToHtml("_привет_ мир"), "<em>привет</em> мир")


if __name__ == "__main__":
    unittest.main()
