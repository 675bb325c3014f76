import math

from wordpdf.docs.model import Cursor, FontSet, FontVariant, Paragraph, Style, StyledRun
from wordpdf.layout.text import layout_paragraph, layout_run, select_font, wrap_words


def test_short_text_is_one_line():
    assert wrap_words("Hello world", 80) == ["Hello world "]


def test_empty_and_blank_text_produce_no_lines():
    assert wrap_words("", 80) == []
    assert wrap_words("   \t\n ", 80) == []


def test_lines_stay_under_budget():
    words = ["alpha", "be", "gamma", "delta", "epsilon", "z", "omega", "kappa"] * 20
    text = " ".join(words)
    lines = wrap_words(text, 30)
    total_chars = sum(len(w) for w in words)
    assert len(lines) >= math.ceil(total_chars / 30)
    for line in lines:
        # words plus single separating spaces, without the trailing space
        assert len(line.rstrip(" ")) < 30
    assert " ".join(l.strip() for l in lines) == text


def test_overlong_word_gets_its_own_line():
    long_word = "x" * 120
    lines = wrap_words(f"short {long_word} tail", 80)
    assert lines == ["short ", long_word + " ", "tail "]


def test_select_font_exact_variants():
    fonts = FontSet()
    assert select_font(Style.REGULAR, fonts) is FontVariant.REGULAR
    assert select_font(Style.BOLD, fonts) is FontVariant.BOLD
    assert select_font(Style.ITALIC, fonts) is FontVariant.ITALIC
    assert select_font(Style.BOLD_ITALIC, fonts) is FontVariant.BOLD_ITALIC


def test_select_font_falls_back_to_closest_single_attribute():
    assert select_font(Style.BOLD_ITALIC, FontSet(bold_italic=None)) is FontVariant.BOLD
    assert select_font(Style.BOLD_ITALIC, FontSet(bold=None, bold_italic=None)) is FontVariant.ITALIC
    assert select_font(Style.ITALIC, FontSet(italic=None)) is FontVariant.REGULAR


def test_scenario_hello_world(a4):
    para = Paragraph([StyledRun("Hello world")])
    cursor, lines = layout_paragraph(para, Cursor(0, a4.top_mm), a4, FontSet(), 80, 12.0)
    assert len(lines) == 1
    line = lines[0]
    assert (line.page_index, line.x_mm, line.y_mm) == (0, 20.0, 277.0)
    assert line.font_style is FontVariant.REGULAR
    assert line.text == "Hello world "
    # one line plus the blank line separating paragraphs
    assert cursor == Cursor(0, 253.0)


def test_run_tail_does_not_advance_cursor(a4):
    run = StyledRun("one two three four", Style.BOLD)
    cursor, lines = layout_run(run, Cursor(0, a4.top_mm), a4, FontSet(), 10, 12.0)
    assert [l.text for l in lines] == ["one two ", "three ", "four "]
    assert [l.y_mm for l in lines] == [277.0, 265.0, 253.0]
    assert cursor.y_mm == lines[-1].y_mm
    assert all(l.font_style is FontVariant.BOLD for l in lines)


def test_runs_in_a_paragraph_do_not_overlap(a4):
    para = Paragraph([StyledRun("first"), StyledRun("second", Style.ITALIC)])
    _, lines = layout_paragraph(para, Cursor(0, a4.top_mm), a4, FontSet(), 80, 12.0)
    assert [l.y_mm for l in lines] == [277.0, 265.0]
    assert [l.font_style for l in lines] == [FontVariant.REGULAR, FontVariant.ITALIC]


def test_empty_paragraph_only_adds_blank_line(a4):
    cursor, lines = layout_paragraph(Paragraph([]), Cursor(0, 100.0), a4, FontSet(), 80, 12.0)
    assert lines == []
    assert cursor == Cursor(0, 88.0)
