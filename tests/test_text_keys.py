from bot.texts.en import TEXTS
from bot.texts.i18n import headings, t
from tools.check_text_keys import collect_used_keys, find_missing_headings


def test_every_used_text_key_exists():
    used = collect_used_keys()

    assert "WELCOME_TEXT" in used
    missing = sorted(used - TEXTS.keys())
    assert not missing, f"texts missing keys: {missing}"


def test_headings_are_lines_of_their_texts():
    assert find_missing_headings() == {}


def test_t_formats_only_with_arguments():
    assert t("HELP_TEXT").endswith("{collections}")
    assert t("PAGE_FOOTER", current=2, total=3) == "Page 2/3"
    assert "Tips:" in headings("HELP_TEXT")
    assert headings("NO_RESULTS_TEXT") == frozenset()
