import sys
import tempfile
import unittest
from pathlib import Path

from applauncher.models import Accepted, DesktopEntryRef, ParsedEntry, Rejected, RejectReason
from applauncher.parser import parse_all, parse_entry, parse_entry_text
from tests.helpers import app_lines, write_entry


def _text(*lines):
    return "\n".join(lines) + "\n"


class TestParseEntryText(unittest.TestCase):
    def test_well_formed_entry(self):
        outcome = parse_entry_text(_text(*app_lines()))
        self.assertIsInstance(outcome, Accepted)
        self.assertEqual(outcome.entry.name, "Foo")
        self.assertEqual(outcome.entry.exec, "foo %U")
        self.assertTrue(outcome.entry.visible)
        self.assertIsNone(outcome.entry.comment)

    def test_no_display_only_changes_visibility(self):
        plain = parse_entry_text(_text(*app_lines())).entry
        hidden = parse_entry_text(_text(*app_lines("Foo", "foo %U", "NoDisplay=true"))).entry
        self.assertFalse(hidden.visible)
        self.assertEqual((hidden.name, hidden.exec, hidden.comment), (plain.name, plain.exec, plain.comment))

    def test_hidden_accepts_one(self):
        entry = parse_entry_text(_text(*app_lines("Foo", "foo", "Hidden=1"))).entry
        self.assertFalse(entry.visible)

    def test_hidden_false_stays_visible(self):
        entry = parse_entry_text(_text(*app_lines("Foo", "foo", "Hidden=false", "NoDisplay=0"))).entry
        self.assertTrue(entry.visible)

    def test_spaces_around_equals_and_trimming(self):
        text = _text("[Desktop Entry]", "Type = Application", "Name  =  Foo Bar  ", "Exec= foo --x ")
        entry = parse_entry_text(text).entry
        self.assertEqual(entry.name, "Foo Bar")
        self.assertEqual(entry.exec, "foo --x")

    def test_values_are_not_unescaped(self):
        entry = parse_entry_text(_text(*app_lines("A\\sB", "sh -c \"echo\\ hi\""))).entry
        self.assertEqual(entry.name, "A\\sB")

    def test_first_occurrence_wins(self):
        text = _text("[Desktop Entry]", "Type=Application", "Name=First", "Name=Second", "Exec=x")
        self.assertEqual(parse_entry_text(text).entry.name, "First")

    def test_localized_keys_ignored(self):
        text = _text("[Desktop Entry]", "Type=Application", "Name[de]=Eins", "Name=One", "Exec=x")
        self.assertEqual(parse_entry_text(text).entry.name, "One")

    def test_comment(self):
        entry = parse_entry_text(_text(*app_lines("Foo", "foo", "Comment=Does things"))).entry
        self.assertEqual(entry.comment, "Does things")

    def test_fields_outside_main_section_ignored(self):
        text = _text(
            "[Desktop Entry]",
            "Type=Application",
            "Name=Foo",
            "[Desktop Action new-window]",
            "Exec=foo --new-window",
        )
        outcome = parse_entry_text(text)
        self.assertEqual(outcome, Rejected(RejectReason.MISSING_EXEC))

    def test_main_section_not_first(self):
        text = _text("# comment", "[Other]", "Name=Nope", "[Desktop Entry]", *app_lines()[1:])
        self.assertEqual(parse_entry_text(text).entry.name, "Foo")

    def test_crlf_line_endings(self):
        text = "\r\n".join(app_lines()) + "\r\n"
        entry = parse_entry_text(text).entry
        self.assertEqual(entry.exec, "foo %U")

    def test_missing_section_warns(self):
        with self.assertLogs("applauncher.parser", level="WARNING") as cm:
            outcome = parse_entry_text(_text("Type=Application", "Name=Foo", "Exec=foo"))
        self.assertEqual(outcome, Rejected(RejectReason.MISSING_SECTION))
        self.assertEqual(len(cm.records), 1)

    def test_wrong_type_rejected(self):
        for type_value in ("Link", "Directory", "application", ""):
            text = _text("[Desktop Entry]", f"Type={type_value}", "Name=Foo", "Exec=foo")
            self.assertEqual(parse_entry_text(text), Rejected(RejectReason.WRONG_TYPE))

    def test_missing_type_rejected(self):
        text = _text("[Desktop Entry]", "Name=Foo", "Exec=foo")
        self.assertEqual(parse_entry_text(text), Rejected(RejectReason.WRONG_TYPE))

    def test_missing_name_logs_exactly_one_warning(self):
        with self.assertLogs("applauncher", level="WARNING") as cm:
            outcome = parse_entry_text(_text("[Desktop Entry]", "Type=Application", "Exec=foo"))
        self.assertEqual(outcome, Rejected(RejectReason.MISSING_NAME))
        self.assertEqual(len(cm.records), 1)

    def test_missing_exec_rejected(self):
        text = _text("[Desktop Entry]", "Type=Application", "Name=Foo")
        self.assertEqual(parse_entry_text(text), Rejected(RejectReason.MISSING_EXEC))

    def test_try_exec_not_found_rejected(self):
        text = _text(*app_lines("Foo", "foo", "TryExec=/nonexistent/binary-xyz"))
        self.assertEqual(parse_entry_text(text), Rejected(RejectReason.TRY_EXEC_NOT_FOUND))

    def test_try_exec_found_accepted(self):
        text = _text(*app_lines("Foo", "foo", f"TryExec={sys.executable}"))
        self.assertIsInstance(parse_entry_text(text), Accepted)

    def test_wrong_type_checked_before_name(self):
        text = _text("[Desktop Entry]", "Type=Link", "URL=https://example.com")
        with self.assertNoLogs("applauncher", level="WARNING"):
            outcome = parse_entry_text(text)
        self.assertEqual(outcome, Rejected(RejectReason.WRONG_TYPE))


class TestParseFiles(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _ref(self, p: Path) -> DesktopEntryRef:
        return DesktopEntryRef(identifier=p.name, path=str(p))

    def test_parse_entry_records_source_path(self):
        p = write_entry(self.root, "foo.desktop", app_lines())
        entry = parse_entry(self._ref(p))
        self.assertEqual(entry, ParsedEntry(name="Foo", exec="foo %U", path=str(p)))

    def test_unreadable_file_is_silently_dropped(self):
        ref = DesktopEntryRef(identifier="gone.desktop", path=str(self.root / "gone.desktop"))
        with self.assertNoLogs("applauncher", level="WARNING"):
            self.assertIsNone(parse_entry(ref))

    def test_parse_all_skips_rejected_and_keys_by_name(self):
        good = write_entry(self.root, "good.desktop", app_lines("Good", "good"))
        link = write_entry(self.root, "link.desktop", ["[Desktop Entry]", "Type=Link", "Name=L", "Exec=x"])
        noexec = write_entry(self.root, "noexec.desktop", ["[Desktop Entry]", "Type=Application", "Name=N"])
        entries = parse_all([self._ref(good), self._ref(link), self._ref(noexec)])
        self.assertEqual(list(entries), ["Good"])

    def test_parse_all_first_name_wins(self):
        a = write_entry(self.root, "a/foo.desktop", app_lines("Foo", "first"))
        b = write_entry(self.root, "b/foo2.desktop", app_lines("Foo", "second"))
        entries = parse_all([self._ref(a), self._ref(b)])
        self.assertEqual(entries["Foo"].exec, "first")

    def test_parse_all_continues_after_bad_file(self):
        bad = write_entry(self.root, "bad.desktop", ["just text"])
        good = write_entry(self.root, "good.desktop", app_lines("Good", "good"))
        with self.assertLogs("applauncher.parser", level="WARNING"):
            entries = parse_all([self._ref(bad), self._ref(good)])
        self.assertIn("Good", entries)


if __name__ == "__main__":
    unittest.main()
